"""
Flashcards Backend - FastAPI Application

Create flashcard sets, add term/definition cards and flip through them.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (parent of backend/)
# Must happen before importing modules that use environment variables
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from src import __version__  # noqa: E402
from src.api.dependencies import cleanup_dependencies, init_dependencies  # noqa: E402
from src.api.routes import sets_router, share_router, view_router  # noqa: E402
from src.config import (  # noqa: E402
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    get_cors_allow_credentials,
    get_cors_origins,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for startup/shutdown events.

    Startup:
    - Build the collection store and navigator

    Shutdown:
    - Drop them (nothing is persisted)
    """
    logger.info("Starting flashcards backend...")

    await init_dependencies()
    logger.info("Dependencies initialized")

    yield

    logger.info("Shutting down flashcards backend...")
    await cleanup_dependencies()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Flashcards API",
    description="Flashcard sets with a flip-through card browser",
    version=__version__,
    lifespan=lifespan,
)

# CORS configuration - loaded from environment with restrictive defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=get_cors_allow_credentials(),
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register API routers
app.include_router(view_router)
app.include_router(sets_router)
app.include_router(share_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "flashcards-backend",
        "version": __version__,
    }
