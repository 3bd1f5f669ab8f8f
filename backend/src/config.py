"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
"""

import logging
import os

DEFAULT_SHARE_URL = "https://developer.apple.com/xcode/swiftui"

# Valid values for COLLECTION_SEED
SEED_EMPTY = "empty"
SEED_SAMPLE = "sample"


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000-3005 for development
    """
    default_origins = ",".join(f"http://localhost:{port}" for port in range(3000, 3006))
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: true
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "true").lower() == "true"


# The API only reads and posts JSON
CORS_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]

CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
    "X-Requested-With",
]


def is_production() -> bool:
    """Check if running in production environment."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


def get_share_url() -> str:
    """Get the link offered by the share button.

    Environment variable: SHARE_URL
    """
    return os.getenv("SHARE_URL", DEFAULT_SHARE_URL)


def get_collection_seed() -> str:
    """Get how the collection is populated at startup.

    Environment variable: COLLECTION_SEED
    Options:
        - 'empty': Start with no sets (default)
        - 'sample': Load the bundled sample sets

    Raises:
        ValueError: If the value is not a known option
    """
    seed = os.getenv("COLLECTION_SEED", SEED_EMPTY).strip().lower()
    if seed not in (SEED_EMPTY, SEED_SAMPLE):
        raise ValueError(
            f"Invalid COLLECTION_SEED: '{seed}'. Valid options: '{SEED_EMPTY}', '{SEED_SAMPLE}'"
        )
    return seed


def get_log_level() -> int:
    """Get the root log level.

    Environment variable: LOG_LEVEL (name such as DEBUG or INFO)
    Unknown names fall back to INFO.
    """
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_host() -> str:
    """Get the bind host for the HTTP server (HOST, default 127.0.0.1)."""
    return os.getenv("HOST", "127.0.0.1")


def get_port() -> int:
    """Get the bind port for the HTTP server (PORT, default 8000)."""
    return int(os.getenv("PORT", "8000"))
