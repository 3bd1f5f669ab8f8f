"""Share link API route."""

from fastapi import APIRouter
from pydantic import BaseModel

from src.config import get_share_url

router = APIRouter(prefix="/api/share", tags=["share"])


class ShareResponse(BaseModel):
    """The link offered by the share button."""

    url: str


@router.get("", response_model=ShareResponse)
async def get_share_link() -> ShareResponse:
    """Get the fixed external link for the share button."""
    return ShareResponse(url=get_share_url())
