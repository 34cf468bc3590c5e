"""System endpoints: health check."""

from fastapi import APIRouter

from pricepath import __version__
from pricepath.web.schemas import HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """API health check."""
    return HealthResponse(status="ok", version=__version__)
