"""Health check endpoints."""

from fastapi import APIRouter

from ..... import __version__
from ..deps import get_library
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        HealthResponse with current status and version.
    """
    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness probe; loads the document library if it is not loaded yet."""
    library = get_library()
    return HealthResponse(status="ready", version=__version__, documents=len(library.repository))
