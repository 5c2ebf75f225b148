"""
System router — service status.

Endpoints:
- GET /api/status — Service status and the backend selected at startup

/api/health is taken by the medical persona, hence the different name.
"""

from fastapi import APIRouter, Depends

from backend.llm_router import CompletionRouter
from configs import VERSION

from ..schemas import StatusResponse
from ..deps import get_router


router = APIRouter(prefix="/api", tags=["System"])


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/status", response_model=StatusResponse)
async def service_status(completion_router: CompletionRouter = Depends(get_router)):
    """Report service status and which backend serves completions."""
    return StatusResponse(
        status="ok",
        version=VERSION,
        backend=completion_router.backend.value,
        model=completion_router.client.model,
    )
