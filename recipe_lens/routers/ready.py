from fastapi import APIRouter, Depends

from ..core.ai_client import VisionGateway
from ..deps import get_gateway
from ..schemas import AIStatusResponse
from ..settings import settings

router = APIRouter()


@router.get("/ready")
async def ready():
    return {"ok": True}


@router.get("/ai/status", response_model=AIStatusResponse)
def get_ai_status(gateway: VisionGateway = Depends(get_gateway)):
    """Debug endpoint for AI availability. Never echoes the credential."""
    return AIStatusResponse(
        ai_mode=settings.ai_mode,
        provider=gateway.provider,
        model=gateway.model,
        has_api_key=bool(gateway.api_key),
    )
