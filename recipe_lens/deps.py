"""FastAPI dependencies for the Recipe Lens API.

Provides:
- The model gateway, built once from settings
- The recipe service wired to that gateway

Tests swap the gateway through app.dependency_overrides[get_gateway].
"""

from functools import lru_cache

from fastapi import Depends

from .core.ai_client import VisionGateway, build_gateway
from .services.recipe_service import RecipeService
from .settings import settings


@lru_cache
def get_gateway() -> VisionGateway:
    return build_gateway(settings)


def get_recipe_service(gateway: VisionGateway = Depends(get_gateway)) -> RecipeService:
    return RecipeService(gateway, max_image_bytes=settings.max_image_bytes)
