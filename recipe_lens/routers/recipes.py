from fastapi import APIRouter, Depends

from ..deps import get_recipe_service
from ..errors import MethodNotAllowedError
from ..schemas import ErrorResponse, GenerateRecipeRequest, GenerateRecipeResponse
from ..services.recipe_service import RecipeService

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateRecipeResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def generate_recipe(
    payload: GenerateRecipeRequest,
    service: RecipeService = Depends(get_recipe_service),
):
    """
    Generate a recipe from a base64 encoded food photo.
    """
    recipe = await service.generate(payload.image)
    return GenerateRecipeResponse(recipe=recipe)


@router.api_route(
    "/generate",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"],
    include_in_schema=False,
)
async def generate_recipe_wrong_method():
    raise MethodNotAllowedError()
