from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# Free-text scalars the model may also answer as plain numbers ("servings": 4)
Scalar = Union[str, int, float]


class Recipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    description: Optional[Scalar] = None
    ingredients: List[str]
    instructions: List[str]
    prep_time: Optional[Scalar] = Field(None, alias="prepTime")
    cook_time: Optional[Scalar] = Field(None, alias="cookTime")
    servings: Optional[Scalar] = None
    difficulty: Optional[Scalar] = None


class GenerateRecipeRequest(BaseModel):
    image: Optional[str] = Field(None, description="Base64 encoded image, no data-URL prefix")


class GenerateRecipeResponse(BaseModel):
    recipe: Recipe


class ErrorResponse(BaseModel):
    error: str


class AIStatusResponse(BaseModel):
    ai_mode: str
    provider: str
    model: str
    has_api_key: bool
