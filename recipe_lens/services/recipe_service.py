import base64
import binascii
import logging
from typing import Optional

from ..core.ai_client import VisionGateway
from ..core.prompts import RECIPE_FROM_IMAGE_PROMPT
from ..errors import (
    ConfigError,
    ExtractionError,
    InputError,
    NormalizationError,
    RecipeLensError,
    RecipeParseError,
)
from ..parsing import RecipeExtractor
from ..schemas import Recipe
from ..settings import settings
from .normalizer import normalize

logger = logging.getLogger("recipe_lens.recipes")


class RecipeService:
    """Turns one uploaded food photo into one Recipe, or raises one RecipeLensError."""

    def __init__(
        self,
        gateway: VisionGateway,
        extractor: Optional[RecipeExtractor] = None,
        max_image_bytes: int = settings.max_image_bytes,
        prompt: str = RECIPE_FROM_IMAGE_PROMPT,
    ):
        self.gateway = gateway
        self.extractor = extractor or RecipeExtractor()
        self.max_image_bytes = max_image_bytes
        self.prompt = prompt

    def validate_image(self, image: Optional[str]) -> str:
        image = (image or "").strip()
        if not image:
            raise InputError("Image is required")

        try:
            decoded = base64.b64decode(image, validate=True)
        except (binascii.Error, ValueError):
            raise InputError("Image must be base64 encoded")

        if len(decoded) > self.max_image_bytes:
            raise InputError("Image is too large")

        return image

    async def generate(self, image: Optional[str]) -> Recipe:
        try:
            return await self._generate(image)
        except RecipeLensError:
            raise
        except Exception as e:
            logger.exception("Recipe generation error")
            raise RecipeLensError("Internal server error") from e

    async def _generate(self, image: Optional[str]) -> Recipe:
        image = self.validate_image(image)

        if not self.gateway.is_configured():
            logger.error(f"{self.gateway.provider} API key not found")
            raise ConfigError()

        # GatewayError propagates as is; the extractor never sees a failed call
        raw_text = await self.gateway.generate(image, self.prompt)

        try:
            result = self.extractor.extract(raw_text)
            recipe = normalize(result.candidate)
        except ExtractionError as e:
            logger.error(f"Failed to extract recipe ({e.reason}). Raw content: {raw_text!r}")
            raise RecipeParseError() from e
        except NormalizationError as e:
            logger.error(f"Extracted recipe is invalid ({e}). Raw content: {raw_text!r}")
            raise RecipeParseError() from e

        logger.info(f"Generated recipe '{recipe.title}' via {result.source} extraction")
        return recipe
