import logging
from typing import Optional

from .json_extractor import JsonRecipeParser
from .parser import ExtractionResult, RecipeParser
from .rule_based_parser import RuleBasedParser

logger = logging.getLogger("recipe_lens.parsing")


class RecipeExtractor:
    """
    Two-tier extraction of a recipe candidate from a model completion.

    The strict JSON parser runs first. When it finds nothing usable the
    rule-based scanner runs on the original completion text; that fallback is
    a normal branch, not an error. Only a crash inside the fallback surfaces,
    as ExtractionError("fallback-failed").
    """

    def __init__(self, strict: Optional[RecipeParser] = None, fallback: Optional[RecipeParser] = None):
        self.strict = strict or JsonRecipeParser()
        self.fallback = fallback or RuleBasedParser()

    def extract(self, raw_text: str) -> ExtractionResult:
        candidate = self.strict.parse(raw_text)
        if candidate is not None:
            logger.debug("Recipe extracted from JSON")
            return ExtractionResult(candidate=candidate, source="json")

        logger.info("Completion has no usable recipe JSON, using text extraction")
        logger.debug(f"Raw completion: {raw_text!r}")
        candidate = self.fallback.parse(raw_text)
        return ExtractionResult(candidate=candidate, source="heuristic")
