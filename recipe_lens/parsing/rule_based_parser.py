import logging
import re
from typing import Any, Dict, List

from ..core.text import append_unique, is_list_item, is_step_line, non_empty_lines, strip_list_marker, strip_step_label
from ..errors import ExtractionError
from .parser import RecipeParser

logger = logging.getLogger("recipe_lens.parsing")

DEFAULT_TITLE = "Delicious Recipe"
DEFAULT_DESCRIPTION = "Recipe generated from image analysis"
MISSING_INGREDIENTS = "Ingredients not clearly specified in the image"
MISSING_INSTRUCTIONS = "Instructions not clearly specified in the image"
DEFAULT_PREP_TIME = "30 minutes"
DEFAULT_COOK_TIME = "30 minutes"
DEFAULT_SERVINGS = "4 servings"
DEFAULT_DIFFICULTY = "Medium"

TITLE_LABEL = re.compile(r"(?:title|dish|recipe):\s*(.+)", re.IGNORECASE)
INGREDIENTS_HEADER = re.compile(r"ingredients", re.IGNORECASE)
INSTRUCTIONS_HEADER = re.compile(r"instructions|directions|steps", re.IGNORECASE)


class RuleBasedParser(RecipeParser):
    """
    Line scanner for completions that are not usable JSON.

    Never gives up: anything it cannot find is filled with a placeholder so
    the result always has a title and non-empty ingredients/instructions.
    """

    def parse(self, text: str) -> Dict[str, Any]:
        try:
            text = text or ""
            lines = non_empty_lines(text)

            ingredients = self._extract_ingredients(lines) or [MISSING_INGREDIENTS]
            instructions = self._extract_instructions(lines) or [MISSING_INSTRUCTIONS]

            return {
                "title": self._extract_title(text, lines),
                "description": DEFAULT_DESCRIPTION,
                "ingredients": ingredients,
                "instructions": instructions,
                "prepTime": DEFAULT_PREP_TIME,
                "cookTime": DEFAULT_COOK_TIME,
                "servings": DEFAULT_SERVINGS,
                "difficulty": DEFAULT_DIFFICULTY,
            }
        except Exception as e:
            logger.exception("Fallback recipe extraction failed")
            raise ExtractionError("fallback-failed") from e

    def _extract_title(self, text: str, lines: List[str]) -> str:
        match = TITLE_LABEL.search(text)
        if match:
            return match.group(1).strip()

        if lines and ":" not in lines[0]:
            return lines[0]

        return DEFAULT_TITLE

    def _extract_ingredients(self, lines: List[str]) -> List[str]:
        ingredients: List[str] = []
        in_section = False

        for line in lines:
            # Header lines switch sections and are never content
            if INGREDIENTS_HEADER.search(line):
                in_section = True
                continue

            if INSTRUCTIONS_HEADER.search(line):
                in_section = False
                continue

            # List items count wherever they appear
            if in_section or is_list_item(line):
                append_unique(ingredients, strip_list_marker(line))

        return ingredients

    def _extract_instructions(self, lines: List[str]) -> List[str]:
        instructions: List[str] = []
        in_section = False

        for line in lines:
            if INSTRUCTIONS_HEADER.search(line):
                in_section = True
                continue

            if in_section or is_step_line(line):
                append_unique(instructions, strip_step_label(line))

        return instructions
