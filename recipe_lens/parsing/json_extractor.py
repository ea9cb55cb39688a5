import json
import logging
import re
from typing import Any, Dict, List, Optional

from .parser import RecipeParser

logger = logging.getLogger("recipe_lens.parsing")

# First fenced block, optionally tagged json; inner content is group 1
FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")

REQUIRED_FIELDS = ("title", "ingredients", "instructions")


def find_json_span(text: str) -> Optional[str]:
    """
    Locate the JSON object inside a completion.

    Uses the inner content of the first fenced block when there is one,
    otherwise the whole text, then slices from the first "{" to the last "}"
    so prose around the object is ignored.
    """
    match = FENCED_BLOCK.search(text)
    candidate = match.group(1) if match else text

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start == -1 or end == -1:
        return None
    return candidate[start:end + 1]


def _is_blank(value: Any) -> bool:
    # null, "", 0, false and NaN; an empty list is still present
    if isinstance(value, (bool, int, float)):
        return not value or value != value
    return value is None or value == ""


def missing_required_fields(data: Dict[str, Any]) -> List[str]:
    return [field for field in REQUIRED_FIELDS if _is_blank(data.get(field))]


class JsonRecipeParser(RecipeParser):
    """Strict path: the completion holds a JSON object with the recipe fields."""

    def parse(self, text: str) -> Optional[Dict[str, Any]]:
        span = find_json_span(text or "")
        if span is None:
            logger.debug("No JSON object found in completion")
            return None

        try:
            data = json.loads(span)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Failed to parse recipe JSON: {e}")
            return None

        missing = missing_required_fields(data)
        if missing:
            # The parsed object is discarded; text extraction runs on the raw completion
            logger.warning(f"Recipe JSON is missing {', '.join(missing)}, falling back to text extraction")
            return None

        return data
