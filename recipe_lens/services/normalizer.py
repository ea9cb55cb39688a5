import logging
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from ..errors import NormalizationError
from ..schemas import Recipe

logger = logging.getLogger("recipe_lens.parsing")

ORDERED_FIELDS = ("ingredients", "instructions")
OPTIONAL_FIELDS = ("description", "prepTime", "cookTime", "servings", "difficulty")


def normalize(candidate: Union[Recipe, Mapping[str, Any]]) -> Recipe:
    """
    Turn an extracted candidate into a valid Recipe.

    - title must be a non-blank string
    - ingredients/instructions: a bare scalar becomes a one-item list,
      non-string items are rendered to text, blank items are dropped, and
      the result must not be empty
    - optional scalars pass through as they are
    - text that cannot be encoded as UTF-8 is repaired with U+FFFD

    Normalizing a Recipe again returns an equal Recipe.

    Raises:
        NormalizationError naming the offending field
    """
    if isinstance(candidate, Recipe):
        candidate = candidate.model_dump(by_alias=True, exclude_none=True)

    title = candidate.get("title")
    if not isinstance(title, str) or not title.strip():
        raise NormalizationError("title")

    fields: dict[str, Any] = {"title": _utf8_text(title)}
    for field in ORDERED_FIELDS:
        fields[field] = _ordered_lines(field, candidate.get(field))

    for field in OPTIONAL_FIELDS:
        value = candidate.get(field)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            logger.warning(f"Dropping non-scalar {field} of type {type(value).__name__}")
            continue
        fields[field] = _utf8_text(value) if isinstance(value, str) else value

    try:
        return Recipe.model_validate(fields)
    except ValidationError as e:
        raise NormalizationError("recipe", str(e)) from e


def _ordered_lines(field: str, value: Any) -> List[str]:
    if value is None:
        raise NormalizationError(field)

    items = value if isinstance(value, list) else [value]
    lines = [text for text in (_item_text(item) for item in items) if text]
    if not lines:
        raise NormalizationError(field)
    return lines


def _item_text(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, str):
        return _utf8_text(item) if item.strip() else ""
    if isinstance(item, dict):
        # e.g. {"item": "flour", "quantity": "200 g"}
        return " ".join(text for text in (_item_text(v) for v in item.values()) if text)
    if isinstance(item, list):
        return " ".join(text for text in (_item_text(v) for v in item) if text)
    return str(item)


def _utf8_text(value: str) -> str:
    # Lone surrogates from JSON escapes cannot be encoded; replace them with U+FFFD
    return value.encode("utf-8", "surrogatepass").decode("utf-8", "replace")
