from abc import ABC, abstractmethod
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel


class ExtractionResult(BaseModel):
    candidate: Dict[str, Any]
    source: Literal["json", "heuristic"]


class RecipeParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> Optional[Dict[str, Any]]:
        """Parse a raw completion into a recipe candidate, or None if this parser finds nothing usable."""
        pass
