from .parser import RecipeParser, ExtractionResult
from .json_extractor import JsonRecipeParser, find_json_span
from .rule_based_parser import RuleBasedParser
from .extractor import RecipeExtractor

__all__ = ["RecipeParser", "ExtractionResult", "JsonRecipeParser", "find_json_span", "RuleBasedParser", "RecipeExtractor"]
