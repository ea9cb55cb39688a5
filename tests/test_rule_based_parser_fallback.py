import pytest
from unittest.mock import patch

from recipe_lens.errors import ExtractionError
from recipe_lens.parsing.rule_based_parser import (
    DEFAULT_TITLE,
    MISSING_INGREDIENTS,
    MISSING_INSTRUCTIONS,
    RuleBasedParser,
)


def test_labelled_title_numbered_ingredients_and_steps():
    text = "Title: Pasta\nIngredients\n1. Pasta\n2. Cheese\nInstructions\nStep 1: Boil water\nStep 2: Add pasta"
    result = RuleBasedParser().parse(text)

    assert result["title"] == "Pasta"
    assert result["ingredients"] == ["Pasta", "Cheese"]
    assert result["instructions"] == ["Boil water", "Add pasta"]


def test_bullets_and_step_labels():
    text = """
    Lemon Garlic Chicken

    Ingredients:
    - 2 chicken breasts
    • 1 lemon
    * 3 cloves garlic

    Instructions:
    Step 1: Season the chicken.
    Step 2. Sear for 6 minutes per side.
    Step 3) Squeeze over the lemon.
    """
    result = RuleBasedParser().parse(text)

    assert result["title"] == "Lemon Garlic Chicken"
    assert result["ingredients"] == ["2 chicken breasts", "1 lemon", "3 cloves garlic"]
    assert result["instructions"] == [
        "Season the chicken.",
        "Sear for 6 minutes per side.",
        "Squeeze over the lemon.",
    ]


def test_header_lines_are_not_content():
    text = "Ingredients: 2 eggs\n- butter\nDirections for two\nWhisk and fry"
    result = RuleBasedParser().parse(text)

    assert result["ingredients"] == ["butter"]
    assert result["instructions"] == ["Whisk and fry"]


def test_placeholders_when_nothing_recognizable():
    result = RuleBasedParser().parse("I'm sorry, I can't identify this dish.")

    assert result["title"] == "I'm sorry, I can't identify this dish."
    assert result["ingredients"] == [MISSING_INGREDIENTS]
    assert result["instructions"] == [MISSING_INSTRUCTIONS]


def test_empty_text_gets_all_placeholders():
    result = RuleBasedParser().parse("")

    assert result == {
        "title": DEFAULT_TITLE,
        "description": "Recipe generated from image analysis",
        "ingredients": [MISSING_INGREDIENTS],
        "instructions": [MISSING_INSTRUCTIONS],
        "prepTime": "30 minutes",
        "cookTime": "30 minutes",
        "servings": "4 servings",
        "difficulty": "Medium",
    }


def test_first_line_with_colon_is_not_a_title():
    result = RuleBasedParser().parse("Here it is: a lovely soup\nSimmer gently")
    assert result["title"] == DEFAULT_TITLE


def test_title_label_anywhere_in_text():
    text = "This looks great.\nDish: Pad Thai\n- rice noodles"
    assert RuleBasedParser().parse(text)["title"] == "Pad Thai"

    text = "Here is a recipe: Banana Bread"
    assert RuleBasedParser().parse(text)["title"] == "Banana Bread"


def test_list_items_count_as_ingredients_outside_the_section():
    text = "Tomato Soup\n1. Roast the tomatoes\n2) Blend until smooth"
    result = RuleBasedParser().parse(text)

    assert result["ingredients"] == ["Roast the tomatoes", "Blend until smooth"]
    assert result["instructions"] == [MISSING_INSTRUCTIONS]


def test_numbered_lines_under_instructions_keep_their_number():
    text = "Ingredients\n- flour\nDirections\n1. Mix"
    result = RuleBasedParser().parse(text)

    # Numbered lines are list items wherever they are, so they also land in ingredients
    assert result["ingredients"] == ["flour", "Mix"]
    assert result["instructions"] == ["1. Mix"]


def test_step_lines_outside_section():
    result = RuleBasedParser().parse("Grilled Cheese\nStep 1: Butter the bread\nstep2) Grill")
    assert result["instructions"] == ["Butter the bread", "Grill"]


def test_exact_duplicates_are_dropped():
    text = "Ingredients\n- salt\n- salt\n- Salt\n- pepper"
    result = RuleBasedParser().parse(text)
    assert result["ingredients"] == ["salt", "Salt", "pepper"]


def test_scan_crash_surfaces_as_extraction_error():
    parser = RuleBasedParser()
    with patch.object(RuleBasedParser, "_extract_ingredients", side_effect=RuntimeError("boom")):
        with pytest.raises(ExtractionError) as exc_info:
            parser.parse("anything")

    assert exc_info.value.reason == "fallback-failed"
