RECIPE_FROM_IMAGE_PROMPT = """Analyze this food image and generate a detailed recipe. Please provide:

1. A creative and appetizing title for the dish
2. A brief description of the dish
3. A complete list of ingredients with measurements
4. Step-by-step cooking instructions
5. Estimated prep time and cook time
6. Number of servings
7. Difficulty level (Easy, Medium, or Hard)

Please format your response as a JSON object with the following structure:
{
  "title": "Dish Name",
  "description": "Brief description of the dish",
  "ingredients": ["ingredient 1", "ingredient 2", ...],
  "instructions": ["step 1", "step 2", ...],
  "prepTime": "X minutes",
  "cookTime": "X minutes",
  "servings": "X servings",
  "difficulty": "Easy/Medium/Hard"
}

Be specific with measurements and cooking times. Make the recipe practical and achievable for home cooks."""
