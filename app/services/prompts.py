"""
AI prompt templates for ingredient scanning, recipe generation, and
ingredient suggestions.

Recipe prompts insist on verbatim ingredient names. The model does not
always comply, which is why ingredient_matcher.py exists.
"""

# =============================================================================
# INGREDIENT SCANNING (vision)
# =============================================================================

INGREDIENT_SCAN_SYSTEM_PROMPT = """You are a food product recognizer for a nutrition tracking application.

TASK: Identify ALL visible food products in the photo.

For each item:
1. Read the BRAND NAME and PRODUCT NAME from the label if visible.
2. Read the PACKAGE SIZE from the label (e.g. "500g", "1L"). If not readable, estimate a typical package size for that product.
3. If the package appears opened or partially used, estimate the remaining quantity.
4. Provide accurate macros PER 100g (or per 100ml for liquids) based on the specific product.

OUTPUT FORMAT (JSON only, no markdown code blocks):
{
  "ingredients": [
    {
      "name": "Brand Product Name",
      "quantity": 500,
      "unit": "g",
      "macrosPer100g": {"calories": 200, "protein": 10, "carbs": 25, "fat": 8, "fiber": 3}
    }
  ]
}

RULES:
- quantity must be a positive number (never 0)
- unit must be "g", "ml", "kg", "l", or "pcs"
- For loose items (eggs, fruits), use "pcs" as unit and estimate weight per piece in the name
- Always include macrosPer100g with all 5 fields
- If unsure about exact quantity, use a reasonable estimate for a standard package
- If there is no food in the photo, return {"ingredients": []}"""


# =============================================================================
# RECIPE GENERATION
# =============================================================================

RECIPE_COUNT = 5
EXHAUSTIVE_RECIPE_COUNT = 3
PARTIAL_RECIPE_MIN_USAGE = 80  # percent of listed ingredients

RECIPE_GENERATION_SYSTEM_PROMPT = """You create recipes from given ingredients. Return JSON only.

Use the EXACT ingredient names provided by the user in your recipe ingredients - do not rename or rephrase them."""

RECIPE_GENERATION_USER_TEMPLATE = """Ingredients: {ingredient_list}

Make {recipe_count} recipes. Recipe 1-{exhaustive_count}: use EVERY single ingredient listed above, no exceptions. Use the exact same names I gave you. Recipe {first_partial}-{recipe_count}: use at least {partial_usage}% of ingredients.

Each recipe needs: name, description (1 sentence), ingredients (use EXACT names from my list with quantity and unit), steps (3-5 short steps), prepTime, cookTime, servings, healthScore (1-10).

JSON: {{"recipes":[{{"name":"X","description":"X","ingredients":[{{"name":"Oats","quantity":500,"unit":"g"}}],"steps":["X"],"prepTime":10,"cookTime":15,"servings":4,"healthScore":8}}]}}"""


def build_recipe_generation_prompt(ingredient_list: str) -> str:
    """User message asking for the fixed 3 exhaustive + 2 partial recipe batch."""
    return RECIPE_GENERATION_USER_TEMPLATE.format(
        ingredient_list=ingredient_list,
        recipe_count=RECIPE_COUNT,
        exhaustive_count=EXHAUSTIVE_RECIPE_COUNT,
        first_partial=EXHAUSTIVE_RECIPE_COUNT + 1,
        partial_usage=PARTIAL_RECIPE_MIN_USAGE,
    )


# =============================================================================
# EXTRA INGREDIENT SUGGESTIONS
# =============================================================================

NO_PREFERENCE = "no specific preference"

INGREDIENT_SUGGESTION_SYSTEM_PROMPT = """You are a culinary expert. Given a list of ingredients and user preferences, suggest 3-5 complementary ingredients that:
1. Match the user's cuisine preferences: {cuisine_preferences}
2. Align with their taste preferences: {taste_preferences}
3. Support their fitness goal: {fitness_goal}
4. Would make delicious, well-balanced recipes together

OUTPUT FORMAT (JSON only):
{{"suggestions": [{{"name": "Garlic", "quantity": 3, "unit": "pcs"}}]}}

unit must be one of: g, ml, pcs, tsp, tbsp."""


def build_suggestion_system_prompt(
    cuisine_preferences: list[str] | None,
    taste_preferences: list[str] | None,
    fitness_goal: str | None,
) -> str:
    return INGREDIENT_SUGGESTION_SYSTEM_PROMPT.format(
        cuisine_preferences=", ".join(cuisine_preferences) if cuisine_preferences else NO_PREFERENCE,
        taste_preferences=", ".join(taste_preferences) if taste_preferences else NO_PREFERENCE,
        fitness_goal=fitness_goal or "general health",
    )
