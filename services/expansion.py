"""
Recipe Expansion Service

Functions for scaling recipe ingredient lists by the servings requested
for each meal in a plan.
"""

from constants import MEAL_TIME_ORDER


def meal_sort_key(meal):
    """Sort meals by date, then by the canonical meal-time order."""
    meal_time = meal.get('meal_time') or 'custom'
    try:
        slot = MEAL_TIME_ORDER.index(meal_time)
    except ValueError:
        slot = len(MEAL_TIME_ORDER)
    return str(meal.get('date')), slot


def expand_recipe(recipe, servings, meal_date=None, meal_id=None):
    """
    Scale a recipe's ingredients for the requested number of servings.

    Amounts are declared per recipe.base_servings (1 when the recipe does not
    say otherwise) and scaled linearly. Units are left untouched and the
    declared ingredient order is preserved.

    Args:
        recipe: Recipe dict with id, ingredients and optional base_servings
        servings: Positive integer serving count
        meal_date: Date string recorded in the provenance stub
        meal_id: Id of the meal being expanded (kept for de-duplication)

    Returns:
        List of scaled ingredient dicts, each with a 'source' provenance stub
    """
    if isinstance(servings, bool) or not isinstance(servings, int) or servings < 1:
        raise ValueError(f"servings must be a positive integer, got {servings!r}")

    base_servings = recipe.get('base_servings') or 1
    scale = servings / base_servings
    recipe_id = recipe.get('id')

    expanded = []
    for ingredient in recipe.get('ingredients') or []:
        amount = ingredient.get('amount') or 0
        expanded.append({
            'name': ingredient.get('name', ''),
            'amount': amount * scale,
            'unit': ingredient.get('unit') or '',
            'preparation': ingredient.get('preparation'),
            'optional': bool(ingredient.get('optional', False)),
            'meal_id': meal_id,
            'source': {
                'recipe_id': recipe_id,
                'meal_date': meal_date,
                'servings': servings,
            },
        })
    return expanded


def expand_meals(meals, recipes):
    """
    Expand every recipe-backed meal in plan order.

    Meals without a recipe reference, or whose recipe is missing from
    `recipes`, contribute nothing.

    Args:
        meals: Iterable of meal dicts
        recipes: Mapping of recipe id -> recipe dict

    Returns:
        Flat list of scaled ingredient dicts
    """
    instances = []
    for meal in sorted(meals, key=meal_sort_key):
        recipe_id = meal.get('recipe_id')
        if not recipe_id or recipe_id not in recipes:
            continue
        instances.extend(expand_recipe(
            recipes[recipe_id],
            meal.get('servings') or 1,
            meal_date=str(meal.get('date')),
            meal_id=meal.get('id'),
        ))
    return instances
