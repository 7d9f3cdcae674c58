"""
Validation Constants

Contains whitelist values and limits for validating API input and
the structured output of the grocery generation service.
"""

# Valid meal-time slots, in the order meals are processed within a day
MEAL_TIME_ORDER = ('breakfast', 'lunch', 'dinner', 'snack', 'custom')

# Valid export formats
VALID_EXPORT_FORMATS = {'json', 'csv'}

# Sales tax applied to budget estimates
TAX_RATE = 0.0825

# Maximum field lengths for security
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_title': 200,
    'meal_title': 200,
    'description': 2000,
    'instructions': 50000,
    'source_url': 500,
    'pantry_item': 200,
    'unit': 30,
}
