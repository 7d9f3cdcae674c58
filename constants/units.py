"""
Unit Constants and Conversion Tables

Contains all unit mappings, conversion factors, and presentation thresholds
used when consolidating grocery quantities.
"""

# Weight conversions to grams (lowercase unit -> factor)
WEIGHT_TO_G = {
    'g': 1, 'gram': 1, 'grams': 1,
    'kg': 1000, 'kilogram': 1000, 'kilograms': 1000,
    'oz': 28.3495, 'ounce': 28.3495, 'ounces': 28.3495,
    'lb': 453.592, 'lbs': 453.592, 'pound': 453.592, 'pounds': 453.592,
}

# Volume conversions to milliliters (lowercase unit -> factor)
VOLUME_TO_ML = {
    'ml': 1, 'milliliter': 1, 'milliliters': 1,
    'l': 1000, 'liter': 1000, 'liters': 1000,
    'tsp': 4.92892, 'teaspoon': 4.92892, 'teaspoons': 4.92892,
    'tbsp': 14.7868, 'tablespoon': 14.7868, 'tablespoons': 14.7868,
    'fl oz': 29.5735, 'fluid ounce': 29.5735, 'fluid ounces': 29.5735,
    'cup': 236.588, 'cups': 236.588,
    'pint': 473.176, 'pints': 473.176,
    'quart': 946.353, 'quarts': 946.353,
    'gallon': 3785.41, 'gallons': 3785.41,
}

# Canonical base unit for each kind
BASE_UNITS = {'weight': 'g', 'volume': 'ml'}

# Supported presentation systems
UNIT_SYSTEMS = {'imperial', 'metric'}
DEFAULT_UNIT_SYSTEM = 'imperial'

# Presentation units per (kind, system), largest first: (unit, minimum base value)
DISPLAY_UNITS = {
    ('weight', 'metric'): [('kg', 1000), ('g', 0)],
    ('weight', 'imperial'): [('lb', 16 * 28.3495), ('oz', 0)],
    ('volume', 'metric'): [('l', 1000), ('ml', 0)],
    ('volume', 'imperial'): [('cup', 236.588 / 4), ('tbsp', 14.7868), ('tsp', 0)],
}
