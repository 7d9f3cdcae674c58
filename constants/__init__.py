"""
Constants Package

Lookup tables shared by the services and the API layer.
"""

from .units import (
    WEIGHT_TO_G,
    VOLUME_TO_ML,
    BASE_UNITS,
    UNIT_SYSTEMS,
    DEFAULT_UNIT_SYSTEM,
    DISPLAY_UNITS,
)

from .categories import (
    DEFAULT_CATEGORY,
    GROCERY_CATEGORIES,
    CATEGORY_PHRASES,
    CATEGORY_KEYWORDS,
)

from .validation import (
    MEAL_TIME_ORDER,
    VALID_EXPORT_FORMATS,
    TAX_RATE,
    MAX_LENGTHS,
)
