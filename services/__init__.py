"""
Services Package

Business logic modules for the meal planning application.
"""

from .conversion import (
    is_weight_unit,
    is_volume_unit,
    unit_kind,
    to_grams,
    to_milliliters,
    to_canonical,
    to_grams_estimate,
    convert_amount,
    units_compatible,
    display_unit,
)

from .matching import (
    normalize_ingredient_name,
    normalize_unit,
    merge_key,
)

from .expansion import (
    meal_sort_key,
    expand_recipe,
    expand_meals,
)

from .categorize import (
    categorize_ingredient,
    categorize_items,
)

from .pantry import (
    reconcile_pantry,
)

from .shopping import (
    new_grocery_item,
    consolidate_ingredients,
    present_quantities,
    list_summary,
    build_grocery_list,
    generate_grocery_list,
)

from .cost import (
    effective_price,
    estimate_budget,
)

from .generation import (
    GroceryGenerationError,
    GroceryGenerationClient,
    generate_grocery_list_ai,
)

from .export import (
    grocery_list_rows,
    grocery_list_to_csv,
    grocery_list_to_json,
)

__all__ = [
    # Conversion
    'is_weight_unit',
    'is_volume_unit',
    'unit_kind',
    'to_grams',
    'to_milliliters',
    'to_canonical',
    'to_grams_estimate',
    'convert_amount',
    'units_compatible',
    'display_unit',
    # Matching
    'normalize_ingredient_name',
    'normalize_unit',
    'merge_key',
    # Expansion
    'meal_sort_key',
    'expand_recipe',
    'expand_meals',
    # Categorize
    'categorize_ingredient',
    'categorize_items',
    # Pantry
    'reconcile_pantry',
    # Shopping
    'new_grocery_item',
    'consolidate_ingredients',
    'present_quantities',
    'list_summary',
    'build_grocery_list',
    'generate_grocery_list',
    # Cost
    'effective_price',
    'estimate_budget',
    # Generation
    'GroceryGenerationError',
    'GroceryGenerationClient',
    'generate_grocery_list_ai',
    # Export
    'grocery_list_rows',
    'grocery_list_to_csv',
    'grocery_list_to_json',
]
