"""
Schemas Package

Pydantic models describing API request bodies and the structured
output expected from the grocery generation service.
"""

from .grocery import (
    GroceryItemSource,
    GroceryItemSchema,
    GroceryListResponse,
    GroceryListUpdate,
)

from .payloads import (
    RecipeIngredientSchema,
    RecipeCreate,
    RecipeUpdate,
    MealPlanCreate,
    MealPlanUpdate,
    MealCreate,
    PantryItemCreate,
    PantryItemUpdate,
    GenerateGroceryListRequest,
    PriceEstimateRequest,
)

__all__ = [
    # Grocery
    'GroceryItemSource',
    'GroceryItemSchema',
    'GroceryListResponse',
    'GroceryListUpdate',
    # Payloads
    'RecipeIngredientSchema',
    'RecipeCreate',
    'RecipeUpdate',
    'MealPlanCreate',
    'MealPlanUpdate',
    'MealCreate',
    'PantryItemCreate',
    'PantryItemUpdate',
    'GenerateGroceryListRequest',
    'PriceEstimateRequest',
]
