"""
Grocery List Schemas

Shape of a grocery item as produced by the generation service and as
accepted when a stored list is edited.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GroceryItemSource(BaseModel):
    """One meal's contribution to a grocery item."""
    model_config = ConfigDict(strict=True)

    recipe_id: str
    meal_date: str
    servings: float


class GroceryItemSchema(BaseModel):
    """A consolidated grocery line item."""
    model_config = ConfigDict(strict=True)

    id: Optional[str] = None
    name: str = Field(min_length=1)
    display_name: str
    quantity: float = Field(ge=0)
    unit: str
    quantity_in_grams: Optional[float] = Field(default=None, ge=0)
    category: str = Field(min_length=1)
    notes: Optional[str] = None
    from_recipes: List[GroceryItemSource]
    estimated_price: Optional[float] = Field(default=None, ge=0)
    store_suggestions: Optional[List[str]] = None
    optional: bool


class GroceryListResponse(BaseModel):
    """Top-level JSON object returned by the generation service."""
    model_config = ConfigDict(strict=True)

    items: List[GroceryItemSchema]


class GroceryListUpdate(BaseModel):
    """Wholesale replacement of a stored list's items and/or summary."""

    items: Optional[List[GroceryItemSchema]] = None
    summary: Optional[dict] = None
