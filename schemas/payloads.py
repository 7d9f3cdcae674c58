"""
Request Payload Schemas

Validation for JSON bodies accepted by the API.
"""

import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from constants import MAX_LENGTHS

MealTime = Literal['breakfast', 'lunch', 'dinner', 'snack', 'custom']
UnitSystem = Literal['imperial', 'metric']


class RecipeIngredientSchema(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_LENGTHS['ingredient_name'])
    amount: float = Field(ge=0)
    unit: str = Field(default='', max_length=MAX_LENGTHS['unit'])
    preparation: Optional[str] = None
    optional: bool = False


class RecipeCreate(BaseModel):
    title: str = Field(min_length=1, max_length=MAX_LENGTHS['recipe_title'])
    ingredients: List[RecipeIngredientSchema] = []
    base_servings: int = Field(default=1, gt=0)
    instructions: str = ''
    url: Optional[str] = None
    image_url: Optional[str] = None


class RecipeUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=MAX_LENGTHS['recipe_title'])
    ingredients: Optional[List[RecipeIngredientSchema]] = None
    base_servings: Optional[int] = Field(default=None, gt=0)
    instructions: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class MealPlanCreate(BaseModel):
    """New meal plan; the range is inclusive and must not run backwards."""
    start_date: datetime.date
    end_date: datetime.date
    owner_id: Optional[str] = None

    @model_validator(mode='after')
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError('End date must be after or equal to start date')
        return self


class MealPlanUpdate(BaseModel):
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None

    @model_validator(mode='after')
    def check_date_range(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError('End date must be after or equal to start date')
        return self


class MealCreate(BaseModel):
    date: datetime.date
    meal_time: MealTime
    title: str = Field(min_length=1, max_length=MAX_LENGTHS['meal_title'])
    recipe_id: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=MAX_LENGTHS['description'])
    servings: int = Field(default=1, gt=0)


class PantryItemCreate(BaseModel):
    item: str = Field(min_length=1, max_length=MAX_LENGTHS['pantry_item'])
    quantity: float = Field(ge=0)
    unit: str = Field(default='', max_length=MAX_LENGTHS['unit'])
    owner_id: Optional[str] = None


class PantryItemUpdate(BaseModel):
    item: Optional[str] = Field(default=None, min_length=1, max_length=MAX_LENGTHS['pantry_item'])
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, max_length=MAX_LENGTHS['unit'])


class PantrySnapshotItem(BaseModel):
    id: Optional[str] = None
    item: str
    quantity: float = Field(ge=0)
    unit: str = ''


class GenerateGroceryListRequest(BaseModel):
    unit_system: Optional[UnitSystem] = None
    pantry_items: Optional[List[PantrySnapshotItem]] = None
    use_ai: bool = False


class PriceEstimateRequest(BaseModel):
    grocery_list_id: str = Field(min_length=1)
    store: Optional[str] = None
    manual_overrides: Dict[str, float] = {}

    @model_validator(mode='after')
    def check_overrides(self):
        for item_id, price in self.manual_overrides.items():
            if price < 0:
                raise ValueError(f'Override for {item_id} must not be negative')
        return self
