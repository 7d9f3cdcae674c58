"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .recipe import Recipe
from .mealplan import MealPlan, Meal
from .pantry import PantryItem
from .grocery import GroceryList

__all__ = [
    'db',
    'Recipe',
    'MealPlan',
    'Meal',
    'PantryItem',
    'GroceryList',
]
