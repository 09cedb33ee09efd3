"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, utcnow

from .collection import Collection, CollectionItem
from .mealplan import MealPlan, MealPlanItem
from .favourite import FavouriteRecipe
from .shopping import ShoppingList
from .note import RecipeNote
from .image import RecipeImage

__all__ = [
    'db',
    'utcnow',
    'Collection',
    'CollectionItem',
    'MealPlan',
    'MealPlanItem',
    'FavouriteRecipe',
    'ShoppingList',
    'RecipeNote',
    'RecipeImage',
]
