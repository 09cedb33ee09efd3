"""
Services Package

Business logic modules for the recipe API.
"""

from .recipe_api import (
    RecipeAPIClient,
    init_recipe_api,
    get_recipe_api,
)

from .image_host import (
    CloudinaryHost,
    LocalHost,
    get_image_host,
)

from .ordering import next_order

from .shopping import (
    normalize_items,
    normalize_recipe_ids,
)

from .serializers import (
    to_iso,
    serialize_collection,
    serialize_collection_item,
    serialize_meal_plan,
    serialize_meal_plan_item,
    serialize_favourite,
    serialize_shopping_list,
    serialize_note,
    serialize_recipe_image,
)

__all__ = [
    # Recipe API
    'RecipeAPIClient',
    'init_recipe_api',
    'get_recipe_api',
    # Image hosting
    'CloudinaryHost',
    'LocalHost',
    'get_image_host',
    # Ordering
    'next_order',
    # Shopping
    'normalize_items',
    'normalize_recipe_ids',
    # Serializers
    'to_iso',
    'serialize_collection',
    'serialize_collection_item',
    'serialize_meal_plan',
    'serialize_meal_plan_item',
    'serialize_favourite',
    'serialize_shopping_list',
    'serialize_note',
    'serialize_recipe_image',
]
