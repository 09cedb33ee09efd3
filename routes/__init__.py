"""
Routes Package

One blueprint per resource family. Blueprints that need a user register
utils.auth.require_auth as their before_request hook.
"""

from .collections import collections_bp
from .favourites import favourites_bp
from .meal_plan import meal_plan_bp
from .notes import notes_bp
from .recipe_images import recipe_images_bp
from .recipes import recipes_bp
from .shopping_list import shopping_list_bp
from .upload import upload_bp, uploads_bp
from .wine import wine_bp

API_BLUEPRINTS = [
    collections_bp,
    meal_plan_bp,
    favourites_bp,
    notes_bp,
    recipe_images_bp,
    recipes_bp,
    wine_bp,
    shopping_list_bp,
    upload_bp,
    uploads_bp,
]


def register_blueprints(app):
    """Mount every resource blueprint under API_PREFIX."""
    prefix = (app.config.get('API_PREFIX') or '').rstrip('/')
    for blueprint in API_BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=prefix + blueprint.url_prefix)
