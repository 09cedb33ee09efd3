"""
Favourite Recipe Routes

/recipes/favourite   GET list (enriched from the recipe API)
                     POST add {recipeId}
                     DELETE remove {recipeId} (idempotent)
"""

from flask import Blueprint, current_app
from sqlalchemy.exc import IntegrityError

from models import db, FavouriteRecipe
from services import get_recipe_api, serialize_favourite
from utils.auth import current_user_id, require_auth
from utils.errors import ConflictError, QuotaExceededError
from utils.params import json_body, parse_recipe_id

favourites_bp = Blueprint('favourites', __name__, url_prefix='/recipes/favourite')
favourites_bp.before_request(require_auth)

UNAVAILABLE_MESSAGE = (
    "Your favourites are saved, but recipe details are temporarily "
    "unavailable due to API daily limit."
)


def unavailable_placeholders(recipe_ids):
    """Bare entries returned when the recipe API quota is exhausted."""
    return {
        'results': [
            {
                'id': recipe_id,
                'title': f"Recipe #{recipe_id} (Details unavailable - API limit reached)",
                'image': None,
                '_apiUnavailable': True,
            }
            for recipe_id in recipe_ids
        ],
        '_message': UNAVAILABLE_MESSAGE,
    }


@favourites_bp.route('', methods=['GET'])
def list_favourites():
    favourites = (
        FavouriteRecipe.query.filter_by(user_id=current_user_id())
        .order_by(FavouriteRecipe.created_at, FavouriteRecipe.id)
        .all()
    )
    recipe_ids = [favourite.recipe_id for favourite in favourites]

    if not recipe_ids:
        return {'results': []}, 200

    try:
        return get_recipe_api().get_bulk_information(recipe_ids), 200
    except QuotaExceededError:
        current_app.logger.warning("Recipe API daily limit reached, returning bare favourites")
        return unavailable_placeholders(recipe_ids), 200


@favourites_bp.route('', methods=['POST'])
def add_favourite():
    body = json_body()
    recipe_id = parse_recipe_id(body.get('recipeId'))
    user_id = current_user_id()

    if FavouriteRecipe.query.filter_by(user_id=user_id, recipe_id=recipe_id).first():
        raise ConflictError("Recipe is already in favorites")

    favourite = FavouriteRecipe(user_id=user_id, recipe_id=recipe_id)
    db.session.add(favourite)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with an identical request
        db.session.rollback()
        raise ConflictError("Recipe is already in favorites")

    return serialize_favourite(favourite), 201


@favourites_bp.route('', methods=['DELETE'])
def remove_favourite():
    body = json_body()
    recipe_id = parse_recipe_id(body.get('recipeId'))

    FavouriteRecipe.query.filter_by(
        user_id=current_user_id(),
        recipe_id=recipe_id,
    ).delete(synchronize_session=False)
    db.session.commit()

    # Deleting something that is not there is still a success
    return '', 204
