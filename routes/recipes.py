"""
Recipe Proxy Routes

Public read-only endpoints that forward to the recipe API:

/recipes/search                 complexSearch with filters
/recipes/autocomplete           title suggestions
/recipes/<id>/summary           short HTML summary
/recipes/<id>/information       full recipe details
/recipes/<id>/similar           similar recipes
"""

from flask import Blueprint, request

from constants.search import FLAG_FILTERS, INTEGER_FILTERS, NUTRIENT_FILTERS, TEXT_FILTERS
from constants.validation import (
    AUTOCOMPLETE_DEFAULT, AUTOCOMPLETE_MAX, AUTOCOMPLETE_MIN, AUTOCOMPLETE_MIN_QUERY_LENGTH,
    SIMILAR_DEFAULT, SIMILAR_MAX, SIMILAR_MIN,
)
from services import get_recipe_api
from utils.errors import ValidationError
from utils.params import parse_bounded_int, parse_flag, require_path_recipe_id

recipes_bp = Blueprint('recipes', __name__, url_prefix='/recipes')


def search_filters(args):
    """Pick the supported filters out of the query string."""
    filters = {}
    for name in TEXT_FILTERS:
        value = args.get(name)
        if value:
            filters[name] = value
    for name in FLAG_FILTERS:
        if parse_flag(args.get(name)):
            filters[name] = 'true'
    for name in INTEGER_FILTERS + NUTRIENT_FILTERS:
        value = args.get(name)
        if value is None or value.strip() == '':
            continue
        try:
            filters[name] = int(float(value))
        except (ValueError, OverflowError):
            raise ValidationError(f"{name} must be a number")
    return filters


@recipes_bp.route('/search', methods=['GET'])
def search():
    search_term = (request.args.get('searchTerm') or '').strip()
    page = parse_bounded_int(request.args.get('page'), 1, 0, 10000, "Page must be a positive integer")
    filters = search_filters(request.args)
    return get_recipe_api().search_recipes(search_term, max(page, 1), filters), 200


@recipes_bp.route('/autocomplete', methods=['GET'])
def autocomplete():
    query = (request.args.get('query') or '').strip()
    number = parse_bounded_int(
        request.args.get('number'),
        AUTOCOMPLETE_DEFAULT,
        AUTOCOMPLETE_MIN,
        AUTOCOMPLETE_MAX,
        f"Number must be between {AUTOCOMPLETE_MIN} and {AUTOCOMPLETE_MAX}",
    )
    if len(query) < AUTOCOMPLETE_MIN_QUERY_LENGTH:
        raise ValidationError(f"Query must be at least {AUTOCOMPLETE_MIN_QUERY_LENGTH} characters")

    return get_recipe_api().autocomplete(query, number), 200


@recipes_bp.route('/<recipe_id>/summary', methods=['GET'])
def summary(recipe_id):
    recipe_id = require_path_recipe_id(recipe_id)
    return get_recipe_api().get_summary(recipe_id), 200


@recipes_bp.route('/<recipe_id>/information', methods=['GET'])
def information(recipe_id):
    recipe_id = require_path_recipe_id(recipe_id)
    return get_recipe_api().get_information(
        recipe_id,
        include_nutrition=parse_flag(request.args.get('includeNutrition')),
        add_wine_pairing=parse_flag(request.args.get('addWinePairing')),
        add_taste_data=parse_flag(request.args.get('addTasteData')),
    ), 200


@recipes_bp.route('/<recipe_id>/similar', methods=['GET'])
def similar(recipe_id):
    recipe_id = require_path_recipe_id(recipe_id)
    number = parse_bounded_int(
        request.args.get('number'),
        SIMILAR_DEFAULT,
        SIMILAR_MIN,
        SIMILAR_MAX,
        f"Number must be between {SIMILAR_MIN} and {SIMILAR_MAX}",
    )
    return get_recipe_api().get_similar(recipe_id, number), 200
