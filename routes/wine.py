"""
Wine Pairing Routes

/food/wine/pairing?food=&maxPrice=   wines that suit a dish, ingredient or cuisine
/food/wine/dishes?wine=              dishes that suit a wine
"""

from flask import Blueprint, request

from services import get_recipe_api
from utils.errors import ValidationError
from utils.params import is_blank, parse_optional_float

wine_bp = Blueprint('wine', __name__, url_prefix='/food/wine')


@wine_bp.route('/pairing', methods=['GET'])
def pairing():
    food = request.args.get('food')
    if is_blank(food):
        raise ValidationError("Food name is required")
    max_price = parse_optional_float(
        request.args.get('maxPrice'), "maxPrice must be a positive number", min_val=0
    )
    return get_recipe_api().get_wine_pairing(food, max_price), 200


@wine_bp.route('/dishes', methods=['GET'])
def dishes():
    wine = request.args.get('wine')
    if is_blank(wine):
        raise ValidationError("Wine type is required")
    return get_recipe_api().get_dishes_for_wine(wine), 200
