"""
Shopping List Routes

/shopping-list   GET list, POST create, PUT update, DELETE

PUT and DELETE take the list id in the JSON body.
"""

from flask import Blueprint

from constants.validation import MAX_LENGTHS
from models import db, ShoppingList
from services import normalize_items, normalize_recipe_ids, serialize_shopping_list
from utils.auth import current_user_id, require_auth
from utils.errors import NotFoundError, ValidationError
from utils.params import is_blank, json_body, parse_record_id
from utils.sanitizer import sanitize_name

shopping_list_bp = Blueprint('shopping_list', __name__, url_prefix='/shopping-list')
shopping_list_bp.before_request(require_auth)


def _owned_list(raw_id):
    if is_blank(raw_id):
        raise ValidationError("Shopping list ID is required")
    list_id = parse_record_id(raw_id)
    shopping_list = None
    if list_id is not None:
        shopping_list = ShoppingList.query.filter_by(id=list_id, user_id=current_user_id()).first()
    if not shopping_list:
        raise NotFoundError("Shopping list not found")
    return shopping_list


@shopping_list_bp.route('', methods=['GET'])
def list_shopping_lists():
    lists = (
        ShoppingList.query.filter_by(user_id=current_user_id())
        .order_by(ShoppingList.created_at.desc(), ShoppingList.id.desc())
        .all()
    )
    return [serialize_shopping_list(shopping_list) for shopping_list in lists], 200


@shopping_list_bp.route('', methods=['POST'])
def create_shopping_list():
    body = json_body()
    name = sanitize_name(body.get('name'), MAX_LENGTHS['shopping_list_name'])
    recipe_ids = body.get('recipeIds')
    items = body.get('items')

    if not name or not isinstance(recipe_ids, list) or items is None:
        raise ValidationError("Name, recipe IDs array, and items are required")

    shopping_list = ShoppingList(
        user_id=current_user_id(),
        name=name,
        recipe_ids=normalize_recipe_ids(recipe_ids),
        items=normalize_items(items),
    )
    db.session.add(shopping_list)
    db.session.commit()
    return serialize_shopping_list(shopping_list), 201


@shopping_list_bp.route('', methods=['PUT'])
def update_shopping_list():
    body = json_body()
    shopping_list = _owned_list(body.get('id'))

    if 'name' in body and body['name'] is not None:
        name = sanitize_name(body['name'], MAX_LENGTHS['shopping_list_name'])
        if not name:
            raise ValidationError("Shopping list name cannot be empty")
        shopping_list.name = name
    if 'items' in body and body['items'] is not None:
        shopping_list.items = normalize_items(body['items'])
    if 'isCompleted' in body and body['isCompleted'] is not None:
        shopping_list.is_completed = bool(body['isCompleted'])

    db.session.commit()
    return serialize_shopping_list(shopping_list), 200


@shopping_list_bp.route('', methods=['DELETE'])
def delete_shopping_list():
    body = json_body()
    shopping_list = _owned_list(body.get('id'))
    db.session.delete(shopping_list)
    db.session.commit()
    return '', 204
