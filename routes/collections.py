"""
Collection Routes

/collections                      GET list, POST create
/collections/<id>                 GET detail, PUT update, DELETE
/collections/<id>/items           POST add recipe, DELETE remove recipe

Every query is filtered by the caller's user id; another user's
collection is reported exactly like a missing one.
"""

from flask import Blueprint
from sqlalchemy import func

from constants.validation import MAX_LENGTHS
from models import db, Collection, CollectionItem
from services import next_order, serialize_collection, serialize_collection_item
from utils.auth import current_user_id, require_auth
from utils.errors import NotFoundError, ValidationError
from utils.params import MAX_DB_INT, is_blank, json_body, parse_image_url, parse_recipe_id
from utils.sanitizer import sanitize_name, sanitize_text

collections_bp = Blueprint('collections', __name__, url_prefix='/collections')
collections_bp.before_request(require_auth)


def _owned_collection(collection_id):
    if collection_id > MAX_DB_INT:
        raise NotFoundError("Collection not found")
    collection = Collection.query.filter_by(id=collection_id, user_id=current_user_id()).first()
    if not collection:
        raise NotFoundError("Collection not found")
    return collection


# ============================================
# ROUTES - COLLECTIONS
# ============================================

@collections_bp.route('', methods=['GET'])
def list_collections():
    rows = (
        db.session.query(Collection, func.count(CollectionItem.id))
        .outerjoin(CollectionItem, CollectionItem.collection_id == Collection.id)
        .filter(Collection.user_id == current_user_id())
        .group_by(Collection.id)
        .order_by(Collection.created_at.desc(), Collection.id.desc())
        .all()
    )
    return [serialize_collection(collection, item_count=count) for collection, count in rows], 200


@collections_bp.route('', methods=['POST'])
def create_collection():
    body = json_body()
    name = sanitize_name(body.get('name'), MAX_LENGTHS['collection_name'])
    if not name:
        raise ValidationError("Collection name is required")

    collection = Collection(
        user_id=current_user_id(),
        name=name,
        description=sanitize_text(body.get('description'), MAX_LENGTHS['description']),
        color=sanitize_name(body.get('color'), MAX_LENGTHS['color']) or None,
    )
    db.session.add(collection)
    db.session.commit()
    return serialize_collection(collection, item_count=0), 201


@collections_bp.route('/<int:collection_id>', methods=['GET'])
def get_collection(collection_id):
    collection = _owned_collection(collection_id)
    return serialize_collection(collection, include_items=True), 200


@collections_bp.route('/<int:collection_id>', methods=['PUT'])
def update_collection(collection_id):
    body = json_body()
    collection = _owned_collection(collection_id)

    # Only non-blank names replace the current one
    if not is_blank(body.get('name')):
        collection.name = sanitize_name(body['name'], MAX_LENGTHS['collection_name'])
    if 'description' in body:
        collection.description = sanitize_text(body['description'], MAX_LENGTHS['description'])
    if 'color' in body:
        collection.color = sanitize_name(body['color'], MAX_LENGTHS['color']) or None

    db.session.commit()
    return serialize_collection(collection), 200


@collections_bp.route('/<int:collection_id>', methods=['DELETE'])
def delete_collection(collection_id):
    collection = _owned_collection(collection_id)
    db.session.delete(collection)
    db.session.commit()
    return '', 204


# ============================================
# ROUTES - COLLECTION ITEMS
# ============================================

@collections_bp.route('/<int:collection_id>/items', methods=['POST'])
def add_collection_item(collection_id):
    body = json_body()
    collection = _owned_collection(collection_id)

    title = sanitize_name(body.get('recipeTitle'), MAX_LENGTHS['recipe_title'])
    if is_blank(body.get('recipeId')) or not title:
        raise ValidationError("Recipe ID and title are required")
    recipe_id = parse_recipe_id(body.get('recipeId'))
    recipe_image = parse_image_url(body.get('recipeImage'), MAX_LENGTHS['recipe_image'])

    order = body.get('order')
    if order is None:
        order = next_order(CollectionItem.order, CollectionItem.collection_id == collection.id)
    elif isinstance(order, bool) or not isinstance(order, int) or abs(order) > MAX_DB_INT:
        raise ValidationError("Order must be an integer")

    item = CollectionItem(
        collection_id=collection.id,
        recipe_id=recipe_id,
        recipe_title=title,
        recipe_image=recipe_image,
        order=order,
    )
    db.session.add(item)
    db.session.commit()
    return serialize_collection_item(item), 201


@collections_bp.route('/<int:collection_id>/items', methods=['DELETE'])
def remove_collection_item(collection_id):
    body = json_body()
    collection = _owned_collection(collection_id)
    recipe_id = parse_recipe_id(body.get('recipeId'))

    deleted = CollectionItem.query.filter_by(
        collection_id=collection.id,
        recipe_id=recipe_id,
    ).delete(synchronize_session=False)
    db.session.commit()

    if deleted == 0:
        raise NotFoundError("Item not found in collection")
    return '', 204
