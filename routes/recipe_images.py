"""
Recipe Image Routes

/recipes/images?recipeId=   GET the caller's images for a recipe
/recipes/images             POST attach an image (usually an /upload result)
/recipes/images             DELETE by image id
"""

from flask import Blueprint, request

from constants.validation import MAX_LENGTHS, VALID_IMAGE_TYPES
from models import db, RecipeImage
from services import next_order, serialize_recipe_image
from utils.auth import current_user_id, require_auth
from utils.errors import NotFoundError, ValidationError
from utils.params import (
    MAX_DB_INT, is_blank, json_body, parse_image_url, parse_recipe_id, parse_record_id,
)
from utils.sanitizer import sanitize_text

recipe_images_bp = Blueprint('recipe_images', __name__, url_prefix='/recipes/images')
recipe_images_bp.before_request(require_auth)


# ============================================
# ROUTES - RECIPE IMAGES
# ============================================

@recipe_images_bp.route('', methods=['GET'])
def list_images():
    recipe_id = parse_recipe_id(request.args.get('recipeId'))
    images = (
        RecipeImage.query.filter_by(user_id=current_user_id(), recipe_id=recipe_id)
        .order_by(RecipeImage.image_type, RecipeImage.order, RecipeImage.id)
        .all()
    )
    return [serialize_recipe_image(image) for image in images], 200


@recipe_images_bp.route('', methods=['POST'])
def add_image():
    body = json_body()
    if is_blank(body.get('recipeId')) or is_blank(body.get('imageUrl')) or is_blank(body.get('imageType')):
        raise ValidationError("Recipe ID, image URL, and image type are required")

    recipe_id = parse_recipe_id(body['recipeId'])
    image_url = parse_image_url(body['imageUrl'], MAX_LENGTHS['recipe_image'])
    if not image_url:
        raise ValidationError("Image URL is invalid")

    image_type = str(body['imageType']).strip().lower()
    if image_type not in VALID_IMAGE_TYPES:
        raise ValidationError(f"Image type must be one of: {', '.join(sorted(VALID_IMAGE_TYPES))}")

    order = body.get('order')
    if order is not None and (isinstance(order, bool) or not isinstance(order, int) or abs(order) > MAX_DB_INT):
        raise ValidationError("Order must be an integer")

    user_id = current_user_id()
    if order is None:
        order = next_order(
            RecipeImage.order,
            RecipeImage.user_id == user_id,
            RecipeImage.recipe_id == recipe_id,
            RecipeImage.image_type == image_type,
        )

    image = RecipeImage(
        user_id=user_id,
        recipe_id=recipe_id,
        image_url=image_url,
        image_type=image_type,
        order=order,
        caption=sanitize_text(body.get('caption'), MAX_LENGTHS['caption']) or None,
    )
    db.session.add(image)
    db.session.commit()
    return serialize_recipe_image(image), 201


@recipe_images_bp.route('', methods=['DELETE'])
def remove_image():
    body = json_body()
    if is_blank(body.get('id')):
        raise ValidationError("Image ID is required")

    image_id = parse_record_id(body['id'])
    image = None
    if image_id is not None:
        image = RecipeImage.query.filter_by(id=image_id, user_id=current_user_id()).first()
    if not image:
        raise NotFoundError("Image not found")

    db.session.delete(image)
    db.session.commit()
    return '', 204
