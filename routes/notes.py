"""
Recipe Note Routes

/recipes/notes?recipeId=   GET the caller's note for a recipe
/recipes/notes             POST create or replace, DELETE by recipeId
"""

from flask import Blueprint, request
from sqlalchemy.exc import IntegrityError

from constants.validation import MAX_LENGTHS, MAX_RATING, MIN_RATING
from models import db, RecipeNote
from services import serialize_note
from utils.auth import current_user_id, require_auth
from utils.errors import NotFoundError, ValidationError
from utils.params import is_blank, json_body, parse_recipe_id
from utils.sanitizer import sanitize_name, sanitize_text

notes_bp = Blueprint('notes', __name__, url_prefix='/recipes/notes')
notes_bp.before_request(require_auth)


def _parse_rating(value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Rating must be between 1 and 5")
    if value < MIN_RATING or value > MAX_RATING or int(value) != value:
        raise ValidationError("Rating must be between 1 and 5")
    return int(value)


def _parse_tags(value):
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError("Tags must be an array of strings")
    tags = []
    for tag in value:
        cleaned = sanitize_name(tag, MAX_LENGTHS['tag'])
        if cleaned and cleaned not in tags:
            tags.append(cleaned)
    return tags


@notes_bp.route('', methods=['GET'])
def get_note():
    recipe_id = parse_recipe_id(request.args.get('recipeId'))
    note = RecipeNote.query.filter_by(user_id=current_user_id(), recipe_id=recipe_id).first()
    if not note:
        raise NotFoundError("Note not found")
    return serialize_note(note), 200


@notes_bp.route('', methods=['POST'])
def save_note():
    body = json_body()
    recipe_id = parse_recipe_id(body.get('recipeId'))
    if is_blank(body.get('content')) or not isinstance(body.get('content'), str):
        raise ValidationError("Note content is required")

    content = sanitize_text(body['content'], MAX_LENGTHS['note_content'])
    title = sanitize_name(body.get('title'), MAX_LENGTHS['note_title']) or None
    rating = _parse_rating(body.get('rating'))
    tags = _parse_tags(body.get('tags'))
    user_id = current_user_id()

    note = RecipeNote.query.filter_by(user_id=user_id, recipe_id=recipe_id).first()
    if note is None:
        note = RecipeNote(user_id=user_id, recipe_id=recipe_id)
        db.session.add(note)
    note.title = title
    note.content = content
    note.rating = rating
    note.tags = tags

    try:
        db.session.commit()
    except IntegrityError:
        # A concurrent request created the note; update that one instead
        db.session.rollback()
        note = RecipeNote.query.filter_by(user_id=user_id, recipe_id=recipe_id).first_or_404()
        note.title, note.content, note.rating, note.tags = title, content, rating, tags
        db.session.commit()

    return serialize_note(note), 200


@notes_bp.route('', methods=['DELETE'])
def delete_note():
    body = json_body()
    recipe_id = parse_recipe_id(body.get('recipeId'))
    deleted = RecipeNote.query.filter_by(
        user_id=current_user_id(),
        recipe_id=recipe_id,
    ).delete(synchronize_session=False)
    db.session.commit()

    if deleted == 0:
        raise NotFoundError("Note not found")
    return '', 204
