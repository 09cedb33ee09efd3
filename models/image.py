"""
Recipe Image Model
"""

from .base import db, utcnow


class RecipeImage(db.Model):
    """
    Photo a user attached to a recipe (their finished dish, a step, ...).

    `order` is advisory and counted per user, recipe and image type.
    """
    __tablename__ = 'recipe_image'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, nullable=False, index=True)
    image_url = db.Column(db.String(500), nullable=False)
    image_type = db.Column(db.String(20), nullable=False)  # 'final', 'step', 'ingredient', 'custom'
    order = db.Column(db.Integer, nullable=False, default=0)
    caption = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
