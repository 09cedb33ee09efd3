"""
Recipe Note Model
"""

from .base import db, utcnow


class RecipeNote(db.Model):
    """Private note a user keeps about a recipe (one per user and recipe)."""
    __tablename__ = 'recipe_note'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'recipe_id', name='uq_recipe_note_user_recipe'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, nullable=False)
    title = db.Column(db.String(200), nullable=True)
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, nullable=True)  # 1-5
    tags = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
