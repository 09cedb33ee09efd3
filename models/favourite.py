"""
Favourite Recipe Model
"""

from .base import db, utcnow


class FavouriteRecipe(db.Model):
    """Spoonacular recipe id bookmarked by a user."""
    __tablename__ = 'favourite_recipe'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'recipe_id', name='uq_favourite_user_recipe'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    recipe_id = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
