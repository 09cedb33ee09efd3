"""
Shopping Models

Contains the ShoppingList model. List items are stored as a JSON
document rather than rows, since the client always reads and writes
the whole list.
"""

from .base import db, utcnow


class ShoppingList(db.Model):
    """
    Shopping list built from one or more recipes.

    Each entry in `items` looks like:
        {"name": str, "quantity": str, "unit": str, "category": str,
         "recipeIds": [int], "checked": bool}
    """
    __tablename__ = 'shopping_list'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    recipe_ids = db.Column(db.JSON, nullable=False, default=list)
    items = db.Column(db.JSON, nullable=False, default=list)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
