"""
Collection Models

Contains the Collection and CollectionItem models for user-curated
groups of recipes.
"""

from .base import db, utcnow


class Collection(db.Model):
    """Named group of recipes owned by one user."""
    __tablename__ = 'recipe_collection'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    color = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    items = db.relationship(
        'CollectionItem',
        backref='collection',
        lazy=True,
        cascade='all, delete-orphan',
        order_by='CollectionItem.order',
    )


class CollectionItem(db.Model):
    """
    A recipe saved into a collection.

    `order` is an advisory display counter (max existing + 1 on insert).
    It is not unique: two concurrent inserts may pick the same value.
    """
    __tablename__ = 'collection_item'

    id = db.Column(db.Integer, primary_key=True)
    collection_id = db.Column(
        db.Integer,
        db.ForeignKey('recipe_collection.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    recipe_id = db.Column(db.Integer, nullable=False, index=True)
    recipe_title = db.Column(db.String(300), nullable=False)
    recipe_image = db.Column(db.String(500), nullable=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
