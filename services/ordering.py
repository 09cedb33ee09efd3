"""
Advisory Ordering

Display order for collection and meal plan items is max(existing) + 1
within a group. The read and the insert are not atomic, so two concurrent
inserts can end up with the same value. Order is only used for display,
so duplicates are tolerated and nothing is renumbered on delete.
"""

from sqlalchemy import func

from models import db


def next_order(column, *criteria):
    """Next order value for rows matching `criteria` (1 for an empty group)."""
    current = db.session.query(func.max(column)).filter(*criteria).scalar()
    return (current or 0) + 1
