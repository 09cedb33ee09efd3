"""
Meal Plan Models

Contains the MealPlan and MealPlanItem models for weekly meal planning.
"""

from .base import db, utcnow


class MealPlan(db.Model):
    """One user's plan for the week starting on week_start."""
    __tablename__ = 'meal_plan'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'week_start', name='uq_meal_plan_user_week'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(255), nullable=False, index=True)
    week_start = db.Column(db.Date, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    meals = db.relationship(
        'MealPlanItem',
        backref='meal_plan',
        lazy=True,
        cascade='all, delete-orphan',
        order_by=lambda: [MealPlanItem.day_of_week, MealPlanItem.meal_type, MealPlanItem.order],
    )


class MealPlanItem(db.Model):
    """Recipe scheduled on a day (0 = Monday) for a meal type."""
    __tablename__ = 'meal_plan_item'

    id = db.Column(db.Integer, primary_key=True)
    meal_plan_id = db.Column(
        db.Integer,
        db.ForeignKey('meal_plan.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    recipe_id = db.Column(db.Integer, nullable=False)
    recipe_title = db.Column(db.String(300), nullable=False)
    recipe_image = db.Column(db.String(500), nullable=True)
    day_of_week = db.Column(db.Integer, nullable=False)  # 0-6, Monday-Sunday
    meal_type = db.Column(db.String(20), nullable=False)  # 'breakfast', 'lunch', 'dinner', 'snack'
    servings = db.Column(db.Integer, nullable=False, default=1)
    order = db.Column(db.Integer, nullable=False, default=0)  # advisory, per day/meal type
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
