"""
Meal Plan Routes

/meal-plan?weekStart=YYYY-MM-DD   GET the week's plan
/meal-plan                        POST add a meal (creates the week on demand)
/meal-plan                        DELETE remove a meal by itemId
"""

from flask import Blueprint, request
from sqlalchemy.exc import IntegrityError

from constants.validation import (
    MAX_DAY_OF_WEEK, MAX_LENGTHS, MAX_SERVINGS, MIN_DAY_OF_WEEK, VALID_MEAL_TYPES,
)
from models import db, MealPlan, MealPlanItem
from services import next_order, serialize_meal_plan, serialize_meal_plan_item
from utils.auth import current_user_id, require_auth
from utils.errors import NotFoundError, ValidationError
from utils.params import (
    is_blank, json_body, parse_image_url, parse_iso_date, parse_recipe_id, parse_record_id,
)
from utils.sanitizer import sanitize_name

meal_plan_bp = Blueprint('meal_plan', __name__, url_prefix='/meal-plan')
meal_plan_bp.before_request(require_auth)


def _get_or_create_plan(user_id, week_start):
    plan = MealPlan.query.filter_by(user_id=user_id, week_start=week_start).first()
    if plan:
        return plan

    plan = MealPlan(user_id=user_id, week_start=week_start)
    db.session.add(plan)
    try:
        db.session.flush()
    except IntegrityError:
        # Another request created the same week first
        db.session.rollback()
        plan = MealPlan.query.filter_by(user_id=user_id, week_start=week_start).first()
        if plan is None:
            raise
    return plan


def _parse_day(value):
    if isinstance(value, bool):
        raise ValidationError("Day of week must be an integer between 0 and 6")
    try:
        day = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Day of week must be an integer between 0 and 6")
    if day < MIN_DAY_OF_WEEK or day > MAX_DAY_OF_WEEK:
        raise ValidationError("Day of week must be an integer between 0 and 6")
    return day


def _parse_servings(value):
    if value is None or value == '':
        return 1
    try:
        servings = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Servings must be a positive integer")
    if isinstance(value, bool) or servings < 1 or servings > MAX_SERVINGS:
        raise ValidationError("Servings must be a positive integer")
    return servings


# ============================================
# ROUTES - MEAL PLAN
# ============================================

@meal_plan_bp.route('', methods=['GET'])
def get_meal_plan():
    week_start_raw = request.args.get('weekStart')
    if is_blank(week_start_raw):
        raise ValidationError("Week start date is required")
    week_start = parse_iso_date(week_start_raw, "Week start date is required")

    plan = MealPlan.query.filter_by(user_id=current_user_id(), week_start=week_start).first()
    if not plan:
        raise NotFoundError("Meal plan not found")

    meals = (
        MealPlanItem.query.filter_by(meal_plan_id=plan.id)
        .order_by(MealPlanItem.day_of_week, MealPlanItem.meal_type, MealPlanItem.order, MealPlanItem.id)
        .all()
    )
    return serialize_meal_plan(plan, meals), 200


@meal_plan_bp.route('', methods=['POST'])
def add_meal():
    body = json_body()
    title = sanitize_name(body.get('recipeTitle'), MAX_LENGTHS['recipe_title'])
    meal_type = body.get('mealType')

    if (
        is_blank(body.get('weekStart'))
        or body.get('recipeId') is None
        or not title
        or body.get('dayOfWeek') is None
        or is_blank(meal_type)
    ):
        raise ValidationError(
            "Week start, recipe ID, recipe title, day of week, and meal type are required"
        )

    week_start = parse_iso_date(body['weekStart'], "Week start date is required")
    recipe_id = parse_recipe_id(body['recipeId'])
    day_of_week = _parse_day(body['dayOfWeek'])
    meal_type = str(meal_type).strip().lower()
    if meal_type not in VALID_MEAL_TYPES:
        raise ValidationError(f"Meal type must be one of: {', '.join(sorted(VALID_MEAL_TYPES))}")
    servings = _parse_servings(body.get('servings'))
    recipe_image = parse_image_url(body.get('recipeImage'), MAX_LENGTHS['recipe_image'])

    plan = _get_or_create_plan(current_user_id(), week_start)

    item = MealPlanItem(
        meal_plan_id=plan.id,
        recipe_id=recipe_id,
        recipe_title=title,
        recipe_image=recipe_image,
        day_of_week=day_of_week,
        meal_type=meal_type,
        servings=servings,
        order=next_order(
            MealPlanItem.order,
            MealPlanItem.meal_plan_id == plan.id,
            MealPlanItem.day_of_week == day_of_week,
            MealPlanItem.meal_type == meal_type,
        ),
    )
    db.session.add(item)
    db.session.commit()
    return serialize_meal_plan_item(item), 201


@meal_plan_bp.route('', methods=['DELETE'])
def remove_meal():
    body = json_body()
    if is_blank(body.get('itemId')):
        raise ValidationError("Item ID is required")

    item_id = parse_record_id(body['itemId'])
    item = None
    if item_id is not None:
        item = (
            MealPlanItem.query.join(MealPlan, MealPlanItem.meal_plan_id == MealPlan.id)
            .filter(MealPlanItem.id == item_id, MealPlan.user_id == current_user_id())
            .first()
        )
    if not item:
        raise NotFoundError("Meal plan item not found")

    db.session.delete(item)
    db.session.commit()
    return '', 204
