"""
Response Serializers

Turn model instances into the camelCase JSON shapes the front end reads.
All dates and timestamps leave the API as ISO-8601 strings.
"""

from datetime import datetime, timezone


def to_iso(value):
    """ISO-8601 string for a date/datetime. Naive datetimes are stored as UTC."""
    if value is None:
        return None
    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def serialize_collection_item(item):
    return {
        'id': item.id,
        'collectionId': item.collection_id,
        'recipeId': item.recipe_id,
        'recipeTitle': item.recipe_title,
        'recipeImage': item.recipe_image,
        'order': item.order,
        'createdAt': to_iso(item.created_at),
    }


def serialize_collection(collection, item_count=None, include_items=False):
    data = {
        'id': collection.id,
        'userId': collection.user_id,
        'name': collection.name,
        'description': collection.description,
        'color': collection.color,
        'createdAt': to_iso(collection.created_at),
        'updatedAt': to_iso(collection.updated_at),
    }
    if include_items:
        items = sorted(collection.items, key=lambda item: (item.order, item.id))
        data['items'] = [serialize_collection_item(item) for item in items]
        data['itemCount'] = len(items)
    elif item_count is not None:
        data['itemCount'] = item_count
    return data


def serialize_meal_plan_item(item):
    return {
        'id': item.id,
        'mealPlanId': item.meal_plan_id,
        'recipeId': item.recipe_id,
        'recipeTitle': item.recipe_title,
        'recipeImage': item.recipe_image,
        'dayOfWeek': item.day_of_week,
        'mealType': item.meal_type,
        'servings': item.servings,
        'order': item.order,
        'createdAt': to_iso(item.created_at),
    }


def serialize_meal_plan(plan, meals):
    return {
        'id': plan.id,
        'userId': plan.user_id,
        'weekStart': to_iso(plan.week_start),
        'createdAt': to_iso(plan.created_at),
        'updatedAt': to_iso(plan.updated_at),
        'meals': [serialize_meal_plan_item(meal) for meal in meals],
    }


def serialize_favourite(favourite):
    return {
        'id': favourite.id,
        'recipeId': favourite.recipe_id,
        'userId': favourite.user_id,
        'createdAt': to_iso(favourite.created_at),
    }


def serialize_shopping_list(shopping_list):
    return {
        'id': shopping_list.id,
        'userId': shopping_list.user_id,
        'name': shopping_list.name,
        'recipeIds': list(shopping_list.recipe_ids or []),
        'items': list(shopping_list.items or []),
        'isCompleted': bool(shopping_list.is_completed),
        'createdAt': to_iso(shopping_list.created_at),
        'updatedAt': to_iso(shopping_list.updated_at),
    }


def serialize_note(note):
    return {
        'id': note.id,
        'userId': note.user_id,
        'recipeId': note.recipe_id,
        'title': note.title,
        'content': note.content,
        'rating': note.rating,
        'tags': list(note.tags or []),
        'createdAt': to_iso(note.created_at),
        'updatedAt': to_iso(note.updated_at),
    }


def serialize_recipe_image(image):
    return {
        'id': image.id,
        'userId': image.user_id,
        'recipeId': image.recipe_id,
        'imageUrl': image.image_url,
        'imageType': image.image_type,
        'order': image.order,
        'caption': image.caption,
        'createdAt': to_iso(image.created_at),
        'updatedAt': to_iso(image.updated_at),
    }
