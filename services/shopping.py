"""
Shopping List Service

Functions for validating and normalizing shopping list contents before
they are stored as JSON.
"""

from utils.errors import ValidationError
from utils.sanitizer import sanitize_name

DEFAULT_CATEGORY = 'Other'


def _to_int_list(values, error):
    if not isinstance(values, list):
        raise ValidationError(error)
    result = []
    for value in values:
        if isinstance(value, bool):
            raise ValidationError(error)
        try:
            result.append(int(value))
        except (TypeError, ValueError):
            raise ValidationError(error)
    return result


def normalize_recipe_ids(recipe_ids):
    """Recipe ids as a list of ints; raises ValidationError for anything else."""
    return _to_int_list(recipe_ids, "Recipe IDs must be an array of numbers")


def normalize_item(item):
    """
    Normalize one shopping list entry.

    Required: name. Defaults: quantity '', category 'Other', recipeIds [],
    checked False. Unit is kept only when given.
    """
    if not isinstance(item, dict):
        raise ValidationError("Shopping list items must be objects")

    name = sanitize_name(item.get('name'))
    if not name:
        raise ValidationError("Shopping list item name is required")

    quantity = item.get('quantity', '')
    normalized = {
        'name': name,
        'quantity': '' if quantity is None else str(quantity).strip(),
        'category': sanitize_name(item.get('category')) or DEFAULT_CATEGORY,
        'recipeIds': _to_int_list(item.get('recipeIds') or [], "Item recipe IDs must be an array of numbers"),
        'checked': bool(item.get('checked', False)),
    }
    if item.get('unit'):
        normalized['unit'] = sanitize_name(item['unit'], max_length=20)
    return normalized


def normalize_items(items):
    if not isinstance(items, list):
        raise ValidationError("Items must be an array")
    return [normalize_item(item) for item in items]
