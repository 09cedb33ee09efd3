"""
Request Parameter Helpers

Parsing helpers shared by the route handlers. Unlike the lenient
form helpers of a server-rendered app, these raise ValidationError so the
caller gets a 400 instead of a silently clamped value.
"""

import re
from datetime import date, datetime

from flask import request

from .errors import ValidationError
from .sanitizer import sanitize_url

RECIPE_ID_PATTERN = re.compile(r'^\d+$')

# Largest value an Integer column holds on every supported database
MAX_DB_INT = 2 ** 31 - 1


def json_body():
    """Request body as a dict; anything else (missing, invalid, a list) is {}."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def parse_bounded_int(value, default, min_val, max_val, error):
    """
    Parse an integer query parameter that must fall inside [min_val, max_val].

    Missing or empty values return `default`. Anything unparsable or out of
    range raises ValidationError(error).
    """
    if value is None or (isinstance(value, str) and value.strip() == ''):
        return default
    try:
        result = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(error)
    if result < min_val or result > max_val:
        raise ValidationError(error)
    return result


def parse_optional_float(value, error, min_val=None):
    if value is None or (isinstance(value, str) and value.strip() == ''):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValidationError(error)
    if result != result or (min_val is not None and result < min_val):
        raise ValidationError(error)
    return result


def parse_recipe_id(value, error='Recipe ID is required'):
    """Coerce a recipe id from a JSON body (int or numeric string)."""
    if isinstance(value, bool) or is_blank(value):
        raise ValidationError(error)
    if isinstance(value, int):
        recipe_id = value
    elif isinstance(value, float) and value.is_integer():
        recipe_id = int(value)
    elif isinstance(value, str) and RECIPE_ID_PATTERN.match(value.strip()):
        recipe_id = int(value.strip())
    else:
        raise ValidationError('Recipe ID must be a number')
    if recipe_id <= 0:
        raise ValidationError(error)
    if recipe_id > MAX_DB_INT:
        raise ValidationError('Recipe ID is out of range')
    return recipe_id


def require_path_recipe_id(value):
    """Recipe ids in URLs must be all digits."""
    if not value or not RECIPE_ID_PATTERN.match(value):
        raise ValidationError('Valid recipe ID is required')
    return value


def parse_record_id(value):
    """
    Coerce a record id from a JSON body. Returns None for values that cannot
    be a primary key so the caller reports "not found" rather than leaking
    anything about id formats.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        record_id = value
    elif isinstance(value, str) and RECIPE_ID_PATTERN.match(value.strip()):
        record_id = int(value.strip())
    else:
        return None
    if record_id <= 0 or record_id > MAX_DB_INT:
        return None
    return record_id


def parse_iso_date(value, error):
    """
    Parse a week start such as '2025-01-06' or '2025-01-06T00:00:00.000Z'.
    Only the calendar date is kept.
    """
    if is_blank(value) or not isinstance(value, str):
        raise ValidationError(error)
    text = value.strip()
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        if len(text) > 10 and text[10] in 'Tt ':
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        pass
    raise ValidationError('Week start must be an ISO-8601 date')


def parse_flag(value):
    """Query-string boolean: only 'true' (any case) and '1' count as true."""
    return isinstance(value, str) and value.strip().lower() in ('true', '1')


def parse_image_url(value, max_length):
    """
    Optional http(s) image URL. Unsafe schemes come back as None; a safe URL
    longer than max_length is rejected rather than cut.
    """
    url = sanitize_url(value)
    if url and len(url) > max_length:
        raise ValidationError(f"Image URL must be at most {max_length} characters")
    return url
