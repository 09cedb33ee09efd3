"""
Input Sanitization Module

Normalizes free text from request bodies before it is stored. Output is
JSON rendered by the React client (which escapes on render), so values
are cleaned rather than HTML-escaped.
"""

import re
from urllib.parse import urlparse

CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Strip whitespace and control characters, then truncate.

    Newlines and tabs are kept so multi-line notes survive.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, or None when the input was None
    """
    if text is None:
        return None

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=200):
    """
    Sanitize a single-line name (collection, list, recipe title).

    Collapses runs of whitespace and removes all control characters.
    Returns an empty string for None so callers can test for blank names.
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    name = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', name)
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length]

    return name


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Prevents javascript:, data:, vbscript:, and other dangerous URL schemes
    that could execute code when used in href or src attributes.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, None if unsafe, empty or invalid
    """
    if not url or not isinstance(url, str):
        return None

    url = url.strip()

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    # Only allow http and https (or scheme-relative paths)
    if parsed.scheme.lower() not in ('http', 'https', ''):
        return None

    url_lower = url.lower()
    for dangerous in ('javascript:', 'vbscript:', 'data:', 'file:'):
        if dangerous in url_lower:
            return None

    return url
