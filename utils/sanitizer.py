"""
Input Sanitization Module

Cleans user-supplied text before it is stored: strips control characters,
normalizes whitespace, enforces length limits and rejects unsafe URLs.
Escaping for display is left to whatever renders the JSON.
"""

import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS

# Control characters, keeping tab/newline/carriage return
_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize free text such as a meal description.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=200):
    """
    Sanitize a single-line name (recipe title, ingredient, pantry item).

    Newlines and runs of whitespace collapse to single spaces.
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    name = _CONTROL_CHARS.sub('', name)
    name = re.sub(r'\s+', ' ', name).strip()

    if len(name) > max_length:
        name = name[:max_length]

    return name


def sanitize_url(url):
    """
    Sanitize a URL by rejecting dangerous schemes.

    Only http and https are allowed.

    Args:
        url: The URL to validate (can be None)

    Returns:
        The URL if safe, None if unsafe, empty or invalid
    """
    if not url or not isinstance(url, str):
        return None

    url = url.strip()
    if len(url) > MAX_LENGTHS['source_url']:
        return None

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        return None

    return url


def sanitize_ingredients(ingredients):
    """Sanitize the name/unit/preparation text of a recipe ingredient list."""
    cleaned = []
    for ingredient in ingredients:
        preparation = sanitize_name(ingredient.get('preparation'), MAX_LENGTHS['ingredient_name'])
        cleaned.append({
            'name': sanitize_name(ingredient.get('name'), MAX_LENGTHS['ingredient_name']),
            'amount': ingredient.get('amount', 0),
            'unit': sanitize_name(ingredient.get('unit'), MAX_LENGTHS['unit']),
            'preparation': preparation or None,
            'optional': bool(ingredient.get('optional', False)),
        })
    return cleaned
