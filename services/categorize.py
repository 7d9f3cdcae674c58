"""
Categorization Service

Assigns grocery items to store categories using keyword tables.
"""

from constants import CATEGORY_PHRASES, CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from .matching import normalize_ingredient_name


def categorize_ingredient(name):
    """
    Best-effort category for an ingredient name.

    Whole-name phrases win; otherwise words are checked from the last
    (usually the noun, as in "chicken broth") to the first. Unknown names
    fall back to DEFAULT_CATEGORY.
    """
    canonical = normalize_ingredient_name(name)
    if canonical in CATEGORY_PHRASES:
        return CATEGORY_PHRASES[canonical]

    for word in reversed(canonical.split()):
        word = word.strip(',.;:()')
        if word in CATEGORY_KEYWORDS:
            return CATEGORY_KEYWORDS[word]

    return DEFAULT_CATEGORY


def categorize_items(items):
    """Fill in a category for every item that lacks one (in place)."""
    for item in items:
        category = item.get('category')
        if not isinstance(category, str) or not category.strip():
            item['category'] = categorize_ingredient(item.get('name', ''))
        else:
            item['category'] = category.strip().lower()
    return items
