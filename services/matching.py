"""
Ingredient Matching Service

Functions for normalizing ingredient names and units into the keys used
to merge grocery items and match them against the pantry.
"""

import re

from .conversion import unit_kind


def normalize_ingredient_name(name):
    """Canonical ingredient name: lowercased, trimmed, single-spaced."""
    if not name:
        return ''
    return re.sub(r'\s+', ' ', str(name)).strip().lower()


def normalize_unit(unit):
    """Normalize a unit string for textual comparison."""
    if not unit:
        return ''
    return re.sub(r'\s+', ' ', str(unit)).strip().lower()


def unit_key(unit):
    """
    Merge key component for a unit.

    Weight and volume units collapse to their kind so that "2 cups" and
    "500 ml" land on the same key; anything else keys on its own text.
    The two are tagged apart, so a unit literally spelled "weight" never
    lands on the weight key.
    """
    kind = unit_kind(unit)
    if kind is not None:
        return 'kind', kind
    return 'text', normalize_unit(unit)


def merge_key(name, unit):
    """Key under which two ingredient instances consolidate."""
    return normalize_ingredient_name(name), unit_key(unit)


def names_match(name_a, name_b):
    return normalize_ingredient_name(name_a) == normalize_ingredient_name(name_b)
