"""
Pantry Reconciliation Service

Subtracts what is already on hand from a consolidated grocery list.
"""

import copy
import logging
from collections import defaultdict

from .conversion import convert_amount, to_grams, units_compatible
from .matching import normalize_ingredient_name

logger = logging.getLogger(__name__)

# Quantities at or below this are treated as fully covered
EPSILON = 1e-9


def reconcile_pantry(items, pantry_items):
    """
    Subtract pantry stock from grocery items.

    Pantry entries match on canonical name and only count when their unit is
    compatible with the grocery item's unit. Items whose need is fully
    covered are dropped. Remaining quantities are not rounded, so feed this
    unrounded items and round afterwards. The input list is not modified,
    so reconciling the same list against the same pantry always gives the
    same answer.

    Args:
        items: Consolidated grocery item dicts
        pantry_items: Pantry dicts with item, quantity and unit

    Returns:
        New list of grocery item dicts
    """
    pantry_by_name = defaultdict(list)
    for pantry_item in pantry_items:
        pantry_by_name[normalize_ingredient_name(pantry_item.get('item'))].append(pantry_item)

    reconciled = []
    for item in items:
        remaining = item['quantity']
        for stock in pantry_by_name.get(normalize_ingredient_name(item['name']), []):
            if not units_compatible(stock.get('unit'), item['unit']):
                continue
            # Negative stock never adds to the list
            on_hand = max(stock.get('quantity') or 0, 0)
            remaining -= convert_amount(on_hand, stock.get('unit'), item['unit'])

        if remaining <= EPSILON:
            logger.debug("Pantry covers %s, dropping it", item['name'])
            continue

        item = copy.deepcopy(item)
        if remaining != item['quantity']:
            item['quantity'] = remaining
            grams = to_grams(remaining, item['unit'])
            if grams is not None:
                item['quantity_in_grams'] = grams
        reconciled.append(item)

    return reconciled
