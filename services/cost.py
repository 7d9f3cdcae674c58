"""
Cost Calculation Service

Functions for estimating the cost of a persisted grocery list.
"""

from datetime import datetime, timezone

from constants import TAX_RATE


def effective_price(item, manual_overrides=None):
    """Manual override if present, else the item's estimated price, else 0."""
    if manual_overrides and item.get('id') in manual_overrides:
        return manual_overrides[item['id']]
    price = item.get('estimated_price')
    return price if price is not None else 0.0


def estimate_budget(grocery_list, manual_overrides=None, store=None, tax_rate=TAX_RATE):
    """
    Build a budget estimate for a grocery list.

    Pure calculation: the grocery list is not modified. Items without a
    price count as 0 rather than failing the estimate.

    Args:
        grocery_list: Grocery list dict with id and items
        manual_overrides: Optional dict of item id -> price
        store: Optional store label copied onto every line
        tax_rate: Sales tax rate applied to the subtotal

    Returns:
        Dict with items, category_subtotals, subtotal, tax_estimate,
        grand_total and created_at
    """
    lines = []
    category_subtotals = {}

    for item in grocery_list.get('items', []):
        price = effective_price(item, manual_overrides)
        lines.append({
            'item_id': item.get('id'),
            'name': item.get('display_name') or item.get('name'),
            'quantity': item.get('quantity'),
            'unit': item.get('unit'),
            'estimated_price': price,
            'store': store,
        })
        category = item.get('category')
        category_subtotals[category] = category_subtotals.get(category, 0.0) + price

    subtotal = sum(category_subtotals.values())
    tax_estimate = subtotal * tax_rate

    return {
        'grocery_list_id': grocery_list.get('id'),
        'items': lines,
        'category_subtotals': category_subtotals,
        'subtotal': subtotal,
        'tax_estimate': tax_estimate,
        'grand_total': subtotal + tax_estimate,
        'created_at': datetime.now(timezone.utc).isoformat(),
    }
