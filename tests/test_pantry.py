"""
Pantry reconciliation tests.
Run with: pytest tests/test_pantry.py
"""

import sys
import os
import copy

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services import consolidate_ingredients, expand_recipe, new_grocery_item, reconcile_pantry


def grocery_items():
    return [
        new_grocery_item('eggs', 12, 'count', category='dairy'),
        new_grocery_item('flour', 1.5, 'kg', quantity_in_grams=1500, category='pantry'),
        new_grocery_item('garlic', 2, 'cloves', category='produce'),
        new_grocery_item('milk', 2, 'cup', category='dairy'),
    ]


def by_name(items):
    return {item['name']: item for item in items}


def test_exhausted_item_is_dropped():
    result = reconcile_pantry(grocery_items(), [{'item': 'eggs', 'quantity': 12, 'unit': 'count'}])
    assert 'eggs' not in by_name(result)
    assert len(result) == 3


def test_oversupply_is_dropped():
    result = reconcile_pantry(grocery_items(), [{'item': 'eggs', 'quantity': 30, 'unit': 'count'}])
    assert 'eggs' not in by_name(result)


def test_partial_stock_is_converted_and_subtracted():
    result = by_name(reconcile_pantry(grocery_items(), [{'item': 'Flour', 'quantity': 500, 'unit': 'g'}]))
    assert result['flour']['quantity'] == 1.0
    assert result['flour']['unit'] == 'kg'
    assert result['flour']['quantity_in_grams'] == 1000


def test_volume_stock_subtracted():
    result = by_name(reconcile_pantry(grocery_items(), [{'item': 'milk', 'quantity': 236.588, 'unit': 'ml'}]))
    assert result['milk']['quantity'] == 1.0


def test_incompatible_units_are_ignored():
    items = grocery_items()
    result = by_name(reconcile_pantry(items, [
        {'item': 'garlic', 'quantity': 10, 'unit': 'g'},
        {'item': 'milk', 'quantity': 500, 'unit': 'g'},
    ]))
    assert result['garlic']['quantity'] == 2
    assert result['milk']['quantity'] == 2


def test_names_match_case_and_whitespace_insensitively():
    result = reconcile_pantry(grocery_items(), [{'item': '  EGGS ', 'quantity': 12, 'unit': 'Count'}])
    assert 'eggs' not in by_name(result)


def test_several_pantry_entries_for_one_item():
    result = by_name(reconcile_pantry(grocery_items(), [
        {'item': 'eggs', 'quantity': 4, 'unit': 'count'},
        {'item': 'eggs', 'quantity': 6, 'unit': 'count'},
    ]))
    assert result['eggs']['quantity'] == 2


def test_reconcile_does_not_modify_input():
    items = grocery_items()
    before = copy.deepcopy(items)
    reconcile_pantry(items, [
        {'item': 'eggs', 'quantity': 12, 'unit': 'count'},
        {'item': 'flour', 'quantity': 500, 'unit': 'g'},
    ])
    assert items == before


def test_reconcile_is_idempotent():
    items = grocery_items()
    pantry = [
        {'item': 'eggs', 'quantity': 6, 'unit': 'count'},
        {'item': 'flour', 'quantity': 0.25, 'unit': 'kg'},
    ]
    assert reconcile_pantry(items, pantry) == reconcile_pantry(items, pantry)


def test_empty_pantry_returns_equal_items():
    items = grocery_items()
    assert reconcile_pantry(items, []) == items


def test_negative_stock_is_ignored():
    result = by_name(reconcile_pantry(grocery_items(), [{'item': 'eggs', 'quantity': -100, 'unit': 'count'}]))
    assert result['eggs']['quantity'] == 12


def test_small_remainder_is_kept():
    flour = {'id': 'r1', 'ingredients': [{'name': 'flour', 'amount': 1234, 'unit': 'g'}]}
    items = consolidate_ingredients(expand_recipe(flour, 1), 'metric', round_quantities=False)

    result = reconcile_pantry(items, [{'item': 'flour', 'quantity': 1230, 'unit': 'g'}])

    assert len(result) == 1
    assert result[0]['quantity_in_grams'] == pytest.approx(4)
