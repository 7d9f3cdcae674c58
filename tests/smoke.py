"""
Smoke tests for the meal planner app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import create_app, db
    assert create_app is not None
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Recipe, MealPlan, Meal, PantryItem, GroceryList
    assert Recipe is not None
    assert GroceryList is not None
    print("OK: Models import successfully")

def test_services_import():
    """Verify the grocery pipeline can be imported."""
    from services import (
        expand_recipe, consolidate_ingredients, reconcile_pantry,
        categorize_items, estimate_budget,
    )
    assert callable(expand_recipe)
    assert callable(consolidate_ingredients)
    assert callable(reconcile_pantry)
    assert callable(categorize_items)
    assert callable(estimate_budget)
    print("OK: Services import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import VOLUME_TO_ML, WEIGHT_TO_G, MEAL_TIME_ORDER, TAX_RATE
    assert 'cup' in VOLUME_TO_ML
    assert 'lb' in WEIGHT_TO_G
    assert MEAL_TIME_ORDER[0] == 'breakfast'
    assert TAX_RATE == 0.0825
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import VOLUME_TO_ML, WEIGHT_TO_G

    # These values must not change
    assert VOLUME_TO_ML['ml'] == 1
    assert VOLUME_TO_ML['l'] == 1000
    assert VOLUME_TO_ML['cup'] == 236.588
    assert VOLUME_TO_ML['fl oz'] == 29.5735
    assert WEIGHT_TO_G['g'] == 1
    assert WEIGHT_TO_G['kg'] == 1000
    assert WEIGHT_TO_G['oz'] == 28.3495
    assert WEIGHT_TO_G['lb'] == 453.592
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import create_app, init_db
    app = create_app('testing')
    init_db(app)
    with app.test_client() as client:
        response = client.get('/api/recipes')
        assert response.status_code == 200
        assert response.get_json()['success'] is True
        print("OK: App serves recipe list")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_services_import,
        test_constants_import,
        test_conversion_constants_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
