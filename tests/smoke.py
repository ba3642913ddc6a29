"""
Smoke tests for the bakery engine.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app
    assert app is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import ParsedIngredient, ScaledIngredient, ShoppingItem, TimelineStep
    assert ParsedIngredient is not None
    assert TimelineStep is not None
    print("OK: Models import successfully")

def test_services_import():
    """Verify the engine services can be imported."""
    from services import (
        parse_ingredient, lookup_density, convert_to_grams, scale_ingredients,
        calculate_packaging_needs, aggregate_shopping_list, generate_timeline, generate_ics
    )
    assert callable(parse_ingredient)
    assert callable(lookup_density)
    assert callable(generate_ics)
    print("OK: Services import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import VOLUME_TO_ML, WEIGHT_TO_G, DENSITY_TABLE, TIMELINE_TEMPLATES
    assert 'cup' in VOLUME_TO_ML
    assert 'lb' in WEIGHT_TO_G
    assert 'bread flour' in DENSITY_TABLE
    assert TIMELINE_TEMPLATES
    print("OK: Constants import successfully")

def test_conversion_constants_unchanged():
    """Verify critical conversion constants have expected values."""
    from constants import VOLUME_TO_ML, WEIGHT_TO_G, DENSITY_TABLE

    # These values must not change
    assert VOLUME_TO_ML['ml'] == 1
    assert VOLUME_TO_ML['l'] == 1000
    assert VOLUME_TO_ML['cup'] == 240
    assert VOLUME_TO_ML['tbsp'] == 14.787
    assert VOLUME_TO_ML['tsp'] == 4.929
    assert VOLUME_TO_ML['stick'] == 120
    assert WEIGHT_TO_G['g'] == 1
    assert WEIGHT_TO_G['kg'] == 1000
    assert WEIGHT_TO_G['lb'] == 453.592
    assert DENSITY_TABLE['all-purpose flour'] == 0.521
    print("OK: Conversion constants unchanged")

def test_app_runs():
    """Verify app can create test client."""
    from app import app
    app.config['TESTING'] = True
    with app.test_client() as client:
        response = client.get('/')
        assert response.status_code == 200
        print("OK: App serves home page")

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
