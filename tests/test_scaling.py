"""
Tests for the scaling engine and pan volume calculation.
Run with: pytest tests/test_scaling.py
"""

import math
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import ParsedIngredient, ScalingInput
from services.scaling import (
    calculate_scaling_factor, smart_round, scale_ingredients, calculate_pan_volume
)


def _ingredient(name, grams, is_flour=None):
    if is_flour is None:
        is_flour = 'flour' in name
    return ParsedIngredient(
        raw_text=name,
        quantity=None,
        unit=None,
        ingredient_name=name,
        prep_notes=None,
        unit_grams=grams,
        is_flour=is_flour,
    )


def test_multiplier_mode():
    assert calculate_scaling_factor(ScalingInput(mode='multiplier', multiplier=2.5)) == 2.5
    assert calculate_scaling_factor(ScalingInput(mode='multiplier')) == 1


def test_quantity_mode():
    scaling = ScalingInput(mode='quantity', target_quantity=36, recipe_yield_quantity=12)
    assert calculate_scaling_factor(scaling) == 3


def test_quantity_mode_guards_bad_ratio():
    """A zero or negative side of the ratio falls back to 1."""
    assert calculate_scaling_factor(
        ScalingInput(mode='quantity', target_quantity=4, recipe_yield_quantity=0)) == 1
    assert calculate_scaling_factor(
        ScalingInput(mode='quantity', target_quantity=-4, recipe_yield_quantity=2)) == 1
    assert calculate_scaling_factor(
        ScalingInput(mode='quantity', target_quantity=4)) == 1


def test_pan_mode():
    scaling = ScalingInput(mode='pan', target_pan_volume_ml=2000, original_pan_volume_ml=1000)
    assert calculate_scaling_factor(scaling) == 2
    assert calculate_scaling_factor(ScalingInput(mode='pan', target_pan_volume_ml=2000)) == 1


def test_unknown_mode():
    assert calculate_scaling_factor(ScalingInput(mode='bogus', multiplier=5)) == 1


def test_smart_round_tiers():
    assert smart_round(1234.7) == 1235
    assert smart_round(100) == 100
    assert smart_round(99.74) == 99.5
    assert smart_round(47.3) == 47.5
    assert smart_round(3.27) == 3.3
    assert smart_round(2.25) == 2.3
    assert smart_round(0) == 0


def test_scale_weigh_sheet():
    ingredients = [
        _ingredient('bread flour', 500),
        _ingredient('water', 350),
        _ingredient('salt', 10),
        _ingredient('mystery spice', None),
    ]
    scaled = scale_ingredients(ingredients, 2)

    assert [s.ingredient_name for s in scaled] == ['bread flour', 'water', 'salt', 'mystery spice']
    assert [s.scaled_grams for s in scaled] == [1000, 700, 20, 0]
    assert [s.display_weight for s in scaled] == ['1 kg', '700 g', '20 g', '0.0 g']
    assert scaled[0].bakers_percentage == 1.0
    assert math.isclose(scaled[1].bakers_percentage, 0.7)
    assert math.isclose(scaled[2].bakers_percentage, 0.02)
    assert scaled[3].bakers_percentage is None
    assert scaled[3].original_grams == 0


def test_flour_percentages_sum_to_one():
    ingredients = [
        _ingredient('bread flour', 400),
        _ingredient('whole wheat flour', 100),
        _ingredient('water', 375),
    ]
    scaled = scale_ingredients(ingredients, 1.5)
    flour_total = sum(s.bakers_percentage for s in scaled if s.is_flour)
    assert math.isclose(flour_total, 1.0)
    assert math.isclose(scaled[2].bakers_percentage, 0.75)


def test_percentage_uses_unrounded_weights():
    ingredients = [
        _ingredient('bread flour', 333.333),
        _ingredient('butter', 33.3333),
    ]
    scaled = scale_ingredients(ingredients, 1)
    assert scaled[1].scaled_grams == 33.5
    assert math.isclose(scaled[1].bakers_percentage, 0.1)


def test_no_flour_means_no_percentages():
    scaled = scale_ingredients([_ingredient('water', 100), _ingredient('sugar', 50)], 1)
    assert all(s.bakers_percentage is None for s in scaled)


def test_factor_one_only_rounds():
    ingredients = [_ingredient('bread flour', 512.4), _ingredient('yeast', 3.14)]
    scaled = scale_ingredients(ingredients, 1)
    assert [s.scaled_grams for s in scaled] == [smart_round(512.4), smart_round(3.14)]


def test_scaling_is_linear_before_rounding():
    ingredients = [_ingredient('bread flour', 500), _ingredient('water', 325)]
    doubled = scale_ingredients(ingredients, 2)
    tripled = scale_ingredients(ingredients, 3)
    assert doubled[1].scaled_grams == 650
    assert tripled[1].scaled_grams == 975
    assert doubled[1].bakers_percentage == tripled[1].bakers_percentage


def test_empty_ingredient_list():
    assert scale_ingredients([], 2) == []


def test_pan_volume_rectangle():
    dims = {'length': 20, 'width': 10, 'height': 5}
    assert calculate_pan_volume('rectangular', dims) == 1000
    assert calculate_pan_volume('rectangle', dims) == 1000
    assert calculate_pan_volume('Rectangle ', dims) == 1000


def test_pan_volume_square():
    assert calculate_pan_volume('square', {'length': 20, 'height': 5}) == 2000


def test_pan_volume_round():
    dims = {'diameter': 20, 'height': 5}
    assert math.isclose(calculate_pan_volume('round', dims), math.pi * 100 * 5)
    assert math.isclose(calculate_pan_volume('circle', dims), math.pi * 100 * 5)


def test_pan_volume_missing_dimension():
    assert calculate_pan_volume('rectangle', {'length': 20, 'height': 5}) == 0
    assert calculate_pan_volume('round', {'diameter': 20}) == 0
    assert calculate_pan_volume('square', {'height': 5}) == 0


def test_pan_volume_unknown_shape():
    assert calculate_pan_volume('bundt', {'diameter': 25, 'height': 10}) == 0
    assert calculate_pan_volume(None, {}) == 0


def test_overflowing_weights_do_not_raise():
    scaled = scale_ingredients([_ingredient('bread flour', 500)], 1e308)
    assert math.isinf(scaled[0].scaled_grams)
    assert scaled[0].display_weight == 'inf kg'
