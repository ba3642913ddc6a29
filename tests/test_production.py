"""
Tests for packaging needs and shopping list aggregation.
Run with: pytest tests/test_production.py
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models import (
    PackagingSpec, PackagingBatch, ShoppingIngredient, ShoppingBatch, BatchContribution
)
from services.packaging import calculate_packaging_needs
from services.shopping import aggregate_shopping_list


# ============================================
# Packaging
# ============================================

def test_packaging_totals_and_shortfall():
    box = PackagingSpec(packaging_type_id=1, name='Pastry box', quantity_per_yield=1,
                        current_stock=4, reorder_threshold=2)
    needs = calculate_packaging_needs([
        PackagingBatch(target_quantity=3, packaging=[box]),
        PackagingBatch(target_quantity=3, packaging=[box]),
    ])
    assert len(needs) == 1
    assert needs[0].quantity_needed == 6
    assert needs[0].shortfall == 2
    assert needs[0].is_low_stock is True


def test_packaging_rounds_up_per_batch():
    """Two batches needing 1.5 bags each take 4 bags, not 3."""
    bag = PackagingSpec(packaging_type_id=7, name='Bag', quantity_per_yield=0.5, current_stock=100)
    needs = calculate_packaging_needs([
        PackagingBatch(target_quantity=3, packaging=[bag]),
        PackagingBatch(target_quantity=3, packaging=[bag]),
    ])
    assert needs[0].quantity_needed == 4


def test_packaging_uses_last_stock_seen():
    first = PackagingSpec(packaging_type_id=2, name='Label', quantity_per_yield=1,
                          current_stock=10, reorder_threshold=0)
    second = PackagingSpec(packaging_type_id=2, name='Label', quantity_per_yield=1,
                           current_stock=12, reorder_threshold=5)
    needs = calculate_packaging_needs([
        PackagingBatch(target_quantity=4, packaging=[first]),
        PackagingBatch(target_quantity=4, packaging=[second]),
    ])
    assert needs[0].current_stock == 12
    assert needs[0].shortfall == 0
    # 12 - 8 = 4 left, below the threshold of 5
    assert needs[0].is_low_stock is True


def test_packaging_well_stocked():
    box = PackagingSpec(packaging_type_id=1, name='Box', quantity_per_yield=2,
                        current_stock=100, reorder_threshold=10)
    needs = calculate_packaging_needs([PackagingBatch(target_quantity=3, packaging=[box])])
    assert needs[0].quantity_needed == 6
    assert needs[0].shortfall == 0
    assert needs[0].is_low_stock is False


def test_packaging_sorted_by_name():
    specs = [
        PackagingSpec(packaging_type_id=1, name='cake box', quantity_per_yield=1),
        PackagingSpec(packaging_type_id=2, name='bread bag', quantity_per_yield=1),
        PackagingSpec(packaging_type_id=3, name='Box', quantity_per_yield=1),
    ]
    needs = calculate_packaging_needs([PackagingBatch(target_quantity=1, packaging=specs)])
    assert [n.name for n in needs] == ['Box', 'bread bag', 'cake box']


def test_packaging_empty():
    assert calculate_packaging_needs([]) == []
    assert calculate_packaging_needs([PackagingBatch(target_quantity=5)]) == []


# ============================================
# Shopping list
# ============================================

def test_shopping_list_consolidates_batches():
    country = ShoppingBatch(name='Country loaf', scaling_factor=1, ingredients=[
        ShoppingIngredient(ingredient_name='Bread flour', unit_grams=500, ingredient_id=1),
        ShoppingIngredient(ingredient_name='salt', unit_grams=10),
    ])
    baguette = ShoppingBatch(name='Baguette', scaling_factor=2, ingredients=[
        ShoppingIngredient(ingredient_name='Bread flour', unit_grams=500, ingredient_id=1),
        ShoppingIngredient(ingredient_name='Salt ', unit_grams=10),
    ])
    items = aggregate_shopping_list([country, baguette])

    assert [item.name for item in items] == ['Bread flour', 'salt']
    flour, salt = items
    assert flour.ingredient_id == 1
    assert flour.total_grams == 1500
    assert flour.display_quantity == '1.5 kg'
    assert flour.batches == [
        BatchContribution(batch_name='Country loaf', grams=500),
        BatchContribution(batch_name='Baguette', grams=1000),
    ]
    assert salt.ingredient_id is None
    assert salt.total_grams == 30
    assert salt.display_quantity == '30 g'


def test_shopping_list_groups_by_id_before_name():
    batch = ShoppingBatch(name='Test', scaling_factor=1, ingredients=[
        ShoppingIngredient(ingredient_name='AP flour', unit_grams=100, ingredient_id=7),
        ShoppingIngredient(ingredient_name='all-purpose flour', unit_grams=200, ingredient_id=7),
    ])
    items = aggregate_shopping_list([batch])
    assert len(items) == 1
    assert items[0].name == 'AP flour'
    assert items[0].total_grams == 300


def test_shopping_list_rounds_after_summing():
    batches = [
        ShoppingBatch(name=f'Batch {n}', scaling_factor=1, ingredients=[
            ShoppingIngredient(ingredient_name='yeast', unit_grams=0.333),
        ])
        for n in range(3)
    ]
    items = aggregate_shopping_list(batches)
    assert items[0].total_grams == 1.0
    assert len(items[0].batches) == 3


def test_shopping_list_unknown_weight_counts_as_zero():
    batch = ShoppingBatch(name='Test', scaling_factor=3, ingredients=[
        ShoppingIngredient(ingredient_name='sprinkles', unit_grams=None),
    ])
    items = aggregate_shopping_list([batch])
    assert items[0].total_grams == 0
    assert items[0].batches[0].grams == 0


def test_shopping_list_empty():
    assert aggregate_shopping_list([]) == []
