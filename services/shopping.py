"""
Shopping List Service

Consolidates the ingredients of several production batches into a single
shopping list with per-batch breakdowns.
"""

import re

from models import BatchContribution, ShoppingItem
from utils.format import round_half_up, format_weight


def _item_key(ingredient):
    """Group by ingredient id when known, otherwise by normalized name."""
    if ingredient.ingredient_id is not None:
        return ('id', ingredient.ingredient_id)
    return ('name', re.sub(r'\s+', ' ', ingredient.ingredient_name.lower().strip()))


def aggregate_shopping_list(batches):
    """
    Aggregate ShoppingBatch records into a consolidated shopping list.

    Each ingredient's unit_grams (0 if unknown) is multiplied by its batch's
    scaling factor. Totals are rounded to 2 decimals only after summing, and
    each item lists its contributions in the order they were encountered.

    Returns:
        ShoppingItem list sorted by name
    """
    consolidated = {}
    for batch in batches:
        for ingredient in batch.ingredients:
            grams = (ingredient.unit_grams or 0) * batch.scaling_factor
            contribution = BatchContribution(batch_name=batch.name, grams=grams)
            key = _item_key(ingredient)

            if key in consolidated:
                consolidated[key]['total_grams'] += grams
                consolidated[key]['batches'].append(contribution)
            else:
                consolidated[key] = {
                    'ingredient_id': ingredient.ingredient_id,
                    'name': ingredient.ingredient_name,
                    'total_grams': grams,
                    'batches': [contribution],
                }

    shopping_items = []
    for item in consolidated.values():
        shopping_items.append(ShoppingItem(
            ingredient_id=item['ingredient_id'],
            name=item['name'],
            total_grams=round_half_up(item['total_grams'], 100),
            display_quantity=format_weight(item['total_grams']),
            batches=item['batches'],
        ))

    shopping_items.sort(key=lambda item: (item.name.casefold(), item.name))
    return shopping_items
