"""
Packaging Needs Service

Works out how many of each packaging type a production run will consume,
compares that with stock on hand, and flags shortfalls.
"""

import math

from models import PackagingNeed


def calculate_packaging_needs(batches):
    """
    Calculate packaging requirements across PackagingBatch records.

    Each batch makes target_quantity finished items; each PackagingSpec says
    how many units of a packaging type one item uses. Requirements are
    rounded up per batch entry and then summed per packaging type. Stock and
    reorder threshold take the last value seen for a type.

    Returns:
        PackagingNeed list sorted by name
    """
    consolidated = {}
    for batch in batches:
        for spec in batch.packaging:
            required = math.ceil(batch.target_quantity * spec.quantity_per_yield)

            if spec.packaging_type_id in consolidated:
                entry = consolidated[spec.packaging_type_id]
                entry['quantity_needed'] += required
                entry['current_stock'] = spec.current_stock
                entry['reorder_threshold'] = spec.reorder_threshold
            else:
                consolidated[spec.packaging_type_id] = {
                    'name': spec.name,
                    'quantity_needed': required,
                    'current_stock': spec.current_stock,
                    'reorder_threshold': spec.reorder_threshold,
                }

    needs = []
    for type_id, entry in consolidated.items():
        needed = entry['quantity_needed']
        stock = entry['current_stock']
        needs.append(PackagingNeed(
            packaging_type_id=type_id,
            name=entry['name'],
            quantity_needed=needed,
            current_stock=stock,
            shortfall=max(0, needed - stock),
            is_low_stock=(stock - needed) < entry['reorder_threshold'],
        ))

    needs.sort(key=lambda need: (need.name.casefold(), need.name))
    return needs
