"""
Formatting Utilities

Display helpers for weights and baker's percentages, plus the half-up
rounding shared by the scaling engine and the aggregators.
"""

import math


def round_half_up(value, per_unit=1):
    """
    Round value to the nearest 1/per_unit step, halves rounding up.

    round_half_up(47.3, 2) -> 47.5 (nearest 0.5)
    round_half_up(3.25, 10) -> 3.3 (nearest 0.1)

    Values too large to round, infinity and NaN come back unchanged.
    """
    scaled = value * per_unit
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / per_unit


def _strip_zeros(text):
    return text.rstrip('0').rstrip('.') if '.' in text else text


def format_weight(grams):
    """
    Smart-format a weight given in grams.

    - >= 1000g: kilograms with up to 2 decimals ("1.25 kg", "2 kg")
    - > 100g: whole grams ("250 g")
    - 10-100g: nearest 0.5g ("25.5 g", "47 g")
    - < 10g: 1 decimal place ("3.2 g")
    """
    if grams >= 1000:
        return f"{_strip_zeros(f'{grams / 1000:.2f}')} kg"

    if grams > 100:
        return f"{int(round_half_up(grams))} g"

    if grams >= 10:
        rounded = round_half_up(grams, 2)
        if rounded == int(rounded):
            return f"{int(rounded)} g"
        return f"{rounded:.1f} g"

    return f"{round_half_up(grams, 10):.1f} g"


def format_percentage(ratio):
    """Format a baker's percentage ratio (0.65) as "65.0%"."""
    if ratio is None:
        return '--'
    return f"{ratio * 100:.1f}%"
