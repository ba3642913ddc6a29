"""
Ingredient Models

Contains the ParsedIngredient and ScaledIngredient records produced by the
parser and the scaling engine, and the ScalingInput that selects a scaling
policy.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedIngredient:
    """
    Structured result of parsing one raw ingredient line.

    unit_grams is only set when quantity is known and either the unit
    converted to grams or a count weight matched a unit-less line.
    """
    raw_text: str
    quantity: float | None
    unit: str | None
    ingredient_name: str
    prep_notes: str | None
    unit_grams: float | None
    is_flour: bool


@dataclass(frozen=True)
class ScaledIngredient:
    """One line of a weigh sheet after scaling."""
    ingredient_name: str
    original_grams: float
    scaled_grams: float
    display_weight: str
    is_flour: bool
    bakers_percentage: float | None


@dataclass(frozen=True)
class ScalingInput:
    """Scaling request: mode is 'multiplier', 'quantity' or 'pan'."""
    mode: str
    multiplier: float | None = None
    target_quantity: float | None = None
    recipe_yield_quantity: float | None = None
    target_pan_volume_ml: float | None = None
    original_pan_volume_ml: float | None = None
