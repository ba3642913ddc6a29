"""
Scaling Service

Rescales a recipe's ingredient list and computes baker's percentages.

Scaling modes:
- multiplier: direct multiplier (e.g., 2x)
- quantity: target yield / recipe yield
- pan: target pan volume / original pan volume
"""

import logging
import math

from models import ScaledIngredient
from utils.format import round_half_up, format_weight

logger = logging.getLogger(__name__)


def _positive(value):
    return value is not None and value > 0


def calculate_scaling_factor(scaling):
    """
    Calculate the scaling factor for a ScalingInput.

    Quantity and pan modes fall back to 1 when either side of the ratio is
    missing, zero, or negative. Unknown modes also return 1.
    """
    if scaling.mode == 'multiplier':
        return scaling.multiplier if scaling.multiplier is not None else 1

    if scaling.mode == 'quantity':
        if not (_positive(scaling.target_quantity) and _positive(scaling.recipe_yield_quantity)):
            return 1
        return scaling.target_quantity / scaling.recipe_yield_quantity

    if scaling.mode == 'pan':
        if not (_positive(scaling.target_pan_volume_ml) and _positive(scaling.original_pan_volume_ml)):
            return 1
        return scaling.target_pan_volume_ml / scaling.original_pan_volume_ml

    logger.debug("Unknown scaling mode %r, using factor 1", scaling.mode)
    return 1


def smart_round(grams):
    """
    Round grams by magnitude, for a kitchen scale.

    - >= 100g: nearest 1g
    - 10-100g: nearest 0.5g
    - < 10g: nearest 0.1g
    """
    if grams >= 100:
        return round_half_up(grams)
    if grams >= 10:
        return round_half_up(grams, 2)
    return round_half_up(grams, 10)


def scale_ingredients(ingredients, factor):
    """
    Scale a list of ingredients by the given factor.

    Each ingredient needs ingredient_name, unit_grams (None if unknown), and
    is_flour; ParsedIngredient records work directly.

    Baker's percentage is the ratio of an ingredient's scaled weight to the
    total scaled flour weight (0.65 for 65%), computed before rounding.
    Ingredients with unknown weight scale to 0 and get no percentage.

    Returns:
        ScaledIngredient list in input order
    """
    total_flour_grams = sum(
        ing.unit_grams * factor
        for ing in ingredients
        if ing.is_flour and ing.unit_grams is not None
    )

    scaled = []
    for ing in ingredients:
        original_grams = ing.unit_grams if ing.unit_grams is not None else 0
        raw_scaled = original_grams * factor
        scaled_grams = smart_round(raw_scaled)

        bakers_percentage = None
        if total_flour_grams > 0 and ing.unit_grams is not None:
            bakers_percentage = raw_scaled / total_flour_grams

        scaled.append(ScaledIngredient(
            ingredient_name=ing.ingredient_name,
            original_grams=original_grams,
            scaled_grams=scaled_grams,
            display_weight=format_weight(scaled_grams),
            is_flour=ing.is_flour,
            bakers_percentage=bakers_percentage,
        ))

    return scaled


def calculate_pan_volume(shape, dimensions):
    """
    Calculate the interior volume of a pan in ml, from dimensions in cm.

    Shapes:
    - rectangular / rectangle: length x width x height
    - square: length x length x height
    - round / circle: pi x (diameter / 2)^2 x height

    Args:
        shape: Pan shape name
        dimensions: Mapping with length, width, diameter, height keys

    Returns:
        Volume in ml, or 0 for an unknown shape or a missing dimension
    """
    normalized_shape = (shape or '').lower().strip()
    length = dimensions.get('length')
    width = dimensions.get('width')
    diameter = dimensions.get('diameter')
    height = dimensions.get('height')

    if height is None:
        return 0

    if normalized_shape in ('rectangular', 'rectangle'):
        if length is None or width is None:
            return 0
        return length * width * height

    if normalized_shape == 'square':
        if length is None:
            return 0
        return length * length * height

    if normalized_shape in ('round', 'circle'):
        if diameter is None:
            return 0
        radius = diameter / 2
        return math.pi * radius * radius * height

    return 0
