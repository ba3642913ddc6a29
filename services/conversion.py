"""
Unit Conversion Service

Converts (quantity, unit) pairs to grams. Weight units convert directly;
volume units go through milliliters and the ingredient's density; lines with
no unit at all ("3 eggs") use a per-item weight table.
"""

import logging
from collections import namedtuple
from enum import Enum

from constants import (
    VOLUME_TO_ML, WEIGHT_TO_G, TABLESPOON_SHORTHAND, TABLESPOON_ML, COUNT_WEIGHTS
)
from .density import lookup_density, normalize_name, substring_match

logger = logging.getLogger(__name__)


class UnitKind(Enum):
    WEIGHT = 'weight'
    VOLUME = 'volume'
    UNKNOWN = 'unknown'


# kind plus its factor: grams per unit for WEIGHT, ml per unit for VOLUME
UnitClass = namedtuple('UnitClass', ['kind', 'factor'])

UNKNOWN_UNIT = UnitClass(UnitKind.UNKNOWN, None)


def classify_unit(unit):
    """
    Classify a unit token as weight, volume, or unknown.

    A bare uppercase 'T' is tablespoon; everything else is matched
    case-insensitively ('t' is teaspoon).
    """
    if not unit:
        return UNKNOWN_UNIT

    if unit.strip() == TABLESPOON_SHORTHAND:
        return UnitClass(UnitKind.VOLUME, TABLESPOON_ML)

    normalized = unit.lower().strip()
    if normalized in WEIGHT_TO_G:
        return UnitClass(UnitKind.WEIGHT, WEIGHT_TO_G[normalized])
    if normalized in VOLUME_TO_ML:
        return UnitClass(UnitKind.VOLUME, VOLUME_TO_ML[normalized])
    return UNKNOWN_UNIT


def convert_to_ml(quantity, unit):
    """Convert a volume measurement to ml. None if unit is not a volume unit."""
    unit_class = classify_unit(unit)
    if unit_class.kind is not UnitKind.VOLUME:
        return None
    return quantity * unit_class.factor


def convert_to_grams(quantity, unit, ingredient_name):
    """
    Convert a quantity with a unit to grams.

    Volume units need a density for the ingredient; when none is found the
    conversion fails rather than assuming water.

    Returns:
        Grams, or None if the unit is unrecognized or the density is unknown
    """
    unit_class = classify_unit(unit)

    if unit_class.kind is UnitKind.WEIGHT:
        return quantity * unit_class.factor

    if unit_class.kind is UnitKind.VOLUME:
        density = lookup_density(ingredient_name)
        if density is None:
            logger.debug("Cannot weigh %s %s of %r: unknown density", quantity, unit, ingredient_name)
            return None
        return quantity * unit_class.factor * density

    logger.debug("Unrecognized unit %r", unit)
    return None


def count_weight_grams(quantity, ingredient_name):
    """
    Weight of a counted ingredient, e.g. 2 large eggs -> 2 x 50g.

    Exact normalized match first, then the first COUNT_WEIGHTS key that
    contains the name or is contained in it.

    Returns:
        Grams, or None if the ingredient has no per-item weight
    """
    normalized = normalize_name(ingredient_name)
    if not normalized:
        return None

    if normalized in COUNT_WEIGHTS:
        return quantity * COUNT_WEIGHTS[normalized]

    key = substring_match(normalized, COUNT_WEIGHTS)
    if key is not None:
        return quantity * COUNT_WEIGHTS[key]

    return None
