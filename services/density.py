"""
Density Lookup Service

Resolves an ingredient name to a density in g/ml so volume measurements can
be weighed. Recipe text is rarely canonical ("organic all-purpose flour"),
so the lookup falls back from exact matches to aliases to substrings.
"""

import logging
import re

from constants import DENSITY_TABLE, INGREDIENT_ALIASES

logger = logging.getLogger(__name__)


def normalize_name(name):
    """Lowercase, trim, and collapse whitespace."""
    return re.sub(r'\s+', ' ', (name or '').lower().strip())


def substring_match(normalized, table):
    """
    Return the first key of table that contains normalized or is contained
    in it, in table order. None if nothing matches.
    """
    if not normalized:
        return None
    for key in table:
        if key in normalized or normalized in key:
            return key
    return None


def lookup_density(name):
    """
    Look up the density (g/ml) for an ingredient name.

    First match wins:
    1. Exact match in DENSITY_TABLE
    2. Exact match in INGREDIENT_ALIASES, resolved to its canonical density
    3. Substring match (either direction) against DENSITY_TABLE keys
    4. Substring match (either direction) against alias keys
    5. None

    Returns:
        Density in g/ml, or None if the ingredient is unknown
    """
    normalized = normalize_name(name)
    if not normalized:
        return None

    if normalized in DENSITY_TABLE:
        return DENSITY_TABLE[normalized]

    canonical = INGREDIENT_ALIASES.get(normalized)
    if canonical in DENSITY_TABLE:
        return DENSITY_TABLE[canonical]

    key = substring_match(normalized, DENSITY_TABLE)
    if key is not None:
        logger.debug("Density for %r resolved by substring to %r", normalized, key)
        return DENSITY_TABLE[key]

    # Every alias points at a canonical key, so the first alias hit decides
    for alias, canonical in INGREDIENT_ALIASES.items():
        if alias in normalized or normalized in alias:
            if canonical in DENSITY_TABLE:
                logger.debug("Density for %r resolved by alias %r to %r", normalized, alias, canonical)
                return DENSITY_TABLE[canonical]

    logger.debug("No density for %r", normalized)
    return None
