"""
Parsing Service

Functions for parsing free-form ingredient lines ("2 1/4 cups all-purpose
flour, sifted") into structured ParsedIngredient records, and for turning
quantities back into kitchen-friendly text.
"""

import logging
import math
import re
from decimal import Decimal

from constants import (
    UNIT_TOKENS, UNICODE_FRACTIONS, COMMON_FRACTIONS,
    VAGUE_QUANTITY_PHRASES, TRAILING_VAGUE_PHRASES
)
from models import ParsedIngredient
from .conversion import convert_to_grams, count_weight_grams

logger = logging.getLogger(__name__)

VAGUE_QUANTITY_PATTERN = re.compile(
    r'^(?:' + '|'.join(VAGUE_QUANTITY_PHRASES) + r')(?=\s|$)\s*', re.IGNORECASE
)
TRAILING_VAGUE_PATTERN = re.compile(
    r'\s+(?:' + '|'.join(TRAILING_VAGUE_PHRASES) + r')$', re.IGNORECASE
)
# Unit must be followed by whitespace or end of text so "g" never eats "garlic"
UNIT_PATTERN = re.compile(
    r'^(' + '|'.join(UNIT_TOKENS) + r')(?:\s|$)', re.IGNORECASE
)
LEADING_FRACTION_PATTERN = re.compile(r'^(\d+\s*/\s*\d+)\s*')
LEADING_NUMBER_PATTERN = re.compile(r'^(\d+(?:\.\d+)?)\s*')
LEADING_OF_PATTERN = re.compile(r'^of\s+', re.IGNORECASE)


def float_to_fraction(value):
    """Convert float to fraction string for display."""
    if value is None or value == 0:
        return '0'
    # Check if it's a whole number
    if value == int(value):
        return str(int(value))
    # Split into whole and decimal parts
    whole = int(value)
    decimal = value - whole
    # Check common fractions (with tolerance)
    for dec, frac in COMMON_FRACTIONS.items():
        if abs(decimal - dec) < 0.02:
            if whole > 0:
                return f"{whole} {frac}"
            return frac
    # Fall back to decimal
    return f"{value:.2f}".rstrip('0').rstrip('.')


def normalize_fractions(text):
    """
    Replace Unicode fraction characters with decimal equivalents.

    A fraction directly after a whole number is folded into it
    ("1½" and "1 ½" both become "1.5"); a lone fraction becomes its
    decimal ("½ cup" -> "0.5 cup"). Whitespace is collapsed.
    """
    text = re.sub(r'\s+', ' ', text)

    for char, value in UNICODE_FRACTIONS.items():
        if char not in text:
            continue
        # Mixed fraction like "1½" or "1 ½"
        pattern = r'(?<![\d.])(\d+)\s*' + re.escape(char)
        text = re.sub(pattern, lambda match: _fold_mixed_fraction(match, value), text)
        text = text.replace(char, f" {value}")

    return re.sub(r'\s+', ' ', text).strip()


def _fold_mixed_fraction(match, value):
    whole = float(match.group(1))
    if not math.isfinite(whole):
        return match.group(0)
    return _format_quantity(round(whole + value, 3))


def parse_fraction(text):
    """Parse a fraction string like '1/2' to 0.5. None if malformed or x/0."""
    match = re.match(r'^(\d+)\s*/\s*(\d+)$', (text or '').strip())
    if not match:
        return None
    try:
        numerator = int(match.group(1))
        denominator = int(match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator
    except (ValueError, OverflowError):
        # Too many digits for an int or a float
        return None


def _parse_quantity(text):
    """
    Parse a leading quantity: a fraction, a decimal, or a mixed number.

    Returns:
        (quantity, remaining_text), or None if the text has no leading number
    """
    remaining = text.strip()

    # Fraction first so "1/3 cup" isn't read as just "1"
    match = LEADING_FRACTION_PATTERN.match(remaining)
    if match:
        value = parse_fraction(match.group(1))
        if value is not None:
            return value, remaining[match.end():]

    match = LEADING_NUMBER_PATTERN.match(remaining)
    if not match:
        return None

    quantity = float(match.group(1))
    if not math.isfinite(quantity):
        # Too many digits to be a kitchen quantity
        return None
    remaining = remaining[match.end():]

    # Mixed number like "2 1/2"
    match = LEADING_FRACTION_PATTERN.match(remaining)
    if match:
        value = parse_fraction(match.group(1))
        if value is not None:
            return quantity + value, remaining[match.end():]

    return quantity, remaining


def _parse_unit(text):
    """
    Match a known unit at the start of text.

    Returns:
        (unit, remaining_text); unit is None when nothing matched
    """
    remaining = text.strip()
    match = UNIT_PATTERN.match(remaining)
    if not match:
        return None, remaining

    unit = match.group(1)
    if unit.endswith('.'):
        unit = unit[:-1]
    remaining = remaining[match.end():].strip()
    # "2 cups of flour"
    remaining = LEADING_OF_PATTERN.sub('', remaining, count=1)
    return unit, remaining


def _clean_name(name):
    """Lowercase, collapse whitespace, drop a trailing 'to taste'/'as needed'."""
    name = re.sub(r'\s+', ' ', name.lower()).strip()
    shortened = TRAILING_VAGUE_PATTERN.sub('', name).strip()
    return shortened or name


def parse_ingredient(text):
    """
    Parse an ingredient line into a ParsedIngredient.

    Never raises: text that cannot be understood ends up as the ingredient
    name with no quantity, unit, or weight.

    Everything after the first comma is treated as prep notes, including
    commas that are really part of the name ("boneless, skinless chicken").
    """
    raw_text = text if isinstance(text, str) else ('' if text is None else str(text))
    stripped = raw_text.strip()

    # Prep notes follow the first comma
    main_part, comma, notes = stripped.partition(',')
    main_part = main_part.strip()
    prep_notes = (notes.strip() or None) if comma else None

    main_part = normalize_fractions(main_part)

    # "to taste", "a pinch of", ...
    vague_match = VAGUE_QUANTITY_PATTERN.match(main_part)
    if vague_match:
        name = _clean_name(main_part[vague_match.end():].strip() or main_part)
        return ParsedIngredient(
            raw_text=raw_text,
            quantity=None,
            unit=None,
            ingredient_name=name,
            prep_notes=prep_notes,
            unit_grams=None,
            is_flour='flour' in name,
        )

    quantity = None
    after_quantity = main_part
    parsed_quantity = _parse_quantity(main_part)
    if parsed_quantity is not None:
        quantity, after_quantity = parsed_quantity

    unit, after_unit = _parse_unit(after_quantity)

    name = _clean_name(after_unit or main_part)

    unit_grams = None
    if quantity is not None and unit is not None:
        unit_grams = convert_to_grams(quantity, unit, name)
    elif quantity is not None:
        # No unit: "3 eggs"
        unit_grams = count_weight_grams(quantity, name)

    if unit_grams is not None and not math.isfinite(unit_grams):
        unit_grams = None

    if quantity is not None and unit_grams is None:
        logger.debug("No gram weight for %r", raw_text)

    return ParsedIngredient(
        raw_text=raw_text,
        quantity=quantity,
        unit=unit,
        ingredient_name=name,
        prep_notes=prep_notes,
        unit_grams=unit_grams,
        is_flour='flour' in name,
    )


def parse_ingredients(lines):
    """Parse several ingredient lines, skipping blank ones."""
    return [parse_ingredient(line) for line in lines if line and line.strip()]


def _format_quantity(value):
    """Plain decimal text for a quantity: 2.25 -> '2.25', 3.0 -> '3'."""
    text = repr(float(value))
    if 'e' in text:
        # Expand exponent form without losing digits: 1e-07 -> '0.0000001'
        text = format(Decimal(text), 'f')
    elif text.endswith('.0'):
        text = text[:-2]
    return text


def format_ingredient(parsed):
    """
    Re-serialize a parsed ingredient as "{quantity} {unit} {name}".

    For lines without commas and with a recognized unit, parsing the result
    gives back the same quantity, unit, and name.
    """
    parts = []
    if parsed.quantity is not None:
        parts.append(_format_quantity(parsed.quantity))
    if parsed.unit:
        parts.append(parsed.unit)
    parts.append(parsed.ingredient_name)
    return ' '.join(parts)
