"""
Constants Package

Read-only lookup tables shared by the services. Nothing here is mutated at
runtime.
"""

from .units import (
    UNIT_TOKENS,
    VOLUME_TO_ML,
    WEIGHT_TO_G,
    TABLESPOON_SHORTHAND,
    TABLESPOON_ML,
    UNICODE_FRACTIONS,
    COMMON_FRACTIONS,
    VAGUE_QUANTITY_PHRASES,
    TRAILING_VAGUE_PHRASES,
)
from .ingredients import DENSITY_TABLE, INGREDIENT_ALIASES, COUNT_WEIGHTS
from .timelines import STEP_TYPES, TIMELINE_TEMPLATES, check_step_types
from .validation import (
    VALID_SCALING_MODES,
    SCALING_NUMBER_KEYS,
    VALID_PAN_SHAPES,
    PAN_DIMENSION_KEYS,
    VALID_TIMELINE_FORMATS,
    MAX_LENGTHS,
)
