"""
Services Package

The bakery domain engine: parsing, unit conversion, scaling, production
aggregates, and timelines. Every function here is pure.
"""

from .density import (
    normalize_name,
    lookup_density,
)

from .conversion import (
    UnitKind,
    UnitClass,
    classify_unit,
    convert_to_ml,
    convert_to_grams,
    count_weight_grams,
)

from .parsing import (
    float_to_fraction,
    normalize_fractions,
    parse_fraction,
    parse_ingredient,
    parse_ingredients,
    format_ingredient,
)

from .scaling import (
    calculate_scaling_factor,
    smart_round,
    scale_ingredients,
    calculate_pan_volume,
)

from .packaging import calculate_packaging_needs

from .shopping import aggregate_shopping_list

from .timeline import (
    list_templates,
    get_template,
    generate_timeline_from_template,
    generate_timeline,
)

from .calendar import (
    timeline_to_events,
    generate_ics,
)

__all__ = [
    # Density
    'normalize_name',
    'lookup_density',
    # Conversion
    'UnitKind',
    'UnitClass',
    'classify_unit',
    'convert_to_ml',
    'convert_to_grams',
    'count_weight_grams',
    # Parsing
    'float_to_fraction',
    'normalize_fractions',
    'parse_fraction',
    'parse_ingredient',
    'parse_ingredients',
    'format_ingredient',
    # Scaling
    'calculate_scaling_factor',
    'smart_round',
    'scale_ingredients',
    'calculate_pan_volume',
    # Production
    'calculate_packaging_needs',
    'aggregate_shopping_list',
    # Timeline
    'list_templates',
    'get_template',
    'generate_timeline_from_template',
    'generate_timeline',
    'timeline_to_events',
    'generate_ics',
]
