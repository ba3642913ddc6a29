"""
Validation Constants

Contains whitelist values and limits for validating API payloads before
they reach the engine.
"""

# Valid scaling modes
VALID_SCALING_MODES = {'multiplier', 'quantity', 'pan'}

# Numeric fields of a scaling request
SCALING_NUMBER_KEYS = (
    'multiplier', 'target_quantity', 'recipe_yield_quantity',
    'target_pan_volume_ml', 'original_pan_volume_ml',
)

# Valid pan shapes (aliases included)
VALID_PAN_SHAPES = {'rectangular', 'rectangle', 'square', 'round', 'circle'}

# Dimension keys accepted for a pan, in centimeters
PAN_DIMENSION_KEYS = ('length', 'width', 'diameter', 'height')

# Valid output formats for a generated timeline
VALID_TIMELINE_FORMATS = {'json', 'ics'}

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'ingredient_name': 200,
    'batch_name': 200,
    'packaging_name': 200,
    'location': 200,
}
