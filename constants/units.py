"""
Unit Constants and Conversion Tables

Contains the unit tokens recognized by the ingredient parser, the conversion
factors used to normalize them to grams, and the fraction tables used to
read and display quantities.
"""

# Unit tokens recognized at the start of an ingredient line (regex fragments).
# Order matters: longer tokens come first so "tablespoon" is never read as "t".
# Single letters come last and must be followed by whitespace.
UNIT_TOKENS = [
    r'fluid ounces', r'fluid ounce', r'fl oz\.?', r'fl\. oz\.?',
    r'tablespoons?', r'teaspoons?',
    r'tbsp\.?', r'tbs\.?', r'tsp\.?',
    r'cups?',
    r'ounces?', r'pounds?',
    r'kilograms?', r'grams?',
    r'milliliters?', r'millilitres?', r'liters?', r'litres?',
    r'quarts?', r'pints?',
    r'lbs?\.?', r'oz\.?', r'kg\.?', r'ml\.?',
    r'pt\.?', r'qt\.?',
    r'sticks?',
    r'pinch(?:es)?', r'dash(?:es)?',
    r'c\.', r'g\.', r'l\.', r't\.', r'T',
    r'c', r'g', r'l', r't',
]

# Volume conversions to ML (lowercase unit -> ml per unit)
VOLUME_TO_ML = {
    'teaspoon': 4.929, 'teaspoons': 4.929, 'tsp': 4.929, 'tsp.': 4.929, 't': 4.929,
    'tablespoon': 14.787, 'tablespoons': 14.787, 'tbsp': 14.787, 'tbsp.': 14.787, 'tbs': 14.787,
    'fluid ounce': 29.574, 'fluid ounces': 29.574, 'fl oz': 29.574, 'fl. oz': 29.574,
    'fl. oz.': 29.574, 'fl oz.': 29.574,
    'cup': 240, 'cups': 240, 'c': 240, 'c.': 240,
    'pint': 480, 'pints': 480, 'pt': 480, 'pt.': 480,
    'quart': 960, 'quarts': 960, 'qt': 960, 'qt.': 960,
    'liter': 1000, 'liters': 1000, 'litre': 1000, 'litres': 1000, 'l': 1000,
    'milliliter': 1, 'milliliters': 1, 'millilitre': 1, 'millilitres': 1, 'ml': 1,
    # Butter sticks: 1 stick = 1/2 cup
    'stick': 120, 'sticks': 120,
}

# Weight conversions to G (lowercase unit -> grams per unit)
WEIGHT_TO_G = {
    'gram': 1, 'grams': 1, 'g': 1, 'g.': 1,
    'kilogram': 1000, 'kilograms': 1000, 'kg': 1000, 'kg.': 1000,
    'ounce': 28.3495, 'ounces': 28.3495, 'oz': 28.3495, 'oz.': 28.3495,
    'pound': 453.592, 'pounds': 453.592, 'lb': 453.592, 'lbs': 453.592,
    'lb.': 453.592, 'lbs.': 453.592,
}

# Uppercase "T" is the recipe shorthand for tablespoon ("t" is teaspoon)
TABLESPOON_SHORTHAND = 'T'
TABLESPOON_ML = 14.787

# Unicode fraction characters mapping (fixed constants, not computed)
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,    # ½
    '\u00bc': 0.25,   # ¼
    '\u00be': 0.75,   # ¾
    '\u2153': 0.333,  # ⅓
    '\u2154': 0.667,  # ⅔
    '\u2155': 0.2,    # ⅕
    '\u2156': 0.4,    # ⅖
    '\u2157': 0.6,    # ⅗
    '\u2158': 0.8,    # ⅘
    '\u2159': 0.167,  # ⅙
    '\u215a': 0.833,  # ⅚
    '\u2150': 0.143,  # ⅐
    '\u215b': 0.125,  # ⅛
    '\u215c': 0.375,  # ⅜
    '\u215d': 0.625,  # ⅝
    '\u215e': 0.875,  # ⅞
    '\u2151': 0.111,  # ⅑
    '\u2152': 0.1,    # ⅒
}

# Common fractions for display (using precise values)
COMMON_FRACTIONS = {
    0.125: '1/8', 0.25: '1/4', 1/3: '1/3', 0.375: '3/8',
    0.5: '1/2', 0.625: '5/8', 2/3: '2/3', 0.75: '3/4', 0.875: '7/8'
}

# Phrases that stand in for a quantity at the start of a line
VAGUE_QUANTITY_PHRASES = [
    r'to\s+taste',
    r'as\s+needed',
    r'a\s+pinch(?:\s+of)?',
    r'a\s+dash(?:\s+of)?',
]

# Phrases dropped from the end of an ingredient name ("salt to taste")
TRAILING_VAGUE_PHRASES = [
    r'to\s+taste',
    r'as\s+needed',
]
