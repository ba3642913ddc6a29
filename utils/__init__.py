# Utility modules for the bakery engine
from .format import round_half_up, format_weight, format_percentage
from .payload import (
    PayloadError, safe_float, safe_int, require_mapping, require_list,
    require_number, parse_datetime
)
from .sanitizer import sanitize_ingredient_text, sanitize_label
from .log import configure_logging
