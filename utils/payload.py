"""
Request Payload Helpers

Coerces JSON request bodies into the plain values the engine expects.
Anything that cannot be coerced raises PayloadError, which the app turns
into a 400 response.
"""

import math
from datetime import datetime


class PayloadError(Exception):
    """Raised when a request payload is missing or has the wrong shape."""
    pass


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value is not None and value != '' else default
        if result is None:
            return None
        if not math.isfinite(result):
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def safe_int(value, default=0, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value is not None and value != '' else default
        if result is None:
            return None
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError, OverflowError):
        return default


def require_mapping(value, field):
    """Return value if it is a JSON object, else raise PayloadError."""
    if not isinstance(value, dict):
        raise PayloadError(f"'{field}' must be an object")
    return value


def require_list(value, field, max_items=None):
    """Return value if it is a JSON array (optionally bounded in length)."""
    if not isinstance(value, list):
        raise PayloadError(f"'{field}' must be a list")
    if max_items is not None and len(value) > max_items:
        raise PayloadError(f"'{field}' has more than {max_items} entries")
    return value


def require_number(value, field):
    """Return value as a float, raising PayloadError if it is not numeric."""
    if isinstance(value, bool):
        raise PayloadError(f"'{field}' must be a number")
    try:
        result = float(value)
    except (ValueError, TypeError):
        raise PayloadError(f"'{field}' must be a number")
    if not math.isfinite(result):
        raise PayloadError(f"'{field}' must be a finite number")
    return result


def parse_datetime(value, field):
    """
    Parse an ISO-8601 timestamp.

    A trailing 'Z' is accepted as UTC.
    """
    if not isinstance(value, str) or not value.strip():
        raise PayloadError(f"'{field}' must be an ISO-8601 timestamp")
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise PayloadError(f"'{field}' must be an ISO-8601 timestamp")
