"""
Input Sanitization Module

Cleans free text arriving from the UI or from imported recipes before it is
handed to the parser or echoed back in a computed record. HTML escaping is
left to whatever renders the output.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_ingredient_text(text, max_length=None):
    """
    Sanitize a single ingredient line.

    Control characters (tabs, stray newlines, null bytes) become spaces,
    runs of whitespace collapse, and the line is truncated to max_length.

    Args:
        text: Single ingredient line (can be None)
        max_length: Maximum length (default MAX_LENGTHS['ingredient_text'])

    Returns:
        Sanitized ingredient text, '' for empty input
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    if max_length is None:
        max_length = MAX_LENGTHS['ingredient_text']

    text = _CONTROL_CHARS.sub(' ', text)
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_label(label, field, default=''):
    """
    Sanitize a short label such as a batch or packaging name.

    Args:
        label: The label to sanitize
        field: Key into MAX_LENGTHS for the length limit
        default: Returned when nothing is left after cleaning

    Returns:
        Sanitized label
    """
    if label is None:
        return default

    if not isinstance(label, str):
        label = str(label)

    label = _CONTROL_CHARS.sub('', label)
    label = re.sub(r'\s+', ' ', label).strip()

    max_length = MAX_LENGTHS.get(field, 200)
    if len(label) > max_length:
        label = label[:max_length-3] + '...'

    return label or default
