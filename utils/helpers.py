"""
Miscellaneous utility helper functions.
Provides common functionality used across the application.
"""

import json
import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3).

    Matches the rounding the dashboards have always shown, unlike Python's
    banker's rounding.
    """
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage of part in whole, 0 when whole is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)


def parse_int(value, default: int = None) -> int:
    """
    Parse an integer from user input.

    Args:
        value: Raw value (int, str, or None)
        default: Returned when value is missing or not an integer

    Returns:
        Parsed integer or default
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_bool(value) -> bool:
    """Interpret form and JSON booleans ('true', '1', 'on', True)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def load_json_list(value) -> list:
    """
    Decode a JSON list column, tolerating NULL and legacy CSV text.

    Args:
        value: Stored text, a list, or None

    Returns:
        List of strings
    """
    if not value:
        return []
    if isinstance(value, list):
        return value
    try:
        decoded = json.loads(value)
    except (TypeError, ValueError):
        return [part.strip() for part in str(value).split(',') if part.strip()]
    return decoded if isinstance(decoded, list) else []

