"""
Input parsing helpers shared by schemas, routers and repositories.

Identifiers arrive as path segments and query strings, dates as JSON
strings. The helpers here return None for anything that does not parse, so
callers can decide whether that means "invalid input" (schemas) or "no such
row" (lookups by id).
"""

import re
from datetime import date, datetime
from typing import Any

# Surrogate keys are 32-bit SERIAL columns
MAX_ID = 2**31 - 1

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def parse_integer(value: Any) -> int | None:
    """
    Parse an integer from a JSON value or a string of digits.

    Booleans are rejected even though Python treats them as numbers. Floats
    are accepted only when they have no fractional part, so a JSON 1.0
    counts as 1.

    Examples:
        >>> parse_integer(7), parse_integer("7"), parse_integer(" -3 "), parse_integer(7.0)
        (7, 7, -3, 7)
        >>> parse_integer("7.5"), parse_integer(7.5), parse_integer(True), parse_integer(None)
        (None, None, None, None)
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip())
    return None


def parse_id(value: Any) -> int | None:
    """
    Parse a row identifier.

    Returns None when the value is not an integer or falls outside the key
    range, which callers treat as "no matching row".
    """
    number = parse_integer(value)
    if number is None or not is_storable_id(number):
        return None
    return number


def is_storable_id(number: int) -> bool:
    """Check that an integer fits the primary key column."""
    return 1 <= number <= MAX_ID


def parse_iso_date(value: Any) -> date | None:
    """
    Parse an ISO-8601 calendar date.

    Accepts date strings ("1813-01-28") and datetime strings
    ("1813-01-28T00:00:00Z"), keeping only the date part of the latter.
    date and datetime objects pass through.

    Returns:
        The parsed date, or None if the value is not an ISO-8601 date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None
