"""Lenient parsing of path and query parameters.

Numbers are read from their leading integer digits (``"3abc"`` and ``"2.5"``
both read as 3 and 2). Listing never fails on a bad query string, and a
non-numeric id is simply an id that does not exist.
"""

import re

from storefront.domain.exceptions import EntityNotFoundError

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def leading_int(raw: str) -> int | None:
    """The integer at the start of ``raw``, or None when there is none."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_id(raw: str, entity_type: str) -> int:
    value = leading_int(raw)
    if value is None:
        raise EntityNotFoundError(entity_type, raw)
    return value


def parse_limit(raw: str | None) -> int | None:
    """A positive integer, or None for "no limit"."""
    if raw is None:
        return None
    value = leading_int(raw)
    return value if value is not None and value > 0 else None


def parse_active(raw: str | None) -> bool | None:
    """``"true"`` (any case) is True; any other supplied value is False."""
    if raw is None:
        return None
    return raw.strip().lower() == "true"
