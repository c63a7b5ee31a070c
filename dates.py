"""Lenient timestamp parsing for sitemap and article dates."""

from __future__ import annotations

from datetime import UTC, datetime

from dateutil import parser as date_parser

# Two defaults that differ in every date field: a component dateutil fills in
# from the default shows up as a mismatch between the two parses.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def parse_timestamp(raw: str | None) -> datetime | None:
    """Parse a date string into an aware UTC datetime, or None if it can't be read.

    The string must carry a full calendar date (year, month and day); values
    such as "Monday" or "10" are rejected instead of being completed from
    today's date. Naive values are assumed to be UTC.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None

    value = raw.strip()
    try:
        parsed = date_parser.parse(value, default=_DEFAULT_A)
        if parsed.date() != date_parser.parse(value, default=_DEFAULT_B).date():
            return None
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
