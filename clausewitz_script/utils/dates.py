"""Date literals: parsing, the quoted-date heuristic, and rendering.

Unquoted dates (``1936.1.1``, ``1936.1.1.12``) are recognized by the grammar
and always parse to Date. Quoted strings are only promoted to Date when they
look like one: three or four dot-separated fields, a 3-4 digit year and 1-2
digit month/day/hour.
"""
from typing import Optional

from ..models.ast import Date


def parse_date(text: str) -> Date:
    """Parse an unquoted ``Y.M.D`` or ``Y.M.D.H`` token already accepted by the grammar"""
    fields = [int(field) for field in text.split('.')]
    hour = fields[3] if len(fields) > 3 else None
    return Date(fields[0], fields[1], fields[2], hour)


def _is_digits(field: str, min_len: int, max_len: int) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return min_len <= len(field) <= max_len and field.isascii() and field.isdigit()


def match_quoted_date(text: str) -> Optional[Date]:
    """Return a Date if quoted string content looks like one, else None.

    >>> match_quoted_date("1936.1.1")
    Date(year=1936, month=1, day=1, hour=None)
    >>> match_quoted_date("v1.2.3") is None
    True
    """
    fields = text.split('.')
    if len(fields) not in (3, 4):
        return None
    if not _is_digits(fields[0], 3, 4):
        return None
    if not all(_is_digits(field, 1, 2) for field in fields[1:]):
        return None

    hour = int(fields[3]) if len(fields) == 4 else None
    return Date(int(fields[0]), int(fields[1]), int(fields[2]), hour)


def format_date(date: Date) -> str:
    """Render a date. Dates with an hour are quoted, plain dates are not."""
    if date.hour is None:
        return f"{date.year}.{date.month}.{date.day}"
    return f'"{date.year}.{date.month}.{date.day}.{date.hour}"'
