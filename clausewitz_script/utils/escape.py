"""String escaping for quoted literals.

Shared by script strings and localisation values. Only five characters are
escaped: backslash, double quote, newline, carriage return and tab. Unknown
escape sequences are kept as written when unescaping.
"""
import re

from ..constants import ESCAPE_SEQUENCES, UNESCAPE_SEQUENCES

_NEEDS_ESCAPE = re.compile('[' + re.escape(''.join(ESCAPE_SEQUENCES)) + ']')


def unescape(raw: str) -> str:
    """Turn the body of a quoted literal into its text.

    ``\\\\ \\" \\n \\r \\t`` map to their characters. Any other backslash
    sequence is passed through as the two original characters, and a
    trailing lone backslash is kept.
    """
    if '\\' not in raw:
        return raw

    parts = []
    pos = 0
    length = len(raw)
    while True:
        slash = raw.find('\\', pos)
        if slash < 0:
            parts.append(raw[pos:])
            break
        parts.append(raw[pos:slash])

        if slash + 1 >= length:
            parts.append('\\')
            break

        follower = raw[slash + 1]
        parts.append(UNESCAPE_SEQUENCES.get(follower, '\\' + follower))
        pos = slash + 2

    return ''.join(parts)


def escape(text: str) -> str:
    """Escape text for placement between double quotes."""
    if not _NEEDS_ESCAPE.search(text):
        return text
    return _NEEDS_ESCAPE.sub(lambda match: ESCAPE_SEQUENCES[match.group(0)], text)


def quote(text: str) -> str:
    """Escape text and wrap it in double quotes"""
    return f'"{escape(text)}"'
