"""
Script Serializer

Renders a Document back to script text:

- one item per line, ``key <op> value`` with single spaces around the operator
- Blocks open with ``{`` on the pair line, children one level deeper, and
  close with ``}`` on its own line at the pair's indentation
- Arrays pack their atoms onto lines up to a width budget (soft wrap); an
  atom is never split, comments and nested groups always get their own lines
- strings are re-escaped and quoted; dates with an hour are quoted

Serialization has no error path for documents built by the parser.
"""
from decimal import Decimal
from pathlib import Path
from typing import List, Union

from ..config import FormatterConfig
from ..models.ast import Array, Block, Boolean, Comment, Date, Document, Identifier, Number, Pair, String
from ..constants import BOOLEAN_FALSE, BOOLEAN_TRUE
from ..utils.dates import format_date
from ..utils.escape import quote


def format_number(value: float) -> str:
    """Shortest decimal spelling: ``1.0`` -> ``1``, ``0.5`` -> ``0.5``, no exponent"""
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if 'e' in text:
        text = format(Decimal(text), 'f')
    return text


def format_key(key) -> str:
    if isinstance(key, Identifier):
        return key.name
    if isinstance(key, Number):
        return format_number(key.value)
    return format_date(key)


def format_scalar(value) -> str:
    """Render an atom (string, identifier, number, boolean or date)"""
    if isinstance(value, String):
        return quote(value.text)
    if isinstance(value, Identifier):
        return value.name
    if isinstance(value, Number):
        return format_number(value.value)
    if isinstance(value, Boolean):
        return BOOLEAN_TRUE if value.value else BOOLEAN_FALSE
    if isinstance(value, Date):
        return format_date(value)
    raise TypeError(f"Not a scalar value: {value!r}")


def text_width(text: str) -> int:
    """Width of text for line wrapping, in UTF-8 bytes"""
    return len(text.encode('utf-8'))


class ScriptSerializer:
    """Serializer for Clausewitz script documents"""

    def __init__(self, config: FormatterConfig = None):
        self.config = config or FormatterConfig()

    def serialize_to_string(self, document: Document) -> str:
        """Serialize a document to script text"""
        out: List[str] = []
        for item in document:
            self._render_item(item, 0, out)
        return ''.join(out)

    def serialize_to_file(self, document: Document, filepath: Union[str, Path]):
        """Serialize a document to a UTF-8 file"""
        text = self.serialize_to_string(document)
        Path(filepath).write_text(text, encoding='utf-8')

    def _indent(self, level: int) -> str:
        return self.config.indent * level

    def _render_item(self, item, level: int, out: List[str]):
        prefix = self._indent(level)

        if isinstance(item, Comment):
            out.append(f"{prefix}{item.text}\n")
        elif isinstance(item, Pair):
            out.append(f"{prefix}{format_key(item.key)} {item.operator.value} ")
            self._render_value(item.value, level, out)
        else:
            out.append(prefix)
            self._render_value(item, level, out)

    def _render_value(self, value, level: int, out: List[str]):
        """Render a value that starts mid-line; always ends with a newline"""
        if isinstance(value, Block):
            out.append("{\n")
            for child in value.items:
                self._render_item(child, level + 1, out)
            out.append(f"{self._indent(level)}}}\n")
        elif isinstance(value, Array):
            self._render_array(value, level, out)
        else:
            out.append(format_scalar(value))
            out.append("\n")

    def _render_array(self, array: Array, level: int, out: List[str]):
        inner = self._indent(level + 1)
        budget = self.config.line_width

        pending: List[str] = []
        pending_width = 0

        out.append("{\n")
        for entry in array.values:
            if isinstance(entry, (Comment, Array, Block)):
                if pending:
                    out.append(f"{inner}{' '.join(pending)}\n")
                    pending, pending_width = [], 0
                if isinstance(entry, Comment):
                    out.append(f"{inner}{entry.text}\n")
                else:
                    out.append(inner)
                    self._render_value(entry, level + 1, out)
                continue

            text = format_scalar(entry)
            width = text_width(text)
            if pending and pending_width + 1 + width > budget:
                out.append(f"{inner}{' '.join(pending)}\n")
                pending, pending_width = [], 0

            if pending:
                pending_width += 1
            pending.append(text)
            pending_width += width

        if pending:
            out.append(f"{inner}{' '.join(pending)}\n")
        out.append(f"{self._indent(level)}}}\n")


# Utility functions for easy use

def serialize(document: Document, config: FormatterConfig = None) -> str:
    """Serialize a document to script text"""
    return ScriptSerializer(config).serialize_to_string(document)


def serialize_to_file(document: Document, filepath: Union[str, Path], config: FormatterConfig = None):
    """Serialize a document to a file"""
    ScriptSerializer(config).serialize_to_file(document, filepath)
