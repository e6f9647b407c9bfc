"""Exception types raised by the parser and the marshaling layer."""

from typing import Optional, Sequence


class ParseError(Exception):
    """Base class for failures that abort parsing of a whole document."""


class GrammarError(ParseError):
    """Text does not match the grammar.

    Carries the 1-based line/column of the offending input and, when the
    parser knows it, the set of token names it expected there.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None,
                 expected: Optional[Sequence[str]] = None):
        self.message = message
        self.line = line
        self.column = column
        self.expected = tuple(sorted(expected)) if expected else ()
        super().__init__(self._format())

    @property
    def location(self):
        """(line, column) tuple, or None when unknown"""
        if self.line is None:
            return None
        return (self.line, self.column)

    def _format(self) -> str:
        text = self.message
        if self.line is not None:
            text = f"{text} at line {self.line}, column {self.column}"
        if self.expected:
            text = f"{text} (expected one of: {', '.join(self.expected)})"
        return text


class ResourceError(ParseError):
    """Document nesting exceeds the configured maximum depth.

    ``depth`` is None when the interpreter stack ran out before the
    configured limit was reached.
    """

    def __init__(self, depth: Optional[int], limit: int):
        self.depth = depth
        self.limit = limit
        if depth is None:
            message = f"Nesting exhausted the interpreter stack before reaching maximum depth of {limit}"
        else:
            message = f"Nesting depth {depth} exceeds maximum of {limit}"
        super().__init__(message)


class MarshalError(ValueError):
    """Generic structured data does not describe a valid document."""
