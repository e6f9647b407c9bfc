"""Parser and formatter configuration.

Two conventions exist for script files and neither is assumed by the code:

- indentation: tabs (``TAB_CONVENTION``) or four spaces (``SPACE_CONVENTION``)
- a comment inside an otherwise pair-less brace group either stays in an
  Array (``comments_force_block=False``) or turns the group into a Block
  (``comments_force_block=True``)

The defaults pick tabs and comment-tolerant arrays.
"""
from dataclasses import dataclass

from .constants import ARRAY_LINE_WIDTH, DEFAULT_INDENT, DEFAULT_MAX_DEPTH, SPACE_INDENT, TAB_INDENT


@dataclass(frozen=True)
class ParserConfig:
    """Options that affect how text becomes a document."""
    comments_force_block: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")


@dataclass(frozen=True)
class FormatterConfig:
    """Options that affect how a document becomes text."""
    indent: str = DEFAULT_INDENT
    line_width: int = ARRAY_LINE_WIDTH


@dataclass(frozen=True)
class Convention:
    """A matched pair of parser and formatter settings."""
    name: str
    parser: ParserConfig
    formatter: FormatterConfig


TAB_CONVENTION = Convention(
    name='tab',
    parser=ParserConfig(comments_force_block=False),
    formatter=FormatterConfig(indent=TAB_INDENT),
)

SPACE_CONVENTION = Convention(
    name='spaces',
    parser=ParserConfig(comments_force_block=True),
    formatter=FormatterConfig(indent=SPACE_INDENT),
)

CONVENTIONS = {
    TAB_CONVENTION.name: TAB_CONVENTION,
    SPACE_CONVENTION.name: SPACE_CONVENTION,
}
