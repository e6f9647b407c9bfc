"""
Script Parser

Front door for turning script text into a Document: grammar recognition
followed by AST building. Each call owns its working state, so one parser
instance (or the module-level functions) can be used from many threads.
"""
import logging
from pathlib import Path
from typing import Union

from ..config import ParserConfig
from ..models.ast import Document
from .builder import ASTBuilder
from .grammar import recognize

logger = logging.getLogger(__name__)


class ScriptParser:
    """Parser for Clausewitz script files"""

    def __init__(self, config: ParserConfig = None):
        self.config = config or ParserConfig()
        self._builder = ASTBuilder(self.config)

    def parse_string(self, text: str) -> Document:
        """Parse script text and return its Document

        Raises:
            GrammarError: text does not match the grammar
            ResourceError: nesting is deeper than config.max_depth
        """
        tree = recognize(text)
        return self._builder.build(tree)

    def parse_file(self, filepath: Union[str, Path]) -> Document:
        """Read a UTF-8 file (BOM tolerated) and parse it"""
        filepath = Path(filepath)
        text = filepath.read_text(encoding='utf-8-sig')
        logger.debug("Parsing %s (%d chars)", filepath, len(text))
        return self.parse_string(text)


# Utility functions for easy use

def parse(text: str, config: ParserConfig = None) -> Document:
    """Parse script text into a Document"""
    return ScriptParser(config).parse_string(text)


def parse_file(filepath: Union[str, Path], config: ParserConfig = None) -> Document:
    """Parse a script file into a Document"""
    return ScriptParser(config).parse_file(filepath)
