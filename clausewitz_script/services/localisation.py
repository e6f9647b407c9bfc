"""
Localisation file parser/serializer

Localisation files are line oriented and unrelated to the script grammar:

    l_english:
     KEY:0 "Text with \\"escapes\\""
     # comment
     OTHER_KEY: "no version number"

The only thing shared with script parsing is the escape table. Values are
taken greedily up to the last double quote on the line, because game files
routinely contain unescaped quotes inside values.

Comments may also precede the header. They are kept as the first items, so
they are written back just below the header.
"""
import logging
from pathlib import Path
from typing import Union

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from ..constants import COMMENT_MARKER, UTF8_BOM
from ..models.ast import Comment
from ..models.localisation import LocalisationFile, LocalisationPair
from ..utils.escape import quote, unescape
from .grammar import strip_bom, to_grammar_error

logger = logging.getLogger(__name__)

LOCALISATION_GRAMMAR = r"""
    file: comment* header item*

    header: LANGUAGE ":"

    item: pair
        | comment

    pair: KEY ":" VERSION? VALUE
    comment: COMMENT

    LANGUAGE: /l_[A-Za-z_]+/
    KEY: /[^\s:"#]+/
    VERSION: /\d+/
    VALUE: /"[^\r\n]*"/
    COMMENT: /#[^\r\n]*/

    %ignore /\s+/
"""

_parser = Lark(
    LOCALISATION_GRAMMAR,
    start='file',
    parser='lalr',
    lexer='contextual',
    maybe_placeholders=False,
)


def _build_pair(node: Tree) -> LocalisationPair:
    key = None
    version = None
    value = ''
    for token in node.children:
        if token.type == 'KEY':
            key = str(token)
        elif token.type == 'VERSION':
            version = int(token)
        elif token.type == 'VALUE':
            value = unescape(str(token)[1:-1])
        else:
            logger.debug("Ignoring token %s %r in localisation pair", token.type, str(token))
    return LocalisationPair(key=key, value=value, version=version)


def parse_localisation(text: str) -> LocalisationFile:
    """Parse localisation text

    Raises:
        GrammarError: text is not a valid localisation file
    """
    try:
        tree = _parser.parse(strip_bom(text))
    except UnexpectedInput as e:
        raise to_grammar_error(e) from e

    language = None
    items = []
    for child in tree.children:
        if child.data == 'header':
            language = str(child.children[0])
            continue
        node = child.children[0] if child.data == 'item' else child
        if node.data == 'pair':
            items.append(_build_pair(node))
        else:
            items.append(Comment(str(node.children[0])))

    logger.debug("Parsed %s localisation with %d items", language, len(items))
    return LocalisationFile(language, tuple(items))


def parse_localisation_file(filepath: Union[str, Path]) -> LocalisationFile:
    return parse_localisation(Path(filepath).read_text(encoding='utf-8-sig'))


def _serialize_item(item) -> str:
    if isinstance(item, Comment):
        if item.text.startswith(COMMENT_MARKER):
            return f" {item.text}\n"
        return f" {COMMENT_MARKER} {item.text}\n"

    version = '' if item.version is None else str(item.version)
    return f" {item.key}:{version} {quote(item.value)}\n"


def serialize_localisation(loc: LocalisationFile) -> str:
    """Serialize a localisation file, BOM and header first"""
    parts = [UTF8_BOM, loc.language, ":\n"]
    parts.extend(_serialize_item(item) for item in loc.items)
    return ''.join(parts)


def serialize_localisation_file(loc: LocalisationFile, filepath: Union[str, Path]):
    # utf-8, not utf-8-sig: the BOM is already part of the text
    Path(filepath).write_text(serialize_localisation(loc), encoding='utf-8')
