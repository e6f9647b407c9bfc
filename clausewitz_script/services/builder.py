"""
AST Builder

Walks the Lark parse tree produced by the grammar recognizer and builds the
typed document model. Grammar-only wrapper nodes (``item``, ``value``) are
unwrapped on the way down. Brace groups go through the structural
classifier, quoted strings through the unescaper and the date heuristic.

Recursion follows brace nesting. Each level costs two frames
(value -> item -> value), and the depth is checked against
``ParserConfig.max_depth`` before descending. A limit set higher than the
interpreter stack allows still ends in ResourceError, not RecursionError.
"""
import logging

from lark import Token, Tree

from ..config import ParserConfig
from ..errors import GrammarError, ResourceError
from ..models.ast import Boolean, Comment, Document, Identifier, Number, Operator, Pair, String
from ..utils.dates import match_quoted_date, parse_date
from ..utils.escape import unescape
from .classifier import classify

logger = logging.getLogger(__name__)

_WRAPPERS = ('item', 'value')


def _unwrap(node: Tree) -> Tree:
    while node.data in _WRAPPERS:
        node = node.children[0]
    return node


def build_key(node: Tree):
    """Build a Key from a ``key`` node (identifier, number or date token)

    Raises:
        GrammarError: a quoted key that is not a date
    """
    token: Token = node.children[0]
    if token.type == 'NUMBER':
        return Number(float(token))
    if token.type == 'DATE':
        return parse_date(str(token))
    if token.type == 'STRING':
        # Dates with an hour are written quoted, in key position too
        date = match_quoted_date(unescape(str(token)[1:-1]))
        if date is None:
            raise GrammarError(f"Quoted key {str(token)!r} is not a date",
                               token.line, token.column)
        return date
    # IDENTIFIER, and yes/no used as a key name
    return Identifier(str(token))


def build_operator(token: Token) -> Operator:
    """Map operator text to an Operator, falling back to ``=``"""
    operator = Operator.from_text(str(token))
    if operator is None:
        logger.warning("Unknown operator %r, treating it as '='", str(token))
        return Operator.EQ
    return operator


def build_string(token: Token):
    """Build a String, or a Date when the quoted text looks like one"""
    text = unescape(str(token)[1:-1])
    date = match_quoted_date(text)
    if date is not None:
        return date
    return String(text)


def build_scalar(node: Tree):
    """Build an atom from a concrete value node"""
    kind = node.data
    token: Token = node.children[0]
    if kind == 'string':
        return build_string(token)
    if kind == 'number':
        return Number(float(token))
    if kind == 'date':
        return parse_date(str(token))
    if kind == 'boolean':
        return Boolean(str(token) == 'yes')
    return Identifier(str(token))


class ASTBuilder:
    """Converts parse trees into Documents according to a ParserConfig"""

    def __init__(self, config: ParserConfig = None):
        self.config = config or ParserConfig()

    def build(self, tree: Tree) -> Document:
        """Build a Document from a ``file`` parse tree

        Raises:
            ResourceError: nesting is deeper than config.max_depth, or deep
                enough to exhaust the interpreter stack first
        """
        try:
            items = tuple(self._build_item(child, 0) for child in tree.children)
        except RecursionError as e:
            logger.debug("Recursion limit hit while building (max_depth=%d)", self.config.max_depth)
            raise ResourceError(None, self.config.max_depth) from e
        logger.debug("Built document with %d top-level items", len(items))
        return Document(items)

    def _build_item(self, node: Tree, depth: int):
        node = _unwrap(node)
        kind = node.data

        if kind == 'pair':
            key_node, op_token, value_node = node.children
            return Pair(build_key(key_node), build_operator(op_token),
                        self._build_value(value_node, depth))

        if kind == 'comment':
            return Comment(str(node.children[0]))

        return self._build_value(node, depth)

    def _build_value(self, node: Tree, depth: int):
        node = _unwrap(node)
        if node.data != 'block':
            return build_scalar(node)

        depth += 1
        if depth > self.config.max_depth:
            raise ResourceError(depth, self.config.max_depth)

        children = []
        for child in node.children:
            children.append(self._build_item(child, depth))
        return classify(children, self.config.comments_force_block)
