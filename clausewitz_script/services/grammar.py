"""
Script Grammar Recognizer

Tokenizes and structurally validates script text with a Lark LALR grammar,
producing an untyped parse tree. Any mismatch is reported as a GrammarError
for the whole document; there is no partial-tree recovery.

Terminal priorities resolve the overlap between barewords and typed literals:
DATE beats NUMBER beats IDENTIFIER, and BOOLEAN beats IDENTIFIER. The typed
terminals only match when they span the whole bareword, so ``12abc``,
``1.5.x`` and ``yesterday`` lex as identifiers.
"""
import logging

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from ..constants import UTF8_BOM
from ..errors import GrammarError

logger = logging.getLogger(__name__)

# Characters that end a bareword
_WORD_END = r'(?![^\s={}#"<>])'

SCRIPT_GRAMMAR = r"""
    file: item*

    item: pair
        | value
        | comment

    pair: key OPERATOR value

    key: IDENTIFIER
       | NUMBER
       | DATE
       | BOOLEAN
       | STRING

    value: block
         | string
         | identifier
         | number
         | date
         | boolean

    block: "{" item* "}"

    string: STRING
    identifier: IDENTIFIER
    number: NUMBER
    date: DATE
    boolean: BOOLEAN
    comment: COMMENT

    OPERATOR: /<=|>=|[<>=]/
    STRING: /"(?:[^"\\]|\\.)*"/s
    DATE.4: /\d+\.\d+\.\d+(?:\.\d+)?WORD_END/
    NUMBER.3: /[+-]?(?:\d+(?:\.\d+)?|\.\d+)WORD_END/
    BOOLEAN.3: /(?:yes|no)WORD_END/
    IDENTIFIER: /[^\s={}#"<>]+/
    COMMENT: /#[^\r\n]*/

    %ignore /\s+/
""".replace('WORD_END', _WORD_END)

# Readable names for terminals in error messages
_TOKEN_NAMES = {
    'LBRACE': "'{'",
    'RBRACE': "'}'",
    'OPERATOR': 'operator',
    'STRING': 'string',
    'DATE': 'date',
    'NUMBER': 'number',
    'BOOLEAN': 'boolean',
    'IDENTIFIER': 'identifier',
    'COMMENT': 'comment',
    '$END': 'end of input',
}

_parser = Lark(
    SCRIPT_GRAMMAR,
    start='file',
    parser='lalr',
    lexer='basic',
    propagate_positions=False,
    maybe_placeholders=False,
)


def strip_bom(text: str) -> str:
    """Drop a leading UTF-8 byte order mark"""
    if text.startswith(UTF8_BOM):
        return text[len(UTF8_BOM):]
    return text


def _expected_names(expected) -> list:
    return [_TOKEN_NAMES.get(name, name) for name in expected or ()]


def to_grammar_error(e: UnexpectedInput) -> GrammarError:
    """Translate a Lark exception into a GrammarError"""
    line = getattr(e, 'line', None)
    column = getattr(e, 'column', None)
    if line is not None and line < 0:
        line = column = None

    if isinstance(e, UnexpectedCharacters):
        message = f"Invalid token starting with {e.char!r}"
        expected = _expected_names(e.allowed)
    elif isinstance(e, UnexpectedEOF):
        message = "Unexpected end of input"
        expected = _expected_names(e.expected)
    elif isinstance(e, UnexpectedToken):
        name = _TOKEN_NAMES.get(e.token.type, e.token.type)
        if e.token.type == '$END':
            message = "Unexpected end of input"
        elif e.token.type in ('LBRACE', 'RBRACE'):
            message = f"Unexpected {name}"
        else:
            message = f"Unexpected {name} {str(e.token)!r}"
        expected = _expected_names(e.expected)
    else:
        message = str(e)
        expected = []

    return GrammarError(message, line, column, expected)


def recognize(text: str, parser: Lark = _parser) -> Tree:
    """Parse script text into a Lark parse tree rooted at ``file``.

    Raises:
        GrammarError: text is not valid script
    """
    try:
        tree = parser.parse(strip_bom(text))
    except UnexpectedInput as e:
        error = to_grammar_error(e)
        logger.debug("Grammar error: %s", error)
        raise error from e
    return tree
