from .ast import (
    Array,
    Block,
    Boolean,
    Comment,
    Date,
    Document,
    Identifier,
    Number,
    Operator,
    Pair,
    String,
)
from .localisation import LocalisationFile, LocalisationPair

__all__ = [
    'Array', 'Block', 'Boolean', 'Comment', 'Date', 'Document', 'Identifier',
    'Number', 'Operator', 'Pair', 'String', 'LocalisationFile', 'LocalisationPair',
]
