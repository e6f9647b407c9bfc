"""
Clausewitz Script Document Model

Immutable node classes for parsed script files. Each variant family is a
closed set of classes rather than a class hierarchy:

- Item:       Pair | <value> | Comment
- Key:        Identifier | Number | Date
- Value:      String | Identifier | Number | Boolean | Date | Array | Block
- ArrayEntry: <value> | Comment

Containers hold tuples so a built tree cannot be mutated.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..constants import OPERATOR_SPELLINGS


class Operator(Enum):
    """Assignment or comparison between a key and its value"""
    EQ = '='
    LE = '<='
    GE = '>='
    LT = '<'
    GT = '>'

    @classmethod
    def from_text(cls, text: str) -> Optional['Operator']:
        """Look up an operator by its spelling, None if unknown"""
        name = OPERATOR_SPELLINGS.get(text)
        return cls[name] if name else None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Date:
    """Calendar date ``Y.M.D`` with an optional hour (``Y.M.D.H``)."""
    year: int
    month: int
    day: int
    hour: Optional[int] = None


@dataclass(frozen=True)
class String:
    """Quoted string, stored unescaped"""
    text: str


@dataclass(frozen=True)
class Identifier:
    """Bareword token"""
    name: str


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Comment:
    """Line comment including its leading ``#``, verbatim"""
    text: str


@dataclass(frozen=True)
class Array:
    """Brace group holding only plain values (and possibly comments)."""
    values: Tuple['ArrayEntry', ...] = ()

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)


@dataclass(frozen=True)
class Block:
    """Brace group holding at least one pair, children kept in source order."""
    items: Tuple['Item', ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def pairs(self):
        """Iterate over the Pair children only"""
        return (item for item in self.items if isinstance(item, Pair))


Key = Union[Identifier, Number, Date]
Scalar = Union[String, Identifier, Number, Boolean, Date]
Value = Union[String, Identifier, Number, Boolean, Date, Array, Block]
ArrayEntry = Union[Value, Comment]

KEY_TYPES = (Identifier, Number, Date)
SCALAR_TYPES = (String, Identifier, Number, Boolean, Date)
COMPOSITE_TYPES = (Array, Block)
VALUE_TYPES = SCALAR_TYPES + COMPOSITE_TYPES


@dataclass(frozen=True)
class Pair:
    """``key <operator> value``"""
    key: Key
    operator: Operator
    value: Value


Item = Union[Pair, Value, Comment]


@dataclass(frozen=True)
class Document:
    """Ordered top-level items produced by one parse call."""
    items: Tuple[Item, ...] = ()

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]


def is_value(node) -> bool:
    """True if node is one of the Value variants"""
    return isinstance(node, VALUE_TYPES)
