"""
Clausewitz Script Parser/Serializer

Parses grand-strategy game script files into a typed, immutable document
model and serializes documents back to text in the games' own layout.

    >>> from clausewitz_script import parse, serialize
    >>> doc = parse("x = { 1 2 3 }")
    >>> print(serialize(doc), end="")
    x = {
    	1 2 3
    }
"""

from .config import (
    CONVENTIONS,
    SPACE_CONVENTION,
    TAB_CONVENTION,
    Convention,
    FormatterConfig,
    ParserConfig,
)
from .errors import GrammarError, MarshalError, ParseError, ResourceError
from .models import (
    Array,
    Block,
    Boolean,
    Comment,
    Date,
    Document,
    Identifier,
    LocalisationFile,
    LocalisationPair,
    Number,
    Operator,
    Pair,
    String,
)
from .services.localisation import (
    parse_localisation,
    parse_localisation_file,
    serialize_localisation,
    serialize_localisation_file,
)
from .services.marshal import from_data, from_json, localisation_from_data, localisation_to_data, to_data, to_json
from .services.parser import ScriptParser, parse, parse_file
from .services.serializer import ScriptSerializer, serialize, serialize_to_file
from .utils.escape import escape, unescape

__version__ = '0.1.0'
