"""
Clausewitz Script Parser - Constants and Configuration Defaults

This module contains the constant values used throughout the package:
- Indentation conventions (tab and fixed-width spaces)
- Array soft-wrap width budget
- Nesting depth limit for the AST builder
- Escape table shared by the script and localisation formats
- Operator spellings and boolean literals
"""

# ======================================================================
# FORMATTING
# ======================================================================

# The two indentation conventions seen in script files.
TAB_INDENT = '\t'
SPACE_INDENT = '    '

DEFAULT_INDENT = TAB_INDENT

# Width budget for packing array elements onto one line.
# Measured in UTF-8 bytes and excluding the leading indentation.
ARRAY_LINE_WIDTH = 120

# ======================================================================
# PARSING LIMITS
# ======================================================================

# Maximum brace nesting accepted by the AST builder. Each level costs a few
# interpreter frames in the builder and serializer, so this stays well below
# the default recursion limit.
DEFAULT_MAX_DEPTH = 256

# ======================================================================
# LITERALS
# ======================================================================

BOOLEAN_TRUE = 'yes'
BOOLEAN_FALSE = 'no'

# Operator spelling -> Operator member name
OPERATOR_SPELLINGS = {
    '=': 'EQ',
    '<=': 'LE',
    '>=': 'GE',
    '<': 'LT',
    '>': 'GT',
}

COMMENT_MARKER = '#'

UTF8_BOM = '\ufeff'

# ======================================================================
# ESCAPE TABLE
# ======================================================================
# Literal character -> escaped spelling inside a quoted string.
# Shared by script strings and localisation values.

ESCAPE_SEQUENCES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}

# Character following a backslash -> literal character
UNESCAPE_SEQUENCES = {
    '\\': '\\',
    '"': '"',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

# ======================================================================
# FILE DISCOVERY (CLI)
# ======================================================================

SCRIPT_SUFFIXES = ('.txt',)
LOCALISATION_SUFFIXES = ('.yml', '.yaml')
