"""
Token tables for the astsketch tokenizer.

This module defines the lexical side of the translator:
- Lexeme categories (keyword, operator, identifier, constant)
- Operator glyph tables for the simple and extended tokenizer profiles
- Keyword and literal-word lookup tables
- Regex patterns shared by the tokenizer and the expression parser

Author: astsketch maintainers
"""

import re
from enum import Enum
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple


class Category(Enum):
    """
    Lexical classification of a lexeme.

    Used for presentation only; the parser never branches on it.
    """
    KEYWORD = "keyword"
    OPERATOR = "operator"
    IDENTIFIER = "identifier"
    CONSTANT = "constant"


# ========================================================================
# Patterns
# ========================================================================

NUMBER_PATTERN = re.compile(r'^\d+(\.\d+)?$')
QUOTED_PATTERN = re.compile(r'^(".*"|\'.*\')$', re.DOTALL)

# Dotted names are accepted so member calls (System.out.println) stay one callee
IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$')


# ========================================================================
# Glyph tables
# ========================================================================

# Single glyphs split by the flat-expression tokenizer
SIMPLE_GLYPHS: FrozenSet[str] = frozenset("+-*/()^,")

# Extended profile: two-character operators are matched before single glyphs
EXTENDED_DOUBLE_GLYPHS: Tuple[str, ...] = (
    "==", "!=", "<=", ">=", "&&", "||", "++", "--",
    "+=", "-=", "*=", "/=", "%=",
)
EXTENDED_GLYPHS: FrozenSet[str] = frozenset("+-*/%()^<>=!,;{}[]")


@dataclass(frozen=True)
class LexerProfile:
    """Glyph tables a Lexer splits on."""
    name: str
    single_glyphs: FrozenSet[str]
    double_glyphs: Tuple[str, ...] = ()


SIMPLE_PROFILE = LexerProfile("simple", SIMPLE_GLYPHS)
EXTENDED_PROFILE = LexerProfile("extended", EXTENDED_GLYPHS, EXTENDED_DOUBLE_GLYPHS)


# ========================================================================
# Keyword tables
# ========================================================================

# Keywords recognised in every dialect (matched case-insensitively)
CORE_KEYWORDS: FrozenSet[str] = frozenset({
    "int", "float", "double", "char", "void", "bool", "string",
    "if", "else", "while", "for", "return",
    "def", "class", "public", "private", "static",
    "import", "from", "as",
})

# Words that parse as constants rather than identifiers
LITERAL_WORDS: FrozenSet[str] = frozenset({
    "true", "false", "null", "True", "False", "None",
})

# Everything the category lookup treats as an operator
OPERATORS: FrozenSet[str] = frozenset({
    "+", "-", "*", "/", "=", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!",
    "%", "++", "--", "+=", "-=", "*=", "/=", "%=", "^",
    "(", ")", "{", "}", "[", "]", ";", ",",
})


def is_number(lexeme: str) -> bool:
    """Check if lexeme is a numeric literal."""
    return NUMBER_PATTERN.match(lexeme) is not None


def is_quoted(lexeme: str) -> bool:
    """Check if lexeme is a quoted string or character literal."""
    return len(lexeme) >= 2 and QUOTED_PATTERN.match(lexeme) is not None


def is_identifier(lexeme: str) -> bool:
    """Check if lexeme matches the identifier pattern."""
    return IDENTIFIER_PATTERN.match(lexeme) is not None


def classify_lexeme(lexeme: str, keywords: Iterable[str] = CORE_KEYWORDS) -> Category:
    """
    Classify a lexeme into its presentation category.

    Args:
        lexeme: Raw token text
        keywords: Keyword set of the active dialect

    Returns:
        Category of the lexeme
    """
    if is_number(lexeme) or is_quoted(lexeme) or lexeme in LITERAL_WORDS:
        return Category.CONSTANT
    if lexeme.lower() in {k.lower() for k in keywords}:
        return Category.KEYWORD
    if lexeme in OPERATORS:
        return Category.OPERATOR
    return Category.IDENTIFIER
