"""
astsketch Lexer Package

Turns raw snippet text into ordered lexeme strings and classifies lexemes
into presentation categories.

Key Features:
- Simple profile for flat arithmetic expressions
- Extended profile with two-character operators for line dialects
- Never fails; suspicious input is reported as warnings

Author: astsketch maintainers
"""

from .tokens import (
    Category, LexerProfile, SIMPLE_PROFILE, EXTENDED_PROFILE,
    classify_lexeme, is_number, is_quoted, is_identifier,
)
from .lexer import Lexer, tokenize, tokenize_extended
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_extended",
    "Category",
    "LexerProfile",
    "SIMPLE_PROFILE",
    "EXTENDED_PROFILE",
    "classify_lexeme",
    "is_number",
    "is_quoted",
    "is_identifier",
    "Diagnostic",
    "LexerWarning",
]
