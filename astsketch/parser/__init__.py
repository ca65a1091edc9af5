"""
astsketch Parser Package

Implements a table-driven precedence-climbing parser for expressions and the
immutable node model shared by every stage.

Key Features:
- One parser, parameterized by a precedence table per dialect
- Creation-order node ids from a per-call NodeFactory
- Best-effort trees for malformed input, with warnings instead of errors

Author: astsketch maintainers
"""

from .ast_nodes import Node, NodeKind, NodeFactory, format_tree
from .parser import (
    Parser, PrecedenceLevel, LINE_LEVELS, ARITHMETIC_LEVELS, UNARY_OPERATORS,
    parse_text, parse_expression,
)
from .errors import ParseWarning, UnknownDialectError, PARSER_WARNING_CODES

__all__ = [
    # Core parser
    "Parser",
    "PrecedenceLevel",
    "LINE_LEVELS",
    "ARITHMETIC_LEVELS",
    "UNARY_OPERATORS",
    "parse_text",
    "parse_expression",

    # Nodes
    "Node", "NodeKind", "NodeFactory", "format_tree",

    # Diagnostics
    "ParseWarning", "UnknownDialectError", "PARSER_WARNING_CODES",
]
