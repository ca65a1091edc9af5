"""
astsketch Package

A best-effort text-to-tree translator for code snippets. Given a snippet and
a dialect (a flat arithmetic-expression grammar, or a C-like, Python-like or
Java-like pseudo-language) it produces an immutable syntax tree whose nodes
carry both a structural role and a lexical category.

Architecture:
    astsketch/
    ├── lexer/           # Tokenization and lexeme categories
    ├── parser/          # Node model and precedence-climbing expression parser
    ├── classifier/      # Ordered line rules for statements
    ├── dialects.py      # Per-dialect tables
    ├── assembler.py     # Program tree grouping
    └── config.py        # Parser configuration

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Category, Lexer, tokenize, tokenize_extended, Diagnostic
from .parser import Node, NodeKind, NodeFactory, Parser, parse_expression, format_tree
from .parser import ParseWarning, UnknownDialectError
from .classifier import StatementClassifier, classify
from .dialects import Dialect, DialectSpec, get_dialect_spec
from .assembler import TreeAssembler, ParseResult, build, build_with_diagnostics
from .config import ParserConfig, get_parser_config

__all__ = [
    # Entry points
    "build",
    "build_with_diagnostics",
    "parse_expression",
    "classify",
    "tokenize",
    "tokenize_extended",

    # Core classes
    "TreeAssembler",
    "StatementClassifier",
    "Parser",
    "Lexer",
    "Node",
    "NodeKind",
    "NodeFactory",
    "Category",
    "Dialect",
    "DialectSpec",
    "get_dialect_spec",
    "ParserConfig",
    "get_parser_config",
    "ParseResult",
    "format_tree",

    # Diagnostics
    "Diagnostic",
    "ParseWarning",
    "UnknownDialectError",

    # Version info
    "__version__",
    "__license__",
]
