"""
Dialect registry for astsketch.

A dialect decides which tokenizer profile, operator table and statement
heuristics apply to a snippet. Dialects share all control flow; they only
select tables.

Author: astsketch maintainers
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple, Union

from .lexer.tokens import LexerProfile, SIMPLE_PROFILE, EXTENDED_PROFILE, CORE_KEYWORDS
from .parser.parser import (
    PrecedenceLevel, LINE_LEVELS, ARITHMETIC_LEVELS, UNARY_OPERATORS,
    LOGICAL_OR, LOGICAL_AND, EQUALITY, RELATIONAL, ADDITIVE, MULTIPLICATIVE,
)
from .parser.errors import UnknownDialectError


class Dialect(Enum):
    """Supported snippet dialects."""
    EXPRESSION = "expression"
    C = "c"
    PYTHON = "python"
    JAVA = "java"

    @property
    def is_line_oriented(self) -> bool:
        return self is not Dialect.EXPRESSION

    @classmethod
    def from_name(cls, name: Union[str, "Dialect"], strict: bool = True) -> Optional["Dialect"]:
        """
        Look up a dialect by name or alias.

        Args:
            name: Dialect member, value, or alias such as "c-like"
            strict: Raise UnknownDialectError for unknown names

        Returns:
            The dialect, or None for an unknown name when not strict
        """
        if isinstance(name, Dialect):
            return name
        key = str(name).strip().lower()
        dialect = DIALECT_ALIASES.get(key)
        if dialect is None and strict:
            raise UnknownDialectError(str(name), sorted(DIALECT_ALIASES))
        return dialect


DIALECT_ALIASES: Dict[str, Dialect] = {
    "expression": Dialect.EXPRESSION,
    "math": Dialect.EXPRESSION,
    "c": Dialect.C,
    "c-like": Dialect.C,
    "python": Dialect.PYTHON,
    "python-like": Dialect.PYTHON,
    "java": Dialect.JAVA,
    "java-like": Dialect.JAVA,
}


@dataclass(frozen=True)
class DialectSpec:
    """Tables and heuristics a dialect selects."""
    dialect: Dialect
    label: str
    lexer_profile: LexerProfile
    precedence_levels: Tuple[PrecedenceLevel, ...]
    unary_operators: FrozenSet[str]
    keywords: FrozenSet[str]
    type_keywords: FrozenSet[str] = frozenset()
    function_keywords: FrozenSet[str] = frozenset()
    function_header_endings: Tuple[str, ...] = (")", ";")
    default_return_type: str = "void"
    bare_parameters: bool = False
    block_opener: str = "{"
    sample: str = ""

    @property
    def line_terminators(self) -> str:
        """Characters stripped from the end of a line before parsing it."""
        return ";" + self.block_opener


BASE_TYPE_KEYWORDS = frozenset({"int", "float", "double", "char", "void", "bool", "string"})

CONTROL_KEYWORDS = frozenset({
    "if", "else", "elif", "while", "for", "return", "switch", "do", "case",
})

PYTHON_LEVELS: Tuple[PrecedenceLevel, ...] = (
    PrecedenceLevel("logical-or", LOGICAL_OR.operators | {"or"}),
    PrecedenceLevel("logical-and", LOGICAL_AND.operators | {"and"}),
    EQUALITY, RELATIONAL, ADDITIVE, MULTIPLICATIVE,
)


DIALECT_SPECS: Dict[Dialect, DialectSpec] = {
    Dialect.EXPRESSION: DialectSpec(
        dialect=Dialect.EXPRESSION,
        label="Expression Program",
        lexer_profile=SIMPLE_PROFILE,
        precedence_levels=ARITHMETIC_LEVELS,
        unary_operators=UNARY_OPERATORS,
        keywords=CORE_KEYWORDS,
        sample="(3 + 5) * 2 - sqrt(16) / 4",
    ),
    Dialect.C: DialectSpec(
        dialect=Dialect.C,
        label="C Program",
        lexer_profile=EXTENDED_PROFILE,
        precedence_levels=LINE_LEVELS,
        unary_operators=UNARY_OPERATORS,
        keywords=CORE_KEYWORDS | {"long", "short", "unsigned", "signed", "struct",
                                  "const", "switch", "case", "break", "continue"},
        type_keywords=BASE_TYPE_KEYWORDS | {"long", "short", "unsigned", "signed"},
        sample=(
            "int factorial(int n) {\n"
            "    if (n <= 1) {\n"
            "        return 1;\n"
            "    }\n"
            "    return n * factorial(n - 1);\n"
            "}"
        ),
    ),
    Dialect.PYTHON: DialectSpec(
        dialect=Dialect.PYTHON,
        label="PYTHON Program",
        lexer_profile=EXTENDED_PROFILE,
        precedence_levels=PYTHON_LEVELS,
        unary_operators=UNARY_OPERATORS | {"not"},
        keywords=CORE_KEYWORDS | {"elif", "and", "or", "not", "in", "is", "lambda",
                                  "pass", "break", "continue", "with", "yield"},
        type_keywords=BASE_TYPE_KEYWORDS,
        function_keywords=frozenset({"def"}),
        function_header_endings=(")", ";", ":"),
        default_return_type="None",
        bare_parameters=True,
        block_opener=":",
        sample=(
            "def fibonacci(n):\n"
            "    if n <= 1:\n"
            "        return n\n"
            "    return fibonacci(n-1) + fibonacci(n-2)"
        ),
    ),
    Dialect.JAVA: DialectSpec(
        dialect=Dialect.JAVA,
        label="JAVA Program",
        lexer_profile=EXTENDED_PROFILE,
        precedence_levels=LINE_LEVELS,
        unary_operators=UNARY_OPERATORS,
        keywords=CORE_KEYWORDS | {"long", "short", "byte", "boolean", "new", "final",
                                  "protected", "extends", "implements", "this"},
        type_keywords=BASE_TYPE_KEYWORDS | {"long", "short", "byte", "boolean"},
        sample=(
            "public class Calculator {\n"
            "    public int add(int a, int b) {\n"
            "        return a + b;\n"
            "    }\n"
            "}"
        ),
    ),
}


def get_dialect_spec(dialect: Union[str, Dialect]) -> DialectSpec:
    """
    Get the spec for a dialect member or name.

    Raises:
        UnknownDialectError: If a name matches no dialect
    """
    return DIALECT_SPECS[Dialect.from_name(dialect)]
