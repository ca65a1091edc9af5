"""
Diagnostics for the astsketch parser.

The parser is total over its input: malformed text degrades into a
best-effort tree. Every degradation is recorded as a ParseWarning so callers
who care can see what was guessed, while callers who don't always get a tree.

Author: astsketch maintainers
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic


class ParseWarning:
    """
    Represents a recoverable parse problem.

    Never raised; collected on the component that produced it.
    """

    def __init__(
        self,
        message: str,
        line: int = 0,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ParseWarning({self.diagnostic.code}, {self.diagnostic.message!r})"


class UnknownDialectError(ValueError):
    """Raised by strict dialect lookup for a name no dialect answers to."""

    def __init__(self, name: str, known: List[str]):
        super().__init__(f"Unknown dialect {name!r}; expected one of {', '.join(known)}")
        self.name = name
        self.known = known


# Parser warning codes for categorization
PARSER_WARNING_CODES = {
    "P101": "Missing operand",
    "P102": "Unterminated group",
    "P103": "Trailing tokens ignored",
    "P104": "Empty expression",
    "P105": "Unrecognized line dropped",
    "P106": "Unknown dialect, default used",
    "P107": "Expression kept as raw text",
    "P108": "Nesting too deep",
}


# Helper functions for creating common parser warnings

def create_missing_operand_warning(operator: str, line: int = 0) -> ParseWarning:
    """Create a warning for an operator without an operand."""
    return ParseWarning(
        message=f"Operator '{operator}' is missing an operand",
        line=line,
        code="P101",
        help_text="The operator node was built with the operands that were found.",
        suggestions=["Ensure all operators have operands"]
    )


def create_unterminated_group_warning(opener: str, line: int = 0) -> ParseWarning:
    """Create a warning for an opening delimiter that was never closed."""
    closing = {"(": ")", "[": "]", "{": "}"}.get(opener, opener)
    return ParseWarning(
        message=f"Unclosed delimiter '{opener}'",
        line=line,
        code="P102",
        help_text="Everything up to the end of the input was taken as the group's content.",
        suggestions=[f"Add a closing '{closing}'"]
    )


def create_trailing_tokens_warning(tokens: List[str], line: int = 0) -> ParseWarning:
    """Create a warning for tokens left over after a complete expression."""
    shown = " ".join(tokens[:5]) + (" ..." if len(tokens) > 5 else "")
    return ParseWarning(
        message=f"Ignored trailing tokens: {shown}",
        line=line,
        code="P103",
        help_text="Only the first complete expression is kept.",
    )


def create_empty_expression_warning(line: int = 0) -> ParseWarning:
    """Create a warning for an expression with no tokens."""
    return ParseWarning(
        message="Empty expression",
        line=line,
        code="P104",
        help_text="An empty identifier was used in its place.",
    )


def create_dropped_line_warning(text: str, line: int = 0) -> ParseWarning:
    """Create a warning for a line that produced no node."""
    return ParseWarning(
        message=f"Could not interpret line {text!r}; it was left out of the tree",
        line=line,
        code="P105",
    )


def create_unknown_dialect_warning(name: str, fallback: str) -> ParseWarning:
    """Create a warning for an unknown dialect name."""
    return ParseWarning(
        message=f"Unknown dialect {name!r}, parsed as {fallback!r}",
        code="P106",
        suggestions=["Use one of: expression, c, python, java"]
    )


def create_raw_text_warning(text: str, line: int = 0) -> ParseWarning:
    """Create a warning for an expression the grammar could not structure."""
    return ParseWarning(
        message=f"Could not structure {text!r}; kept as raw text",
        line=line,
        code="P107",
    )


def create_nesting_too_deep_warning(limit: int, line: int = 0) -> ParseWarning:
    """Create a warning for input nested beyond the parser's limit."""
    return ParseWarning(
        message=f"Expression nested deeper than {limit} levels; the nested part was skipped",
        line=line,
        code="P108",
        help_text="An empty identifier stands in for the skipped operand.",
    )
