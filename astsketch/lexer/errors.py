"""
Diagnostics for the astsketch tokenizer.

The tokenizer never fails: anything it cannot make sense of is still emitted
as a token. Suspicious input is reported as a warning instead, using the
same Diagnostic record the parser uses.

Author: astsketch maintainers
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """
    A single diagnostic (warning or info) about the input text.

    Positions are whole lines only: snippets are classified line by line,
    so there is no column or span. Severity never reaches "error" because
    nothing the parser meets is fatal.
    """
    message: str
    line: int                   # 1-based source line, 0 when unknown
    severity: str               # "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        code = f"[{self.code}] " if self.code else ""
        result = f"{severity_prefix}: {code}{self.message}\n"
        result += f"  --> line {self.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerWarning:
    """
    Represents a tokenizer warning.

    Warnings never stop tokenization.
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


LEXER_WARNING_CODES = {
    "L101": "String literal split by whitespace or operator glyph",
}


def create_split_literal_warning(lexeme: str, line: int = 0) -> LexerWarning:
    """Create a warning for a quoted literal the tokenizer broke apart."""
    return LexerWarning(
        message=f"Quoted literal starting at {lexeme!r} was split into several tokens",
        line=line,
        code="L101",
        help_text="The tokenizer has no quoting rules; whitespace and operator "
                  "glyphs inside quotes still separate tokens.",
        suggestions=["Avoid spaces and operators inside string literals"]
    )
