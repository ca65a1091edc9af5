"""
astsketch Lexer - splits raw text into lexeme strings

Deliberately simple: a single left-to-right pass with a pending buffer.
Whitespace flushes the buffer, an operator glyph flushes the buffer and is
emitted on its own. No lookahead beyond the current character (plus one for
two-character operators in the extended profile), no string quoting.
"""

from typing import List

from .tokens import LexerProfile, SIMPLE_PROFILE, EXTENDED_PROFILE
from .errors import LexerWarning, create_split_literal_warning


class Lexer:
    """
    Tokenizer parameterized by a glyph profile.

    The simple profile is used by the flat-expression dialect, the extended
    profile (multi-character operators, punctuation) by line dialects.
    """

    def __init__(self, profile: LexerProfile = SIMPLE_PROFILE, line: int = 0):
        """
        Initialize the lexer.

        Args:
            profile: Glyph tables to split on
            line: Source line number used in warnings
        """
        self.profile = profile
        self.line = line
        self.tokens: List[str] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into lexeme strings.

        Returns:
            Ordered list of non-empty lexemes
        """
        self.tokens = []
        self.warnings = []
        current = []
        pos = 0

        while pos < len(text):
            char = text[pos]

            if char.isspace():
                self._flush(current)
                pos += 1
                continue

            pair = text[pos:pos + 2]
            if len(pair) == 2 and pair in self.profile.double_glyphs:
                self._flush(current)
                self.tokens.append(pair)
                pos += 2
                continue

            if char in self.profile.single_glyphs:
                self._flush(current)
                self.tokens.append(char)
            else:
                current.append(char)
            pos += 1

        self._flush(current)
        self._check_split_literals()

        return self.tokens

    def _flush(self, current: List[str]):
        """Emit the pending buffer as a token, if any."""
        if current:
            self.tokens.append(''.join(current))
            current.clear()

    def _check_split_literals(self):
        """Warn about quoted literals that did not survive tokenization."""
        for token in self.tokens:
            quote = token[0]
            if quote in ('"', "'") and (len(token) == 1 or token[-1] != quote):
                self.warnings.append(create_split_literal_warning(token, self.line))

    def has_warnings(self) -> bool:
        """Check if the last tokenize call produced warnings."""
        return len(self.warnings) > 0


def tokenize(text: str) -> List[str]:
    """
    Tokenize with the simple flat-expression profile.

    Splits on whitespace and the glyphs + - * / ( ) ^ ,
    """
    return Lexer(SIMPLE_PROFILE).tokenize(text)


def tokenize_extended(text: str) -> List[str]:
    """
    Tokenize with the extended profile used by line-oriented dialects.

    Two-character operators (==, <=, &&, ++, +=, ...) are matched before
    single glyphs.
    """
    return Lexer(EXTENDED_PROFILE).tokenize(text)
