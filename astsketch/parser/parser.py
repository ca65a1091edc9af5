"""
astsketch Precedence-Climbing Expression Parser

Recursive descent with one grammar rule per operator tier. The tiers come
from a precedence table, lowest binding first, so dialects differ only in
which table they hand the parser. After the last tier come unary prefixes
and then primaries.

The parser never raises. Missing operands, unclosed parentheses and
leftover tokens are recorded as warnings and the best partial tree is
returned.

Author: astsketch maintainers
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, FrozenSet, Tuple, Iterable

from ..lexer.tokens import (
    Category, CORE_KEYWORDS, LITERAL_WORDS, is_number, is_quoted, is_identifier
)
from ..lexer.lexer import Lexer
from .ast_nodes import Node, NodeKind, NodeFactory
from .errors import (
    ParseWarning, create_missing_operand_warning, create_unterminated_group_warning,
    create_trailing_tokens_warning, create_empty_expression_warning,
    create_raw_text_warning, create_nesting_too_deep_warning
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecedenceLevel:
    """One binding tier of binary operators."""
    name: str
    operators: FrozenSet[str]
    right_associative: bool = False


LOGICAL_OR = PrecedenceLevel("logical-or", frozenset({"||"}))
LOGICAL_AND = PrecedenceLevel("logical-and", frozenset({"&&"}))
EQUALITY = PrecedenceLevel("equality", frozenset({"==", "!="}))
RELATIONAL = PrecedenceLevel("relational", frozenset({"<", ">", "<=", ">="}))
ADDITIVE = PrecedenceLevel("additive", frozenset({"+", "-"}))
MULTIPLICATIVE = PrecedenceLevel("multiplicative", frozenset({"*", "/", "%"}))
POWER = PrecedenceLevel("power", frozenset({"^"}), right_associative=True)

# Lowest precedence first; the first entry is the grammar's entry point
LINE_LEVELS: Tuple[PrecedenceLevel, ...] = (
    LOGICAL_OR, LOGICAL_AND, EQUALITY, RELATIONAL, ADDITIVE, MULTIPLICATIVE,
)
ARITHMETIC_LEVELS: Tuple[PrecedenceLevel, ...] = (ADDITIVE, MULTIPLICATIVE, POWER)

UNARY_OPERATORS: FrozenSet[str] = frozenset({"-", "!", "++", "--"})

# Each nested group, call or prefix operator costs about one frame per level
# plus this many; the headroom is left for callers further up the stack
FRAMES_PER_NESTING = 6
RECURSION_HEADROOM = 250


def nesting_limit(levels: Tuple[PrecedenceLevel, ...]) -> int:
    """Deepest nesting a parser over these levels follows before skipping input."""
    budget = sys.getrecursionlimit() - RECURSION_HEADROOM
    return max(1, budget // (len(levels) + FRAMES_PER_NESTING))


class Parser:
    """
    Precedence-climbing expression parser over lexeme strings.

    The cursor starts at 0 and only moves forward.
    """

    def __init__(self, tokens: List[str],
                 levels: Tuple[PrecedenceLevel, ...] = LINE_LEVELS,
                 unary_operators: FrozenSet[str] = UNARY_OPERATORS,
                 keywords: Iterable[str] = CORE_KEYWORDS,
                 factory: Optional[NodeFactory] = None,
                 line: int = 0):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: Lexemes from the tokenizer
            levels: Binary operator tiers, lowest precedence first
            unary_operators: Prefix operators
            keywords: Words produced as keyword leaves
            factory: Node factory shared with the enclosing parse call
            line: Source line used in warnings
        """
        self.tokens = tokens
        self.current = 0
        self.levels = levels
        self.unary_operators = unary_operators
        self.keywords = {k.lower() for k in keywords}
        self.factory = factory or NodeFactory()
        self.line = line
        self.depth = 0
        self.max_nesting = nesting_limit(levels)
        self.warnings: List[ParseWarning] = []

    def parse(self) -> Optional[Node]:
        """
        Parse the token stream into an expression tree.

        Returns:
            Root of the expression, a placeholder identifier for an empty
            stream, or None when no expression could be started
        """
        if not self.tokens:
            self.warnings.append(create_empty_expression_warning(self.line))
            return self.factory.placeholder()

        expr = self._parse_expression()

        if not self._is_at_end():
            self.warnings.append(
                create_trailing_tokens_warning(self.tokens[self.current:], self.line)
            )

        return expr

    def _parse_expression(self) -> Optional[Node]:
        """Parse at the lowest precedence level."""
        return self._parse_level(0)

    def _parse_level(self, index: int) -> Optional[Node]:
        """Parse one binary tier, folding operators left to right."""
        if index >= len(self.levels):
            return self._parse_unary()

        level = self.levels[index]
        left = self._parse_level(index + 1)

        if level.right_associative:
            if self._peek() in level.operators:
                operator = self._advance()
                right = self._descend(self._parse_level, index)
                left = self._binary(operator, left, right)
            return left

        while self._peek() in level.operators:
            operator = self._advance()
            right = self._parse_level(index + 1)
            left = self._binary(operator, left, right)
            if left is None:
                break

        return left

    def _binary(self, operator: str, left: Optional[Node],
                right: Optional[Node]) -> Optional[Node]:
        """Build a binary-op from whichever operands were obtained."""
        operands = [node for node in (left, right) if node is not None]
        if len(operands) < 2:
            self.warnings.append(create_missing_operand_warning(operator, self.line))
        if not operands:
            return None
        return self.factory.create(NodeKind.BINARY_OP, operator, Category.OPERATOR, operands)

    def _parse_unary(self) -> Optional[Node]:
        """Parse prefix operators, right-associative."""
        if self._peek() in self.unary_operators:
            operator = self._advance()
            operand = self._descend(self._parse_unary)
            if operand is None:
                self.warnings.append(create_missing_operand_warning(operator, self.line))
                operand = self.factory.placeholder()
            return self.factory.create(NodeKind.UNARY_OP, operator, Category.OPERATOR, [operand])

        return self._parse_primary()

    def _parse_primary(self) -> Optional[Node]:
        """Parse grouping, literals, identifiers and calls."""
        token = self._peek()
        if token is None:
            return None

        if token == "(":
            self._advance()
            expr = self._descend(self._parse_expression)
            if self._peek() == ")":
                self._advance()
            elif self._is_at_end():
                self.warnings.append(create_unterminated_group_warning("(", self.line))
            return expr

        if is_number(token) or is_quoted(token) or token in LITERAL_WORDS:
            self._advance()
            return self.factory.constant(token)

        if is_identifier(token):
            self._advance()
            if self._peek() == "(":
                self._advance()
                args = self._parse_arguments()
                return self.factory.create(NodeKind.CALL, token, Category.IDENTIFIER, args)
            if token.lower() in self.keywords:
                return self.factory.keyword(token)
            return self.factory.identifier(token)

        return None

    def _parse_arguments(self) -> List[Node]:
        """Parse a comma-separated argument list after '('."""
        args = []

        while not self._is_at_end() and self._peek() != ")":
            start = self.current
            arg = self._descend(self._parse_expression)
            if arg is not None:
                args.append(arg)
            if self._peek() == ",":
                self._advance()
            elif self.current == start:
                # Token that cannot start an expression, skip it
                self._advance()

        if self._peek() == ")":
            self._advance()
        else:
            self.warnings.append(create_unterminated_group_warning("(", self.line))

        return args

    # Utility methods

    def _descend(self, parse, *args) -> Optional[Node]:
        """
        Run a nested parse.

        Past max_nesting the nested operand is skipped and replaced by a
        placeholder, so the enclosing groups and operators keep their shape.
        """
        if self.depth >= self.max_nesting:
            if self._is_at_end():
                return None
            self.warnings.append(create_nesting_too_deep_warning(self.max_nesting, self.line))
            self._skip_nested()
            return self.factory.placeholder()

        self.depth += 1
        try:
            return parse(*args)
        finally:
            self.depth -= 1

    def _skip_nested(self):
        """Consume tokens up to the ')' that closes the enclosing group, or the end."""
        depth = 0
        while not self._is_at_end():
            token = self._peek()
            if token == ")":
                if depth == 0:
                    break
                depth -= 1
            elif token == "(":
                depth += 1
            self._advance()

    def _advance(self) -> str:
        """Consume and return current token."""
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Optional[str]:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None


def parse_text(text: str, spec, factory: NodeFactory, line: int = 0,
               warnings: Optional[List[ParseWarning]] = None,
               fallback: bool = True) -> Optional[Node]:
    """
    Tokenize and parse text with a dialect's lexer profile and grammar.

    Args:
        text: Expression source
        spec: DialectSpec supplying profile, precedence table and keywords
        factory: Node factory of the enclosing parse call
        line: Source line used in warnings
        warnings: List that receives tokenizer and parser warnings
        fallback: Wrap the raw text as a constant when nothing parses

    Returns:
        Expression tree, or None when fallback is off and nothing parsed
    """
    lexer = Lexer(spec.lexer_profile, line)
    tokens = lexer.tokenize(text)

    parser = Parser(
        tokens,
        levels=spec.precedence_levels,
        unary_operators=spec.unary_operators,
        keywords=spec.keywords,
        factory=factory,
        line=line,
    )
    expr = parser.parse()

    if warnings is not None:
        warnings.extend(lexer.warnings)
        warnings.extend(parser.warnings)

    if expr is None and fallback:
        logger.debug("line %d: no expression in %r, keeping raw text", line, text)
        if warnings is not None:
            warnings.append(create_raw_text_warning(text, line))
        expr = factory.create(NodeKind.EXPRESSION, text, Category.CONSTANT)

    return expr


def parse_expression(source: str, dialect=None,
                     factory: Optional[NodeFactory] = None) -> Node:
    """
    Convenience function to parse a single expression.

    Node numbering restarts at 1 unless a factory is passed in.

    Args:
        source: Expression source
        dialect: Dialect member or name; the flat-expression dialect by default
        factory: Optional node factory to continue numbering from

    Returns:
        Expression tree; never None
    """
    from ..dialects import Dialect, get_dialect_spec

    spec = get_dialect_spec(dialect if dialect is not None else Dialect.EXPRESSION)
    return parse_text(source, spec, factory or NodeFactory())
