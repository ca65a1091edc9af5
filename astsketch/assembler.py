"""
Tree assembly for astsketch.

Turns a whole snippet into a program-rooted tree. The flat-expression
dialect parses the text as one expression; line dialects classify each line
and group the results: functions first, then a Declarations container, then
a Statements container. Containers are only emitted when they have content.

Author: astsketch maintainers
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .lexer.errors import Diagnostic
from .lexer.tokens import Category
from .parser.ast_nodes import Node, NodeKind, NodeFactory
from .parser.parser import parse_text
from .parser.errors import create_unknown_dialect_warning
from .classifier.classifier import StatementClassifier
from .dialects import Dialect, DialectSpec, DIALECT_SPECS
from .config import ParserConfig, get_parser_config

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """A tree together with the diagnostics gathered while building it."""
    tree: Node
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def has_diagnostics(self) -> bool:
        return len(self.diagnostics) > 0


class TreeAssembler:
    """
    Builds program trees for one dialect.

    Each build call starts a fresh NodeFactory, so ids restart at 1 and
    concurrent builds on separate assemblers never interfere.
    """

    def __init__(self, dialect: Union[str, Dialect, None] = None,
                 config: Optional[ParserConfig] = None):
        """
        Initialize the assembler.

        Args:
            dialect: Dialect member or name; the configured default if None
            config: Parser configuration; the global default if None
        """
        self.config = config or get_parser_config()
        self.warnings: List = []
        self._dialect_warnings: List = []
        self.spec = self._resolve_spec(dialect)

    def _resolve_spec(self, dialect: Union[str, Dialect, None]) -> DialectSpec:
        """Resolve a dialect, falling back to the configured default."""
        if dialect is None:
            dialect = self.config.default_dialect

        resolved = Dialect.from_name(dialect, strict=self.config.strict_dialects)
        if resolved is None:
            fallback = Dialect.from_name(self.config.default_dialect, strict=False) or Dialect.EXPRESSION
            logger.debug("unknown dialect %r, using %s", dialect, fallback.value)
            self._dialect_warnings.append(create_unknown_dialect_warning(str(dialect), fallback.value))
            resolved = fallback

        return DIALECT_SPECS[resolved]

    def build(self, text: str) -> Node:
        """
        Build the program tree for a snippet.

        Never raises for any text input.

        Returns:
            Root node of kind program
        """
        self.warnings = list(self._dialect_warnings)
        factory = NodeFactory()
        program_id = factory.reserve_id()

        if self.spec.dialect.is_line_oriented:
            children = self._build_lines(text, factory)
        else:
            children = self._build_expression(text, factory)

        program = factory.create(
            NodeKind.PROGRAM, self.spec.label, Category.KEYWORD, children, node_id=program_id
        )
        logger.debug("built %s tree with %d nodes and %d warnings",
                     self.spec.dialect.value, factory.next_id - 1, len(self.warnings))
        return program

    def _build_expression(self, text: str, factory: NodeFactory) -> List[Node]:
        expr = parse_text(text.strip(), self.spec, factory, line=1, warnings=self.warnings)
        return [factory.group(NodeKind.STATEMENTS_GROUP, "Statements", [expr])]

    def _build_lines(self, text: str, factory: NodeFactory) -> List[Node]:
        classifier = StatementClassifier(self.spec, factory)
        functions: List[Node] = []
        declarations: List[Node] = []
        statements: List[Node] = []

        for line_number, raw_line in enumerate(text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or self.config.is_comment(line):
                continue

            node = classifier.classify(line, line_number)
            if node is None:
                continue

            if node.kind == NodeKind.FUNCTION_DECLARATION:
                functions.append(node)
            elif node.kind == NodeKind.VARIABLE_DECLARATION:
                declarations.append(node)
            else:
                statements.append(node)

        self.warnings.extend(classifier.warnings)

        children = list(functions)
        if declarations:
            children.append(factory.group(NodeKind.DECLARATIONS_GROUP, "Declarations", declarations))
        if statements:
            children.append(factory.group(NodeKind.STATEMENTS_GROUP, "Statements", statements))
        return children

    def has_warnings(self) -> bool:
        """Check if the last build produced warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Diagnostic]:
        """Get the diagnostics of the last build."""
        return [warning.diagnostic for warning in self.warnings]


def build(text: str, dialect: Union[str, Dialect, None] = None,
          config: Optional[ParserConfig] = None) -> Node:
    """
    Build a program tree for a snippet.

    Args:
        text: Snippet source
        dialect: Dialect member or name
        config: Optional parser configuration

    Returns:
        Root node of kind program
    """
    return TreeAssembler(dialect, config).build(text)


def build_with_diagnostics(text: str, dialect: Union[str, Dialect, None] = None,
                           config: Optional[ParserConfig] = None) -> ParseResult:
    """Build a program tree and return it with its diagnostics."""
    assembler = TreeAssembler(dialect, config)
    tree = assembler.build(text)
    return ParseResult(tree, assembler.get_diagnostics())
