"""
Line-oriented statement classifier.

Takes one logical line of pseudo-code at a time and runs it through the
ordered statement rules. The first rule whose predicate matches builds the
node; later rules are never consulted for that line.

Author: astsketch maintainers
"""

import logging
from typing import List, Optional, Union

from ..parser.ast_nodes import Node, NodeFactory
from ..parser.errors import create_dropped_line_warning
from ..dialects import Dialect, DialectSpec, get_dialect_spec
from .rules import RuleContext, StatementRule, STATEMENT_RULES

logger = logging.getLogger(__name__)

# Lines made only of these characters carry no statement
STRUCTURAL_CHARS = frozenset("{};")


class StatementClassifier:
    """
    Classifies single lines into statement nodes.

    Shares its NodeFactory with the enclosing tree assembly so ids stay
    unique across the whole tree.
    """

    def __init__(self, dialect: Union[str, Dialect, DialectSpec],
                 factory: Optional[NodeFactory] = None,
                 rules: tuple = STATEMENT_RULES):
        """
        Initialize the classifier.

        Args:
            dialect: Dialect member, name, or an already resolved spec
            factory: Node factory of the enclosing parse call
            rules: Ordered statement rules, first match wins
        """
        if isinstance(dialect, DialectSpec):
            self.spec = dialect
        else:
            self.spec = get_dialect_spec(dialect)
        self.factory = factory or NodeFactory()
        self.rules = rules
        self.warnings: List = []

    def classify(self, line: str, line_number: int = 0) -> Optional[Node]:
        """
        Classify one line.

        Args:
            line: Source line, comments already removed
            line_number: 1-based line number used in warnings

        Returns:
            Statement node, or None when the line carries nothing
        """
        text = self._normalize(line)
        if not text:
            return None

        if set(text) <= STRUCTURAL_CHARS:
            logger.debug("line %d: structural only, skipped", line_number)
            return None

        rule = self.match_rule(text)
        ctx = RuleContext(self.spec, self.factory, line_number, self.warnings)
        node = rule.extractor(text, ctx)

        if node is None:
            logger.debug("line %d: rule %s produced nothing for %r",
                         line_number, rule.name, text)
            self.warnings.append(create_dropped_line_warning(text, line_number))
        else:
            logger.debug("line %d: classified as %s", line_number, rule.name)

        return node

    def match_rule(self, text: str) -> StatementRule:
        """Return the first rule whose predicate accepts the line."""
        for rule in self.rules:
            if rule.predicate(text, self.spec):
                return rule
        # The expression rule accepts everything
        return self.rules[-1]

    @staticmethod
    def _normalize(line: str) -> str:
        """Strip whitespace and closing braces that open a line ('} else {')."""
        text = line.strip()
        if text.startswith("}") and not set(text) <= STRUCTURAL_CHARS:
            text = text.lstrip("}").strip()
        return text


def classify(line: str, dialect: Union[str, Dialect] = Dialect.C,
             factory: Optional[NodeFactory] = None) -> Optional[Node]:
    """
    Convenience function to classify a single line.

    Node numbering restarts at 1 unless a factory is passed in.
    """
    return StatementClassifier(dialect, factory).classify(line)
