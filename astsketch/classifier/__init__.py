"""
astsketch Classifier Package

Heuristic, line-granular recognition of declarations, control headers,
returns, assignments and expression statements.

Author: astsketch maintainers
"""

from .rules import StatementRule, RuleContext, STATEMENT_RULES, extract_parenthesized
from .classifier import StatementClassifier, classify

__all__ = [
    "StatementClassifier",
    "classify",
    "StatementRule",
    "RuleContext",
    "STATEMENT_RULES",
    "extract_parenthesized",
]
