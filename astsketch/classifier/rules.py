"""
Statement rules for the line classifier.

Each rule pairs a predicate (does this line look like my construct?) with an
extractor (build the node). Rules are tried in table order and the first
whose predicate holds wins, so the order is part of the behaviour: a typed
declaration must be claimed before a generic assignment, a function header
before a call statement.

Author: astsketch maintainers
"""

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from ..lexer.tokens import Category, is_identifier
from ..parser.ast_nodes import Node, NodeKind, NodeFactory
from ..parser.parser import parse_text
from ..dialects import DialectSpec, CONTROL_KEYWORDS


# '=' and compound '+=' style operators, but not '==', '<=', '>=' or '!='
ASSIGNMENT_OPERATOR = re.compile(r'(?<![=!<>])([+\-*/%]?=)(?!=)')

CONDITION_HEADER = re.compile(r'^(if|while|elif|else\s+if)\b')
FOR_HEADER = re.compile(r'^for\b')
RETURN_HEADER = re.compile(r'^return\b')
FOR_IN_HEADER = re.compile(r'^for\s+(.+?)\s+in\s+(.+)$')
RETURN_ANNOTATION = re.compile(r'->\s*([^:{;]+)')
LEADING_WORD = re.compile(r'^\s*([A-Za-z_][A-Za-z0-9_]*)')


@dataclass
class RuleContext:
    """What an extractor needs besides the line itself."""
    spec: DialectSpec
    factory: NodeFactory
    line: int = 0
    warnings: List = field(default_factory=list)

    def expression(self, text: str) -> Node:
        """Parse a sub-expression, keeping raw text if nothing parses."""
        return parse_text(text, self.spec, self.factory, self.line, self.warnings)

    def strip_terminator(self, text: str) -> str:
        """Drop trailing semicolons and block openers."""
        return text.strip().rstrip(self.spec.line_terminators).strip()


@dataclass(frozen=True)
class StatementRule:
    """A named predicate and extractor pair."""
    name: str
    predicate: Callable[[str, DialectSpec], bool]
    extractor: Callable[[str, RuleContext], Optional[Node]]


# ============================================================================
# Helpers
# ============================================================================

def extract_parenthesized(text: str) -> Optional[str]:
    """
    Return the content between the first '(' and its matching ')'.

    An unbalanced '(' runs to the end of the text. Returns None when the
    text has no '('.
    """
    start = text.find("(")
    if start < 0:
        return None

    depth = 0
    for pos in range(start, len(text)):
        if text[pos] == "(":
            depth += 1
        elif text[pos] == ")":
            depth -= 1
            if depth == 0:
                return text[start + 1:pos]

    return text[start + 1:]


def split_assignment(text: str) -> Optional[Tuple[str, str, str]]:
    """Split 'target op value' at the first assignment operator."""
    match = ASSIGNMENT_OPERATOR.search(text)
    if match is None:
        return None
    return text[:match.start()].strip(), match.group(1), text[match.end():].strip()


def _first_word(text: str) -> str:
    match = LEADING_WORD.match(text)
    return match.group(1).lower() if match else ""


def _build_assignment(target: str, operator: str, value: str, ctx: RuleContext) -> Node:
    children = [ctx.factory.identifier(target)]
    if value:
        children.append(ctx.expression(value))
    return ctx.factory.create(NodeKind.ASSIGNMENT, operator, Category.OPERATOR, children)


# ============================================================================
# Rule 1: typed variable declaration
# ============================================================================

def is_variable_declaration(text: str, spec: DialectSpec) -> bool:
    if _first_word(text) not in spec.type_keywords:
        return False
    parts = split_assignment(text)
    declarator = parts[0] if parts else text.rstrip(";").strip()
    return "(" not in declarator and len(declarator.split()) >= 2


def extract_variable_declaration(text: str, ctx: RuleContext) -> Node:
    stripped = ctx.strip_terminator(text)
    parts = split_assignment(stripped)
    declarator = parts[0] if parts else stripped

    words = declarator.split()
    type_name, name = words[0], words[-1]

    children = [ctx.factory.keyword(type_name), ctx.factory.identifier(name)]
    if parts:
        _, operator, value = parts
        children.append(_build_assignment(name, operator, value, ctx))

    return ctx.factory.create(
        NodeKind.VARIABLE_DECLARATION, f"Variable: {name}", Category.IDENTIFIER, children
    )


# ============================================================================
# Rule 2: function declaration header
# ============================================================================

def is_function_declaration(text: str, spec: DialectSpec) -> bool:
    if "(" not in text or ")" not in text:
        return False

    stripped = text.rstrip()
    if "{" not in text and not stripped.endswith(spec.function_header_endings):
        return False

    if _first_word(text) in CONTROL_KEYWORDS:
        return False

    head = text[:text.index("(")]
    if "=" in head:
        return False

    # A bare "name(...)" line counts too; its return type is defaulted
    words = head.split()
    return bool(words) and is_identifier(words[-1])


def _parse_parameter(param: str, spec: DialectSpec,
                     ctx: RuleContext) -> Optional[Node]:
    param = param.strip()
    if spec.bare_parameters:
        # name[: type][= default]
        param = param.split("=", 1)[0].strip()
        name, _, type_name = param.partition(":")
        name, type_name = name.strip(), type_name.strip()
        if not name:
            return None
        children = [ctx.factory.keyword(type_name)] if type_name else []
        children.append(ctx.factory.identifier(name))
        return ctx.factory.create(NodeKind.DECLARATION, name, Category.IDENTIFIER, children)

    words = param.split()
    if len(words) < 2:
        return None
    type_name, name = " ".join(words[:-1]), words[-1]
    children = [ctx.factory.keyword(type_name), ctx.factory.identifier(name)]
    return ctx.factory.create(NodeKind.DECLARATION, name, Category.IDENTIFIER, children)


def extract_function_declaration(text: str, ctx: RuleContext) -> Node:
    spec = ctx.spec
    words = text[:text.index("(")].split()
    name = words[-1]
    prefix = [word for word in words[:-1] if word not in spec.function_keywords]

    return_type = " ".join(prefix)
    annotation = RETURN_ANNOTATION.search(text[text.index(")"):])
    if not return_type and annotation:
        return_type = annotation.group(1).strip()

    params = []
    for param in (extract_parenthesized(text) or "").split(","):
        node = _parse_parameter(param, spec, ctx)
        if node is not None:
            params.append(node)

    children = [
        ctx.factory.keyword(return_type or spec.default_return_type),
        ctx.factory.identifier(name),
    ]
    if params:
        children.append(ctx.factory.group(NodeKind.PARAMETER_LIST, "Parameters", params))

    return ctx.factory.create(
        NodeKind.FUNCTION_DECLARATION, f"Function: {name}", Category.IDENTIFIER, children
    )


# ============================================================================
# Rule 3: if / while headers
# ============================================================================

def is_condition_header(text: str, spec: DialectSpec) -> bool:
    return CONDITION_HEADER.match(text) is not None


def _condition_text(rest: str, ctx: RuleContext) -> str:
    if ctx.spec.block_opener == "{" and rest.lstrip().startswith("("):
        return (extract_parenthesized(rest) or "").strip()
    return ctx.strip_terminator(rest)


def extract_condition_header(text: str, ctx: RuleContext) -> Node:
    match = CONDITION_HEADER.match(text)
    keyword = " ".join(match.group(1).split())
    kind = NodeKind.WHILE if keyword == "while" else NodeKind.IF

    condition = _condition_text(text[match.end():], ctx)
    children = [ctx.expression(condition)] if condition else []

    return ctx.factory.create(kind, keyword, Category.KEYWORD, children)


# ============================================================================
# Rule 4: for headers
# ============================================================================

def is_for_header(text: str, spec: DialectSpec) -> bool:
    return FOR_HEADER.match(text) is not None


def _clause(label: str, text: str, ctx: RuleContext) -> Node:
    """Wrap one header part in a labelled synthetic container."""
    if is_variable_declaration(text, ctx.spec):
        content = extract_variable_declaration(text, ctx)
    elif is_assignment(text, ctx.spec):
        content = extract_assignment(text, ctx)
    else:
        content = ctx.expression(text)
    return ctx.factory.create(NodeKind.EXPRESSION, label, Category.KEYWORD, [content],
                              synthetic=True)


def extract_for_header(text: str, ctx: RuleContext) -> Node:
    clauses = []

    if ctx.spec.block_opener == ":":
        match = FOR_IN_HEADER.match(ctx.strip_terminator(text))
        if match:
            clauses.append(_clause("Target", match.group(1).strip(), ctx))
            clauses.append(_clause("Iterable", match.group(2).strip(), ctx))
    else:
        content = extract_parenthesized(text) or ""
        if ";" in content:
            labels = ("Init", "Condition", "Update")
            for label, part in zip(labels, content.split(";")[:3]):
                if part.strip():
                    clauses.append(_clause(label, part.strip(), ctx))
        elif ":" in content:
            target, _, iterable = content.partition(":")
            if target.strip():
                clauses.append(_clause("Target", target.strip(), ctx))
            if iterable.strip():
                clauses.append(_clause("Iterable", iterable.strip(), ctx))
        elif content.strip():
            clauses.append(_clause("Condition", content.strip(), ctx))

    return ctx.factory.create(NodeKind.FOR, "for", Category.KEYWORD, clauses)


# ============================================================================
# Rule 5: return
# ============================================================================

def is_return(text: str, spec: DialectSpec) -> bool:
    return RETURN_HEADER.match(text) is not None


def extract_return(text: str, ctx: RuleContext) -> Node:
    value = ctx.strip_terminator(text[len("return"):])
    children = [ctx.expression(value)] if value else []
    return ctx.factory.create(NodeKind.RETURN, "return", Category.KEYWORD, children)


# ============================================================================
# Rule 6: assignment
# ============================================================================

def is_assignment(text: str, spec: DialectSpec) -> bool:
    parts = split_assignment(text)
    if parts is None:
        return False
    # '=' inside a call's arguments or a string literal is not an assignment
    target = parts[0]
    return not any(char in target for char in "(\"'")


def extract_assignment(text: str, ctx: RuleContext) -> Node:
    parts = split_assignment(ctx.strip_terminator(text)) or split_assignment(text)
    target, operator, value = parts
    return _build_assignment(target, operator, ctx.strip_terminator(value), ctx)


# ============================================================================
# Rule 7: bare expression statement
# ============================================================================

def is_expression_statement(text: str, spec: DialectSpec) -> bool:
    return True


def extract_expression_statement(text: str, ctx: RuleContext) -> Optional[Node]:
    stripped = ctx.strip_terminator(text)
    if not stripped:
        return None

    expr = parse_text(stripped, ctx.spec, ctx.factory, ctx.line, ctx.warnings,
                      fallback=False)
    if expr is None:
        return None

    return ctx.factory.create(NodeKind.STATEMENT, stripped, Category.IDENTIFIER, [expr])


# First match wins
STATEMENT_RULES: Tuple[StatementRule, ...] = (
    StatementRule("variable-declaration", is_variable_declaration, extract_variable_declaration),
    StatementRule("function-declaration", is_function_declaration, extract_function_declaration),
    StatementRule("condition", is_condition_header, extract_condition_header),
    StatementRule("for", is_for_header, extract_for_header),
    StatementRule("return", is_return, extract_return),
    StatementRule("assignment", is_assignment, extract_assignment),
    StatementRule("expression", is_expression_statement, extract_expression_statement),
)
