"""
Syntax tree node definitions for astsketch.

A single immutable Node type carries every construct. Nodes are classified
twice: by structural role (NodeKind) and by lexical category (Category).
Grouping scaffolding such as "Declarations" or "Parameters" is flagged as
synthetic so consumers never need to compare labels.

Author: astsketch maintainers
"""

from typing import List, Optional, Any, Dict, Iterator, Tuple
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import Category


class NodeKind(Enum):
    """Enumeration of all structural node roles."""

    # Top-level
    PROGRAM = "program"

    # Declarations
    FUNCTION_DECLARATION = "function-declaration"
    VARIABLE_DECLARATION = "variable-declaration"
    DECLARATION = "declaration"

    # Grouping containers
    DECLARATIONS_GROUP = "declarations-group"
    STATEMENTS_GROUP = "statements-group"
    PARAMETER_LIST = "parameter-list"

    # Statements
    IF = "if"
    WHILE = "while"
    FOR = "for"
    RETURN = "return"
    ASSIGNMENT = "assignment"
    STATEMENT = "statement"

    # Expressions
    BINARY_OP = "binary-op"
    UNARY_OP = "unary-op"
    CALL = "call"
    EXPRESSION = "expression"

    # Leaves
    IDENTIFIER = "identifier"
    CONSTANT = "constant"
    KEYWORD = "keyword"

    @property
    def is_group(self) -> bool:
        """Check if this kind is always a grouping container."""
        return self in {
            NodeKind.DECLARATIONS_GROUP,
            NodeKind.STATEMENTS_GROUP,
            NodeKind.PARAMETER_LIST,
        }


@dataclass(frozen=True, eq=False)
class Node:
    """
    Immutable syntax tree node.

    Children order is meaningful: an assignment's first child is its target
    and its second the value, a binary-op's children are left then right.

    Equality is structural and compares whole subtrees; hashing only looks
    at the node itself. Neither recurses, so operator chains thousands of
    levels deep are safe to compare.
    """
    id: int
    kind: NodeKind
    lexeme: str
    category: Category
    children: Tuple['Node', ...] = ()
    synthetic: bool = False

    def _fields(self) -> tuple:
        return (self.id, self.kind, self.lexeme, self.category,
                self.synthetic, len(self.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented

        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left._fields() != right._fields():
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        return hash((self.id, self.kind, self.lexeme, self.category))

    def __str__(self) -> str:
        return f"{self.kind.value}({self.lexeme!r})#{self.id}"

    def __repr__(self) -> str:
        return (f"Node({self.id}, {self.kind.name}, {self.lexeme!r}, "
                f"{self.category.name}, children={len(self.children)})")

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator['Node']:
        """Iterate over this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find_all(self, kind: NodeKind) -> List['Node']:
        """Collect all descendants (including self) of the given kind."""
        return [node for node in self.walk() if node.kind == kind]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain nested dictionaries.

        The result is a fresh structure the caller owns and may decorate
        (for example with layout positions) without touching the tree.
        """
        root: Dict[str, Any] = {}
        stack = [(self, None)]

        while stack:
            node, siblings = stack.pop()
            data = {
                "id": node.id,
                "kind": node.kind.value,
                "lexeme": node.lexeme,
                "category": node.category.value,
                "synthetic": node.synthetic,
                "children": [],
            }
            if siblings is None:
                root = data
            else:
                siblings.append(data)
            stack.extend((child, data["children"]) for child in reversed(node.children))

        return root


@dataclass
class NodeFactory:
    """
    Creates nodes with creation-order ids.

    One factory is created per top-level parse call and threaded through
    every component, so numbering always starts at 1 and two parses never
    share a counter.
    """
    next_id: int = 1

    def reserve_id(self) -> int:
        """Take the next id now for a node that is constructed later."""
        node_id = self.next_id
        self.next_id += 1
        return node_id

    def create(self, kind: NodeKind, lexeme: str, category: Category,
               children: Optional[List[Node]] = None,
               synthetic: bool = False, node_id: Optional[int] = None) -> Node:
        """Create a node, assigning a fresh id unless one was reserved."""
        if node_id is None:
            node_id = self.reserve_id()
        return Node(
            id=node_id,
            kind=kind,
            lexeme=lexeme,
            category=category,
            children=tuple(children or ()),
            synthetic=synthetic or kind.is_group,
        )

    def identifier(self, name: str) -> Node:
        return self.create(NodeKind.IDENTIFIER, name, Category.IDENTIFIER)

    def constant(self, text: str) -> Node:
        return self.create(NodeKind.CONSTANT, text, Category.CONSTANT)

    def keyword(self, word: str) -> Node:
        return self.create(NodeKind.KEYWORD, word, Category.KEYWORD)

    def placeholder(self) -> Node:
        """Empty identifier standing in for a missing operand."""
        return self.identifier("")

    def group(self, kind: NodeKind, label: str, children: List[Node]) -> Node:
        """Create a synthetic container node."""
        return self.create(kind, label, Category.KEYWORD, children, synthetic=True)


def format_tree(node: Node, indent: str = "  ") -> str:
    """
    Render a tree as indented text, one node per line.

    Synthetic containers are marked with a leading '+'.
    """
    lines = []
    stack = [(node, 0)]

    while stack:
        current, depth = stack.pop()
        marker = "+" if current.synthetic else "-"
        lines.append(f"{indent * depth}{marker} {current.kind.value} "
                     f"{current.lexeme!r} [{current.category.value}]")
        stack.extend((child, depth + 1) for child in reversed(current.children))

    return "\n".join(lines)
