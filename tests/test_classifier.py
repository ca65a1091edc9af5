"""
Test suite for the line classifier.

Tests cover:
- Each statement rule in the C-like, Python-like and Java-like dialects
- Rule ordering
- Lines that carry no statement

Author: astsketch maintainers
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from astsketch.lexer.tokens import Category
from astsketch.parser.ast_nodes import NodeKind
from astsketch.classifier.classifier import StatementClassifier, classify
from astsketch.classifier.rules import extract_parenthesized, split_assignment, is_assignment
from astsketch.dialects import Dialect, get_dialect_spec


class TestDeclarations(unittest.TestCase):
    """Test cases for variable and function declarations."""

    def test_initialized_variable(self):
        node = classify("int x = 5;")

        self.assertEqual(node.kind, NodeKind.VARIABLE_DECLARATION)
        self.assertEqual(node.lexeme, "Variable: x")

        type_node, name_node, assignment = node.children
        self.assertEqual((type_node.kind, type_node.lexeme), (NodeKind.KEYWORD, "int"))
        self.assertEqual(type_node.category, Category.KEYWORD)
        self.assertEqual((name_node.kind, name_node.lexeme), (NodeKind.IDENTIFIER, "x"))
        self.assertEqual(assignment.kind, NodeKind.ASSIGNMENT)
        self.assertEqual(assignment.lexeme, "=")
        self.assertEqual(assignment.children[0].lexeme, "x")
        self.assertEqual(assignment.children[1].kind, NodeKind.CONSTANT)
        self.assertEqual(assignment.children[1].lexeme, "5")

    def test_uninitialized_variable(self):
        node = classify("double ratio;")

        self.assertEqual(node.kind, NodeKind.VARIABLE_DECLARATION)
        self.assertEqual(len(node.children), 2)
        self.assertEqual(node.children[1].lexeme, "ratio")

    def test_variable_with_call_initializer(self):
        node = classify("int y = compute(1, 2);")

        self.assertEqual(node.kind, NodeKind.VARIABLE_DECLARATION)
        value = node.children[2].children[1]
        self.assertEqual(value.kind, NodeKind.CALL)
        self.assertEqual(len(value.children), 2)

    def test_function_with_parameters(self):
        node = classify("int add(int a, int b) {")

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.lexeme, "Function: add")

        return_type, name, params = node.children
        self.assertEqual(return_type.lexeme, "int")
        self.assertEqual(name.lexeme, "add")
        self.assertEqual(params.kind, NodeKind.PARAMETER_LIST)
        self.assertTrue(params.synthetic)
        self.assertEqual([p.lexeme for p in params.children], ["a", "b"])

        first = params.children[0]
        self.assertEqual(first.kind, NodeKind.DECLARATION)
        self.assertEqual([c.lexeme for c in first.children], ["int", "a"])

    def test_function_without_parameters(self):
        node = classify("void run()")

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(len(node.children), 2)

    def test_untyped_parameters_are_dropped(self):
        node = classify("int add(a, b) {")

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(len(node.children), 2)

    def test_missing_return_type_defaults(self):
        node = classify("main() {")

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.children[0].lexeme, "void")

    def test_java_modifiers_kept_in_return_type(self):
        node = classify("public int add(int a, int b) {", Dialect.JAVA)

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.children[0].lexeme, "public int")

    def test_python_def(self):
        node = classify("def fibonacci(n):", Dialect.PYTHON)

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.lexeme, "Function: fibonacci")
        self.assertEqual(node.children[0].lexeme, "None")

        param = node.children[2].children[0]
        self.assertEqual(param.lexeme, "n")
        self.assertEqual([c.kind for c in param.children], [NodeKind.IDENTIFIER])

    def test_python_annotations(self):
        node = classify("def area(r: float) -> float:", Dialect.PYTHON)

        self.assertEqual(node.children[0].lexeme, "float")
        param = node.children[2].children[0]
        self.assertEqual([c.lexeme for c in param.children], ["float", "r"])


class TestControlHeaders(unittest.TestCase):
    """Test cases for if, while and for headers."""

    def test_if_condition(self):
        node = classify("if (x > 0)")

        self.assertEqual(node.kind, NodeKind.IF)
        self.assertEqual(node.category, Category.KEYWORD)
        self.assertEqual(len(node.children), 1)

        condition = node.children[0]
        self.assertEqual((condition.kind, condition.lexeme), (NodeKind.BINARY_OP, ">"))
        self.assertEqual([c.lexeme for c in condition.children], ["x", "0"])

    def test_while_with_block(self):
        node = classify("while (i < 10) {")

        self.assertEqual(node.kind, NodeKind.WHILE)
        self.assertEqual(node.children[0].lexeme, "<")

    def test_condition_with_call(self):
        node = classify("if (isValid(x) && y) {")
        self.assertEqual(node.children[0].lexeme, "&&")
        self.assertEqual(node.children[0].children[0].kind, NodeKind.CALL)

    def test_else_if_after_brace(self):
        node = classify("} else if (x == 1) {")

        self.assertEqual(node.kind, NodeKind.IF)
        self.assertEqual(node.lexeme, "else if")

    def test_python_if(self):
        node = classify("if n <= 1:", Dialect.PYTHON)

        self.assertEqual(node.kind, NodeKind.IF)
        self.assertEqual(node.children[0].lexeme, "<=")

    def test_c_for(self):
        node = classify("for (int i = 0; i < n; i++) {")

        self.assertEqual(node.kind, NodeKind.FOR)
        self.assertEqual([c.lexeme for c in node.children], ["Init", "Condition", "Update"])
        self.assertTrue(all(c.synthetic for c in node.children))

        init, condition, _ = node.children
        self.assertEqual(init.children[0].kind, NodeKind.VARIABLE_DECLARATION)
        self.assertEqual(condition.children[0].lexeme, "<")

    def test_python_for_in(self):
        node = classify("for i in range(10):", Dialect.PYTHON)

        self.assertEqual(node.kind, NodeKind.FOR)
        target, iterable = node.children
        self.assertEqual(target.lexeme, "Target")
        self.assertEqual(target.children[0].lexeme, "i")
        self.assertEqual(iterable.children[0].kind, NodeKind.CALL)

    def test_java_for_each(self):
        node = classify("for (int v : values) {", Dialect.JAVA)
        self.assertEqual([c.lexeme for c in node.children], ["Target", "Iterable"])


class TestSimpleStatements(unittest.TestCase):
    """Test cases for returns, assignments and expression statements."""

    def test_return_value(self):
        node = classify("return a + b;")

        self.assertEqual(node.kind, NodeKind.RETURN)
        self.assertEqual(node.children[0].lexeme, "+")

    def test_bare_return(self):
        node = classify("return;")

        self.assertEqual(node.kind, NodeKind.RETURN)
        self.assertEqual(node.children, ())

    def test_assignment(self):
        node = classify("x = y + 1;")

        self.assertEqual(node.kind, NodeKind.ASSIGNMENT)
        target, value = node.children
        self.assertEqual((target.kind, target.lexeme), (NodeKind.IDENTIFIER, "x"))
        self.assertEqual(value.lexeme, "+")

    def test_compound_assignment(self):
        node = classify("count += 2;")

        self.assertEqual(node.kind, NodeKind.ASSIGNMENT)
        self.assertEqual(node.lexeme, "+=")
        self.assertEqual(node.children[0].lexeme, "count")

    def test_comparison_is_not_assignment(self):
        node = classify("x <= 5;")

        self.assertEqual(node.kind, NodeKind.STATEMENT)
        self.assertEqual(node.children[0].lexeme, "<=")

    def test_bare_call_is_a_function_declaration(self):
        node = classify("printf(x);")

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.lexeme, "Function: printf")
        self.assertEqual(node.children[0].lexeme, "void")
        self.assertEqual(node.children[1].lexeme, "printf")

    def test_bare_call_uses_dialect_default_return_type(self):
        node = classify("print(x)", Dialect.PYTHON)

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.children[0].lexeme, "None")

    def test_equals_inside_string_is_not_assignment(self):
        line = 'printf("a=%d", a);'
        spec = get_dialect_spec(Dialect.C)

        self.assertFalse(is_assignment(line, spec))
        self.assertEqual(classify(line).kind, NodeKind.FUNCTION_DECLARATION)

    def test_call_on_right_of_assignment_stays_a_call(self):
        node = classify("total = sum(a, b);")

        self.assertEqual(node.kind, NodeKind.ASSIGNMENT)
        self.assertEqual(node.children[1].kind, NodeKind.CALL)

    def test_java_member_call(self):
        node = classify("System.out.println(x);", Dialect.JAVA)

        self.assertEqual(node.kind, NodeKind.FUNCTION_DECLARATION)
        self.assertEqual(node.children[1].lexeme, "System.out.println")

    def test_parenthesized_expression_statement(self):
        node = classify("(a + b) * c;")

        self.assertEqual(node.kind, NodeKind.STATEMENT)
        self.assertEqual(node.children[0].lexeme, "*")


class TestClassifierBehaviour(unittest.TestCase):
    """Test cases for rule order and skipped lines."""

    def setUp(self):
        self.classifier = StatementClassifier(Dialect.C)

    def test_declaration_rule_wins_over_assignment(self):
        rule = self.classifier.match_rule("int x = 5;")
        self.assertEqual(rule.name, "variable-declaration")

    def test_function_rule_wins_over_expression(self):
        rule = self.classifier.match_rule("int add(int a) {")
        self.assertEqual(rule.name, "function-declaration")

    def test_control_keyword_is_not_a_function(self):
        rule = self.classifier.match_rule("if(x>0) {")
        self.assertEqual(rule.name, "condition")

    def test_structural_lines_are_skipped(self):
        for line in ["}", "{", "};", "  }  "]:
            self.assertIsNone(self.classifier.classify(line), line)
        self.assertEqual(self.classifier.warnings, [])

    def test_unparseable_line_is_dropped_with_warning(self):
        self.assertIsNone(self.classifier.classify("@@@;", 4))

        dropped = self.classifier.warnings[-1]
        self.assertEqual(dropped.code, "P105")
        self.assertEqual(dropped.diagnostic.line, 4)

    def test_dialect_by_name(self):
        classifier = StatementClassifier("python-like")
        self.assertEqual(classifier.spec.dialect, Dialect.PYTHON)


class TestRuleHelpers(unittest.TestCase):
    """Test cases for the text helpers the rules share."""

    def test_balanced_parentheses(self):
        self.assertEqual(extract_parenthesized("if (f(x) > 0) {"), "f(x) > 0")

    def test_unbalanced_parenthesis_runs_to_end(self):
        self.assertEqual(extract_parenthesized("if (x > 0"), "x > 0")

    def test_no_parenthesis(self):
        self.assertIsNone(extract_parenthesized("x = 1"))

    def test_split_assignment(self):
        self.assertEqual(split_assignment("x = 1"), ("x", "=", "1"))
        self.assertEqual(split_assignment("x -= 1"), ("x", "-=", "1"))
        self.assertIsNone(split_assignment("x == 1"))
        self.assertIsNone(split_assignment("x != 1"))
        self.assertIsNone(split_assignment("x >= 1"))


if __name__ == '__main__':
    unittest.main()
