""" Property based tests of the printer, using hypothesis to generate
syntax trees. """

import unittest

from hypothesis import given, strategies as st

from nescprint.printer import NescPrinter, render_text, node_to_str
from nescprint.syntax import Node, NodeKind, identifier, constant
from nescprint.syntax import read_tree, dump_tree
from nescprint.syntax.kinds import BINARY_OPERATORS


names = st.sampled_from(['a', 'b', 'x', 'count', 'p1'])
leaves = st.one_of(
    names.map(identifier), st.integers(0, 1000).map(constant))
binary_kinds = st.sampled_from(
    sorted(BINARY_OPERATORS, key=lambda kind: kind.value))


def binary(children):
    return st.builds(
        lambda kind, left, right: Node(kind, left, right),
        binary_kinds, children, children)


expressions = st.recursive(leaves, binary, max_leaves=12)


def simple_statements():
    return st.one_of(
        expressions.map(lambda e: Node(NodeKind.STATEMENT, e)),
        st.just(Node(NodeKind.BREAK)),
        expressions.map(lambda e: Node(NodeKind.RETURN, e)),
    )


def compound_statements(children):
    return st.one_of(
        st.lists(children, max_size=3).map(
            lambda c: Node(NodeKind.COMPOUND_STATEMENT, *c)),
        st.builds(lambda e, s: Node(NodeKind.IF, e, s), expressions, children),
        st.builds(
            lambda e, s1, s2: Node(NodeKind.IF, e, s1, s2),
            expressions, children, children),
        st.builds(
            lambda e, s: Node(NodeKind.WHILE, e, s), expressions, children),
        st.builds(
            lambda s, e: Node(NodeKind.DO, s, e), children, expressions),
        children.map(lambda s: Node(NodeKind.ATOMIC, s)),
        children.map(lambda s: Node(NodeKind.DEFAULT, s)),
        st.builds(
            lambda v, s: Node(NodeKind.CASE, v, s),
            st.integers(0, 9).map(constant), children),
        st.builds(
            lambda n, s: Node(NodeKind.LABELED_STATEMENT, n, s),
            names.map(identifier), children),
    )


statements = st.recursive(
    simple_statements(), compound_statements, max_leaves=10)


def count_operators(node):
    return sum(1 for n in node.walk() if n.kind in BINARY_OPERATORS)


def balanced(text):
    depth = 0
    for c in text:
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


class ParenthesesTestCase(unittest.TestCase):
    @given(expressions)
    def test_statement_expression(self, expression):
        """ All operators except the topmost one get parentheses """
        text = render_text(Node(NodeKind.STATEMENT, expression))
        expected = count_operators(expression)
        if expression.kind in BINARY_OPERATORS:
            expected -= 1
        self.assertEqual(expected, text.count('('))
        self.assertTrue(balanced(text))

    @given(expressions)
    def test_operand_expression(self, expression):
        """ Outside of suppressed positions every operator is wrapped """
        text = node_to_str(expression)
        self.assertEqual(count_operators(expression), text.count('( '))
        self.assertEqual(count_operators(expression), text.count(' )'))
        self.assertTrue(balanced(text))


class IndentationTestCase(unittest.TestCase):
    @given(statements)
    def test_indentation_unit(self, statement):
        printer = NescPrinter(f=_Sink())
        printer.print(statement)
        self.assertEqual(0, printer.state.indent_level)
        for line in printer.f.text.splitlines():
            indentation = len(line) - len(line.lstrip(' '))
            self.assertEqual(0, indentation % 4)

    @given(st.integers(0, 8))
    def test_nesting_depth(self, depth):
        statement = Node(NodeKind.STATEMENT, identifier('x'))
        for _ in range(depth):
            statement = Node(NodeKind.COMPOUND_STATEMENT, statement)
        lines = render_text(statement).splitlines()
        self.assertIn('    ' * depth + 'x;', lines)


class IdempotenceTestCase(unittest.TestCase):
    @given(statements)
    def test_round_trip(self, statement):
        """ Dumping and reading a tree does not change its rendering """
        again = read_tree(dump_tree(statement))
        self.assertTrue(again.structural_equal(statement))
        self.assertEqual(render_text(statement), render_text(again))

    @given(statements)
    def test_render_twice(self, statement):
        printer = NescPrinter(f=_Sink())
        printer.print(statement)
        first = printer.f.text
        printer.print(statement)
        self.assertEqual(first + first, printer.f.text)


class HeaderTestCase(unittest.TestCase):
    @given(st.integers(0, 20))
    def test_suppressed_siblings(self, count):
        def line_directive(name):
            return Node(NodeKind.LINE_DIRECTIVE, Node(
                NodeKind.STRING_LITERAL, text=name))

        siblings = [
            Node(NodeKind.STATEMENT, identifier('hidden'))
            for _ in range(count)]
        tree = Node(
            NodeKind.FILE,
            line_directive('"App.nc"'),
            line_directive('"lib\\\\defs.h"'),
            *siblings,
            line_directive('"App.nc"'),
            Node(NodeKind.STATEMENT, identifier('shown')))
        text = render_text(tree)
        self.assertEqual('#include "lib/defs.h"\nshown;\n\n', text)
        self.assertNotIn('hidden', text)


class _Sink:
    """ Output which collects everything written to it """
    def __init__(self):
        self.text = ''

    def write(self, txt):
        self.text += txt


if __name__ == '__main__':
    unittest.main()
