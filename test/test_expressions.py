import logging
import unittest

from nescprint.printer import render_text, node_to_str
from nescprint.syntax import read_tree


def expr(text):
    """ Render an expression at the top of a statement """
    output = render_text(read_tree('(STATEMENT {})'.format(text)))
    assert output.endswith(';\n\n')
    return output[:-3]


class ExpressionTestCase(unittest.TestCase):
    """ Check expressions and where they get their parentheses """
    def test_leaves(self):
        self.assertEqual('x', expr('x'))
        self.assertEqual('0x1f', expr('0x1f'))
        self.assertEqual("'a'", expr("(CONSTANT \"'a'\")"))

    def test_binary(self):
        self.assertEqual('a + ( b * c )', expr('(PLUS a (STAR b c))'))
        self.assertEqual('( a - b ) - c', expr('(MINUS (MINUS a b) c)'))
        self.assertEqual('a << 2', expr('(LSHIFT a 2)'))
        self.assertEqual('x *= 2', expr('(MULTASSIGN x 2)'))

    def test_assignment(self):
        self.assertEqual(
            'x = ( a * ( b + c ) )', expr('(ASSIGN x (STAR a (PLUS b c)))'))

    def test_not_suppressed(self):
        """ Outside of a statement, the top operator gets parentheses """
        self.assertEqual('( a + b )', node_to_str(read_tree('(PLUS a b)')))

    def test_conditional(self):
        self.assertEqual(
            'x = ( ( a > b ) ? a : b )',
            expr('(ASSIGN x (CONDITIONAL (GREATER a b) a b))'))
        self.assertEqual('c ? 1 : 2', expr('(CONDITIONAL c 1 2)'))

    def test_prefix(self):
        self.assertEqual('-x', expr('(UNARY_MINUS x)'))
        self.assertEqual('+x', expr('(UNARY_PLUS x)'))
        self.assertEqual('&x', expr('(ADDRESS_OF x)'))
        self.assertEqual('~x', expr('(BITCOMPLEMENT x)'))
        self.assertEqual('--x', expr('(PRE_DECREMENT x)'))
        self.assertEqual('!( a && b )', expr('(NOT (AND a b))'))

    def test_dereference(self):
        self.assertEqual('( *p ) = 0', expr('(ASSIGN (DEREFERENCE p) 0)'))
        self.assertEqual(
            '( *( p + 1 ) )', expr('(DEREFERENCE (PLUS p 1))'))
        self.assertEqual(
            'a * ( *p )', expr('(STAR a (DEREFERENCE p))'))

    def test_call(self):
        self.assertEqual(
            'f( a, ( b + 1 ) )',
            expr('(POSTFIX_EXPRESSION f (ARGUMENT_LIST a (PLUS b 1)))'))
        self.assertEqual(
            'f(  )', expr('(POSTFIX_EXPRESSION f ARGUMENT_LIST)'))

    def test_string_argument(self):
        self.assertEqual(
            'printf( fmt, "x" )',
            expr('(POSTFIX_EXPRESSION printf (ARGUMENT_LIST fmt "x"))'))

    def test_postfix_chain(self):
        self.assertEqual(
            's.x->y[( i + 1 )]',
            expr('(POSTFIX_EXPRESSION s (DOT x) (ARROW y) '
                 '(ARRAY_ELEMENT_SELECTION (PLUS i 1)))'))
        self.assertEqual('i++', expr('(POSTFIX_EXPRESSION i PLUSPLUS)'))
        self.assertEqual('i--', expr('(POSTFIX_EXPRESSION i MINUSMINUS)'))

    def test_postfix_operand(self):
        self.assertEqual(
            '-p->x', expr('(UNARY_MINUS (POSTFIX_EXPRESSION p (ARROW x)))'))

    def test_sizeof(self):
        self.assertEqual(
            'sizeof( a + b )', expr('(SIZEOF_EXPRESSION (PLUS a b))'))
        self.assertEqual(
            'sizeof( struct s  )', expr('(SIZEOF_TYPE (STRUCT s))'))

    def test_cast(self):
        self.assertEqual(
            '(unsigned char )( x + 1 )',
            expr('(CAST (PLUS x 1) UNSIGNED CHAR)'))

    def test_va_arg(self):
        self.assertEqual(
            '__builtin_va_arg(ap, int )', expr('(BUILTIN_VA_ARG ap INT)'))


class FallbackTestCase(unittest.TestCase):
    def test_unknown_rule(self):
        """ A node without a rule shows its text and a warning """
        with self.assertLogs('printer', level=logging.WARNING) as cm:
            text = expr('(MODULE x)')
        self.assertEqual('module ', text)
        self.assertIn('MODULE', cm.output[0])

    def test_unknown_rule_without_text(self):
        with self.assertLogs('printer', level=logging.WARNING):
            text = expr('(GENERIC "")')
        self.assertEqual(' ', text)


if __name__ == '__main__':
    unittest.main()
