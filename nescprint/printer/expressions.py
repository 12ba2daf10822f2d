""" Rendering rules for expressions.

Parentheses are added without looking at operator precedence. Every
binary expression gets enclosing parentheses, except the topmost one of a
statement or a controlling expression. Operands never are topmost.
"""

from contextlib import contextmanager
from ..syntax.kinds import NodeKind, BINARY_OPERATORS

PREFIX_OPERATORS = {
    NodeKind.PRE_INCREMENT: '++',
    NodeKind.PRE_DECREMENT: '--',
    NodeKind.ADDRESS_OF: '&',
    NodeKind.UNARY_PLUS: '+',
    NodeKind.UNARY_MINUS: '-',
    NodeKind.BITCOMPLEMENT: '~',
    NodeKind.NOT: '!',
}


class ExpressionRules:
    """ Mixin rendering expressions """

    def gen_expr(self, node):
        """ Format an expression as text """
        kind = node.kind
        if kind in (NodeKind.IDENTIFIER, NodeKind.CONSTANT,
                    NodeKind.STRING_LITERAL):
            self.emit(node.text)
        elif kind in BINARY_OPERATORS:
            with self.gen_parenthesized():
                self.gen(node[0])
                self.emit(' ')
                self.emit(node.text)
                self.emit(' ')
                self.gen(node[1])
        elif kind is NodeKind.CONDITIONAL:
            with self.gen_parenthesized():
                self.gen(node[0])
                self.emit(' ? ')
                self.gen(node[1])
                self.emit(' : ')
                self.gen(node[2])
        elif kind in PREFIX_OPERATORS:
            self.emit(PREFIX_OPERATORS[kind])
            self.gen_operand(node[0])
        elif kind is NodeKind.DEREFERENCE:
            # Keep the '*' apart from a multiplication
            self.emit('( *')
            self.gen_operand(node[0])
            self.emit(' )')
        elif kind is NodeKind.POSTFIX_EXPRESSION:
            with self.state.expression_parentheses(True):
                self.gen_children(node)
        elif kind is NodeKind.ARGUMENT_LIST:
            self.emit('( ')
            self.gen_joined(node.children)
            self.emit(' )')
        elif kind is NodeKind.ARRAY_ELEMENT_SELECTION:
            self.emit('[')
            self.gen(node[0])
            self.emit(']')
        elif kind in (NodeKind.DOT, NodeKind.ARROW):
            self.emit(node.text)
            self.gen(node[0])
        elif kind in (NodeKind.PLUSPLUS, NodeKind.MINUSMINUS):
            # Postfix operators, applied to the chain before them
            self.emit(node.text)
        elif kind in (NodeKind.SIZEOF_TYPE, NodeKind.SIZEOF_EXPRESSION):
            self.emit('sizeof( ')
            with self.state.expression_parentheses(False):
                self.gen_children(node)
            self.emit(' )')
        elif kind is NodeKind.CAST:
            self.emit('(')
            self.gen_children(node, start=1)
            self.emit(')( ')
            with self.state.expression_parentheses(False):
                self.gen(node[0])
            self.emit(' )')
        elif kind is NodeKind.BUILTIN_VA_ARG:
            self.emit('__builtin_va_arg(')
            with self.state.expression_parentheses(True):
                self.gen(node[0])
                self.emit(', ')
                self.gen(node[1])
            self.emit(')')
        else:  # pragma: no cover
            raise NotImplementedError(str(kind))

    def gen_operand(self, node):
        with self.state.expression_parentheses(True):
            self.gen(node)

    @contextmanager
    def gen_parenthesized(self):
        """ Wrap an operator in parentheses, unless it is topmost """
        parenthesize = not self.state.paren_suppressed
        if parenthesize:
            self.emit('( ')
        with self.state.expression_parentheses(True):
            yield
        if parenthesize:
            self.emit(' )')
