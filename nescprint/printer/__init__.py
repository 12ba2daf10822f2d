""" Syntax tree to nesC source code printer.

The printer is composed of one mixin per family of rules:

- :class:`DeclarationRules`: declarations, declarators and types.
- :class:`StatementRules`: statements.
- :class:`ExpressionRules`: expressions.
- :class:`StructureRules`: files, interfaces, components and wiring.
- :class:`BasePrinter`: output, render state and dispatch.
"""

import io
from .base import BasePrinter
from .declarations import DeclarationRules
from .expressions import ExpressionRules
from .state import RenderState, HeaderFilter, HeaderState
from .statements import StatementRules
from .structure import StructureRules


class NescPrinter(DeclarationRules, StatementRules, ExpressionRules,
                  StructureRules, BasePrinter):
    """ Render a nesC syntax tree as source code.

    An instance keeps state during a render, so it renders one tree at a
    time.
    """
    def print(self, tree):
        """ Render a whole tree """
        self.render_tree(tree)


def render_ast(tree, f=None):
    """ Render a tree as nesC source code to the given file.

    For example:

    >>> from nescprint.syntax import read_tree
    >>> render_ast(read_tree('(STATEMENT (ASSIGN x (STAR a (PLUS b c))))'))
    x = ( a * ( b + c ) );
    <BLANKLINE>
    """
    NescPrinter(f).print(tree)


def render_text(tree):
    """ Render a tree as nesC source code and return the text """
    f = io.StringIO()
    NescPrinter(f).print(tree)
    return f.getvalue()


def node_to_str(node):
    """ Render a part of a tree, without the final newline """
    f = io.StringIO()
    NescPrinter(f).gen(node)
    return f.getvalue()


__all__ = [
    'NescPrinter', 'RenderState', 'HeaderFilter', 'HeaderState',
    'render_ast', 'render_text', 'node_to_str',
]
