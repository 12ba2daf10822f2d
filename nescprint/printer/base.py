""" Core of the syntax tree to source code printer.

The printer walks the tree once, depth first, and writes text to the
output as it goes. Each node kind belongs to one rule family, and each
family is implemented by a mixin class.
"""

import logging
import sys
from ..syntax.kinds import DECLARATION_KINDS, STATEMENT_KINDS
from ..syntax.kinds import EXPRESSION_KINDS, STRUCTURE_KINDS
from .state import RenderState


logger = logging.getLogger('printer')


class BasePrinter:
    """ Output handling, render state and dispatch of the printer """
    def __init__(self, f=None):
        self.f = f
        self.state = RenderState()

    def render_tree(self, tree):
        """ Render a whole tree, followed by a newline """
        logger.debug('Rendering tree rooted at %s', tree.kind.name)
        self.state.reset()
        self.gen(tree)
        self.emit('\n')

    def gen(self, node):
        """ Render a single node by the rules of its family """
        kind = node.kind
        if kind in DECLARATION_KINDS:
            self.gen_declaration(node)
        elif kind in STATEMENT_KINDS:
            self.gen_statement(node)
        elif kind in EXPRESSION_KINDS:
            self.gen_expr(node)
        elif kind in STRUCTURE_KINDS:
            self.gen_structure(node)
        else:
            self.gen_fallback(node)

    def gen_fallback(self, node):
        """ Render a node for which there is no rule.

        This shows the text of the node in the output, which is wrong but
        visible, and does not look at the children.
        """
        logger.warning(
            'No rule to render %s, emitting its text', node.kind.name)
        if node.text is not None:
            self.emit(node.text)
        self.emit(' ')

    def gen_children(self, node, start=0):
        for child in node.children[start:]:
            self.gen(child)

    def gen_joined(self, nodes, separator=', '):
        for index, child in enumerate(nodes):
            if index:
                self.emit(separator)
            self.gen(child)

    def emit(self, txt):
        """ Write text to the output """
        f = sys.stdout if self.f is None else self.f
        f.write(txt)

    def indent(self):
        """ Start a line at the current indentation level """
        self.emit(self.state.indentation)
