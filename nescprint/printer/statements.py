""" Rendering rules for statements. """

from ..syntax.kinds import NodeKind


class StatementRules:
    """ Mixin rendering statements.

    Labels are rendered one level shallower than the statement they label.
    Controlled statements are indented one level, except for compound
    statements, which line up their braces with the controlling construct.
    """

    def gen_statement(self, node):
        """ Render a single statement as text """
        kind = node.kind
        if kind is NodeKind.STATEMENT:
            # Expression statement
            self.indent()
            if node.children:
                self.gen_top_expr(node[0])
            self.emit(';\n')
        elif kind is NodeKind.COMPOUND_STATEMENT:
            self.indent()
            self.emit('{\n')
            with self.state.indented():
                self.gen_children(node)
            self.indent()
            self.emit('}\n')
        elif kind is NodeKind.LABELED_STATEMENT:
            with self.state.outdented():
                self.indent()
                self.emit(node[0].text)
                self.emit(':\n')
            self.gen(node[1])
        elif kind is NodeKind.CASE:
            with self.state.outdented():
                self.indent()
                self.emit('case ')
                self.gen(node[0])
                self.emit(':\n')
            self.gen(node[1])
        elif kind is NodeKind.DEFAULT:
            # 'default' in switch statements, not in declarations
            with self.state.outdented():
                self.indent()
                self.emit('default:\n')
            self.gen(node[0])
        elif kind is NodeKind.ATOMIC:
            self.indent()
            self.emit('atomic\n')
            self.gen_body(node[0])
        elif kind is NodeKind.IF:
            self.gen_header('if', node[0])
            self.gen_body(node[1])
            if len(node) == 3:
                self.indent()
                self.emit('else\n')
                self.gen_body(node[2])
        elif kind is NodeKind.SWITCH:
            self.gen_header('switch', node[0])
            self.gen_body(node[1])
        elif kind is NodeKind.WHILE:
            self.gen_header('while', node[0])
            self.gen_body(node[1])
        elif kind is NodeKind.DO:
            self.indent()
            self.emit('do\n')
            self.gen_body(node[0])
            self.indent()
            self.emit('while( ')
            self.gen_top_expr(node[1])
            self.emit(');\n')
        elif kind is NodeKind.FOR:
            self.indent()
            self.emit('for( ')
            self.gen_joined(node.children[:3], '; ')
            self.emit(' )\n')
            self.gen_body(node[3])
        elif kind in (NodeKind.FOR_INITIALIZE, NodeKind.FOR_CONDITION,
                      NodeKind.FOR_ITERATION):
            if node.children:
                self.gen_top_expr(node[0])
        elif kind is NodeKind.GOTO:
            self.indent()
            self.emit('goto ')
            # The label is the last child, also when the parser keeps a
            # leading child in front of it
            self.gen(node[-1])
            self.emit(';\n')
        elif kind is NodeKind.CONTINUE:
            self.indent()
            self.emit('continue;\n')
        elif kind is NodeKind.BREAK:
            self.indent()
            self.emit('break;\n')
        elif kind is NodeKind.RETURN:
            self.indent()
            self.emit('return ')
            if node.children:
                self.gen(node[0])
            self.emit(';\n')
        else:  # pragma: no cover
            raise NotImplementedError(str(kind))

    def gen_header(self, keyword, expression):
        """ Render the line of a control construct, up to its body """
        self.indent()
        self.emit(keyword)
        self.emit('( ')
        self.gen_top_expr(expression)
        self.emit(' )\n')

    def gen_body(self, statement):
        """ Render the statement controlled by a construct """
        if statement.is_kind(NodeKind.COMPOUND_STATEMENT):
            self.gen(statement)
        else:
            with self.state.indented():
                self.gen(statement)

    def gen_top_expr(self, expression):
        """ Render an expression without enclosing parentheses """
        with self.state.expression_parentheses(False):
            self.gen(expression)
