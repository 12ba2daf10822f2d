""" Rendering rules for declarations and types. """

from ..syntax.kinds import NodeKind, RAW_TOKENS, STRUCTURE_TAGS


class DeclarationRules:
    """ Mixin rendering declarations, declarators and type specifiers """

    def gen_declaration(self, node):
        """ Spit out a declaration or a part of it """
        kind = node.kind
        if kind in RAW_TOKENS or kind is NodeKind.RAW_IDENTIFIER:
            # The separating space is only needed after type names, but it
            # is harmless in other places.
            self.emit(node.text)
            self.emit(' ')
        elif kind is NodeKind.TYPE_NAME:
            for child in node.children:
                self.gen(child)
                self.emit(' ')
        elif kind is NodeKind.DECLARATION:
            self.indent()
            self.gen_specified(node)
            if not node[0].is_kind(NodeKind.FUNCTION_DEFINITION):
                self.emit(';')
            self.emit('\n')
        elif kind in STRUCTURE_TAGS:
            self.gen_struct(node)
        elif kind is NodeKind.ENUM:
            self.gen_enum(node)
        elif kind is NodeKind.ENUMERATOR:
            self.gen(node[0])
            if len(node) > 1:
                self.emit(' = ')
                self.gen(node[1])
        elif kind is NodeKind.DECLARATOR_LIST:
            self.gen_joined(node.children)
        elif kind is NodeKind.INIT_DECLARATOR:
            self.gen(node[0])
            if len(node) > 1:
                self.emit(' = ')
                self.gen_children(node, start=1)
        elif kind is NodeKind.DECLARATOR:
            self.gen_declarator(node)
        elif kind is NodeKind.INITIALIZER_LIST:
            self.emit('{ ')
            self.gen_joined(node.children)
            self.emit(' }')
        elif kind is NodeKind.POINTER_QUALIFIER:
            self.emit('*')
            self.gen_children(node)
        elif kind is NodeKind.DECLARATOR_ARRAY_MODIFIER:
            self.emit('[')
            if node.children:
                self.gen(node[0])
            self.emit(']')
        elif kind is NodeKind.DECLARATOR_PARAMETER_LIST_MODIFIER:
            self.emit('( ')
            self.gen(node[0])
            self.emit(' )')
        elif kind is NodeKind.PARAMETER_LIST:
            with self.state.parameter_scope():
                self.gen_joined(node.children)
        elif kind is NodeKind.PARAMETER:
            self.gen_specified(node)
        elif kind is NodeKind.FUNCTION_DEFINITION:
            for child in node.children:
                if child.is_kind(NodeKind.COMPOUND_STATEMENT):
                    self.emit('\n')
                self.gen(child)
        else:  # pragma: no cover
            raise NotImplementedError(str(kind))

    def gen_specified(self, node):
        """ Render specifiers and declarators, with an extra space after
        typedef names """
        for child in node.children:
            self.gen(child)
            if child.is_kind(NodeKind.RAW_IDENTIFIER):
                self.emit(' ')

    def gen_declarator(self, node):
        """ Render a declarator.

        Declarators nested in another declarator are parenthesized, for
        example in ``int (*p)(int x);``. The parameter list opens a new
        scope, so the declarator of ``x`` is not parenthesized. Checking
        depth instead of precedence sometimes adds parentheses which are
        not needed.
        """
        nested = self.state.in_nested_declarator
        if nested:
            self.emit('(')
        with self.state.declarator():
            for child in node.children:
                self.gen(child)
                self.emit(' ')
        if nested:
            self.emit(')')

    def gen_struct(self, node):
        self.emit(node.text)
        self.emit(' ')
        members = node.children
        if members and not members[0].is_kind(NodeKind.DECLARATION):
            self.gen(members[0])
            self.emit(' ')
            members = members[1:]
        if members:
            self.emit('{\n')
            with self.state.indented():
                for member in members:
                    self.gen(member)
            self.indent()
            self.emit('} ')

    def gen_enum(self, node):
        self.emit('enum ')
        enumerators = node.children
        if enumerators and \
                not enumerators[0].is_kind(NodeKind.ENUMERATOR):
            self.gen(enumerators[0])
            self.emit(' ')
            enumerators = enumerators[1:]
        if enumerators:
            self.emit('{ ')
            self.gen_joined(enumerators)
            self.emit('} ')
