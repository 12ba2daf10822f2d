""" Rendering rules for the large scale structure of nesC programs.

This covers files, interfaces, components and the wiring inside
configurations. Line directives are used to turn the pasted contents of
headers back into include directives.
"""

from ..syntax.kinds import NodeKind


class StructureRules:
    """ Mixin rendering files, interfaces, components and wiring """

    def gen_structure(self, node):
        kind = node.kind
        if kind is NodeKind.FILE:
            self.gen_unsuppressed(node.children)
        elif kind is NodeKind.LINE_DIRECTIVE:
            include = self.state.headers.enter_file(node[0].text)
            if include:
                self.emit(include)
                self.emit('\n')
        elif kind is NodeKind.INTERFACE:
            self.gen_interface(node)
        elif kind is NodeKind.COMPONENT_DEFINITION:
            self.gen_component(node)
        elif kind is NodeKind.COMPONENT_KIND:
            for child in node.children:
                self.emit(child.text)
                self.emit(' ')
        elif kind is NodeKind.COMPONENT_PARAMETER_LIST:
            self.emit('(')
            with self.state.parameter_scope():
                self.gen_joined(node.children)
            self.emit(') ')
        elif kind is NodeKind.SPECIFICATION:
            self.emit(' {\n')
            with self.state.indented():
                self.gen_children(node)
            self.indent()
            self.emit('}\n')
        elif kind in (NodeKind.USES, NodeKind.PROVIDES):
            self.indent()
            self.emit('uses' if kind is NodeKind.USES else 'provides')
            self.emit(' {\n')
            with self.state.indented():
                self.gen_children(node)
            self.indent()
            self.emit('}\n')
        elif kind is NodeKind.INTERFACE_TYPE:
            # Assume there is no 'remote' or 'requires' part left
            self.emit(node[0].text)
            if len(node) > 1:
                self.emit('<')
                self.gen_joined(node.children[1:])
                self.emit('>')
        elif kind is NodeKind.IMPLEMENTATION:
            self.indent()
            self.emit('implementation {\n')
            with self.state.indented():
                self.gen_unsuppressed(node.children)
            self.indent()
            self.emit('}\n')
        elif kind is NodeKind.COMPONENTS:
            self.indent()
            self.emit('components ')
            self.gen_joined(node.children)
            self.emit(';\n')
        elif kind is NodeKind.COMPONENT_DECLARATION:
            self.gen(node[0])
            if len(node) == 2:
                self.emit(' as ')
                self.gen(node[1])
        elif kind is NodeKind.COMPONENT_INSTANTIATION:
            self.emit('new ')
            self.gen(node[0])
            self.emit('( ')
            if len(node) > 1:
                self.gen(node[1])
            self.emit(' )')
        elif kind is NodeKind.COMPONENT_ARGUMENTS:
            self.gen_joined(node.children)
        elif kind is NodeKind.CONNECTION:
            self.gen_connection(node)
        elif kind is NodeKind.IDENTIFIER_PATH:
            self.gen_joined(node.children, '.')
        elif kind is NodeKind.NULL:
            # Placeholder left behind by tree transformations
            self.gen_children(node)
        else:  # pragma: no cover
            raise NotImplementedError(str(kind))

    def gen_unsuppressed(self, nodes):
        """ Render a list of top level nodes, skipping header contents """
        for child in nodes:
            if not self.state.header_suppressed or \
                    child.is_kind(NodeKind.LINE_DIRECTIVE):
                self.gen(child)

    def gen_interface(self, node):
        if node[0].is_kind(NodeKind.INTERFACE_TYPE):
            # Interface used or provided in a specification
            self.indent()
            self.emit('interface ')
            self.gen(node[0])
            if len(node) > 1:
                self.emit(' as ')
                self.gen(node[1])
            self.emit(';\n')
        else:
            # Definition of an interface type
            self.indent()
            self.emit('interface ')
            self.emit(node[0].text)
            self.emit(' {\n')
            with self.state.indented():
                self.gen_children(node, start=1)
            self.indent()
            self.emit('}\n')

    def gen_component(self, node):
        """ Render a module or configuration.

        The children are the kind, the name, the specification and then
        optionally the implementation and the parameter list.
        """
        self.gen(node[0])
        self.gen(node[1])

        parameters = None
        if len(node) == 5:
            parameters = node[4]
        elif len(node) == 4 and \
                node[3].is_kind(NodeKind.COMPONENT_PARAMETER_LIST):
            parameters = node[3]
        if parameters is not None:
            self.gen(parameters)

        self.gen(node[2])

        if len(node) >= 4 and node[3].is_kind(NodeKind.IMPLEMENTATION):
            self.gen(node[3])

    def gen_connection(self, node):
        """ Render wiring between two endpoints.

        The first child is the wiring operator, holding the right endpoint
        as its children. The second child is the left endpoint.
        """
        operator = node[0]
        self.indent()
        self.gen(node[1])
        self.emit(' ')
        self.emit(operator.text)
        self.emit(' ')
        self.gen_children(operator)
        self.emit(';\n')
