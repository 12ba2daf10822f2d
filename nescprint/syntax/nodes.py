""" Syntax tree nodes.

A tree is built from a single node class. The kind of a node determines
how many children it has and what they mean; the node itself does not
check this.
"""

from .kinds import NodeKind


class Node:
    """ Tree node with a kind, optional text and possibly some children.

    When no text is given, keyword and operator kinds take their source
    spelling as text:

    >>> Node(NodeKind.PLUS, Node(NodeKind.IDENTIFIER, text='a'),
    ...      Node(NodeKind.CONSTANT, text='1'))
    PLUS[+](IDENTIFIER[a], CONSTANT[1])
    """

    __slots__ = ('kind', 'text', 'children', 'location')

    def __init__(self, kind, *children, text=None, location=None):
        assert isinstance(kind, NodeKind), str(kind)
        assert all(isinstance(c, Node) for c in children)
        self.kind = kind
        self.text = kind.spelling if text is None else text
        self.children = children
        self.location = location

    def __repr__(self):
        if self.text is not None:
            val = '[{}]'.format(self.text)
        else:
            val = ''
        if self.children:
            ch = '({})'.format(', '.join(repr(c) for c in self.children))
        else:
            ch = ''
        return '{}{}{}'.format(self.kind.name, val, ch)

    def __getitem__(self, index):
        return self.children[index]

    def __len__(self):
        return len(self.children)

    @property
    def child_count(self):
        return len(self.children)

    def child(self, index):
        """ Get the child at the given position """
        return self.children[index]

    def is_kind(self, *kinds):
        """ Test whether this node has one of the given kinds """
        return self.kind in kinds

    def structural_equal(self, other):
        """ Compare kind, text and children, ignoring locations """
        return self.kind == other.kind and \
            self.text == other.text and \
            len(self.children) == len(other.children) and \
            all(a.structural_equal(b) for a, b in
                zip(self.children, other.children))

    def walk(self):
        """ Iterate over this node and all its descendants, depth first """
        yield self
        for c in self.children:
            yield from c.walk()


def identifier(name):
    """ Shortcut to create an identifier leaf """
    return Node(NodeKind.IDENTIFIER, text=name)


def constant(value):
    """ Shortcut to create a constant leaf """
    return Node(NodeKind.CONSTANT, text=str(value))
