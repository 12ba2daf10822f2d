""" Read syntax trees from tree notation.

Tree notation is the parenthesized form written by the tree dumper. For
example, the expression statement ``x = 1;`` reads:

    (STATEMENT (ASSIGN x 1))

The rules are:

- A list ``(KIND ...)`` creates a node of the given kind.
- A quoted string directly after the kind is the text of the node.
- A quoted string in any other position is a string literal child, with
  its quotes kept as part of the text.
- A bare word is a node of that kind when it names a kind, a constant when
  it looks like a number or character literal, and an identifier otherwise.
- A ';' starts a comment which runs until the end of the line.
"""

import logging
from ..common import TreeSyntaxError
from .kinds import NodeKind
from .lexer import TreeLexer
from .nodes import Node


logger = logging.getLogger('reader')


def looks_like_constant(word):
    """ Determine whether a bare word is a numeric or character literal """
    if word[0].isdigit() or word[0] == "'":
        return True
    return len(word) > 1 and word[0] == '.' and word[1].isdigit()


def unescape(text):
    """ Remove the quotes and backslash escapes from a string token """
    parts = []
    chars = iter(text[1:-1])
    for c in chars:
        if c == '\\':
            c = next(chars)
        parts.append(c)
    return ''.join(parts)


class TreeReader:
    """ Recursive descent parser for tree notation """

    def __init__(self):
        self.token = None
        self.tokens = None

    def read(self, text, filename='<tree>'):
        """ Read all trees from the given text """
        self.init_lexer(TreeLexer().tokenize(text, filename))
        trees = []
        while self.peek != 'EOF':
            trees.append(self.parse_tree())
        logger.debug('Read %s tree(s) from %s', len(trees), filename)
        return trees

    def init_lexer(self, tokens):
        """ Initialize the parser with the given tokens (an iterator) """
        self.tokens = tokens
        self.token = next(self.tokens, None)

    def error(self, msg, loc=None):
        """ Raise an error at the given location """
        if loc is None:
            loc = self.token.loc
        raise TreeSyntaxError(msg, loc)

    @property
    def peek(self):
        """ Look at the next token to parse without popping it """
        return self.token.typ

    def next_token(self):
        """ Advance to the next token """
        tok = self.token
        if tok.typ != 'EOF':
            self.token = next(self.tokens)
        return tok

    def consume(self, typ):
        """ Assert that the next token is typ, and if so, return it """
        if self.peek != typ:
            self.error('Expected "{}", got "{}"'.format(typ, self.peek))
        return self.next_token()

    def parse_tree(self):
        """ Parse a single node enclosed in parenthesis """
        self.consume('(')
        if self.peek != 'word':
            self.error('Expected a node kind')
        head = self.next_token()
        kind = NodeKind.from_name(head.val)
        if kind is None:
            self.error('Unknown node kind "{}"'.format(head.val), head.loc)

        text = None
        if self.peek == 'string':
            text = unescape(self.next_token().val)

        children = []
        while self.peek != ')':
            if self.peek == 'EOF':
                self.error('Unexpected end of file')
            children.append(self.parse_child())
        self.consume(')')
        return Node(kind, *children, text=text, location=head.loc)

    def parse_child(self):
        if self.peek == '(':
            return self.parse_tree()

        tok = self.next_token()
        if tok.typ == 'string':
            return Node(
                NodeKind.STRING_LITERAL, text=tok.val, location=tok.loc)
        elif tok.typ == 'word':
            kind = NodeKind.from_name(tok.val)
            if kind is not None:
                return Node(kind, location=tok.loc)
            elif looks_like_constant(tok.val):
                return Node(NodeKind.CONSTANT, text=tok.val, location=tok.loc)
            else:
                return Node(
                    NodeKind.IDENTIFIER, text=tok.val, location=tok.loc)
        else:
            self.error('Unexpected "{}"'.format(tok.val), tok.loc)


def read_trees(text, filename='<tree>'):
    """ Read all trees given in tree notation """
    assert isinstance(text, str)
    return TreeReader().read(text, filename)


def read_tree(text, filename='<tree>'):
    """ Read a single tree given in tree notation.

    >>> read_tree('(STATEMENT (ASSIGN x 1))')
    STATEMENT(ASSIGN[=](IDENTIFIER[x], CONSTANT[1]))
    """
    trees = read_trees(text, filename)
    if len(trees) != 1:
        raise TreeSyntaxError(
            'Expected a single tree, got {}'.format(len(trees)))
    return trees[0]


def read_tree_file(f):
    """ Read a single tree from a file object or a filename """
    if hasattr(f, 'read'):
        filename = getattr(f, 'name', '<tree>')
        return read_tree(f.read(), filename=filename)
    with open(f, 'r') as handle:
        return read_tree(handle.read(), filename=f)
