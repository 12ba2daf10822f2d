""" Debug output of syntax trees.

Two forms are supported: a one-line parenthesized dump in tree notation,
which can be read back by the tree reader, and an indented dump with one
node per line.
"""

from .kinds import NodeKind
from .reader import looks_like_constant


BARE_WORD_STOPS = frozenset('() \t\r\n;"')


def escape(text):
    """ Quote a text so that the tree lexer reads it back unchanged """
    return '"{}"'.format(text.replace('\\', '\\\\').replace('"', '\\"'))


def is_bare_word(text):
    return bool(text) and not any(c in BARE_WORD_STOPS for c in text)


def is_raw_string(text):
    """ Test whether a string literal can be written as it is """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return False
    escaped = False
    for c in text[1:-1]:
        if escaped:
            escaped = False
        elif c == '\\':
            escaped = True
        elif c == '"' or c in '\r\n':
            return False
    return not escaped


def dump_tree(node, compact=True):
    """ Render a tree in tree notation on a single line.

    In compact form, leaves are abbreviated to bare words and raw strings
    where the reader would recreate them. Otherwise every node is written
    in full as ``(KIND "text" children...)``.
    """
    if compact:
        return _dump_compact(node, first=False)
    return _dump_full(node)


def _dump_full(node):
    parts = [node.kind.name]
    if node.text is not None and node.text != node.kind.spelling:
        parts.append(escape(node.text))
    parts.extend(_dump_full(c) for c in node.children)
    return '({})'.format(' '.join(parts))


def _dump_compact(node, first):
    """ Dump a node, where first tells if it directly follows its parent's
    kind, where a string would be taken as the parent's text.
    """
    if not node.children:
        if node.kind is NodeKind.IDENTIFIER:
            if is_bare_word(node.text) and \
                    NodeKind.from_name(node.text) is None and \
                    not looks_like_constant(node.text):
                return node.text
        elif node.kind is NodeKind.CONSTANT:
            if is_bare_word(node.text) and looks_like_constant(node.text):
                return node.text
        elif node.kind is NodeKind.STRING_LITERAL:
            if not first and is_raw_string(node.text):
                return node.text
        elif node.text == node.kind.spelling:
            return node.kind.name

    parts = [node.kind.name]
    if node.text is not None and node.text != node.kind.spelling:
        parts.append(escape(node.text))
    has_text = len(parts) > 1
    for index, c in enumerate(node.children):
        parts.append(_dump_compact(c, first=(index == 0 and not has_text)))
    return '({})'.format(' '.join(parts))


class TreePrinter:
    """ Print a tree with one node per line, indented by depth """
    def __init__(self, file=None):
        self.indent = 0
        self.file = file

    def print(self, node):
        self._print(node)
        self.indent += 1
        try:
            for child in node.children:
                self.print(child)
        finally:
            self.indent -= 1

    def _print(self, node):
        if node.text is None:
            line = node.kind.name
        else:
            line = '{} {}'.format(node.kind.name, escape(node.text))
        print('    ' * self.indent + line, file=self.file)


def print_tree(node, file=None):
    """ Display a syntax tree, one node per line """
    TreePrinter(file=file).print(node)
