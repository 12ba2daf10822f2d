"""
The api module contains a set of handy functions to read, render and dump
nesC syntax trees.
"""

import io
import logging
from .common import get_file
from .highlight import highlight_source
from .options import PrintOptions
from .printer import NescPrinter
from .syntax import read_tree, dump_tree, print_tree


__all__ = ['render', 'render_file', 'dump', 'dump_file']

logger = logging.getLogger('api')


def get_options(options):
    if options is None:
        return PrintOptions()
    return options


def read_source(source):
    """ Get a tree from a node, tree notation text or a tree file """
    if isinstance(source, str) and source.lstrip().startswith('('):
        return read_tree(source)
    elif hasattr(source, 'kind'):
        return source
    f = get_file(source)
    try:
        filename = getattr(f, 'name', '<tree>')
        return read_tree(f.read(), filename=filename)
    finally:
        if f is not source:
            f.close()


def render(source, output=None, options=None):
    """ Render a syntax tree as nesC source code.

    The source can be a tree, tree notation text, a filename or a file
    object. Returns the text when no output file is given.
    """
    options = get_options(options)
    tree = read_source(source)
    f = io.StringIO()
    NescPrinter(f).print(tree)
    text = f.getvalue()
    logger.debug('Rendered %s lines', text.count('\n'))
    if options.highlighted:
        text = highlight_source(text, options)
    if output is None:
        return text
    output.write(text)


def render_file(source, output, options=None):
    """ Render the tree in the file named source into the file output """
    with open(output, 'w') as f:
        render(source, output=f, options=options)


def dump(source, output=None, options=None):
    """ Dump a syntax tree for debugging.

    Writes one node per line, or the whole tree on one line in tree
    notation when the 'one_line' option is enabled.
    """
    options = get_options(options)
    tree = read_source(source)
    if options['one_line']:
        text = dump_tree(tree) + '\n'
    else:
        f = io.StringIO()
        print_tree(tree, file=f)
        text = f.getvalue()
    if output is None:
        return text
    output.write(text)


def dump_file(source, output, options=None):
    """ Dump the tree in the file named source into the file output """
    with open(output, 'w') as f:
        dump(source, output=f, options=options)
