""" Syntax highlighting of rendered source code.

nesC is close enough to C for the pygments C lexer.
"""

import logging
from pygments import highlight
from pygments.formatters import HtmlFormatter, Terminal256Formatter
from pygments.lexers import CLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from .common import CompilerError


logger = logging.getLogger('highlight')


def get_formatter(options):
    """ Select the pygments formatter for the given print options """
    try:
        style = get_style_by_name(options['style'])
    except ClassNotFound:
        raise CompilerError('Unknown style "{}"'.format(options['style']))

    if options['html']:
        return HtmlFormatter(full=True, style=style, title='nesC source')
    else:
        return Terminal256Formatter(style=style)


def highlight_source(source, options):
    """ Highlight nesC source text according to the print options """
    formatter = get_formatter(options)
    logger.debug('Highlighting with %s', formatter.name)
    return highlight(source, CLexer(), formatter)
