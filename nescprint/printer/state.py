""" Mutable state threaded through a single render.

All changes to the state are made with context managers, so that every
change is undone when the rule that made it is left, also when an
exception is raised halfway.
"""

import enum
import logging
from contextlib import contextmanager


logger = logging.getLogger('printer')

HEADER_SUFFIXES = ('.h"', '.h>')


class HeaderState(enum.Enum):
    """ Whether text from the main file or from an included header is being
    visited """
    EMITTING = 1
    SUPPRESSED = 2


class HeaderFilter:
    """ Reconstruct include directives from line directives.

    The preprocessor has pasted the contents of headers into the tree. A
    line directive that names a header marks the start of such contents;
    a line directive naming any other file marks the end of it.
    """
    def __init__(self):
        self.state = HeaderState.EMITTING

    @property
    def suppressed(self):
        return self.state is HeaderState.SUPPRESSED

    def reset(self):
        self.state = HeaderState.EMITTING

    def enter_file(self, quoted_name):
        """ Process a line directive for the given quoted file name.

        Returns the include directive to emit, if any.
        """
        if not quoted_name.endswith(HEADER_SUFFIXES):
            if self.suppressed:
                logger.debug('Back in main file %s', quoted_name)
            self.state = HeaderState.EMITTING
            return None

        if self.suppressed:
            return None

        self.state = HeaderState.SUPPRESSED
        # Always output forward slashes, also for trees made on windows
        quoted_name = quoted_name.replace('\\\\', '/').replace('\\', '/')
        logger.debug('Reconstructed include of %s', quoted_name)
        return '#include {}'.format(quoted_name)


class RenderState:
    """ State consulted and updated by the rendering rules """
    INDENT_UNIT = '    '

    def __init__(self):
        self.indent_level = 0
        self.paren_suppressed = False
        self.headers = HeaderFilter()

        # One counter per parameter list scope, counting the declarators
        # entered in that scope.
        self.declarator_depth = [0]

    def reset(self):
        self.indent_level = 0
        self.paren_suppressed = False
        self.headers.reset()
        self.declarator_depth = [0]

    @property
    def header_suppressed(self):
        return self.headers.suppressed

    @property
    def indentation(self):
        """ The whitespace which starts a line at the current level """
        return self.INDENT_UNIT * max(self.indent_level, 0)

    @property
    def in_nested_declarator(self):
        """ Whether a declarator in the current scope is being rendered """
        return self.declarator_depth[-1] != 0

    @contextmanager
    def indented(self, amount=1):
        """ Context manager which increases and decreases the amount
        of indentation.
        """
        self.indent_level += amount
        try:
            yield
        finally:
            self.indent_level -= amount

    @contextmanager
    def outdented(self):
        """ Render a label one level shallower than its body.

        A label at the top level takes the level to -1, which the
        indentation property renders as no indentation at all.
        """
        with self.indented(-1):
            yield

    @contextmanager
    def parameter_scope(self):
        """ Start counting declarators from zero, for a parameter list """
        self.declarator_depth.append(0)
        try:
            yield
        finally:
            self.declarator_depth.pop()

    @contextmanager
    def declarator(self):
        """ Enter a declarator in the current parameter list scope """
        self.declarator_depth[-1] += 1
        try:
            yield
        finally:
            self.declarator_depth[-1] -= 1

    @contextmanager
    def expression_parentheses(self, enabled):
        """ Set whether the next expression gets enclosing parentheses """
        old_suppressed = self.paren_suppressed
        self.paren_suppressed = not enabled
        try:
            yield
        finally:
            self.paren_suppressed = old_suppressed
