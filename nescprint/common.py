"""
   Error handling routines
   Source location structures
"""

import os


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class SourceLocation:
    """ A location that refers to a position in a tree file """

    __slots__ = ['filename', 'row', 'col', 'length', 'source']

    def __init__(self, filename, row, col, ln, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln
        self.source = source

    def __repr__(self):
        return '({}, {}, {}, {})'.format(
            self.filename, self.row, self.col, self.length)

    def get_lines(self):
        """ Return the lines of the source this location points into """
        if not self.source and self.filename:
            if os.path.exists(self.filename):
                with open(self.filename, 'r') as f:
                    self.source = f.read()
        if self.source:
            return self.source.splitlines()
        return []

    def get_source_line(self):
        """ Return the source line indicated by this location """
        lines = self.get_lines()
        if 0 < self.row <= len(lines):
            return lines[self.row - 1]
        return 'Could not load source'

    def print_message(self, message, lines=None, filename=None, file=None):
        """ Print a message at this location in the given source lines """
        if lines is None:
            lines = self.get_lines()

        if filename is None:
            filename = self.filename
        if filename:
            print('File : "{}"'.format(filename), file=file)

        print_message(
            lines, self.row, self.col, self.length, message, file=file)


def print_message(lines, row, col, length, message, file=None):
    """ Render a message nicely embedded in surrounding source """
    prerow = max(row - 2, 1)
    afterrow = min(row + 3, len(lines))

    for r in range(prerow, afterrow + 1):
        print('{:5} :{}'.format(r, lines[r - 1]), file=file)

        if r == row:
            base_txt = '      :'
            marker = '^' * max(length, 1)
            indent1_txt = base_txt + ' ' * (col - 1)
            indent2_txt = indent1_txt + ' ' * (max(length, 1) // 2)
            print(indent1_txt + marker, file=file)
            print(indent2_txt + '|', file=file)
            print(indent2_txt + '+---- ' + message, file=file)


class Token:
    """ A piece of tree notation text, as produced by the tree lexer """

    __slots__ = ['typ', 'val', 'loc']

    def __init__(self, typ, val, loc):
        self.typ = typ
        self.val = val
        assert isinstance(loc, SourceLocation)
        self.loc = loc

    def __repr__(self):
        return 'Token({}, {}, {})'.format(self.typ, self.val, self.loc)


class CompilerError(Exception):
    """ Base error with an optional location in a tree file """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc and self.loc.get_lines():
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class TreeSyntaxError(CompilerError):
    """ Raised when tree notation text is malformed """
    pass


