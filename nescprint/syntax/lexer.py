""" Hand written lexer for tree notation.

The text is split into chunks, one per line. Chunks consist of a tuple
(row, column, text). A cursor points to a specific character in the
current chunk.

Tree notation has only a few token types:

- '(' and ')'
- quoted strings, with backslash escapes
- words, which run until whitespace, a parenthesis or a comment
- comments, which start with ';' and run until the end of the line
"""

import io
from ..common import Token, SourceLocation, TreeSyntaxError


def create_chunks(f):
    """ Create a sequence of chunks """
    for row, line in enumerate(f, 1):
        yield (row, 1, line)


class TreeLexer:
    """ Lexical scanner for tree notation, based on an idea of Rob Pike.

    Each lexing state is a method that returns the next state.

    See also:
    http://eli.thegreenplace.net/2012/08/09/
    using-sub-generators-for-lexical-scanning-in-python/
    """

    def __init__(self):
        self.token_buffer = []
        self.current_text = []
        self._source = None
        self._filename = None
        self._chunk_iter = None
        self._start_loc = None
        self._chunk = None
        self._chunk_index = 0
        self._chunk_start = 0

    def tokenize(self, text, filename='<tree>'):
        """ Return a sequence of tokens, ending with an 'EOF' token """
        self._source = text
        self._filename = filename
        self._chunk_iter = iter(create_chunks(io.StringIO(text)))
        self._next_chunk()
        self._mark_start()
        state = self.lex_tree
        while state:
            while self.token_buffer:
                yield self.token_buffer.pop(0)
            state = state()
        yield Token('EOF', 'EOF', self.get_location())

    def lex_tree(self):
        c = self.next_char()
        if c is None:
            return None

        if c in '()':
            self.emit(c)
        elif c == ';':
            self.lex_comment()
        elif c == '"':
            self.lex_string()
        elif c in ' \t\r\n':
            self.ignore()
        else:
            self.lex_word()

        return self.lex_tree

    def lex_word(self):
        while True:
            c = self.next_char()
            if c is None:
                break
            elif c in '() \t\r\n;"':
                self.backup_char(c)
                break
        self.emit('word')

    def lex_comment(self):
        """ Eat all characters until end of line """
        while True:
            c = self.next_char()
            if c is None or c in '\n\r':
                break
        self.ignore()

    def lex_string(self):
        while True:
            if self.accept('\\'):
                self.next_char(eof=False)  # Accept any escaped char
            elif self.accept('"'):
                self.emit('string')
                break
            else:
                self.next_char(eof=False)

    # Cursor handling:
    def next_char(self, eof=True):
        """ Retrieve next character.

        If eof is False, raise an error when end of file is encountered.
        """
        char = self._get_char()
        if not eof and char is None:
            self.error('Expected a character, but at end of file')
        return char

    def backup_char(self, char):
        """ go back one item """
        if char:
            assert self._chunk_index > 0
            self._chunk_index -= 1

    def accept(self, valid):
        """ Accept a single character if it is in the valid set """
        char = self.next_char()
        if char and char in valid:
            return True
        else:
            self.backup_char(char)
            return False

    def _get_char(self):
        if self._chunk:
            if self._chunk_index < len(self._chunk[2]):
                c = self._chunk[2][self._chunk_index]
                self._chunk_index += 1
            else:
                self._next_chunk()
                c = self._get_char()
        else:
            c = None
        return c

    def _next_chunk(self):
        """ Enter next text chunk. """
        if self._chunk:
            text = self._chunk[2][self._chunk_start:]
            self.current_text.append(text)
        self._chunk = next(self._chunk_iter, None)
        self._chunk_index = 0
        self._chunk_start = 0
        if self._chunk and not ''.join(self.current_text):
            # Nothing pending, so the next token starts in this chunk
            self.current_text.clear()
            self._start_loc = self.get_location()

    def _mark_start(self):
        """ Store location, and reset text buffer. """
        self._start_loc = self.get_location()
        self.current_text.clear()
        self._chunk_start = self._chunk_index

    def get_location(self):
        """ Return current location """
        if self._chunk:
            row = self._chunk[0]
            column = self._chunk[1] + self._chunk_index
        else:
            row = self._source.count('\n') + 1
            column = 1
        return SourceLocation(
            self._filename, row, column, 1, source=self._source)

    def emit(self, typ):
        """ Emit the current text under scope as a token """
        if self._chunk and self._chunk_index > self._chunk_start:
            text = self._chunk[2][self._chunk_start:self._chunk_index]
            self.current_text.append(text)
        val = ''.join(self.current_text)
        location = self._start_loc
        location.length = len(val)
        self.token_buffer.append(Token(typ, val, location))
        self._mark_start()

    def ignore(self):
        """ Ignore text under cursor """
        self._mark_start()

    def error(self, message):
        raise TreeSyntaxError(message, self.get_location())
