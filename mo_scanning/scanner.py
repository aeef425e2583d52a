# encoding: utf-8
from mo_dots import Data
from mo_future import is_text
from mo_logs import Log

from mo_scanning.white import get_default_whitespace
from mo_scanning.diagnostics import parse_error
from mo_scanning.exceptions import Position
from mo_scanning.patterns import compile_pattern

DEBUG = False


class Scanner(object):
    """
    Walks a string left to right.  Every consuming method either advances
    the cursor and succeeds, or fails and leaves the cursor where it was,
    so an alternative can be tried without rewinding.
    """

    def __init__(self, text, line_offset=0, white=None):
        """
        :param text: THE WHOLE INPUT
        :param line_offset: ADDED TO LINE NUMBERS IN ERRORS, FOR TEXT EMBEDDED IN A BIGGER DOCUMENT
        :param white: CHARACTERS skip_whitespace() WILL SKIP (DEFAULT IS THE CURRENT default_whitespace())
        """
        self.config = Data()
        self.set_whitespace(get_default_whitespace() if white is None else white)
        self.set(text, line_offset)

    def set(self, text, line_offset=0):
        """
        Scan new text, from the start
        """
        if not is_text(text):
            Log.error("expecting text to scan, not {{type}}", type=type(text).__name__)
        if line_offset < 0:
            Log.error("expecting a non-negative line offset, not {{offset}}", offset=line_offset)
        self.text = text
        self._line_offset = line_offset
        self._cursor = 0

    def set_whitespace(self, chars):
        if not is_text(chars):
            Log.error("expecting whitespace to be a string of characters")
        self.config.white_chars = "".join(sorted(set(chars)))
        return self

    @property
    def cursor(self):
        return self._cursor

    @property
    def line_offset(self):
        return self._line_offset

    def is_at_end(self):
        return self._cursor >= len(self.text)

    def remaining_count(self):
        """
        Number of characters AFTER the one under the cursor
        """
        if self.is_at_end():
            return 0
        return len(self.text) - self._cursor - 1

    def remaining_text(self):
        return self.text[self._cursor :]

    def skip_whitespace(self):
        wt = self.config.white_chars
        string = self.text
        end = self._cursor
        instrlen = len(string)
        while end < instrlen and string[end] in wt:
            end += 1
        self._cursor = end

    def capture_position(self):
        return Position(self._cursor)

    def try_match_literal(self, literal):
        """
        Example::

            scanner = Scanner("   blah  end")
            scanner.skip_whitespace()
            scanner.try_match_literal("blah")   # True
            scanner.remaining_text()            # "  end"
            scanner.try_match_literal("end")    # False
            scanner.remaining_text()            # "  end"
        """
        if len(self.text) - self._cursor < len(literal):
            return False
        if self.text.startswith(literal, self._cursor):
            self._cursor += len(literal)
            return True
        return False

    def match_literal(self, literal):
        """
        Example::

            scanner = Scanner("   blah  end")
            scanner.skip_whitespace()
            scanner.match_literal("blah")
            scanner.match_literal("end")  # raises

            Error at [1, 8]
            expected tag `end`
            |    blah  end
            |        ^
        """
        if not self.try_match_literal(literal):
            raise self.error_here("expected tag `" + literal + "`")

    def try_match_pattern(self, pattern):
        """
        :param pattern: A Pattern, OR A REGEX (STRING OR COMPILED)
        :return: THE MATCHED TEXT, OR None IF THE PATTERN DOES NOT MATCH EXACTLY AT THE CURSOR
        """
        pattern = compile_pattern(pattern)
        found = pattern.search(self.text[self._cursor :])
        if found is None:
            return None
        start, end = found
        if DEBUG:
            Log.note("{{pattern|quote}} found at start: {{start}}, end: {{end}}", pattern=pattern.source, start=start, end=end)
        if start != 0:
            return None
        begin, self._cursor = self._cursor, self._cursor + end
        if DEBUG:
            Log.note("cursor moved from {{begin}} to {{end}}", begin=begin, end=self._cursor)
        return self.text[begin : self._cursor]

    def match_pattern(self, pattern):
        pattern = compile_pattern(pattern)
        result = self.try_match_pattern(pattern)
        if result is None:
            raise self.error_here("no match for regex `" + pattern.source + "`")
        return result

    def error_here(self, message):
        """
        :return: ParseError AT THE CURSOR (NOT RAISED)
        """
        return self.error_at(self.capture_position(), message)

    def error_at(self, position, message):
        """
        :param position: FROM capture_position()
        :return: ParseError AT position (NOT RAISED)
        """
        if not isinstance(position, Position):
            Log.error("expecting a Position from capture_position(), not {{type}}", type=type(position).__name__)
        return parse_error(self.text, position.loc, message, self._line_offset)

    # SHORT NAMES, FOR TERSE GRAMMARS
    is_eof = is_at_end
    chars_left = remaining_count
    rest = remaining_text
    ws = skip_whitespace
    pos = capture_position
    try_tag = try_match_literal
    tag = match_literal
    try_re = try_match_pattern
    re = match_pattern
    error = error_at

    def __repr__(self):
        return "Scanner(cursor=" + str(self._cursor) + ", rest=" + repr(self.remaining_text()[:20]) + ")"
