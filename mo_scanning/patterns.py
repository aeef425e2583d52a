# encoding: utf-8
import re
import warnings

from mo_future import is_text
from mo_logs import Log

from mo_scanning.utils import regex_compile


class Pattern(object):
    """
    What the scanner needs from a matching engine.  Subclass this (or
    provide the same two members) to scan with something other than `re`.
    """

    @property
    def source(self):
        """The pattern text, as shown in error messages"""
        raise NotImplementedError()

    def search(self, string):
        """
        :param string: THE TEXT TO SEARCH, FROM OFFSET 0
        :return: (start, end) OF THE FIRST MATCH, OR None
        """
        raise NotImplementedError()

    def __str__(self):
        return self.source


class RegexPattern(Pattern):
    r"""
    Pattern backed by the stdlib `re` module.

    Only matches that start at the scanner cursor are used, so patterns
    should start with ``^``; otherwise `re` will search the whole rest of
    the text only for the result to be thrown away.
    """

    compiledREtype = type(re.compile("[A-Z]"))

    def __init__(self, pattern, flags=0):
        if is_text(pattern):
            if not pattern:
                warnings.warn(
                    "null string passed to RegexPattern; it matches everywhere",
                    SyntaxWarning,
                    stacklevel=2,
                )
            self.regex = regex_compile(pattern, flags)
        elif isinstance(pattern, RegexPattern.compiledREtype):
            if flags:
                Log.error("can not apply flags to an already compiled pattern")
            self.regex = pattern
        else:
            Log.error(
                "RegexPattern may only be constructed with a string or a compiled RE object"
            )

    @property
    def source(self):
        return self.regex.pattern

    def search(self, string):
        found = self.regex.search(string)
        if found is None:
            return None
        return found.start(), found.end()

    def __repr__(self):
        return "RegexPattern(" + repr(self.regex.pattern) + ")"


def compile_pattern(pattern, flags=0):
    """
    :param pattern: A Pattern (RETURNED AS-IS), A STRING, OR A COMPILED RE
    :return: A Pattern
    """
    if isinstance(pattern, Pattern):
        return pattern
    if is_text(pattern) or isinstance(pattern, RegexPattern.compiledREtype):
        return RegexPattern(pattern, flags)
    if callable(getattr(pattern, "search", None)) and hasattr(pattern, "source"):
        # DUCK-TYPED ENGINE
        return pattern
    Log.error("expecting a pattern, not {{type}}", type=type(pattern).__name__)
