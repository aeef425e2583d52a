# encoding: utf-8
from contextlib import contextmanager

from mo_future import is_text
from mo_logs import Log

DEFAULT_WHITE_CHARS = " \n\t\r"
CURRENT_WHITE_CHARS = DEFAULT_WHITE_CHARS


def set_default_whitespace(chars):
    global CURRENT_WHITE_CHARS

    if not is_text(chars):
        Log.error("expecting whitespace to be a string of characters")
    CURRENT_WHITE_CHARS = "".join(sorted(set(chars)))


def get_default_whitespace():
    return CURRENT_WHITE_CHARS


@contextmanager
def default_whitespace(chars):
    """
    Overrides the default whitespace chars for scanners built in this block

    Example::

        # default whitespace chars are space, <TAB>, <CR> and newline
        with default_whitespace(" \\t"):
            scanner = Scanner("a\\nb")
            scanner.try_match_literal("a")
            scanner.skip_whitespace()  # newline is significant, nothing skipped
    """
    global CURRENT_WHITE_CHARS

    old_value = CURRENT_WHITE_CHARS
    set_default_whitespace(chars)
    try:
        yield
    finally:
        CURRENT_WHITE_CHARS = old_value
