# encoding: utf-8
import re

from mo_logs import Log

LINE_END = "\\n"  # TOKEN SHOWN WHEN THE ERROR IS ON A LINE TERMINATOR
END_OF_FILE = "<eof>"


def regex_compile(pattern, flags=0):
    """
    COMPILE pattern, REPORTING BAD PATTERNS WITH THE PATTERN TEXT
    """
    try:
        return re.compile(pattern, flags)
    except re.error as cause:
        Log.error("invalid pattern {{pattern|quote}}", pattern=pattern, cause=cause)
