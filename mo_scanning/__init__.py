# encoding: utf-8
from mo_logs import Log

from mo_scanning.diagnostics import locate, parse_error
from mo_scanning.exceptions import ParseError, Position
from mo_scanning.patterns import Pattern, RegexPattern, compile_pattern
from mo_scanning.scanner import Scanner
from mo_scanning.utils import END_OF_FILE, LINE_END
from mo_scanning.white import default_whitespace, set_default_whitespace, DEFAULT_WHITE_CHARS

__all__ = [
    "DEFAULT_WHITE_CHARS",
    "END_OF_FILE",
    "LINE_END",
    "Log",
    "ParseError",
    "Pattern",
    "Position",
    "RegexPattern",
    "Scanner",
    "compile_pattern",
    "default_whitespace",
    "locate",
    "parse_error",
    "set_default_whitespace",
]
