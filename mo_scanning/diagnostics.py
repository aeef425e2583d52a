# encoding: utf-8
from mo_future import is_text
from mo_logs import Log

from mo_scanning.exceptions import ParseError
from mo_scanning.utils import END_OF_FILE, LINE_END


def locate(text, loc, line_offset=0):
    """
    Find the line and column of loc, and split its line around it

    :param text: THE WHOLE BUFFER
    :param loc: 0-BASED OFFSET INTO text
    :param line_offset: ADDED TO THE LINE NUMBER (FIRST LINE IS line_offset+1)
    :return: ((line, column), (prefix, token, suffix))
    """
    if not is_text(text):
        Log.error("expecting text, not {{type}}", type=type(text).__name__)
    if loc < 0:
        Log.error("expecting a non-negative location, not {{loc}}", loc=loc)

    line_count = line_offset
    segments = text.split("\n")
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        line_count += 1
        if i == last:
            content, terminator = segment, 0
        elif segment.endswith("\r"):
            content, terminator = segment[:-1], 2
        else:
            content, terminator = segment, 1
        length = len(content)

        if loc < length:
            return (
                (line_count, loc + 1),
                (content[:loc], content[loc : loc + 1], content[loc + 1 :]),
            )
        elif loc == length and i == last:
            return (line_count, loc + 1), (content, END_OF_FILE, "")
        elif loc < length + terminator:
            return (line_count, loc + 1), (content, LINE_END, "")
        # A MISSING TERMINATOR STILL COUNTS AS ONE
        loc -= length + (terminator or 1)

    # BEYOND THE END OF THE BUFFER
    return (line_count, loc + 1), ("", END_OF_FILE, "")


def parse_error(text, loc, message, line_offset=0):
    """
    :return: ParseError AT loc IN text, WITH A SINGLE message
    """
    position, excerpt = locate(text, loc, line_offset)
    return ParseError(position, [message], excerpt)
