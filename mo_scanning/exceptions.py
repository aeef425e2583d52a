# encoding: utf-8
from collections import namedtuple

Position = namedtuple("Position", ["loc"])
Position.__doc__ = "A captured scanner cursor, to be handed back to Scanner.error_at()"


class ParseError(Exception):
    """
    A parse failure at a single position: a list of messages, plus the
    source line split around the offending character

    It is a plain value until raised; it holds copies of the source text,
    so it can outlive the scanner that made it.
    """

    def __init__(self, position, messages, excerpt):
        """
        :param position: (line, column), BOTH 1-BASED
        :param messages: LIST OF MESSAGES, OUTERMOST CONTEXT LAST
        :param excerpt: (prefix, token, suffix) OF THE ERROR LINE
        """
        self.position = tuple(position)
        self.messages = list(messages)
        self.excerpt = tuple(excerpt)
        Exception.__init__(self, self.position, self.messages, self.excerpt)

    def push(self, message):
        """
        Add context to this error

        Example::

            try:
                scanner.match_literal("{")
            except ParseError as cause:
                raise cause.push("while parsing block header")
        """
        self.messages.append(message)
        return self

    @property
    def line(self):
        return self.position[0]

    @property
    def column(self):
        return self.position[1]

    @property
    def message(self):
        return self.messages[-1] if self.messages else ""

    def pos(self):
        return self.position

    def msg(self):
        return self.messages

    def err(self):
        return self.excerpt

    def render_lines(self):
        prefix, token, suffix = self.excerpt
        yield "Error at [" + str(self.position[0]) + ", " + str(self.position[1]) + "]"
        for message in self.messages:
            yield message
        yield "| " + prefix + token + suffix
        yield "| " + (" " * len(prefix)) + ("^" * len(token))

    def default_lines(self, treatment):
        """
        Call treatment(line) on each line of the report
        """
        for line in self.render_lines():
            treatment(line)

    def default_str(self):
        return "\n".join(self.render_lines())

    def __str__(self):
        return self.default_str()

    def __repr__(self):
        return "ParseError(" + repr(self.position) + ", " + repr(self.messages) + ", " + repr(self.excerpt) + ")"
