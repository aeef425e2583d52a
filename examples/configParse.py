#
# configParse.py
#
# an example of using the scanner to process a .INI configuration file
#
from mo_dots import Data

from mo_scanning import ParseError, RegexPattern, Scanner

section_name = RegexPattern(r"^[^\]\n]+")
key_name = RegexPattern(r"^[^=\[\n;]+")
rest_of_line = RegexPattern(r"^[^\n]*")


def skip_comments(scanner):
    scanner.skip_whitespace()
    while scanner.try_match_literal(";"):
        scanner.try_match_pattern(rest_of_line)
        scanner.skip_whitespace()


def parse_ini(text, line_offset=0):
    """
    :return: Data OF SECTIONS, EACH A Data OF key -> value
    """
    scanner = Scanner(text, line_offset)
    output = Data()
    skip_comments(scanner)
    while not scanner.is_at_end():
        start = scanner.capture_position()
        scanner.match_literal("[")
        name = scanner.match_pattern(section_name).strip()
        try:
            scanner.match_literal("]")
        except ParseError as cause:
            raise cause.push("while parsing section header")
        if name in output.keys():
            raise scanner.error_at(start, "duplicate section `" + name + "`")
        section = Data()
        skip_comments(scanner)
        while not scanner.is_at_end() and not scanner.text.startswith("[", scanner.cursor):
            key = scanner.match_pattern(key_name).strip()
            scanner.match_literal("=")
            section[key] = scanner.match_pattern(rest_of_line).strip()
            skip_comments(scanner)
        output[name] = section
    return output


if __name__ == "__main__":
    sample = """
        ; a sample file
        [server]
        host = localhost
        port = 8080

        [client]
        retries = 3
    """
    print(parse_ini(sample))
    try:
        parse_ini("[server\nhost = localhost")
    except ParseError as cause:
        print(cause)
