"""
Ready-made pattern definitions for tokens that occur in many languages.
Each function returns a new PatternDefinition to be registered with a
Tokenizer, ie.

>>> from _parsekit.tokenizer import Tokenizer
>>> tokenizer = Tokenizer()
>>> tokenizer.register_pattern(whitespace())
>>> tokenizer.register_pattern(integer())
>>> [t.content for t in tokenizer.tokenize("1 -2")]
[1, -2]

"""

import re

from _parsekit.tokenizer.pattern_definition import ConsumeResult, PatternDefinition

UNICODE_ESCAPE = re.compile(r"[0-9]{4}")


def constant(literal, name):
    """
    Pattern for a fixed piece of text, ie. constant("(", "open paren").
    """
    return PatternDefinition.from_regex(name, re.escape(literal))


def floating_point():
    return PatternDefinition.from_regex(
        "floating point", r"-?[0-9]*\.[0-9]+", interpret=float
    )


def integer():
    return PatternDefinition.from_regex("integer", r"-?[0-9]+", interpret=int)


def whitespace():
    return PatternDefinition.from_regex("whitespace", r"[ \t]+", ignore=True)


def whitespace_with_newlines():
    return PatternDefinition.from_regex("whitespace", r"[ \t\r\n]+", ignore=True)


def comma():
    return constant(",", "comma")


def period():
    return constant(".", "period")


def star():
    return constant("*", "star")


def colon():
    return constant(":", "colon")


def open_paren():
    return constant("(", "open paren")


def close_paren():
    return constant(")", "close paren")


def open_bracket():
    return constant("{", "open bracket")


def close_bracket():
    return constant("}", "close bracket")


def open_square_bracket():
    return constant("[", "open square bracket")


def close_square_bracket():
    return constant("]", "close square bracket")


def consume_json_string(remaining):
    """
    Consume a double quoted string from the start of remaining, replacing
    escapes:

    * \\t, \\r and \\n with tab, carriage return and line feed.
    * \\u followed by four decimal digits with the character at that code
      point. \\u followed by anything else is kept as is.

    Any other escape (including \\") and strings that are not closed before
    the end of remaining fail to match.
    """
    if not remaining.startswith('"'):
        return ConsumeResult.failure()

    content = []
    pos = 1
    end = len(remaining)
    while True:
        if pos >= end:
            return ConsumeResult.failure()
        char = remaining[pos]
        pos += 1
        if char == '"':
            break
        if char != "\\":
            content.append(char)
            continue

        if pos >= end:
            return ConsumeResult.failure()
        escaped = remaining[pos]
        pos += 1
        if escaped == "t":
            content.append("\t")
        elif escaped == "r":
            content.append("\r")
        elif escaped == "n":
            content.append("\n")
        elif escaped == "u":
            digits = remaining[pos : pos + 4]
            if UNICODE_ESCAPE.fullmatch(digits):
                pos += 4
                content.append(chr(int(digits, 10)))
            else:
                content.append("\\u")
        else:
            return ConsumeResult.failure()

    return ConsumeResult(success=True, consumed=remaining[:pos], content="".join(content))


def json_string():
    return PatternDefinition.from_consumer("string", consume_json_string)
