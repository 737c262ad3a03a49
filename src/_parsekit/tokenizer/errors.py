class PatternDefinitionError(Exception):
    """
    Raised when a pattern definition is registered with a missing or
    malformed property. This is a configuration error and is never raised
    while tokenizing.
    """

    pass


class TokenizerError(Exception):
    """
    A tokenizer will throw a TokenizerError if it is asked to tokenize without
    content or patterns, or if a custom consumer misbehaves.
    """

    pass


def visible(text):
    """
    Render control characters in text as escapes, ie. "a\\nb" for "a<newline>b".
    """
    named = {"\r": "\\r", "\n": "\\n", "\t": "\\t"}
    result = []
    for char in text:
        if char in named:
            result.append(named[char])
        elif ord(char) < 0x20 or 0x7F <= ord(char) < 0xA0:
            result.append(f"\\x{ord(char):02x}")
        else:
            result.append(char)
    return "".join(result)


class UnmatchedCharacterError(TokenizerError):
    """
    Raised when no registered pattern matches at the current position.

    :ivar line: 1-based line of the first unmatched character.
    :ivar character: 1-based character of the first unmatched character.
    :ivar preview: The start of the unmatched input with control characters
        escaped.
    """

    displayable = True

    def __init__(self, preview, line, character):
        super().__init__(f"No viable match in '{preview}...' at {line}.{character}")
        self.preview = preview
        self.line = line
        self.character = character
