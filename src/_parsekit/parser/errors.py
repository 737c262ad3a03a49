class ParserError(Exception):
    """
    Raised by the token stream and the shunter when the tokens do not form
    the expected structure.
    """

    pass


class UnexpectedTokenError(ParserError):
    """
    Raised when a token of one type was expected but another token, or the
    end of the tokens, was found.

    :ivar expected: Description of what was expected, usually a token type.
    :ivar found: Type of the token that was found, "EOF" at the end of the
        tokens, or the given description of a value that is not a token.
    :ivar token: The offending token, None at the end of the tokens.
    :ivar line: Line of the offending token.
    :ivar character: Character of the offending token.
    :ivar length: Length of the offending token's content, for underlining
        it in diagnostics.
    """

    displayable = True

    def __init__(self, expected, token, message=None, found=None):
        self.expected = expected
        self.token = token
        if token is None:
            self.found = "EOF" if found is None else found
            self.line = None
            self.character = None
            self.length = 0
        else:
            self.found = token.type
            self.line = token.line
            self.character = token.character
            self.length = len(str(token.content))
        if message is None:
            message = f"Expected {expected} but found {self.found}"
        super().__init__(message)
