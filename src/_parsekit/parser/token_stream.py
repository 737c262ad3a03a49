import logging
from collections.abc import Sequence

from _parsekit.parser.errors import ParserError, UnexpectedTokenError

logger = logging.getLogger(__name__)


class TokenStream:
    """
    Consumes a sequence of tokens from the front, for use by recursive
    descent parsers. Parsers usually subclass TokenStream and implement one
    method per grammar rule:

    >>> class ListParser(TokenStream):
    ...     def parse_list(self):
    ...         self.match("open square bracket")
    ...         items = []
    ...         while not self.looking_at("close square bracket"):
    ...             items.append(self.match("integer").content)
    ...             if self.looking_at("comma"):
    ...                 self.match("comma")
    ...         self.match("close square bracket")
    ...         self.expect_end()
    ...         return items

    The tokens themselves are never modified, consumption advances an index.
    """

    def __init__(self, tokens, debug=False):
        """
        :param tokens: Sequence of tokens, ie. the result of
            Tokenizer.tokenize.
        :param debug: Whether debug_log messages are logged.
        """
        if tokens is None:
            raise ParserError("No tokens provided to the parser")
        if isinstance(tokens, (str, bytes)) or not isinstance(tokens, Sequence):
            raise ParserError(
                "A non-sequence was provided to the parser instead of a token sequence"
            )
        self.tokens = tuple(tokens)
        self.index = 0
        self._debug = False
        self.debug = debug

    @property
    def debug(self):
        return self._debug

    @debug.setter
    def debug(self, value):
        if not isinstance(value, bool):
            raise ValueError("debug has to be either True or False")
        self._debug = value

    @property
    def remaining(self):
        return len(self.tokens) - self.index

    def at_end(self):
        return self.index >= len(self.tokens)

    def peek(self):
        """
        :returns: The next token without consuming it.
        """
        if self.at_end():
            raise ParserError("No tokens available")
        return self.tokens[self.index]

    def looking_at(self, token_type):
        """
        :returns: Whether the next token has the given type.
        :raises ParserError: at the end of the tokens.
        """
        return self.peek().type == token_type

    def next(self):
        if self.at_end():
            raise ParserError("Expected token but found EOF")
        token = self.tokens[self.index]
        self.index += 1
        return token

    def match(self, token_type):
        """
        Consume the next token, which must have the given type.

        :raises UnexpectedTokenError: if the next token has another type
            or there are no more tokens.
        """
        if self.at_end():
            raise UnexpectedTokenError(token_type, None)
        if not self.looking_at(token_type):
            raise UnexpectedTokenError(token_type, self.peek())
        self.debug_log(f"matched {token_type}")
        return self.next()

    def expect_end(self):
        if not self.at_end():
            raise UnexpectedTokenError("EOF", self.peek())

    def resynchronize(self, token_type):
        """
        Skip tokens up to and including the next token of the given type, or
        to the end if there is none. Used for recovering from syntax errors.
        """
        while not self.at_end() and not self.looking_at(token_type):
            self.index += 1
        if not self.at_end():
            self.index += 1

    def position(self):
        """
        :returns: (line, character) of the next token.
        """
        return self.token_position(self.peek())

    @staticmethod
    def token_position(token):
        return (token.line, token.character)

    def debug_log(self, msg):
        if self.debug:
            logger.debug(msg)
