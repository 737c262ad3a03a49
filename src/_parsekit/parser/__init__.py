"""
Building blocks for hand-written parsers consuming the output of
_parsekit.tokenizer: TokenStream gives lookahead and matching over a list of
tokens, and OperatorShunter turns binary infix expressions into a tree
according to a precedence table.
"""

from .errors import ParserError, UnexpectedTokenError
from .shunter import BinaryNode, OperatorShunter
from .token_stream import TokenStream

__all__ = [
    "BinaryNode",
    "OperatorShunter",
    "ParserError",
    "TokenStream",
    "UnexpectedTokenError",
]
