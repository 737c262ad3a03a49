"""
In this module, a tokenizer turns text into a list of tokens using an ordered
list of pattern definitions. A pattern definition recognizes a token either
with a regular expression or with a consumer function for tokens that are
awkward to express as a regular expression, such as strings with escapes.

Patterns are tried in the order they were registered and the first pattern
that matches at the start of the remaining text produces the next token.
There is no longest match: register keywords before identifiers.

Every token records the 1-based line and character where it starts, as
counted by the PositionTracker.
"""

from .errors import PatternDefinitionError, TokenizerError, UnmatchedCharacterError
from .pattern_definition import (
    ConsumeResult,
    ConsumerMatcher,
    PatternDefinition,
    RegexMatcher,
)
from .position_tracker import Position, PositionTracker
from .token import Token
from .tokenizer import Tokenizer

__all__ = [
    "ConsumeResult",
    "ConsumerMatcher",
    "PatternDefinition",
    "PatternDefinitionError",
    "Position",
    "PositionTracker",
    "RegexMatcher",
    "Token",
    "Tokenizer",
    "TokenizerError",
    "UnmatchedCharacterError",
]
