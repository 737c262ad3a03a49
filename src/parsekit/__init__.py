import _parsekit.tokenizer.standard_patterns as standard_patterns
import parsekit.version
from _parsekit.parser import (
    BinaryNode,
    OperatorShunter,
    ParserError,
    TokenStream,
    UnexpectedTokenError,
)
from _parsekit.tokenizer import (
    ConsumeResult,
    ConsumerMatcher,
    PatternDefinition,
    PatternDefinitionError,
    Position,
    PositionTracker,
    RegexMatcher,
    Token,
    Tokenizer,
    TokenizerError,
    UnmatchedCharacterError,
)

__version__ = parsekit.version.version

__all__ = [
    "BinaryNode",
    "ConsumeResult",
    "ConsumerMatcher",
    "OperatorShunter",
    "ParserError",
    "PatternDefinition",
    "PatternDefinitionError",
    "Position",
    "PositionTracker",
    "RegexMatcher",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenizerError",
    "UnexpectedTokenError",
    "UnmatchedCharacterError",
    "standard_patterns",
]
