import logging
import warnings

from _parsekit.tokenizer.errors import (
    PatternDefinitionError,
    TokenizerError,
    UnmatchedCharacterError,
    visible,
)
from _parsekit.tokenizer.pattern_definition import (
    ConsumeResult,
    ConsumerMatcher,
    PatternDefinition,
    RegexMatcher,
)
from _parsekit.tokenizer.position_tracker import PositionTracker
from _parsekit.tokenizer.token import Token

logger = logging.getLogger(__name__)

# Number of characters of unmatched input shown in UnmatchedCharacterError
PREVIEW_LENGTH = 15


class Tokenizer:
    """
    Turns text into a list of tokens using registered pattern definitions.

    Patterns are tried in registration order and the first one that matches
    at the start of the remaining input wins, regardless of how much text
    other patterns would have matched. More specific patterns (keywords) must
    therefore be registered before more general ones (identifiers).

    >>> tokenizer = Tokenizer()
    >>> tokenizer.add_pattern("A", r"a+")
    >>> tokenizer.add_pattern("B", r"b+")
    >>> [(t.type, t.content) for t in tokenizer.tokenize("aabaa")]
    [('A', 'aa'), ('B', 'b'), ('A', 'aa')]

    """

    def __init__(self, language_name="unnamedlanguage"):
        """
        :param language_name: Name of the tokenized language, used in log
            messages.
        """
        self._patterns = []
        self._language_name = None
        self.language_name = language_name

    @property
    def language_name(self):
        return self._language_name

    @language_name.setter
    def language_name(self, value):
        if not isinstance(value, str) or not value:
            raise ValueError("language_name has to be a non-empty string")
        self._language_name = value

    @property
    def patterns(self):
        return tuple(self._patterns)

    def register_pattern(self, definition):
        """
        Append a pattern definition to the end of the priority list.

        :raises PatternDefinitionError: if the definition is malformed.
        """
        if not isinstance(definition, PatternDefinition):
            raise PatternDefinitionError(
                f"Expected a PatternDefinition, got {type(definition).__name__}"
            )
        definition.validate()
        if isinstance(definition.matcher, RegexMatcher) and (
            definition.matcher.matches_empty()
        ):
            warnings.warn(
                f"Pattern {definition.name} can match the empty string, "
                "empty matches are never accepted."
            )
        self._patterns.append(definition)
        logger.debug(
            "%s: registered pattern %s at priority %d",
            self.language_name,
            definition.name,
            len(self._patterns),
        )

    def add_pattern(self, name, pattern=None, consume=None, ignore=False, interpret=None):
        """
        Build and register a pattern definition from either a regular
        expression or a consumer function.
        """
        if pattern is None and consume is None:
            raise PatternDefinitionError(
                "Token types must have a 'pattern' property or a 'consume' function"
            )
        if pattern is not None and consume is not None:
            raise PatternDefinitionError(
                "Token types cannot have both a 'pattern' property and a 'consume' function"
            )
        if pattern is not None:
            matcher = RegexMatcher(pattern)
        else:
            matcher = ConsumerMatcher(consume)
        self.register_pattern(
            PatternDefinition(name, matcher, ignore=ignore, interpret=interpret)
        )

    def match_at(self, definition, text, pos, tracker):
        """
        :returns: the consumed text and ConsumeResult if the definition
            matches non-empty text starting at pos, otherwise None.
        :raises TokenizerError: if a consumer reports success for text which
            does not start at pos.
        """
        result = definition.matcher.match(text, pos)
        if not isinstance(result, ConsumeResult):
            raise TokenizerError(
                f"The consume function for {definition.name} returned "
                f"{result!r} instead of a ConsumeResult"
            )
        if not result.success:
            return None
        consumed = result.consumed
        if not isinstance(consumed, str) or not text.startswith(consumed, pos):
            raise TokenizerError(
                f"The consume function for {definition.name} failed to return the "
                f"start of the remaining content at {tracker.line}.{tracker.character} "
                f"and instead returned {consumed!r}"
            )
        if not consumed:
            return None
        return consumed, result

    def tokenize(self, text):
        """
        :returns: List of tokens for text.
        :raises TokenizerError: if there is no text or no registered patterns.
        :raises UnmatchedCharacterError: if no pattern matches somewhere in text.
        """
        if text is None or not isinstance(text, str):
            raise TokenizerError("No content provided")
        if not self._patterns:
            raise TokenizerError("No token types defined")

        result = []
        pos = 0
        tracker = PositionTracker()
        while pos < len(text):
            for definition in self._patterns:
                found = self.match_at(definition, text, pos, tracker)
                if found is not None:
                    break
            else:
                raise UnmatchedCharacterError(
                    visible(text[pos : pos + PREVIEW_LENGTH]),
                    tracker.line,
                    tracker.character,
                )

            consumed, consume_result = found
            if definition.interpret is not None:
                content = definition.interpret(consumed)
            elif consume_result.content is not None:
                content = consume_result.content
            else:
                content = consumed

            if not definition.ignore:
                result.append(
                    Token(content, definition.name, tracker.line, tracker.character)
                )

            pos += len(consumed)
            tracker.consume(consumed)

        logger.debug(
            "%s: tokenized %d characters into %d tokens",
            self.language_name,
            len(text),
            len(result),
        )
        return result
