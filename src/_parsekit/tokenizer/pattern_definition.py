"""
A pattern definition describes one kind of token. It recognizes text either
with a regular expression (RegexMatcher) or with a custom consumer function
(ConsumerMatcher), never both.

A consumer is given the remaining input and returns a ConsumeResult. On
success, `consumed` must be the exact prefix of the remaining input that
makes up the token, and `content` may replace the token's content.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from _parsekit.tokenizer.errors import PatternDefinitionError


@dataclass(frozen=True)
class ConsumeResult:
    success: bool
    consumed: str = ""
    content: Any = None

    @classmethod
    def failure(cls):
        return cls(success=False)


@dataclass(frozen=True)
class RegexMatcher:
    """
    Matches a regular expression at a position of the input, as
    re.Pattern.match(text, pos) does, so "^" only matches at the start of
    the whole input. Strings are compiled on construction.
    """

    pattern: "re.Pattern"

    def __post_init__(self):
        if isinstance(self.pattern, str):
            try:
                compiled = re.compile(self.pattern)
            except re.error as err:
                raise PatternDefinitionError(
                    f"Token types 'pattern' property is not a valid regular expression: {err}"
                ) from err
            object.__setattr__(self, "pattern", compiled)
        elif not isinstance(self.pattern, re.Pattern) or not isinstance(
            self.pattern.pattern, str
        ):
            raise PatternDefinitionError(
                "Token types 'pattern' property must be a string or compiled regular expression"
            )

    def matches_empty(self):
        return self.pattern.match("") is not None

    def match(self, text, pos=0):
        match = self.pattern.match(text, pos)
        if match is None:
            return ConsumeResult.failure()
        return ConsumeResult(success=True, consumed=match.group(0))


@dataclass(frozen=True)
class ConsumerMatcher:
    """
    Calls the consume function with the input from a position onwards. This
    copies the rest of the input for every attempt, so consumers cost time
    proportional to the remaining input.
    """

    consume: Callable[[str], ConsumeResult]

    def __post_init__(self):
        if not callable(self.consume):
            raise PatternDefinitionError(
                "Token types 'consume' property must be a function"
            )

    def match(self, text, pos=0):
        return self.consume(text[pos:])


Matcher = Union[RegexMatcher, ConsumerMatcher]


@dataclass(frozen=True)
class PatternDefinition:
    name: str
    matcher: Matcher
    ignore: bool = False
    interpret: Optional[Callable[[str], Any]] = None

    @classmethod
    def from_regex(cls, name, pattern, ignore=False, interpret=None):
        return cls(name, RegexMatcher(pattern), ignore=ignore, interpret=interpret)

    @classmethod
    def from_consumer(cls, name, consume, ignore=False, interpret=None):
        return cls(name, ConsumerMatcher(consume), ignore=ignore, interpret=interpret)

    def validate(self):
        """
        :raises PatternDefinitionError: naming the first property that is
            missing or malformed.
        """
        if not self.name or not isinstance(self.name, str):
            raise PatternDefinitionError("Token types must have a 'name' property")
        if self.matcher is None:
            raise PatternDefinitionError(
                "Token types must have a 'pattern' property or a 'consume' function"
            )
        if not isinstance(self.matcher, (RegexMatcher, ConsumerMatcher)):
            raise PatternDefinitionError(
                "Token types 'matcher' property must be a RegexMatcher or "
                f"ConsumerMatcher, got {type(self.matcher).__name__}"
            )
        if not isinstance(self.ignore, bool):
            raise PatternDefinitionError("Token types 'ignore' property must be a bool")
        if self.interpret is not None and not callable(self.interpret):
            raise PatternDefinitionError(
                "Token types 'interpret' property must be a function"
            )
