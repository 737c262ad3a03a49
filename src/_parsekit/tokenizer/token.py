from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Token:
    """
    A token produced by the tokenizer.

    :ivar content: The matched text, or the value produced by the pattern's
        interpret function or custom consumer.
    :ivar type: The name of the pattern that produced the token.
    :ivar line: 1-based line of the token's first character.
    :ivar character: 1-based position of the token's first character
        within its line.
    """

    content: Any
    type: str
    line: int = 1
    character: int = 1
