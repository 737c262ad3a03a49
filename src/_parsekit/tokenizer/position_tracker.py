from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    line: int
    character: int


class PositionTracker:
    """
    Keeps track of the 1-based line and character of consumed text.

    "\\r", "\\n" and "\\r\\n" each count as a single line break.

    >>> tracker = PositionTracker()
    >>> tracker.consume("ab\\r\\nc")
    >>> tracker.position
    Position(line=2, character=2)

    """

    def __init__(self):
        self.line = 1
        self.character = 1
        self.just_seen_carriage_return = False

    @property
    def position(self):
        return Position(self.line, self.character)

    def consume(self, text):
        for char in text:
            if char == "\r":
                self.line += 1
                self.character = 1
                self.just_seen_carriage_return = True
            elif char == "\n":
                if not self.just_seen_carriage_return:
                    self.line += 1
                self.character = 1
                self.just_seen_carriage_return = False
            else:
                self.character += 1
                self.just_seen_carriage_return = False
