# lexer/scanner.py

from typing import List, Optional

from ..errors import EmptyBracketedContent, UnterminatedBracket
from .tokens import BracketedRun, LiteralDelimiter, PlainRun, Segment


class Scanner:
    """
    Hand-written lexer over a pattern.

    A single cursor moves forward with one character of lookahead. The
    scanner does not check balance; run the validator first.
    """
    def __init__(self, pattern: str, left: str, right: str):
        self.pattern = pattern
        self.left = left
        self.right = right
        self.index = 0

    @property
    def current(self) -> Optional[str]:
        return self.pattern[self.index] if self.index < len(self.pattern) else None

    def lookahead(self) -> Optional[str]:
        """Return the character after the current one without advancing."""
        nxt = self.index + 1
        return self.pattern[nxt] if nxt < len(self.pattern) else None

    def consume(self) -> None:
        self.index += 1

    def next_segment(self) -> Optional[Segment]:
        """Return the next segment, or None at the end of the pattern."""
        if self.current is None:
            return None
        if self.current == self.left:
            if self.lookahead() == self.left:
                return self._literal_delimiter()
            return self._bracketed()
        return self._plain()

    def _literal_delimiter(self) -> LiteralDelimiter:
        self.consume()
        self.consume()
        return LiteralDelimiter(self.left)

    def _bracketed(self) -> BracketedRun:
        opened_at = self.index
        self.consume()
        chars = []
        while self.current is not None and self.current != self.right:
            chars.append(self.current)
            self.consume()

        if self.current is None:
            raise UnterminatedBracket(
                f"Missing closing separator {self.right!r} for the one at {opened_at}",
                position=opened_at
            )
        self.consume()

        if not chars:
            raise EmptyBracketedContent(
                f"Empty content between separators at {opened_at}, e.g. "
                f"{self.left}{self.right}",
                position=opened_at
            )
        return BracketedRun(''.join(chars))

    def _plain(self) -> PlainRun:
        start = self.index
        while self.current is not None and self.current != self.left:
            self.consume()
        return PlainRun(self.index - start)

    def __iter__(self):
        while True:
            segment = self.next_segment()
            if segment is None:
                return
            yield segment


def tokenize(pattern: str, left: str, right: str) -> List[Segment]:
    """Split a pattern into segments in the order they appear."""
    return list(Scanner(pattern, left, right))
