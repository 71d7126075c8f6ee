# layout/buffer.py

from typing import Iterable, List, Tuple

from ..styled_text import TextSpan


class SpannedBuffer:
    """
    Mutable text with spans attached to it.

    Replacing a region moves every span so it keeps covering the same
    characters. Spans left empty by a replacement are dropped.
    """
    def __init__(self, text: str, spans: Iterable[TextSpan] = ()):
        self._chars: List[str] = list(text)
        self._spans: List[List] = [[s.start, s.end, s.style] for s in spans]

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return ''.join(self._chars)

    @property
    def spans(self) -> Tuple[TextSpan, ...]:
        return tuple(TextSpan(start, end, style) for start, end, style in self._spans if start < end)

    def replace(self, start: int, end: int, text: str) -> None:
        """Replace [start, end) with text."""
        if not 0 <= start <= end <= len(self._chars):
            raise IndexError(f"Cannot replace [{start}, {end}) in text of length {len(self._chars)}")
        self._chars[start:end] = text
        delta = len(text) - (end - start)

        def move(position: int) -> int:
            if position <= start:
                return position
            if position >= end:
                return position + delta
            return start + min(position - start, len(text))

        for span in self._spans:
            span[0], span[1] = move(span[0]), move(span[1])
        self._spans = [span for span in self._spans if span[0] < span[1]]

    def delete(self, index: int, count: int = 1) -> None:
        self.replace(index, index + count, "")
