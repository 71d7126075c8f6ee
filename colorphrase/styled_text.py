# styled_text.py

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class ColorRange:
    """Half-open range [start, end) of formatted text drawn in one ARGB color."""
    start: int
    end: int
    color: int

    def __post_init__(self):
        if not 0 <= self.start < self.end:
            raise ValueError(f"Invalid color range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end


@dataclass(frozen=True)
class TextSpan:
    """A style carried over from the caller's pattern, e.g. a Rich 'bold' span."""
    start: int
    end: int
    style: Any


@dataclass(frozen=True)
class StyledText:
    """
    The finished output of a ColorPhrase.

    Holds the text with delimiters stripped, the ordered non-overlapping
    color ranges, and any spans that came in with the pattern.
    """
    text: str
    ranges: Tuple[ColorRange, ...] = ()
    spans: Tuple[TextSpan, ...] = ()

    @property
    def plain(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def color_at(self, index: int) -> Optional[int]:
        """Return the color drawn at index, or None when no range covers it."""
        if not 0 <= index < len(self.text):
            raise IndexError(index)
        for color_range in self.ranges:
            if index in color_range:
                return color_range.color
            if color_range.start > index:
                break
        return None

    def slices(self) -> Tuple[Tuple[str, int], ...]:
        """Return (text, color) pairs, one per color range, in order."""
        return tuple((self.text[r.start:r.end], r.color) for r in self.ranges)

    def to_rich(self):
        """Return this text as a rich.text.Text."""
        from .display.console import to_rich_text
        return to_rich_text(self)
