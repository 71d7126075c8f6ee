# lexer/tokens.py

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ..styled_text import ColorRange
from ..definitions import PhraseConfig

if TYPE_CHECKING:
    from ..layout.buffer import SpannedBuffer


@dataclass(frozen=True)
class PlainRun:
    """Ordinary text between bracketed runs; kept as is and drawn in the outer color."""
    length: int

    @property
    def source_length(self) -> int:
        return self.length

    @property
    def output_length(self) -> int:
        return self.length

    def render(self, cursor: int, target: "SpannedBuffer", config: PhraseConfig) -> Optional[ColorRange]:
        return ColorRange(cursor, cursor + self.length, config.outer_color)


@dataclass(frozen=True)
class LiteralDelimiter:
    """Two left delimiters in a row, written out as one."""
    character: str

    @property
    def source_length(self) -> int:
        return 2

    @property
    def output_length(self) -> int:
        return 1

    def render(self, cursor: int, target: "SpannedBuffer", config: PhraseConfig) -> Optional[ColorRange]:
        # Uncolored, so it picks up whatever styling surrounds it
        target.replace(cursor, cursor + 2, self.character)
        return None


@dataclass(frozen=True)
class BracketedRun:
    """Text between a left and a right delimiter, delimiters stripped."""
    text: str

    @property
    def source_length(self) -> int:
        return len(self.text) + 2

    @property
    def output_length(self) -> int:
        return len(self.text)

    def render(self, cursor: int, target: "SpannedBuffer", config: PhraseConfig) -> Optional[ColorRange]:
        end = cursor + len(self.text)
        # Closing delimiter first so the opening one is still at cursor
        target.delete(end + 1)
        target.delete(cursor)
        return ColorRange(cursor, end, config.inner_color)


Segment = Union[PlainRun, LiteralDelimiter, BracketedRun]
