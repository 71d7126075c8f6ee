# definitions.py

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from rich.color import Color
from rich.style import Style

from .errors import InvalidArgument

DEFAULT_SEPARATOR = "{}"
MAX_SEPARATOR_LENGTH = 2
ARGB_MAX = 0xFFFFFFFF

# Named 32-bit ARGB colors
COLORS: Dict[str, int] = {
    'GRAY':   0xFF666666,
    'RED':    0xFFE6454A,
    'GREEN':  0xFF00D75F,
    'PINK':   0xFFFF87D7,
    'BLUE':   0xFF5FAFFF,
    'YELLOW': 0xFFFFFF5F,
    'WHITE':  0xFFEEEEEE,
}


def check_separator(separator: str) -> str:
    """Return the separator unchanged, or raise InvalidArgument."""
    if not isinstance(separator, str) or not separator:
        raise InvalidArgument("separator must not be empty")
    if len(separator) > MAX_SEPARATOR_LENGTH:
        raise InvalidArgument(
            f"separator must be at most {MAX_SEPARATOR_LENGTH} characters, got {separator!r}"
        )
    return separator


def check_color(color: int) -> int:
    """Return the color unchanged if it is a 32-bit ARGB value."""
    if isinstance(color, bool) or not isinstance(color, int) or not 0 <= color <= ARGB_MAX:
        raise InvalidArgument(f"color must be a 32-bit ARGB integer, got {color!r}")
    return color


@dataclass(frozen=True)
class PhraseConfig:
    """
    Delimiters and colors used to format a pattern.

    A one-character separator uses the same character on both sides.
    """
    separator: str = DEFAULT_SEPARATOR
    inner_color: int = COLORS['RED']
    outer_color: int = COLORS['GRAY']

    def __post_init__(self):
        check_separator(self.separator)
        check_color(self.inner_color)
        check_color(self.outer_color)

    @property
    def left(self) -> str:
        return self.separator[0]

    @property
    def right(self) -> str:
        return self.separator[1] if len(self.separator) == 2 else self.separator[0]

    def evolve(self, **changes) -> "PhraseConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = PhraseConfig()


def argb_to_rgb(color: int) -> Tuple[int, int, int]:
    """Split an ARGB integer into its (red, green, blue) channels."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def argb_alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def argb_to_rich_style(color: int) -> Style:
    """Return a Rich foreground style; a fully transparent color yields an empty style."""
    if argb_alpha(color) == 0:
        return Style()
    return Style(color=Color.from_rgb(*argb_to_rgb(color)))
