# display/console.py

from io import StringIO
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..definitions import argb_to_rich_style
from ..styled_text import StyledText


def to_rich_text(styled: StyledText) -> Text:
    """Build a Rich Text: carried-over spans first, color ranges on top."""
    text = Text(styled.text)
    for span in styled.spans:
        text.stylize(span.style, span.start, span.end)
    for color_range in styled.ranges:
        text.stylize(argb_to_rich_style(color_range.color), color_range.start, color_range.end)
    return text


class PhraseConsole:
    """Renders StyledText to a terminal through Rich."""
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(
            force_terminal=True,
            color_system="truecolor",
            highlight=False
        )
        self._capture_console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False
        )

    def render(self, styled: StyledText) -> str:
        """Return the ANSI string for styled, without a trailing newline."""
        with self._capture_console.capture() as capture:
            self._capture_console.print(to_rich_text(styled), end="")
        return capture.get()

    def print(self, styled: StyledText) -> None:
        self.console.print(to_rich_text(styled))
