# test_display.py

import re
import logging
import pytest
from unittest.mock import Mock, AsyncMock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError
from rich.style import Style

from colorphrase import COLORS, PhraseConfig, from_pattern
from colorphrase.definitions import argb_to_rgb, argb_to_rich_style
from colorphrase.display import PatternValidator, PhraseConsole, PhraseTerminal, to_rich_text

ANSI_REGEX = re.compile(r'\x1B\[[0-?]*[ -/]*[@-~]')


class TestColorHelpers:
    """ARGB conversions used by the Rich adapter."""

    def test_rgb_channels(self):
        assert argb_to_rgb(COLORS['RED']) == (230, 69, 74)

    def test_rich_style(self):
        assert argb_to_rich_style(0xFFE6454A).color.triplet == (230, 69, 74)

    def test_transparent_color_has_no_style(self):
        assert argb_to_rich_style(0x00FFFFFF) == Style()


class TestPhraseConsole:
    """Rendering StyledText through Rich."""

    def setup_method(self):
        self.styled = from_pattern("I'm<Chinese>,I love <China>").with_separator("<>").format()

    def test_to_rich_text(self):
        text = to_rich_text(self.styled)
        assert text.plain == "I'mChinese,I love China"
        assert len(text.spans) == len(self.styled.ranges)
        assert text.spans[1].start == 3 and text.spans[1].end == 10

    def test_to_rich_method(self):
        assert self.styled.to_rich().plain == self.styled.text

    def test_render_ansi(self):
        rendered = PhraseConsole().render(self.styled)
        assert "38;2;230;69;74" in rendered
        assert ANSI_REGEX.sub('', rendered) == self.styled.text

    def test_print_uses_console(self):
        console = Mock()
        PhraseConsole(console=console).print(self.styled)
        console.print.assert_called_once()
        assert console.print.call_args[0][0].plain == self.styled.text


class TestPatternValidator:
    """Inline validation in the prompt."""

    def setup_method(self):
        self.validator = PatternValidator(PhraseConfig(separator="<>"))

    def test_accepts_valid_pattern(self):
        self.validator.validate(Document("a<b>c"))

    def test_rejects_blank(self):
        with pytest.raises(ValidationError):
            self.validator.validate(Document("   "))

    def test_malformed_points_at_end(self):
        with pytest.raises(ValidationError) as exc_info:
            self.validator.validate(Document("a<b"))
        assert exc_info.value.cursor_position == 3
        assert "match" in exc_info.value.message

    def test_empty_bracket_points_at_bracket(self):
        with pytest.raises(ValidationError) as exc_info:
            self.validator.validate(Document("ab<>"))
        assert exc_info.value.cursor_position == 2


class TestPhraseTerminal:
    """Prompt handling with a mocked prompt session."""

    def setup_method(self):
        self.session = Mock()
        self.session.prompt_async = AsyncMock(return_value="  a<b>  ")
        self.terminal = PhraseTerminal(PhraseConfig(separator="<>"), logger=Mock(), session=self.session)

    @pytest.mark.asyncio
    async def test_get_pattern_strips_input(self):
        assert await self.terminal.get_pattern() == "a<b>"
        kwargs = self.session.prompt_async.call_args.kwargs
        assert kwargs['validator'] is self.terminal.validator
        assert kwargs['validate_while_typing'] is False

    def test_format_uses_config(self):
        assert self.terminal.format("a<b>").text == "ab"

    def test_validation_does_not_add_handlers(self):
        validator = PatternValidator()
        validator.validate(Document("a{b}"))
        before = len(logging.getLogger("colorphrase.phrase").handlers)
        for _ in range(200):
            validator.validate(Document("a{b}"))
        assert len(logging.getLogger("colorphrase.phrase").handlers) == before
