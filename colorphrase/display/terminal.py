# display/terminal.py

from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import Validator, ValidationError
from prompt_toolkit.formatted_text import FormattedText

from ..definitions import DEFAULT_CONFIG, PhraseConfig
from ..errors import PatternError
from ..logger import Logger
from ..phrase import ColorPhrase
from ..styled_text import StyledText

_default_logger = Logger(__name__)


class PatternValidator(Validator):
    """Rejects input that ColorPhrase cannot format with the given config."""
    def __init__(self, config: PhraseConfig = DEFAULT_CONFIG):
        self.config = config

    def validate(self, document):
        text = document.text
        if not text.strip():
            raise ValidationError(message='', cursor_position=0)
        try:
            ColorPhrase(text, self.config).format()
        except PatternError as e:
            position = e.position if e.position is not None else len(text)
            raise ValidationError(message=str(e), cursor_position=position) from e


class PhraseTerminal:
    """Reads patterns from the user and formats them."""
    def __init__(self, config: PhraseConfig = DEFAULT_CONFIG,
                 logger: Optional[Logger] = None,
                 session: Optional[PromptSession] = None):
        self.config = config
        self.logger = logger or _default_logger
        self.validator = PatternValidator(config)
        self.prompt_session = session or PromptSession(complete_while_typing=False)

    async def get_pattern(self, default_text: str = "") -> str:
        """Prompt until the user enters a pattern that formats cleanly."""
        result = await self.prompt_session.prompt_async(
            FormattedText([('class:prompt', '> ')]),
            default=default_text,
            validator=self.validator,
            validate_while_typing=False
        )
        return result.strip()

    def format(self, pattern: str) -> StyledText:
        return ColorPhrase(pattern, self.config, self.logger).format()
