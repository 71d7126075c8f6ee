# __init__.py

from .errors import (
    ColorPhraseError, InvalidArgument, PatternError,
    MalformedPattern, UnterminatedBracket, EmptyBracketedContent
)
from .definitions import COLORS, DEFAULT_CONFIG, PhraseConfig
from .logger import Logger
from .styled_text import ColorRange, StyledText, TextSpan
from .phrase import ColorPhrase, from_pattern

__all__ = [
    "ColorPhrase", "from_pattern", "StyledText", "ColorRange", "TextSpan",
    "PhraseConfig", "DEFAULT_CONFIG", "COLORS", "Logger",
    "ColorPhraseError", "InvalidArgument", "PatternError",
    "MalformedPattern", "UnterminatedBracket", "EmptyBracketedContent"
]
