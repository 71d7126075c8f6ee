# errors.py

from typing import Optional


class ColorPhraseError(Exception):
    """Base class for every error raised by colorphrase."""


class InvalidArgument(ColorPhraseError, ValueError):
    """Raised eagerly when a builder call receives a bad value."""


class PatternError(ColorPhraseError, ValueError):
    """A pattern could not be formatted."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class MalformedPattern(PatternError):
    """Delimiters do not balance across the whole pattern."""


class UnterminatedBracket(PatternError):
    """A bracketed run was opened but the pattern ended before it closed."""


class EmptyBracketedContent(PatternError):
    """Nothing between a left and a right delimiter, e.g. '{}'."""
