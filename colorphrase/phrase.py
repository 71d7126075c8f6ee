# phrase.py

import threading
from typing import Mapping, Optional, Tuple, Union

from rich.text import Text

from .definitions import DEFAULT_CONFIG, PhraseConfig, check_color, check_separator
from .errors import InvalidArgument, PatternError
from .layout import render
from .lexer import tokenize, validate
from .logger import Logger
from .styled_text import StyledText, TextSpan

PatternLike = Union[str, Text]

_default_logger = Logger(__name__)


def _split_pattern(pattern: PatternLike) -> Tuple[str, Tuple[TextSpan, ...]]:
    """Return the plain text of a pattern and the spans it already carries."""
    if isinstance(pattern, Text):
        spans = []
        if pattern.style:
            spans.append(TextSpan(0, len(pattern.plain), pattern.style))
        spans.extend(TextSpan(s.start, s.end, s.style) for s in pattern.spans)
        return pattern.plain, tuple(spans)
    return pattern, ()


class ColorPhrase:
    """
    Fluent formatter that colors delimited parts of a pattern.

        styled = (ColorPhrase.from_pattern("I'm<Chinese>,I love <China>")
                  .with_separator("<>")
                  .inner_color(0xFFE6454A)
                  .outer_color(0xFF666666)
                  .format())

    Surround text with the separators to give it the inner color; double the
    left separator to write it literally. Every builder call returns a new
    ColorPhrase, and format() computes its result once per instance.
    """

    def __init__(self, pattern: PatternLike, config: PhraseConfig = DEFAULT_CONFIG,
                 logger: Optional[Logger] = None):
        if pattern is None:
            raise InvalidArgument("pattern must not be None")
        if not isinstance(pattern, (str, Text)):
            raise InvalidArgument(
                f"pattern must be a str or rich Text, got {type(pattern).__name__}"
            )
        self._pattern = pattern
        self._config = config
        self.logger = logger or _default_logger
        self._formatted: Optional[StyledText] = None
        self._lock = threading.Lock()

    @classmethod
    def from_pattern(cls, pattern: PatternLike, logger: Optional[Logger] = None) -> "ColorPhrase":
        """Entry point; pattern must not be None."""
        return cls(pattern, logger=logger)

    @classmethod
    def from_resource(cls, resources: Mapping[str, PatternLike], key: str,
                      logger: Optional[Logger] = None) -> "ColorPhrase":
        """Entry point that reads the pattern from a string table."""
        try:
            pattern = resources[key]
        except KeyError:
            raise InvalidArgument(f"No pattern named {key!r} in resources") from None
        return cls(pattern, logger=logger)

    def _evolve(self, **changes) -> "ColorPhrase":
        return ColorPhrase(self._pattern, self._config.evolve(**changes), self.logger)

    def with_separator(self, separator: str) -> "ColorPhrase":
        """Use separator[0] as the left delimiter and separator[-1] as the right one."""
        return self._evolve(separator=check_separator(separator))

    def inner_color(self, color: int) -> "ColorPhrase":
        """Set the ARGB color of text between the separators."""
        return self._evolve(inner_color=check_color(color))

    def outer_color(self, color: int) -> "ColorPhrase":
        """Set the ARGB color of text outside the separators."""
        return self._evolve(outer_color=check_color(color))

    @property
    def pattern(self) -> PatternLike:
        return self._pattern

    @property
    def config(self) -> PhraseConfig:
        return self._config

    def format(self) -> StyledText:
        """
        Return the pattern with separators removed and colors applied.

        Raises:
            MalformedPattern: the separators don't balance.
            UnterminatedBracket: a bracket is never closed.
            EmptyBracketedContent: nothing between two separators.
        """
        if self._formatted is None:
            with self._lock:
                if self._formatted is None:
                    self._formatted = self._build()
        return self._formatted

    def _build(self) -> StyledText:
        text, spans = _split_pattern(self._pattern)
        left, right = self._config.left, self._config.right
        try:
            validate(text, left, right)
            segments = tokenize(text, left, right)
        except PatternError as e:
            self.logger.debug(f"Rejected pattern {text!r}: {e}")
            raise
        styled = render(text, segments, self._config, spans)
        self.logger.debug(
            f"Formatted {len(text)} chars into {len(segments)} segments, "
            f"{len(styled.ranges)} color ranges"
        )
        return styled

    def __str__(self) -> str:
        # Raw pattern; going through format() would drop the spans
        return str(self._pattern)

    def __repr__(self) -> str:
        return f"ColorPhrase({str(self._pattern)!r}, {self._config!r})"


def from_pattern(pattern: PatternLike, logger: Optional[Logger] = None) -> ColorPhrase:
    return ColorPhrase.from_pattern(pattern, logger=logger)
