# layout/renderer.py

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..definitions import PhraseConfig
from ..lexer.tokens import Segment
from ..styled_text import ColorRange, StyledText, TextSpan
from .buffer import SpannedBuffer


def layout(segments: Iterable[Segment]) -> Iterator[Tuple[int, Segment]]:
    """
    Yield (output start, segment) pairs.

    Each start is the sum of the output lengths of the segments before it,
    accumulated in one forward pass.
    """
    cursor = 0
    for segment in segments:
        yield cursor, segment
        cursor += segment.output_length


def render(
    text: str,
    segments: Sequence[Segment],
    config: PhraseConfig,
    spans: Iterable[TextSpan] = ()
) -> StyledText:
    """Apply the segments to a copy of text and return the result."""
    source_length = sum(s.source_length for s in segments)
    if source_length != len(text):
        raise ValueError(
            f"Segments cover {source_length} characters but the text has {len(text)}"
        )

    target = SpannedBuffer(text, spans)
    ranges: List[ColorRange] = []
    # Buffer positions before the cursor are already rewritten, so output
    # coordinates and buffer coordinates agree at every step.
    for cursor, segment in layout(segments):
        color_range = segment.render(cursor, target, config)
        if color_range is not None:
            ranges.append(color_range)

    return StyledText(text=target.text, ranges=tuple(ranges), spans=target.spans)
