# src/markdown_split/splitting/splitter.py

import logging
from time import monotonic

from markdown_split.errors import ParseError, ParseFailure
from markdown_split.observability import names
from markdown_split.observability.base import MetricsHook, NoOpMetricsHook
from markdown_split.parsers.base import StructuralParser
from markdown_split.parsers.config import ParserConfig
from markdown_split.parsers.markdown_parser import MarkdownItParser

from .slicer import Section, Text, slice_sections
from .split_points import find_split_points

logger = logging.getLogger(__name__)


def split(
    text: Text,
    options: ParserConfig | None = None,
    *,
    parser: StructuralParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Text]:
    """Split markdown text into sections based on headings (h1-h6).

    Args:
        text: The markdown text. `bytes` must be UTF-8; sections are then
            returned as `bytes` cut at byte offsets.
        options: Parser dialect. Defaults to `ParserConfig.gfm()`.
        parser: Custom structural parser. Mutually exclusive with `options`.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The sections in document order. Never empty; joined they equal `text`.

    Raises:
        ParseFailure: If the text cannot be parsed.

    Example:
        >>> split("intro\\n# A\\nbody\\n")
        ['intro\\n', '# A\\nbody\\n']
    """
    sections = split_sections(
        text, options, parser=parser, metrics_hook=metrics_hook
    )
    return [section.text for section in sections]


def split_sections(
    text: Text,
    options: ParserConfig | None = None,
    *,
    parser: StructuralParser | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Section[Text]]:
    """Like `split`, but each section also carries its offsets."""
    if options is not None and parser is not None:
        raise ValueError("Pass either options or parser, not both")

    start = monotonic()
    try:
        if parser is None:
            parser = MarkdownItParser(
                options or ParserConfig.gfm(), metrics_hook=metrics_hook
            )
        source = _decode(text)
        root = parser.parse(source)
    except ParseError as e:
        metrics_hook.increment(names.SPLIT_ERRORS_TOTAL)
        logger.error("Failed to parse document: %s", e)
        raise ParseFailure(str(e)) from e

    split_points = find_split_points(root, metrics_hook)
    try:
        if isinstance(text, bytes):
            split_points = _to_byte_offsets(source, split_points)
        logger.debug("Split points: %s", split_points)
        sections = slice_sections(text, split_points)
    except ValueError as e:
        metrics_hook.increment(names.SPLIT_ERRORS_TOTAL)
        logger.error("Parser returned invalid split points: %s", e)
        raise
    logger.debug("Found %d sections", len(sections))

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.SPLIT_DURATION, elapsed_ms)
    metrics_hook.increment(names.SPLIT_SECTIONS_CREATED, len(sections))
    metrics_hook.record_gauge(names.SPLIT_DOCUMENT_SIZE, len(text))
    return sections


def _decode(text: str | bytes) -> str:
    if isinstance(text, str):
        return text
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Document is not valid UTF-8: {e}") from e


def _to_byte_offsets(source: str, offsets: list[int]) -> list[int]:
    """Map code-point offsets in `source` to UTF-8 byte offsets."""
    byte_offsets = []
    char_pos = 0
    byte_pos = 0
    for offset in offsets:
        if offset > len(source):
            raise ValueError(
                f"split point {offset} exceeds text length {len(source)}"
            )
        if offset < char_pos:
            # Out of order; restart so the slicer sees the real value
            char_pos = 0
            byte_pos = 0
        byte_pos += len(source[char_pos:offset].encode("utf-8"))
        char_pos = offset
        byte_offsets.append(byte_pos)
    return byte_offsets
