# src/markdown_split/parsers/markdown_parser.py

import logging
import re
from time import monotonic

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from markdown_split.errors import ParseError
from markdown_split.observability import names
from markdown_split.observability.base import MetricsHook, NoOpMetricsHook

from .config import ParserConfig
from .models import Node, NodeKind

logger = logging.getLogger(__name__)

# markdown-it normalizes all of these to "\n" before tokenizing, so line
# numbers in token maps count them as one break each.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_BOM = "\ufeff"


class MarkdownItParser:
    """
    Structural parser backed by markdown-it-py.

    - Block-level tree only; inline content is not descended into
    - Offsets are code-point indices of the first source line of each block
    - Safe to reuse across documents
    """

    def __init__(
        self,
        config: ParserConfig = ParserConfig.gfm(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        try:
            self._md = _build_markdown_it(config)
        except Exception as e:
            raise ParseError(f"Invalid parser configuration: {e}") from e
        logger.debug("Initialized MarkdownItParser with config=%s", config)

    def parse(self, text: str) -> Node:
        start = monotonic()
        # A leading BOM is not content; headings start right after it
        bom = 1 if text.startswith(_BOM) else 0
        try:
            tokens = self._md.parse(text[bom:])
            tree = SyntaxTreeNode(tokens)
        except Exception as e:
            self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL)
            logger.error("markdown-it failed to parse document: %s", e)
            raise ParseError(str(e)) from e

        line_starts = [s + bom for s in _line_starts(text[bom:])]
        root = Node(
            kind=NodeKind.ROOT,
            offset=0,
            children=tuple(_convert(child, line_starts) for child in tree.children),
            type="root",
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        logger.debug("Parsed %d top-level blocks", len(root.children))
        return root


def _build_markdown_it(config: ParserConfig) -> MarkdownIt:
    md = MarkdownIt(
        "commonmark",
        {"html": config.html, "linkify": config.autolinks},
    )
    if config.tables:
        md.enable("table")
    if config.strikethrough:
        md.enable("strikethrough")
    if config.autolinks:
        md.enable("linkify")
    if config.footnotes:
        md.use(footnote_plugin)
    if config.task_lists:
        md.use(tasklists_plugin)
    if config.front_matter:
        md.use(front_matter_plugin)
    return md


def _line_starts(text: str) -> list[int]:
    starts = [0]
    starts.extend(m.end() for m in _LINE_BREAK_RE.finditer(text))
    return starts


def _offset_for_line(line: int, line_starts: list[int]) -> int:
    # A map may point one past the last line break of the text
    if line < len(line_starts):
        return line_starts[line]
    return line_starts[-1]


def _convert(node: SyntaxTreeNode, line_starts: list[int]) -> Node:
    offset = None
    if node.map is not None:
        offset = _offset_for_line(node.map[0], line_starts)

    if node.type == "heading":
        return Node(
            kind=NodeKind.HEADING,
            offset=offset,
            level=int(node.tag[1:]),
            type=node.type,
        )

    # Inline runs are dropped; nested blocks are kept.
    children = tuple(
        _convert(child, line_starts)
        for child in node.children
        if child.type != "inline"
    )
    return Node(kind=NodeKind.OTHER, offset=offset, children=children, type=node.type)
