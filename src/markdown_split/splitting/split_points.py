# src/markdown_split/splitting/split_points.py

import logging

from markdown_split.observability import names
from markdown_split.observability.base import MetricsHook, NoOpMetricsHook
from markdown_split.parsers.models import Node, NodeKind

logger = logging.getLogger(__name__)


def find_split_points(
    root: Node,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[int]:
    """Find the offsets of top-level headings, in document order.

    Headings without a position are skipped. If any heading is found and the
    first one does not start the document, 0 is prepended so the leading
    content gets its own section. No headings yields an empty list.
    """
    split_points: list[int] = []
    skipped = _traverse(root, split_points)

    if skipped:
        metrics_hook.increment(names.SPLIT_HEADINGS_SKIPPED, skipped)

    # The first split point is always the start of the text
    if split_points and split_points[0] != 0:
        split_points.insert(0, 0)

    return split_points


def _traverse(node: Node, split_points: list[int]) -> int:
    """Collect heading offsets into `split_points`. Returns the skip count."""
    skipped = 0
    if node.kind is NodeKind.ROOT:
        for child in node.children:
            skipped += _traverse(child, split_points)
    elif node.kind is NodeKind.HEADING:
        if node.offset is not None:
            split_points.append(node.offset)
        else:
            logger.debug("Skipping h%s heading without position", node.level)
            skipped += 1
    return skipped
