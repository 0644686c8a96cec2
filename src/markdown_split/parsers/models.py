# src/markdown_split/parsers/models.py

from dataclasses import dataclass, field
from enum import Enum


class NodeKind(str, Enum):
    """Node kinds the splitter distinguishes. Everything else is OTHER."""

    ROOT = "root"
    HEADING = "heading"
    OTHER = "other"


@dataclass(frozen=True)
class Node:
    """A parsed document element.

    Immutable. Parser-agnostic. `offset` is where the element's source text
    begins in the document, or None if the parser did not record it.
    """

    kind: NodeKind
    offset: int | None = None
    children: tuple["Node", ...] = field(default_factory=tuple)
    level: int | None = None  # Heading depth, 1-6
    type: str = ""  # Raw node type from the parser, for debugging
