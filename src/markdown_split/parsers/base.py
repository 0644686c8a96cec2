# src/markdown_split/parsers/base.py

from typing import Protocol

from markdown_split.errors import ParseError

from .models import Node


class StructuralParser(Protocol):
    def parse(self, text: str) -> Node:
        """
        Parse markdown text into a ROOT node.

        Requirements:
        - Deterministic output for same input
        - Offsets index into `text` exactly as given
        - Block-level children in document order

        Raises:
            ParseError: If the text cannot be parsed.
        """
        ...


__all__ = ["ParseError", "StructuralParser"]
