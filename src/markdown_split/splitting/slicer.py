# src/markdown_split/splitting/slicer.py

from dataclasses import dataclass
from typing import Generic, TypeVar

Text = TypeVar("Text", str, bytes)


@dataclass(frozen=True)
class Section(Generic[Text]):
    text: Text
    offset_start: int
    offset_end: int


def normalize_boundaries(split_points: list[int], length: int) -> list[int]:
    """Bracket split points with 0 and `length`.

    An empty list becomes `[0, length]`, so a document without headings is
    still one section.
    """
    boundaries = list(split_points)
    if not boundaries or boundaries[0] != 0:
        boundaries.insert(0, 0)
    # The very last boundary is always the end of the text
    boundaries.append(length)
    return boundaries


def slice_sections(text: Text, split_points: list[int]) -> list[Section[Text]]:
    """Cut `text` at each split point.

    Raises:
        ValueError: If split points are out of bounds or decreasing.
    """
    length = len(text)
    boundaries = normalize_boundaries(split_points, length)
    _validate(boundaries, length)

    return [
        Section(text=text[start:end], offset_start=start, offset_end=end)
        for start, end in zip(boundaries, boundaries[1:])
    ]


def _validate(boundaries: list[int], length: int) -> None:
    for point in boundaries:
        if point < 0:
            raise ValueError(f"split point {point} must be >= 0")
        if point > length:
            raise ValueError(f"split point {point} exceeds text length {length}")
    for prev, point in zip(boundaries, boundaries[1:]):
        if point < prev:
            raise ValueError(f"split points must be non-decreasing: {prev} > {point}")
