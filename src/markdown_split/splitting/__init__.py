from .slicer import Section, normalize_boundaries, slice_sections
from .split_points import find_split_points
from .splitter import split, split_sections

__all__ = [
    "Section",
    "find_split_points",
    "normalize_boundaries",
    "slice_sections",
    "split",
    "split_sections",
]
