"""Split markdown documents into sections at each heading.

Example:
    >>> from markdown_split import split
    >>> split("# A\\ntext1\\n## B\\ntext2\\n")
    ['# A\\ntext1\\n', '## B\\ntext2\\n']
"""

# Errors
from .errors import ParseError, ParseFailure, SplitError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    MarkdownItParser,
    Node,
    NodeKind,
    ParserConfig,
    StructuralParser,
    load_parser_config,
)

# Splitting
from .splitting import (
    Section,
    find_split_points,
    normalize_boundaries,
    slice_sections,
    split,
    split_sections,
)

__all__ = [
    # Errors
    "ParseError",
    "ParseFailure",
    "SplitError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "MarkdownItParser",
    "Node",
    "NodeKind",
    "ParserConfig",
    "StructuralParser",
    "load_parser_config",
    # Splitting
    "Section",
    "find_split_points",
    "normalize_boundaries",
    "slice_sections",
    "split",
    "split_sections",
]
