from .base import ParseError, StructuralParser
from .config import ParserConfig
from .config_file import ParserConfigFile, load_parser_config
from .markdown_parser import MarkdownItParser
from .models import Node, NodeKind

__all__ = [
    "MarkdownItParser",
    "Node",
    "NodeKind",
    "ParseError",
    "ParserConfig",
    "ParserConfigFile",
    "StructuralParser",
    "load_parser_config",
]
