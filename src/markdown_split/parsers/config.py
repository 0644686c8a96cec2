# src/markdown_split/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Dialect flags for the structural parser.

    Immutable. Explicit. No magic defaults from environment.
    The base grammar is always CommonMark; each flag layers an extension on top.
    """

    tables: bool = True
    strikethrough: bool = True
    autolinks: bool = True  # Bare URLs become links (linkify)
    footnotes: bool = True
    task_lists: bool = True
    front_matter: bool = False  # Leading `---` YAML block
    html: bool = True

    @classmethod
    def gfm(cls) -> "ParserConfig":
        """GitHub flavored markdown. The default."""
        return cls()

    @classmethod
    def commonmark(cls) -> "ParserConfig":
        """Plain CommonMark, no extensions."""
        return cls(
            tables=False,
            strikethrough=False,
            autolinks=False,
            footnotes=False,
            task_lists=False,
        )
