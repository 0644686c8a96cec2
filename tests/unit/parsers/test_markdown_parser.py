from unittest.mock import Mock

import pytest

from markdown_split.errors import ParseError
from markdown_split.parsers.config import ParserConfig
from markdown_split.parsers.markdown_parser import MarkdownItParser
from markdown_split.parsers.models import Node, NodeKind


@pytest.fixture
def parser() -> MarkdownItParser:
    return MarkdownItParser()


def _headings(root: Node) -> list[tuple[int | None, int | None]]:
    return [(c.offset, c.level) for c in root.children if c.kind is NodeKind.HEADING]


class TestMarkdownItParser:
    def test_returns_root(self, parser: MarkdownItParser) -> None:
        root = parser.parse("hello\n")

        assert root.kind is NodeKind.ROOT
        assert root.offset == 0

    def test_empty_document_has_no_children(self, parser: MarkdownItParser) -> None:
        assert parser.parse("").children == ()

    def test_atx_heading_offsets_and_levels(self, parser: MarkdownItParser) -> None:
        root = parser.parse("# A\ntext1\n## B\ntext2\n")

        assert _headings(root) == [(0, 1), (10, 2)]

    def test_setext_heading_starts_at_text_line(self, parser: MarkdownItParser) -> None:
        root = parser.parse("intro\n\nTitle\n-----\nbody\n")

        assert _headings(root) == [(7, 2)]

    def test_indented_heading_starts_at_line_start(
        self, parser: MarkdownItParser
    ) -> None:
        root = parser.parse("intro\n   # A\n")

        assert _headings(root) == [(6, 1)]

    def test_crlf_line_breaks(self, parser: MarkdownItParser) -> None:
        root = parser.parse("intro\r\n# A\r\nbody\r\n")

        assert _headings(root) == [(7, 1)]

    def test_lone_cr_line_breaks(self, parser: MarkdownItParser) -> None:
        root = parser.parse("intro\r# A\rbody\r")

        assert _headings(root) == [(6, 1)]

    def test_heading_without_trailing_newline(self, parser: MarkdownItParser) -> None:
        root = parser.parse("intro\n# A")

        assert _headings(root) == [(6, 1)]

    def test_non_heading_blocks_are_other(self, parser: MarkdownItParser) -> None:
        root = parser.parse("para\n\n```\ncode\n```\n\n---\n")

        assert [c.kind for c in root.children] == [NodeKind.OTHER] * 3
        assert [c.type for c in root.children] == ["paragraph", "fence", "hr"]
        assert [c.offset for c in root.children] == [0, 6, 20]

    def test_blockquote_heading_is_nested(self, parser: MarkdownItParser) -> None:
        root = parser.parse("> # quoted\n\n# real\n")

        quote = root.children[0]
        assert quote.type == "blockquote"
        assert quote.children[0].kind is NodeKind.HEADING
        assert quote.children[0].offset == 0
        assert _headings(root) == [(12, 1)]

    def test_list_item_heading_is_nested(self, parser: MarkdownItParser) -> None:
        root = parser.parse("- # item\n")

        assert _headings(root) == []

    def test_html_comment_hides_heading(self, parser: MarkdownItParser) -> None:
        root = parser.parse("<!--\n## Hidden\n-->\n\n## Shown\n")

        assert root.children[0].type == "html_block"
        assert _headings(root) == [(20, 2)]

    def test_inline_content_is_not_kept(self, parser: MarkdownItParser) -> None:
        root = parser.parse("# A *b*\n\ntext\n")

        assert root.children[0].children == ()
        assert root.children[1].children == ()

    def test_parser_is_reusable(self, parser: MarkdownItParser) -> None:
        first = parser.parse("# A\n")
        second = parser.parse("x\n# B\n")

        assert _headings(first) == [(0, 1)]
        assert _headings(second) == [(2, 1)]


class TestParserConfigDialects:
    def test_front_matter_disabled_reads_setext_heading(self) -> None:
        root = MarkdownItParser(ParserConfig.gfm()).parse("---\ntitle: x\n---\n# A\n")

        assert _headings(root) == [(4, 2), (17, 1)]

    def test_front_matter_enabled_is_not_a_heading(self) -> None:
        config = ParserConfig(front_matter=True)

        root = MarkdownItParser(config).parse("---\ntitle: x\n---\n# A\n")

        assert root.children[0].type == "front_matter"
        assert _headings(root) == [(17, 1)]

    def test_tables_enabled(self) -> None:
        root = MarkdownItParser(ParserConfig.gfm()).parse("| a |\n|---|\n| 1 |\n")

        assert root.children[0].type == "table"

    def test_tables_disabled(self) -> None:
        root = MarkdownItParser(ParserConfig.commonmark()).parse(
            "| a |\n|---|\n| 1 |\n"
        )

        assert root.children[0].type == "paragraph"

    def test_footnotes_do_not_add_headings(self) -> None:
        text = "# A\ntext[^1]\n\n[^1]: # not a split\n"

        root = MarkdownItParser(ParserConfig.gfm()).parse(text)

        assert _headings(root) == [(0, 1)]


class TestParseErrors:
    def test_markdown_it_failure_raises_parse_error(self) -> None:
        parser = MarkdownItParser()
        parser._md = Mock(parse=Mock(side_effect=RuntimeError("boom")))

        with pytest.raises(ParseError, match="boom"):
            parser.parse("# A\n")


class TestByteOrderMark:
    def test_heading_after_bom_is_recognised(self, parser: MarkdownItParser) -> None:
        root = parser.parse("\ufeff# A\nx\n# B\n")

        assert _headings(root) == [(1, 1), (7, 1)]

    def test_bom_without_heading_keeps_offsets(self, parser: MarkdownItParser) -> None:
        root = parser.parse("\ufeffintro\n# A\n")

        assert root.children[0].offset == 1
        assert _headings(root) == [(7, 1)]

    def test_bom_only_at_start_is_skipped(self, parser: MarkdownItParser) -> None:
        root = parser.parse("intro\n\ufeff# A\n")

        assert _headings(root) == []
