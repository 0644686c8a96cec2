# src/markdown_split/cli.py

"""Command line entry point: print the heading sections of a markdown file."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from markdown_split.errors import ParseFailure
from markdown_split.parsers.config import ParserConfig
from markdown_split.parsers.config_file import load_parser_config
from markdown_split.splitting.splitter import split_sections

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md-split",
        description="Split a markdown document into sections at each heading",
    )
    parser.add_argument("file", help="Markdown file to split, or - for stdin")
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with parser options (preset, tables, footnotes, ...)",
    )
    parser.add_argument(
        "--commonmark",
        action="store_true",
        help="Parse as plain CommonMark instead of GitHub flavored markdown",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit sections as a JSON list with offsets",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        try:
            options = load_parser_config(args.config)
        except OSError as e:
            arg_parser.error(f"cannot read config {args.config}: {e}")
        except (ValidationError, yaml.YAMLError) as e:
            logger.error("Invalid parser config %s: %s", args.config, e)
            return 1
    elif args.commonmark:
        options = ParserConfig.commonmark()
    else:
        options = ParserConfig.gfm()

    if args.file == "-":
        data = sys.stdin.buffer.read()
    else:
        try:
            data = Path(args.file).read_bytes()
        except OSError as e:
            arg_parser.error(f"cannot read {args.file}: {e}")

    try:
        sections = split_sections(data, options)
    except ParseFailure as e:
        logger.error("Could not split %s: %s", args.file, e.message)
        return 1

    out = sys.stdout
    if args.json:
        payload = [
            {
                "index": i,
                "offset_start": s.offset_start,
                "offset_end": s.offset_end,
                "text": s.text.decode("utf-8"),
            }
            for i, s in enumerate(sections)
        ]
        json.dump(payload, out, ensure_ascii=False, indent=2)
        out.write("\n")
        return 0

    for i, s in enumerate(sections):
        out.write(f"Section {i}\n---------\n{s.text.decode('utf-8')}\n---------\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
