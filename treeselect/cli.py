from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from treeselect.accessors import (
    as_text,
    get_sole_element,
    normalized_text,
    select_by_attribute,
    select_by_class,
    select_by_tag,
)
from treeselect.config import AppConfig, load_config
from treeselect.errors import TreeSelectError
from treeselect.html_parser import parse_html, parse_html_file
from treeselect.http import FetchError, load_url
from treeselect.models import Node, Tree

URL_PREFIXES = ("http://", "https://")
STDIN_SOURCE = "-"

logger = logging.getLogger(__name__)


def load_source(source: str, config: AppConfig) -> Node:
    if source == STDIN_SOURCE:
        return parse_html(sys.stdin.read(), config.parse)
    if source.startswith(URL_PREFIXES):
        return load_url(
            source,
            options=config.parse,
            config=config.fetch,
        )
    return parse_html_file(Path(source), config.parse)


def run_query(tree: Tree, args: argparse.Namespace) -> list[Tree]:
    if args.tag is not None:
        return select_by_tag(tree, args.tag)
    if args.class_name is not None:
        return select_by_class(tree, args.class_name)
    key, separator, value = args.attr.partition("=")
    return select_by_attribute(tree, key, value if separator else None)


def _format_match(match: Tree, args: argparse.Namespace) -> str:
    if args.normalize:
        return normalized_text(match)
    if args.text:
        return as_text(match)
    return repr(match)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeselect", description="Select elements from an HTML document."
    )
    parser.add_argument("source", help="File path, '-' for stdin, or http(s) URL")
    query = parser.add_mutually_exclusive_group(required=True)
    query.add_argument("--tag", help="Select elements with this tag")
    query.add_argument("--class", dest="class_name", help="Select elements with this class")
    query.add_argument("--attr", help="Select elements with attribute KEY or KEY=VALUE")
    parser.add_argument("--text", action="store_true", help="Print text content")
    parser.add_argument(
        "--normalize", action="store_true", help="Print text with collapsed whitespace"
    )
    parser.add_argument(
        "--sole", action="store_true", help="Fail unless exactly one element matches"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config()
    try:
        tree = load_source(args.source, config)
        matches = run_query(tree, args)
        if args.sole:
            matches = [get_sole_element(matches)]
    except (TreeSelectError, FetchError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Query failed", exc_info=True)
        print(f"treeselect: {exc}", file=sys.stderr)
        return 1
    for match in matches:
        print(_format_match(match, args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
