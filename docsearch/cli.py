"""Command line entry point: index documents, answer requests, write answers."""

from __future__ import annotations

import argparse
from typing import Sequence

from docsearch.converter import (
    DEFAULT_ANSWERS_PATH,
    DEFAULT_CONFIG_PATH,
    DEFAULT_REQUESTS_PATH,
    ConverterJSON,
)
from docsearch.index import InvertedIndex
from docsearch.server import SearchServer


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsearch",
        description="Search the documents listed in a config file and write answers.",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="config file")
    parser.add_argument("--requests", default=DEFAULT_REQUESTS_PATH, help="requests file")
    parser.add_argument("--answers", default=DEFAULT_ANSWERS_PATH, help="answers file")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search; configuration errors are printed, not raised."""
    args = _parser().parse_args(argv)
    try:
        converter = ConverterJSON(args.config, args.requests, args.answers)
        index = InvertedIndex()
        index.update_document_base(converter.text_documents())
        server = SearchServer(index)
        converter.put_answers(
            server.search(converter.requests(), converter.response_limit())
        )
    except ValueError as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())