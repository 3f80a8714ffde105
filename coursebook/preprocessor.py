"""Book preprocessor: adds course outlines and timing notes to chapters."""

from __future__ import annotations

import argparse
import json
import sys
from typing import IO

from .course import Book, Courses
from .replacements import replace
from .timing_info import insert_timing_info


def preprocess(input_stream: IO[str], output_stream: IO[str]) -> None:
    """Read a ``[context, book]`` pair as JSON and write the processed book."""
    payload = json.load(input_stream)
    if not isinstance(payload, list) or len(payload) != 2:
        raise ValueError("expected a [context, book] pair on input")
    courses, book = Courses.extract_structure(Book.from_json(payload[1]))

    for chapter in book.iter_chapters():
        found = courses.find_slide(chapter)
        if found is None:
            replace(courses, None, None, None, chapter)
            continue
        course, session, segment, slide = found
        insert_timing_info(slide, chapter)
        replace(courses, course, session, segment, chapter)

    json.dump(book.to_json(), output_stream, ensure_ascii=False, separators=(",", ":"))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-course", description="Book preprocessor for course material"
    )
    commands = parser.add_subparsers(dest="command")
    supports = commands.add_parser("supports", help="Check whether a renderer is supported")
    supports.add_argument("renderer")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.command == "supports":
        return 0
    try:
        preprocess(sys.stdin, sys.stdout)
    except (ValueError, KeyError, TypeError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())