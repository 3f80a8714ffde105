"""Extract exercise files from code blocks marked with a file comment.

A line ``<!-- File path/to/file -->`` names the file that the next code block
is written to. Code blocks without such a comment are ignored, as are comments
that are never followed by a code block.
"""

from __future__ import annotations

import json
import logging
import shutil
import sys
from pathlib import Path, PurePosixPath
from typing import Union

from markdown_it import MarkdownIt

from .course import Book

FILENAME_START = "<!-- File "
FILENAME_END = " -->"

_CODE_TOKENS = frozenset({"fence", "code_block"})

logger = logging.getLogger(__name__)


class ExerciserConfigError(ValueError):
    """Raised when the renderer configuration or the book cannot be used."""


def _filename_in(line: str) -> str | None:
    line = line.strip()
    if (
        line.startswith(FILENAME_START)
        and line.endswith(FILENAME_END)
        and len(line) >= len(FILENAME_START) + len(FILENAME_END)
    ):
        return line[len(FILENAME_START): len(line) - len(FILENAME_END)]
    return None


def process(output_directory: Union[str, Path], input_contents: str) -> None:
    """Write each marked code block in `input_contents` below `output_directory`."""
    output = Path(output_directory)
    next_filename: str | None = None

    for token in MarkdownIt("commonmark").parse(input_contents):
        logger.debug("%r", token)
        if token.type == "html_block":
            for line in token.content.splitlines():
                filename = _filename_in(line)
                if filename is not None:
                    next_filename = filename
                    logger.info("Next file: %r", next_filename)
        elif token.type in _CODE_TOKENS:
            logger.info("Code block %r", token.info)
            if next_filename is None:
                continue
            full_filename = output / next_filename
            logger.info("Opening %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with full_filename.open("w", encoding="utf-8", newline="") as out:
                out.write(token.content)
            next_filename = None


def process_all(book: Book, output_directory: Union[str, Path]) -> None:
    """Extract exercises from every chapter, one subdirectory per chapter file."""
    output = Path(output_directory)
    for chapter in book.iter_chapters():
        logger.debug("Chapter %r / %r", chapter.path, chapter.source_path)
        if chapter.path is None:
            continue
        stem = PurePosixPath(chapter.path).stem
        if not stem:
            raise ExerciserConfigError(f"Chapter {chapter.path!r} has no file stem")
        process(output / stem, chapter.content)


def _output_directory(context: dict) -> Path:
    config = context.get("config", {}).get("output", {}).get("exerciser")
    if not isinstance(config, dict):
        raise ExerciserConfigError("Missing output.exerciser configuration")
    if "output-directory" not in config:
        raise ExerciserConfigError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = config["output-directory"]
    if not isinstance(value, str):
        raise ExerciserConfigError(
            "Expected a string for output.exerciser.output-directory"
        )
    return Path(value)


def main(argv: list[str] | None = None) -> int:
    """Render exercises from a render context read as JSON on standard input."""
    logging.basicConfig()
    try:
        try:
            context = json.load(sys.stdin)
        except json.JSONDecodeError as err:
            raise ExerciserConfigError(f"Parsing stdin: {err}") from err
        output_directory = _output_directory(context)
        shutil.rmtree(output_directory, ignore_errors=True)
        try:
            output_directory.mkdir()
        except OSError as err:
            raise ExerciserConfigError(
                f"Failed to create output directory {str(output_directory)!r}: {err}"
            ) from err
        process_all(Book.from_json(context.get("book", {})), output_directory)
    except (OSError, ValueError, KeyError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())