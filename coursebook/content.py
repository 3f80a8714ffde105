"""Dump the source text of every slide, grouped by course structure."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Union

from .course import Book, Chapter, Courses, PartTitle, Separator

_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_HEADING = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*$")
_SEPARATOR = re.compile(r"^\s*(?:-{3,}|\*{3,}|_{3,})\s*$")
_ITEM = re.compile(
    r"^(?P<indent>[ \t]*)(?P<bullet>[-*+][ \t]+)?"
    r"\[(?P<name>[^\]]*)\]\((?P<path>[^)]*)\)\s*$"
)


def _load_book(root: Union[str, Path] = ".") -> Book:
    """Load the book whose ``src/SUMMARY.md`` lies under `root`."""
    src = Path(root) / "src"
    summary = _COMMENT.sub("", (src / "SUMMARY.md").read_text(encoding="utf-8"))
    book = Book()
    stack: list[tuple[int, Chapter]] = []
    seen_item = False
    top_number = 0

    for line in summary.splitlines():
        if not line.strip():
            continue
        heading = _HEADING.match(line)
        if heading:
            if seen_item:
                book.sections.append(PartTitle(heading["title"]))
                stack.clear()
            continue
        if _SEPARATOR.match(line):
            book.sections.append(Separator())
            stack.clear()
            continue
        item = _ITEM.match(line)
        if item is None:
            raise ValueError(f"SUMMARY.md: cannot parse line {line!r}")
        seen_item = True

        indent = len(item["indent"].expandtabs(4))
        while stack and stack[-1][0] >= indent:
            stack.pop()
        parent = stack[-1][1] if stack else None
        chapter = _chapter(src, item["name"], item["path"].strip(), parent)

        if parent is None:
            if item["bullet"]:
                top_number += 1
                chapter.number = [top_number]
            book.sections.append(chapter)
        else:
            if parent.number is not None:
                siblings = sum(isinstance(sub, Chapter) for sub in parent.sub_items)
                chapter.number = [*parent.number, siblings + 1]
            parent.sub_items.append(chapter)
        stack.append((indent, chapter))
    return book


def _chapter(src: Path, name: str, path: str, parent: Chapter | None) -> Chapter:
    parent_names = [*parent.parent_names, parent.name] if parent else []
    if not path:
        return Chapter(name, parent_names=parent_names)
    content = (src / path).read_text(encoding="utf-8")
    return Chapter(
        name, content=content, path=path, source_path=path, parent_names=parent_names
    )


def course_content(courses: Courses, src_dir: Union[str, Path]) -> str:
    """Headings for every course, session, segment and slide, with slide sources."""
    src = Path(src_dir)
    lines: list[str] = []
    for course in courses:
        lines.append(f"# COURSE: {course.name}\n")
        for session in course:
            lines.append(f"# SESSION: {session.name}\n")
            for segment in session:
                lines.append(f"# SEGMENT: {segment.name}\n")
                for slide in segment:
                    lines.append(f"# SLIDE: {slide.name}\n")
                    lines.extend(
                        (src / path).read_text(encoding="utf-8") + "\n"
                        for path in slide.source_paths
                    )
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="course-content",
        description="Print the source of every slide in course order",
    ).parse_args(argv)
    try:
        courses, _ = Courses.extract_structure(_load_book("."))
        sys.stdout.write(course_content(courses, Path("src")))
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())