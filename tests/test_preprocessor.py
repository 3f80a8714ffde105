import io
import json

import pytest

from coursebook.course import Book, CourseStructureError, Courses
from coursebook.preprocessor import main, preprocess


def _chapter(name, content, source_path, sub_items=()):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": None,
            "sub_items": list(sub_items),
            "path": source_path,
            "source_path": source_path,
            "parent_names": [],
        }
    }


CONTEXT = {"root": ".", "config": {}, "renderer": "html"}

DAY1 = "---\ncourse: Fundamentals\nsession: Day 1\n---\n# Day 1\n{{%session outline}}\n"
HELLO = "---\nminutes: 20\n---\n# Hello\n<details>\nnotes\n</details>\n"


def _book_json():
    return {
        "sections": [
            _chapter("Welcome", "# Welcome\n", "welcome.md"),
            "Separator",
            _chapter("Day 1", DAY1, "day1.md", [_chapter("Hello", HELLO, "day1/hello.md")]),
        ],
        "__non_exhaustive": None,
    }


def _run(book_json):
    out = io.StringIO()
    preprocess(io.StringIO(json.dumps([CONTEXT, book_json])), out)
    return Book.from_json(json.loads(out.getvalue()))


def test_frontmatter_is_stripped_and_outline_inserted():
    book = _run(_book_json())
    courses, _ = Courses.extract_structure(Book.from_json(_book_json()))
    session = courses.find_course("Fundamentals").sessions[0]
    day1 = book.sections[2]
    assert day1.content == "# Day 1\n" + session.outline("day1.md") + "\n"


def test_timing_info_is_inserted_in_sub_chapter_slide():
    book = _run(_book_json())
    hello = book.sections[2].sub_items[0]
    assert "<details>\nThis slide should take about 20 minutes. " in hello.content
    assert not hello.content.startswith("---")


def test_chapters_outside_courses_pass_through():
    book = _run(_book_json())
    assert book.sections[0].content == "# Welcome\n"
    assert len(book.sections) == 3


def test_missing_session_raises():
    bad = {"sections": [_chapter("X", "---\ncourse: C\n---\nx", "x.md")]}
    with pytest.raises(CourseStructureError):
        preprocess(io.StringIO(json.dumps([CONTEXT, bad])), io.StringIO())


def test_supports_any_renderer():
    assert main(["supports", "html"]) == 0


def test_main_reports_errors(monkeypatch, capsys):
    bad = {"sections": [_chapter("X", "---\ncourse: C\n---\nx", "x.md")]}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([CONTEXT, bad])))
    assert main([]) == 1
    assert "'session' must appear" in capsys.readouterr().err


def test_main_writes_book(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([CONTEXT, _book_json()])))
    assert main([]) == 0
    written = json.loads(capsys.readouterr().out)
    assert written["sections"][1] == "Separator"