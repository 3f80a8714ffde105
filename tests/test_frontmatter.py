import pytest

from coursebook.course import Chapter
from coursebook.frontmatter import Frontmatter, FrontmatterError, split_frontmatter


def chapter(content):
    return Chapter("Page", content, source_path="page.md")


def test_all_fields_are_read():
    text = (
        "---\nminutes: 5\ntarget_minutes: 90\ncourse: Fundamentals\n"
        "session: Day 1\n---\n# Title\n"
    )
    frontmatter, content = split_frontmatter(chapter(text))
    assert frontmatter == Frontmatter(
        minutes=5, target_minutes=90, course="Fundamentals", session="Day 1"
    )
    assert content == "# Title\n"


def test_missing_frontmatter_gives_defaults_and_unchanged_content():
    text = "# Just a page\n\nSome text.\n"
    frontmatter, content = split_frontmatter(chapter(text))
    assert frontmatter == Frontmatter()
    assert content == text


def test_unknown_keys_are_ignored():
    frontmatter, content = split_frontmatter(chapter("---\nminutes: 3\nextra: yes\n---\nbody"))
    assert frontmatter.minutes == 3
    assert frontmatter.course is None
    assert content == "body"


def test_empty_frontmatter_block():
    frontmatter, content = split_frontmatter(chapter("---\n---\nbody"))
    assert frontmatter == Frontmatter()
    assert content == "body"


def test_closing_fence_at_end_of_text():
    frontmatter, content = split_frontmatter(chapter("---\ncourse: none\n---"))
    assert frontmatter.course == "none"
    assert content == ""


def test_null_values_are_absent():
    frontmatter, _ = split_frontmatter(chapter("---\nminutes: null\nsession: ~\n---\n"))
    assert frontmatter.minutes is None
    assert frontmatter.session is None


@pytest.mark.parametrize(
    "text",
    [
        "---\nminutes: [unclosed\n---\nbody",
        "---\nminutes: abc\n---\nbody",
        "---\nminutes: -4\n---\nbody",
        "---\ncourse: 12\n---\nbody",
        "---\n- a\n- b\n---\nbody",
    ],
)
def test_invalid_frontmatter_raises(text):
    with pytest.raises(FrontmatterError, match="page.md"):
        split_frontmatter(chapter(text))