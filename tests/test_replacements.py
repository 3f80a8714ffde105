from coursebook.course import Book, Chapter, Courses
from coursebook.replacements import replace


def _courses():
    intro = Chapter(
        "Intro",
        content="---\nminutes: 5\n---\nintro",
        source_path="welcome/intro.md",
        path="welcome/intro.md",
    )
    welcome = Chapter(
        "Welcome",
        content="---\ncourse: Fundamentals\nsession: Day 1\n---\n# Welcome\n",
        source_path="welcome.md",
        path="welcome.md",
        sub_items=[intro],
    )
    hello = Chapter(
        "Hello",
        content="---\nminutes: 10\n---\n# Hello\n",
        source_path="hello.md",
        path="hello.md",
    )
    courses, _ = Courses.extract_structure(Book([welcome, hello]))
    return courses


def _parts(courses):
    course = courses.find_course("Fundamentals")
    session = course.sessions[0]
    segment = session.segments[0]
    return course, session, segment


def test_session_outline_is_expanded():
    courses = _courses()
    course, session, segment = _parts(courses)
    chapter = Chapter("Page", content="Before {{%session outline}} after", source_path="welcome.md")
    replace(courses, course, session, segment, chapter)
    assert chapter.content == "Before " + session.outline("welcome.md") + " after"


def test_segment_outline_is_expanded():
    courses = _courses()
    course, session, segment = _parts(courses)
    chapter = Chapter("Page", content="{{%segment outline}}", source_path="welcome.md")
    replace(courses, course, session, segment, chapter)
    assert chapter.content == segment.outline("welcome.md")
    assert chapter.content.startswith("In this segment:\n")


def test_course_outline_is_expanded():
    courses = _courses()
    course, session, segment = _parts(courses)
    chapter = Chapter("Page", content="{{%course outline}}", source_path="a/b.md")
    replace(courses, course, session, segment, chapter)
    assert chapter.content == course.schedule("a/b.md")
    assert chapter.content.startswith("Course schedule:\n")


def test_named_course_outline_outside_course():
    courses = _courses()
    chapter = Chapter("Page", content="{{%course outline Fundamentals}}", source_path="index.md")
    replace(courses, None, None, None, chapter)
    assert chapter.content == courses.find_course("Fundamentals").schedule("index.md")


def test_unknown_named_course_is_left_alone():
    courses = _courses()
    chapter = Chapter("Page", content="x {{%course outline Missing}} y", source_path="index.md")
    replace(courses, None, None, None, chapter)
    assert chapter.content == "x {{%course outline Missing}} y"


def test_session_outline_without_session_becomes_its_text():
    courses = _courses()
    chapter = Chapter("Page", content="[{{%session outline}}]", source_path="index.md")
    replace(courses, None, None, None, chapter)
    assert chapter.content == "[session outline]"


def test_unknown_directive_is_trimmed():
    courses = _courses()
    chapter = Chapter("Page", content="{{%  foo  bar }}", source_path="index.md")
    replace(courses, None, None, None, chapter)
    assert chapter.content == "foo  bar"


def test_only_first_directive_is_replaced():
    courses = _courses()
    course, session, segment = _parts(courses)
    chapter = Chapter(
        "Page", content="{{%session outline}}|{{%session outline}}", source_path="welcome.md"
    )
    replace(courses, course, session, segment, chapter)
    assert chapter.content == session.outline("welcome.md") + "|{{%session outline}}"


def test_chapter_without_source_path_is_untouched():
    courses = _courses()
    course, session, segment = _parts(courses)
    chapter = Chapter("Draft", content="{{%session outline}}")
    replace(courses, course, session, segment, chapter)
    assert chapter.content == "{{%session outline}}"