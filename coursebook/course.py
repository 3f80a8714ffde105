"""The course hierarchy of a book: courses, sessions, segments and slides.

A book is a sequence of items. A top-level chapter whose frontmatter names a
``course`` starts a new course (``course: none`` ends course material), and a
``session`` entry starts a new session. Each top-level chapter inside a session
becomes a segment whose first slide is the chapter itself; each of its
sub-chapters becomes a further slide, taking its own sub-chapters with it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Union

from .frontmatter import Frontmatter, split_frontmatter
from .markdown import duration, relative_link

BREAK_DURATION = 10
"""Minutes of break between segments."""


class CourseStructureError(ValueError):
    """Raised when the book's annotations do not describe a valid course."""


@dataclass
class Chapter:
    """A chapter of a book, possibly holding sub-items."""

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Chapter:
        number = data.get("number")
        return cls(
            name=data["name"],
            content=data.get("content", ""),
            number=list(number) if number is not None else None,
            sub_items=[_item_from_json(item) for item in data.get("sub_items", [])],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names", [])),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [_item_to_json(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": self.parent_names,
        }


@dataclass
class Separator:
    """A separator between parts of a book."""


@dataclass
class PartTitle:
    """A title heading a part of a book."""

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def _item_from_json(data: Any) -> BookItem:
    if data == "Separator":
        return Separator()
    if isinstance(data, dict):
        if "Chapter" in data:
            return Chapter.from_json(data["Chapter"])
        if "PartTitle" in data:
            return PartTitle(data["PartTitle"])
    raise ValueError(f"unknown book item: {data!r}")


def _item_to_json(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_json()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


def _walk(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield item
            yield from _walk(item.sub_items)


@dataclass
class Book:
    """A book: an ordered list of items."""

    sections: list[BookItem] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Book:
        return cls([_item_from_json(item) for item in data.get("sections", [])])

    def to_json(self) -> dict[str, Any]:
        return {
            "sections": [_item_to_json(item) for item in self.sections],
            "__non_exhaustive": None,
        }

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, depth first, parents before their sub-items."""
        return _walk(self.sections)


@dataclass
class Slide:
    """A single topic, made of one chapter and possibly its sub-chapters."""

    name: str
    minutes: int = 0
    source_paths: list[str] = field(default_factory=list)

    @classmethod
    def _from_chapter(cls, frontmatter: Frontmatter, chapter: Chapter) -> Slide:
        slide = cls(chapter.name)
        slide._add_chapter(frontmatter, chapter)
        return slide

    def _add_chapter(self, frontmatter: Frontmatter, chapter: Chapter) -> None:
        self.minutes += frontmatter.minutes or 0
        if chapter.source_path is not None:
            self.source_paths.append(chapter.source_path)

    def _add_sub_chapters(self, chapter: Chapter) -> None:
        for sub in chapter.sub_items:
            if not isinstance(sub, Chapter):
                continue
            frontmatter, sub.content = split_frontmatter(sub)
            if frontmatter.course is not None or frontmatter.session is not None:
                raise CourseStructureError(
                    f"{sub.path!r}: sub-slides may not have 'course' or 'session' set"
                )
            self._add_chapter(frontmatter, sub)
            self._add_sub_chapters(sub)

    def is_sub_chapter(self, chapter: Chapter) -> bool:
        """Whether `chapter` is one of this slide's sub-chapters rather than its first."""
        first = self.source_paths[0] if self.source_paths else None
        return chapter.source_path != first


@dataclass
class Segment:
    """A collection of slides on a related theme."""

    name: str
    slides: list[Slide] = field(default_factory=list)

    def _add_slide(self, frontmatter: Frontmatter, chapter: Chapter, recurse: bool) -> None:
        slide = Slide._from_chapter(frontmatter, chapter)
        if recurse:
            slide._add_sub_chapters(chapter)
        self.slides.append(slide)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def minutes(self) -> int:
        """Total duration of the slides in this segment."""
        return sum(slide.minutes for slide in self)

    def outline(self, at_source_path: str) -> str:
        """Markdown outline of this segment, for a page at `at_source_path`."""
        lines = ["In this segment:\n"]
        lines.extend(
            f" * [{slide.name}]({relative_link(at_source_path, slide.source_paths[0])})"
            f" ({duration(slide.minutes)})\n"
            for slide in self
            if slide.minutes > 0
        )
        lines.append(f"\nThis segment should take about {duration(self.minutes())}\n")
        return "".join(lines)


@dataclass
class Session:
    """A block of instructional time made of segments."""

    name: str
    segments: list[Segment] = field(default_factory=list)
    _target_minutes: int = field(default=0, repr=False)

    def _add_segment(self, frontmatter: Frontmatter, chapter: Chapter) -> None:
        segment = Segment(chapter.name)
        segment._add_slide(frontmatter, chapter, recurse=False)
        for sub in chapter.sub_items:
            if not isinstance(sub, Chapter):
                continue
            sub_frontmatter, sub.content = split_frontmatter(sub)
            segment._add_slide(sub_frontmatter, sub, recurse=True)
        self.segments.append(segment)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def outline(self, at_source_path: str) -> str:
        """Markdown outline of this session, for a page at `at_source_path`."""
        lines = ["In this session:\n"]
        lines.extend(
            f" * [{segment.name}]"
            f"({relative_link(at_source_path, segment.slides[0].source_paths[0])})"
            f" ({duration(segment.minutes())})\n"
            for segment in self
            if segment.minutes() > 0
        )
        lines.append(
            f"\nIncluding {BREAK_DURATION} minute breaks, this session should take "
            f"about {duration(self.minutes())}\n"
        )
        return "".join(lines)

    def minutes(self) -> int:
        """Total duration of this session, including breaks between segments."""
        durations = [segment.minutes() for segment in self]
        instructional = sum(durations)
        if instructional == 0:
            return 0
        taught = sum(1 for minutes in durations if minutes > 0)
        return instructional + (taught - 1) * BREAK_DURATION

    def target_minutes(self) -> int:
        """Planned duration of this session, or its actual duration if none is set."""
        return self._target_minutes if self._target_minutes > 0 else self.minutes()


@dataclass
class Course:
    """The level of content at which students enroll."""

    name: str
    sessions: list[Session] = field(default_factory=list)

    def _session(self, name: str) -> Session:
        for session in self.sessions:
            if session.name == name:
                return session
        session = Session(name)
        self.sessions.append(session)
        return session

    def __iter__(self) -> Iterator[Session]:
        return iter(self.sessions)

    def minutes(self) -> int:
        """Total duration of all sessions, including breaks within them."""
        return sum(session.minutes() for session in self)

    def target_minutes(self) -> int:
        """Total planned duration of all sessions."""
        return sum(session.target_minutes() for session in self)

    def schedule(self, at_source_path: str) -> str:
        """Markdown schedule of this course, for a page at `at_source_path`."""
        lines = ["Course schedule:\n"]
        for session in self:
            lines.append(
                f" * {session.name} ({duration(session.minutes())}, including breaks)\n"
            )
            lines.extend(
                f"   * [{segment.name}]"
                f"({relative_link(at_source_path, segment.slides[0].source_paths[0])})"
                f" ({duration(segment.minutes())})\n"
                for segment in session
                if segment.minutes() > 0
            )
        return "".join(lines)


@dataclass
class Courses:
    """All courses found in a book."""

    courses: list[Course] = field(default_factory=list)

    @classmethod
    def extract_structure(cls, book: Book) -> tuple[Courses, Book]:
        """Read the course structure from `book`, stripping frontmatter from its chapters."""
        courses = cls()
        course_name: str | None = None
        session_name: str | None = None

        for item in book.sections:
            if not isinstance(item, Chapter):
                continue
            frontmatter, item.content = split_frontmatter(item)

            if frontmatter.course is not None:
                session_name = None
                course_name = None if frontmatter.course == "none" else frontmatter.course
            if frontmatter.session is not None:
                session_name = frontmatter.session

            if course_name is not None and session_name is None:
                raise CourseStructureError(
                    f"{item.path!r}: 'session' must appear in frontmatter "
                    "when 'course' appears"
                )
            if course_name is not None and session_name is not None:
                session = courses._course(course_name)._session(session_name)
                session._target_minutes += frontmatter.target_minutes or 0
                session._add_segment(frontmatter, item)

        return courses, book

    def _course(self, name: str) -> Course:
        course = self.find_course(name)
        if course is None:
            course = Course(name)
            self.courses.append(course)
        return course

    def find_course(self, name: str) -> Course | None:
        """The course called `name`, if there is one."""
        return next((course for course in self if course.name == name), None)

    def find_slide(
        self, chapter: Chapter
    ) -> tuple[Course, Session, Segment, Slide] | None:
        """Locate the slide built from `chapter`, with its enclosing course, session and segment."""
        if chapter.source_path is None:
            return None
        for course in self:
            for session in course:
                for segment in session:
                    for slide in segment:
                        if chapter.source_path in slide.source_paths:
                            return course, session, segment, slide
        return None

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses)