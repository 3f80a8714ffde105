"""Summaries of course timing, for review and for pull requests."""

from __future__ import annotations

import argparse
import sys

from .content import _load_book
from .course import Courses
from .markdown import duration


def timediff(actual: int, target: int, slop: int) -> str:
    """Describe `actual` minutes, noting how far it misses `target` beyond `slop`."""
    if actual > target + slop:
        return f"{duration(actual)} (\u23f0 *{duration(actual - target)} too long*)"
    if actual < target - slop:
        return f"{duration(actual)}: ({duration(target - actual)} short)"
    return duration(actual)


def session_summary(courses: Courses) -> str:
    """Markdown summary of every session and its segments.

    Stops at the first course that has no planned time.
    """
    lines: list[str] = []
    for course in courses:
        if course.target_minutes() == 0:
            break
        for session in course:
            lines.append(f"### {course.name} // {session.name}\n")
            lines.append(
                f"_{timediff(session.minutes(), session.target_minutes(), 15)}_\n\n"
            )
            lines.extend(
                f"* {segment.name} - _{duration(segment.minutes())}_\n"
                for segment in session
            )
            lines.append("\n")
    return "".join(lines)


def pr_summary(courses: Courses) -> str:
    """Markdown summary of course and session timing for a pull request."""
    lines = [
        "## Course Schedule\n",
        "With this pull request applied, the course schedule is as follows:\n",
    ]
    for course in courses:
        if course.target_minutes() == 0:
            break
        lines.append(f"### {course.name}\n")
        lines.append(f"_{timediff(course.minutes(), course.target_minutes(), 15)}_\n")
        lines.extend(
            f"* {session.name} - _{timediff(session.minutes(), session.target_minutes(), 5)}_\n"
            for session in course
        )
    return "".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="course-schedule", description="Summarise the timing of course material"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("sessions", help="Show session summary (default)")
    commands.add_parser("segments", help="Show segment summary")
    commands.add_parser("pr", help="Show summary for a PR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.command == "segments":
        print("segment summary is not available", file=sys.stderr)
        return 2
    try:
        courses, _ = Courses.extract_structure(_load_book("."))
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    if args.command == "pr":
        sys.stdout.write(pr_summary(courses))
    else:
        sys.stdout.write(session_summary(courses))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())