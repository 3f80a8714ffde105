"""Parsing of the YAML frontmatter at the top of a chapter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Protocol

import yaml

_FRONTMATTER = re.compile(
    r"\A[ \t\r\n]*---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontmatterError(ValueError):
    """Raised when a chapter's frontmatter cannot be parsed."""


class _HasContent(Protocol):
    content: str
    source_path: str | None


@dataclass
class Frontmatter:
    """Course annotations found in a chapter's frontmatter."""

    minutes: int | None = None
    target_minutes: int | None = None
    course: str | None = None
    session: str | None = None


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key!r} must be a non-negative integer, got {value!r}")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {value!r}")
    return value


def _parse(text: str) -> Frontmatter:
    data = yaml.safe_load(text)
    if data is None:
        return Frontmatter()
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return Frontmatter(
        minutes=_optional_int(data, "minutes"),
        target_minutes=_optional_int(data, "target_minutes"),
        course=_optional_str(data, "course"),
        session=_optional_str(data, "session"),
    )


def split_frontmatter(chapter: _HasContent) -> tuple[Frontmatter, str]:
    """Split a chapter's content into its frontmatter and the remaining text."""
    match = _FRONTMATTER.match(chapter.content)
    if match is None:
        return Frontmatter(), chapter.content
    try:
        frontmatter = _parse(match.group("yaml"))
    except (yaml.YAMLError, ValueError) as err:
        raise FrontmatterError(
            f"error parsing frontmatter in {chapter.source_path!r}: {err}"
        ) from err
    return frontmatter, chapter.content[match.end():]