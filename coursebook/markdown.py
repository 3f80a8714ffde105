"""Markdown helpers: relative links between pages and human-readable durations."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import PurePosixPath
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _ancestors(path: PurePosixPath) -> Iterator[tuple[str, ...]]:
    """Yield the component tuples of `path` and each of its ancestors."""
    parts = path.parts
    lowest = 1 if path.is_absolute() else 0
    for length in range(len(parts), lowest - 1, -1):
        yield parts[:length]


def relative_link(doc_path: PathLike, target_path: PathLike) -> str:
    """Build a link from the page at `doc_path` to the page at `target_path`."""
    doc = PurePosixPath(os.fspath(doc_path))
    target_text = os.fspath(target_path)
    target_parts = PurePosixPath(target_text).parts

    dotdot = -1
    for prefix in _ancestors(doc):
        if target_parts[: len(prefix)] == prefix:
            break
        dotdot += 1

    if dotdot > 0:
        return "../" * dotdot + target_text
    return f"./{target_text}"


def duration(minutes: int) -> str:
    """Describe a number of minutes in words.

    Durations longer than five minutes are rounded up to a multiple of five.
    """
    if minutes < 0:
        raise ValueError(f"duration cannot be negative: {minutes}")
    if minutes > 5:
        minutes = (minutes + 4) // 5 * 5

    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return "1 minute" if minutes == 1 else f"{minutes} minutes"
    hour_text = "1 hour" if hours == 1 else f"{hours} hours"
    if minutes == 0:
        return hour_text
    return f"{hour_text} and {minutes} minutes"