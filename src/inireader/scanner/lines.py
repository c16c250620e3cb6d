"""Line normalisation and section header recognition."""

from __future__ import annotations

from typing import Sequence

DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = (";", "#")


def normalize_line(
    raw: str, comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES
) -> str | None:
    """Strip a raw line, returning ``None`` for blank and comment lines."""

    line = raw.strip()
    if not line:
        return None
    if any(line.startswith(prefix) for prefix in comment_prefixes if prefix):
        return None
    return line


def section_name(line: str) -> str | None:
    """Return the trimmed name inside ``[...]`` or ``None`` for other lines."""

    if len(line) >= 2 and line[0] == "[" and line[-1] == "]":
        return line[1:-1].strip()
    return None


def matches_target(name: str, target: str) -> bool:
    """Case-insensitive comparison of a section or key name."""

    return name.lower() == target.lower()


__all__ = ["DEFAULT_COMMENT_PREFIXES", "matches_target", "normalize_line", "section_name"]
