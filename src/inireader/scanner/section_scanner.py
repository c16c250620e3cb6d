"""Single-pass scanner that looks up one key inside one section."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from inireader.scanner.entries import parse_entry
from inireader.scanner.lines import (
    DEFAULT_COMMENT_PREFIXES,
    matches_target,
    normalize_line,
    section_name,
)

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """Where the scanner stands relative to the target section."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    DONE = "done"
    EXHAUSTED = "exhausted"

    @property
    def finished(self) -> bool:
        return self in (ScanState.DONE, ScanState.EXHAUSTED)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of one scan over a line source."""

    state: ScanState
    value: str | None
    lines_read: int

    @property
    def found(self) -> bool:
        return self.value is not None


@dataclass(slots=True)
class SectionScanner:
    """Feed lines one at a time until the key is found or the section closes.

    Only the first section whose header matches ``section`` is examined; the
    next header of any name ends the search.
    """

    section: str
    key: str
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES
    state: ScanState = field(default=ScanState.OUTSIDE, init=False)
    value: str | None = field(default=None, init=False)
    lines_read: int = field(default=0, init=False)

    def reset(self) -> None:
        self.state = ScanState.OUTSIDE
        self.value = None
        self.lines_read = 0

    def feed(self, raw: str) -> ScanState:
        """Apply one raw line and return the resulting state."""

        if self.state.finished:
            return self.state
        self.lines_read += 1

        line = normalize_line(raw, self.comment_prefixes)
        if line is None:
            return self.state

        header = section_name(line)
        if header is not None:
            if self.state is ScanState.INSIDE:
                logger.debug(
                    "section [%s] closed at line %d without key %r",
                    self.section,
                    self.lines_read,
                    self.key,
                )
                self.state = ScanState.EXHAUSTED
            elif matches_target(header, self.section):
                logger.debug("entered section [%s] at line %d", header, self.lines_read)
                self.state = ScanState.INSIDE
            return self.state

        if self.state is ScanState.INSIDE:
            entry = parse_entry(line)
            if entry is not None and matches_target(entry.name, self.key):
                if entry.valid:
                    logger.debug("found %r at line %d", entry.name, self.lines_read)
                    self.value = entry.value
                    self.state = ScanState.DONE
                else:
                    logger.debug(
                        "skipping empty value for %r at line %d", entry.name, self.lines_read
                    )
        return self.state

    def scan(self, lines: Iterable[str]) -> ScanResult:
        """Run a fresh scan, stopping at the first terminal state."""

        self.reset()
        for raw in lines:
            if self.feed(raw).finished:
                break
        return ScanResult(state=self.state, value=self.value, lines_read=self.lines_read)


def find_value(
    lines: Iterable[str],
    section: str,
    key: str,
    *,
    comment_prefixes: Sequence[str] = DEFAULT_COMMENT_PREFIXES,
) -> str | None:
    """Return the value of ``key`` in ``section`` or ``None`` when absent."""

    scanner = SectionScanner(section=section, key=key, comment_prefixes=comment_prefixes)
    return scanner.scan(lines).value


__all__ = ["ScanResult", "ScanState", "SectionScanner", "find_value"]
