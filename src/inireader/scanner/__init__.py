"""Line-oriented section/key scanning for INI-style files."""

from inireader.scanner.entries import Entry, parse_entry, unquote
from inireader.scanner.lines import (
    DEFAULT_COMMENT_PREFIXES,
    matches_target,
    normalize_line,
    section_name,
)
from inireader.scanner.section_scanner import (
    ScanResult,
    ScanState,
    SectionScanner,
    find_value,
)

__all__ = [
    "DEFAULT_COMMENT_PREFIXES",
    "Entry",
    "ScanResult",
    "ScanState",
    "SectionScanner",
    "find_value",
    "matches_target",
    "normalize_line",
    "parse_entry",
    "section_name",
    "unquote",
]
