"""Reading INI-style files from disk and looking up one value."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from inireader.config.settings import DEFAULT_ENCODING, ScannerSettings
from inireader.errors import FileOpenError
from inireader.scanner.section_scanner import ScanResult, SectionScanner

logger = logging.getLogger(__name__)


@contextmanager
def open_ini_file(
    path: Path, *, encoding: str = DEFAULT_ENCODING
) -> Iterator[TextIO]:
    """Open ``path`` for line iteration, mapping ``OSError`` to :class:`FileOpenError`."""

    try:
        handle = path.open("r", encoding=encoding, errors="ignore")
    except OSError as exc:
        raise FileOpenError(path, exc.strerror or str(exc)) from exc
    logger.info("reading %s", path)
    with handle:
        yield handle


def scan_file(
    path: Path, section: str, key: str, *, settings: ScannerSettings | None = None
) -> ScanResult:
    """Scan ``path`` once and return the full :class:`ScanResult`."""

    settings = settings or ScannerSettings()
    scanner = SectionScanner(
        section=section, key=key, comment_prefixes=settings.comment_prefixes
    )
    with open_ini_file(path, encoding=settings.encoding) as handle:
        result = scanner.scan(handle)
    logger.info(
        "scan of %s finished as %s after %d lines", path, result.state.value, result.lines_read
    )
    return result


def lookup_value(
    path: Path, section: str, key: str, *, settings: ScannerSettings | None = None
) -> str | None:
    """Return the value of ``key`` in ``section`` of ``path`` or ``None``."""

    return scan_file(path, section, key, settings=settings).value


__all__ = ["lookup_value", "open_ini_file", "scan_file"]
