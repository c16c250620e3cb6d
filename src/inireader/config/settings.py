"""Utilities for loading the optional scanner settings file."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

from inireader.errors import SettingsError
from inireader.scanner.lines import DEFAULT_COMMENT_PREFIXES

DEFAULT_ENCODING = "utf-8-sig"
_KNOWN_KEYS = frozenset({"comment_prefixes", "encoding"})


def is_text_encoding(name: str) -> bool:
    """Return whether ``name`` is a codec that ``open()`` accepts as a text encoding."""

    try:
        info = codecs.lookup(name)
    except LookupError:
        return False
    return getattr(info, "_is_text_encoding", True)


@dataclass(frozen=True, slots=True)
class ScannerSettings:
    """Knobs for reading and scanning a configuration file."""

    comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES
    encoding: str = DEFAULT_ENCODING


def _normalize_prefixes(source: Path, raw: object) -> tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise SettingsError(source, "comment_prefixes must be a string or a list of strings")
    prefixes = tuple(item for item in raw if item)
    if not prefixes:
        raise SettingsError(source, "comment_prefixes must not be empty")
    return prefixes


def settings_from_mapping(source: Path, data: Mapping[str, object]) -> ScannerSettings:
    """Validate a parsed YAML mapping and build :class:`ScannerSettings`."""

    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        raise SettingsError(source, f"unknown keys: {', '.join(unknown)}")

    comment_prefixes = DEFAULT_COMMENT_PREFIXES
    if data.get("comment_prefixes") is not None:
        comment_prefixes = _normalize_prefixes(source, data["comment_prefixes"])

    encoding = data.get("encoding", DEFAULT_ENCODING)
    if not isinstance(encoding, str) or not encoding:
        raise SettingsError(source, "encoding must be a non-empty string")
    if not is_text_encoding(encoding):
        raise SettingsError(source, f"unknown text encoding {encoding!r}")

    return ScannerSettings(comment_prefixes=comment_prefixes, encoding=encoding)


def load_scanner_settings(
    path: Path | None = None, *, strict: bool = True
) -> ScannerSettings:
    """Read the YAML settings file, or return defaults when no path is given."""

    if path is None:
        return ScannerSettings()
    if not path.exists():
        if strict:
            raise SettingsError(path, "file not found")
        return ScannerSettings()

    try:
        data = yaml.safe_load(path.read_text(encoding=DEFAULT_ENCODING))
    except (OSError, UnicodeDecodeError) as exc:
        raise SettingsError(path, f"cannot be read ({exc})") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(path, f"not valid YAML ({exc})") from exc
    if data is None:
        return ScannerSettings()
    if not isinstance(data, dict):
        raise SettingsError(path, "expected a mapping at the top level")
    return settings_from_mapping(path, data)


__all__ = [
    "DEFAULT_ENCODING",
    "ScannerSettings",
    "is_text_encoding",
    "load_scanner_settings",
    "settings_from_mapping",
]
