"""Exceptions raised by inireader outside the pure scanning core."""

from __future__ import annotations

from pathlib import Path


class InireaderError(Exception):
    """Base class for every error the command line maps to an exit code."""


class UsageError(InireaderError):
    """Command-line arguments could not be parsed."""

    def __init__(self, message: str, *, wrong_count: bool = False) -> None:
        super().__init__(message)
        self.wrong_count = wrong_count


class FileOpenError(InireaderError):
    """The configuration file could not be opened for reading."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Couldn't open file {path} for reading: {reason}")
        self.path = path
        self.reason = reason


class SettingsError(InireaderError):
    """The YAML scanner settings are missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid scanner settings {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = ["FileOpenError", "InireaderError", "SettingsError", "UsageError"]
