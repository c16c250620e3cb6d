"""File access helpers for INI-style configuration files."""

from inireader.io.ini_file import lookup_value, open_ini_file, scan_file

__all__ = ["lookup_value", "open_ini_file", "scan_file"]
