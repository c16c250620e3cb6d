"""Key/value entry parsing."""

from __future__ import annotations

from dataclasses import dataclass

_QUOTE = '"'


@dataclass(frozen=True, slots=True)
class Entry:
    """One ``name = value`` line from a section."""

    name: str
    value: str

    @property
    def valid(self) -> bool:
        # an empty value never counts as a match, even for the right key
        return bool(self.name) and bool(self.value)


def unquote(value: str) -> str:
    """Drop one pair of surrounding double quotes, if both are present."""

    if len(value) >= 2 and value[0] == _QUOTE and value[-1] == _QUOTE:
        return value[1:-1]
    return value


def parse_entry(line: str) -> Entry | None:
    """Split a normalised line on its first ``=``.

    Returns ``None`` when the line is not shaped like an entry (no separator or
    an empty name). An empty value still yields an :class:`Entry`; check
    :attr:`Entry.valid` to reject it.
    """

    if "=" not in line:
        return None
    name, value = line.split("=", 1)
    name = name.strip()
    if not name:
        return None
    return Entry(name=name, value=unquote(value.strip()))


__all__ = ["Entry", "parse_entry", "unquote"]
