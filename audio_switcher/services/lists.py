"""Parsing of multiline workflow configuration strings."""

from ..models import FavoriteEntry


def parse_lines(raw: str) -> list[str]:
    """Split a multiline argument into one entry per ``\\n``-separated line.

    Entries are not trimmed. Blank lines in the middle are kept; a trailing
    line break does not add an empty entry.
    """
    if not raw:
        return []
    lines = raw.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_favorite_line(line: str) -> FavoriteEntry:
    """Parse ``name[;alias]``.

    Only the first semicolon separates. A whitespace-only line gives the
    entry ("", "").
    """
    parts = [part for part in line.split(";", 1) if part]
    if len(parts) == 2:
        return FavoriteEntry(name=parts[0].strip(), alias=parts[1].strip())
    name = parts[0].strip() if parts else ""
    return FavoriteEntry(name=name, alias=name)


def parse_favorites(raw: str) -> tuple[list[FavoriteEntry], dict[str, str]]:
    """Parse a favorites list.

    Returns:
        Tuple of (entries in source order, name -> alias map). For
        duplicate names the last entry wins in the map.
    """
    entries = [parse_favorite_line(line) for line in parse_lines(raw)]
    return entries, alias_map(entries)


def alias_map(entries: list[FavoriteEntry]) -> dict[str, str]:
    return {entry.name: entry.alias for entry in entries}


def favorite_names(entries: list[FavoriteEntry]) -> list[str]:
    return [entry.name for entry in entries]
