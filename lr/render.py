"""Compact and long-format rendering of listing rows.

Rows arrive already filtered and named. Compact mode prints names on one line
separated by two spaces; long mode prints one ``ls -l`` style line per row.
All output goes through a single ``ListingWriter`` acquired for the run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from .ansi import display_width, pad_ansi
from .listing import Entry, format_mode, group_display_name, type_char, user_display_name
from .ui_theme import PLAIN_THEME, UITheme

LONG_TIME_FORMAT = "%b %d %y %H:%M"
COMPACT_SEPARATOR = "  "
FIELD_SEPARATOR = " "


@dataclass(frozen=True)
class ListingRow:
    """One visible entry paired with the name it is displayed under."""

    name: str
    entry: Entry


class ListingWriter:
    """Output handle holding the stream and palette for a whole render.

    Use as a context manager; the stream is flushed once on exit.
    """

    def __init__(self, stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
        self.stream = stream
        self.theme = theme

    def __enter__(self) -> ListingWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stream.flush()

    def styled_name(self, row: ListingRow) -> str:
        style = self.theme.directory if row.entry.is_dir else self.theme.file
        if not style:
            return row.name
        return f"{style}{row.name}{self.theme.reset}"

    def write(self, text: str) -> None:
        self.stream.write(text)


def format_mtime(mtime: float) -> str:
    """Format a modification time in local time, e.g. ``Jan 02 24 15:04``.

    Times outside the platform's representable range fall back to raw
    epoch seconds.
    """
    try:
        return datetime.fromtimestamp(mtime).strftime(LONG_TIME_FORMAT)
    except (OverflowError, OSError, ValueError):
        return f"{mtime:.0f}"


def long_fields(entry: Entry) -> list[str]:
    """Return the metadata columns of a long line, name excluded."""
    return [
        f"{type_char(entry)}{format_mode(entry.mode)}",
        str(entry.nlink),
        user_display_name(entry.uid),
        group_display_name(entry.gid),
        str(entry.size),
        format_mtime(entry.mtime),
    ]


def format_long_line(row: ListingRow, writer: ListingWriter) -> str:
    fields = long_fields(row.entry)
    fields.append(writer.styled_name(row))
    return FIELD_SEPARATOR.join(fields) + "\n"


def format_compact_item(row: ListingRow, writer: ListingWriter) -> str:
    return f"{writer.styled_name(row)}{COMPACT_SEPARATOR}"


# Column alignment for ``--align``: mode, nlink, owner, group, size, mtime.
_ALIGNED_COLUMNS = ("left", "right", "left", "left", "right", "left")


def format_aligned_table(rows: list[ListingRow], writer: ListingWriter) -> list[str]:
    """Render long lines with every metadata column padded to its widest cell.

    Names stay unpadded in the last column.
    """
    table = [long_fields(row.entry) for row in rows]
    widths = [0] * len(_ALIGNED_COLUMNS)
    for fields in table:
        for idx, cell in enumerate(fields):
            widths[idx] = max(widths[idx], display_width(cell))

    lines: list[str] = []
    for row, fields in zip(rows, table):
        padded = [
            pad_ansi(cell, widths[idx], _ALIGNED_COLUMNS[idx])
            for idx, cell in enumerate(fields)
        ]
        padded.append(writer.styled_name(row))
        lines.append(FIELD_SEPARATOR.join(padded) + "\n")
    return lines


def render(
    rows: Iterable[ListingRow],
    writer: ListingWriter,
    long_format: bool = False,
    align: bool = False,
) -> int:
    """Write ``rows`` to ``writer`` and return how many were rendered.

    Rows are consumed lazily and written as they arrive, except in aligned
    long mode where the whole listing is needed to size the columns.
    """
    if long_format and align:
        buffered = list(rows)
        for line in format_aligned_table(buffered, writer):
            writer.write(line)
        return len(buffered)

    rendered = 0
    for row in rows:
        if long_format:
            writer.write(format_long_line(row, writer))
        else:
            writer.write(format_compact_item(row, writer))
        rendered += 1

    if not long_format and rendered:
        writer.write("\n")
    return rendered


__all__ = [
    "LONG_TIME_FORMAT",
    "ListingRow",
    "ListingWriter",
    "format_mtime",
    "long_fields",
    "format_long_line",
    "format_compact_item",
    "format_aligned_table",
    "render",
]
