"""Listing pipeline: collect, resolve, name, filter, render.

Entries stream through one at a time in sorted order so output appears
as soon as each entry's metadata has been read.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from .diagnostics import Diagnostics
from .listing import collect, display_name, is_visible, resolve, visibility_name
from .render import ListingRow, ListingWriter, render
from .ui_theme import PLAIN_THEME, UITheme

DEFAULT_PATHS = (".",)


@dataclass(frozen=True)
class ListingOptions:
    """Validated listing request produced by the CLI."""

    paths: tuple[str, ...] = DEFAULT_PATHS
    show_all: bool = False
    long_format: bool = False
    align: bool = False


def iter_rows(options: ListingOptions, diagnostics: Diagnostics) -> Iterator[ListingRow]:
    """Yield visible rows for ``options`` in full-path order.

    Paths whose metadata cannot be read are reported and skipped; hidden
    names are skipped silently unless ``show_all`` is set.
    """
    for collected in collect(options.paths, diagnostics):
        entry = resolve(collected.path, diagnostics)
        if entry is None:
            continue
        name = display_name(collected.path, collected.directory)
        if not is_visible(visibility_name(name, collected.path, collected.directory), options.show_all):
            continue
        yield ListingRow(name=name, entry=entry)


def execute(
    options: ListingOptions,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    theme: UITheme = PLAIN_THEME,
) -> int:
    """Run one listing and return the process exit status.

    Per-path failures are reported on ``stderr`` and do not change the
    status, which is always ``0`` here.
    """
    diagnostics = Diagnostics(stream=stderr)
    stream = stdout if stdout is not None else sys.stdout
    with ListingWriter(stream, theme) as writer:
        render(
            iter_rows(options, diagnostics),
            writer,
            long_format=options.long_format,
            align=options.align,
        )
    return 0
