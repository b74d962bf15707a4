"""lr: an ``ls``-style directory lister.

``lr.listing`` turns path arguments into sorted, metadata-backed entries,
``lr.render`` prints them compactly or in long format, and ``lr.cli`` ties
the two together behind the ``lr`` command. Importing the package stays
cheap; ``main`` pulls in the CLI on first call.
"""

from __future__ import annotations


def main(argv: list[str] | None = None) -> int:
    """Run the ``lr`` command with ``argv`` and return its exit status."""
    from .cli import main as _main

    return _main(argv)


__all__ = ["main"]
