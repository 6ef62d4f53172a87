"""Command-line front door for minils.

Handles ``--help``/``--version``, resolves options and the target, then
streams the listing to stdout. Any ``ListingError`` ends the run with its
message on stderr and exit status 1.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .entries import scan_directory
from .errors import ListingError
from .help import HELP_FLAGS, HELP_TEXT, VERSION_FLAGS, version_text
from .options import EntryTarget, resolve_arguments
from .render import iter_listing, render_single_entry


def run(argv: Sequence[str]) -> None:
    """Resolve ``argv`` and write the listing; raises ``ListingError``."""
    options, target = resolve_arguments(argv)
    if isinstance(target, EntryTarget):
        sys.stdout.write(render_single_entry(target.entry, options.display))
        return

    dir_entries = scan_directory(target.path)
    for chunk in iter_listing(dir_entries, options):
        sys.stdout.write(chunk)


def main(argv: Sequence[str] | None = None) -> None:
    """Run minils on ``argv`` (defaults to ``sys.argv``).

    Help and version are recognised only as the sole argument.
    """
    if argv is None:
        argv = sys.argv

    if len(argv) == 2:
        if argv[1] in HELP_FLAGS:
            sys.stdout.write(HELP_TEXT + "\n")
            return
        if argv[1] in VERSION_FLAGS:
            sys.stdout.write(version_text())
            return

    try:
        run(argv)
    except ListingError as exc:
        sys.stdout.flush()
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
