"""Usage and version text printed by ``--help`` and ``--version``."""

from __future__ import annotations

from . import DESCRIPTION, PROGRAM_NAME, __version__

HELP_TEXT = f"""\
{DESCRIPTION}.
Ignore files and directories starting with a '.' by default

Usage: {PROGRAM_NAME} [options] [path]

META OPTIONS
  -?, --help
          show list of command-line options
  -v, --version
          show version of {PROGRAM_NAME}

Display Options
  -1, --oneline
          display one entry per line
  -l, --long
          display extended file metadata as a table
  -G, --grid
          display entries as a grid (default)
  -R, --recurse
          accepted for compatibility; subdirectories are not descended


Filtering Options
  -a, --all
          show hidden and 'dot' files
  -d, --list-dirs
          list directories as files; don't list their contents
  -D, --only-dirs
          list only directories
  -f, --only-files
          list only files
"""

HELP_FLAGS = frozenset({"--help", "-?"})
VERSION_FLAGS = frozenset({"--version", "-v"})


def version_text() -> str:
    return f"{PROGRAM_NAME} - {DESCRIPTION}\nv{__version__}\n"


__all__ = [
    "HELP_TEXT",
    "HELP_FLAGS",
    "VERSION_FLAGS",
    "version_text",
]
