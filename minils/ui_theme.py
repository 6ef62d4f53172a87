"""ANSI palette used by the listing renderer.

Colors come from the named SGR table in ``pygments.console`` so every escape
sequence the tool prints has one source. There is no no-color mode.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    reset: str
    entry_dir: str
    entry_symlink: str
    entry_file: str
    link_target: str
    perm_read: str
    perm_write: str
    perm_execute: str
    perm_owner: str
    header_label: str


DEFAULT_THEME = UITheme(
    reset=codes["reset"],
    entry_dir=codes["bold"] + codes["blue"],
    entry_symlink=codes["bold"] + codes["brightcyan"],
    entry_file=codes["bold"],
    link_target=codes["reset"] + codes["red"],
    perm_read=codes["yellow"],
    perm_write=codes["red"],
    perm_execute=codes["green"],
    perm_owner=codes["bold"],
    header_label=codes["underline"],
)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
]
