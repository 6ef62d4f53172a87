"""Formatting for listing rows, the long-mode table, and the listing stream.

``format_entry`` is the one row formatter; both the directory listing and
the single-entry path go through it.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from .entries import EntryKind, ListingEntry, entry_from_dir_entry, with_metadata
from .filtering import should_list
from .options import DisplayMode, ResolvedOptions
from .ui_theme import DEFAULT_THEME, UITheme

NAME_PADDING = " " * 5
FIELD_GAP = "  "
SIZE_WIDTH = 5

# (upper bound, unit); the bound is also the divisor, so 999999 bytes shows as 0KB.
SIZE_UNITS: tuple[tuple[int, str], ...] = (
    (10**6, "KB"),
    (10**9, "MB"),
    (10**12, "GB"),
)
TERABYTE_DIVISOR = 10**15


def entry_color(entry: ListingEntry, theme: UITheme | None = None) -> str:
    """Return the name color for ``entry``: dirs blue, links cyan, rest plain bold."""
    active_theme = theme or DEFAULT_THEME
    if entry.kind is EntryKind.DIRECTORY:
        return active_theme.entry_dir
    if entry.kind is EntryKind.SYMLINK:
        return active_theme.entry_symlink
    return active_theme.entry_file


def type_glyph(entry: ListingEntry) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return "d"
    if entry.kind is EntryKind.FILE:
        return "-"
    return "l"


def format_permissions(mode: int, theme: UITheme | None = None) -> str:
    """Render the nine ``rwx`` characters of ``mode`` with per-bit colors.

    Read is yellow, write red, execute green; the owner triplet is bold too.
    Unset bits show ``-`` in the color of the bit they stand for.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    bit_styles = (
        ("r", active_theme.perm_read),
        ("w", active_theme.perm_write),
        ("x", active_theme.perm_execute),
    )
    out: list[str] = []
    for shift, prefix in ((6, active_theme.perm_owner), (3, ""), (0, "")):
        triplet = (mode >> shift) & 0o7
        for position, (char, color) in enumerate(bit_styles):
            is_set = triplet & (0o4 >> position)
            out.append(f"{prefix}{color}{char if is_set else '-'}{reset}")
    return "".join(out)


def format_size(entry: ListingEntry) -> str:
    """Return the five-column size field used in long mode.

    Values are integer-divided, never rounded.
    """
    if entry.is_dir:
        return f"{'-':>{SIZE_WIDTH}}"
    size = entry.size
    if size < 10**3:
        return f"{size:>4}B"
    for limit, unit in SIZE_UNITS:
        if size < limit:
            return f"{size // limit:>3}{unit}"
    return f"{size // TERABYTE_DIVISOR:>3}TB"


def long_header(theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    underline = active_theme.header_label
    reset = active_theme.reset
    labels = (f"{underline}{label}{reset}" for label in ("Permissions", "Size", "Name"))
    return FIELD_GAP.join(labels) + "\n"


def format_entry(entry: ListingEntry, display: DisplayMode, theme: UITheme | None = None) -> str:
    """Format one entry without its line terminator.

    Long mode prefixes type glyph, permissions and size, and shows a
    symlink's target after an arrow. ``entry`` must already carry metadata
    when ``display.long`` is set.
    """
    active_theme = theme or DEFAULT_THEME
    color = entry_color(entry, active_theme)
    reset = active_theme.reset
    parts: list[str] = []
    if display.long:
        parts.append(f"{color}{type_glyph(entry)}{reset}")
        parts.append(format_permissions(entry.mode, active_theme))
        parts.append(FIELD_GAP)
        parts.append(format_size(entry))
        parts.append(FIELD_GAP)

    if display.long and entry.is_symlink:
        parts.append(
            f"{color}{entry.name}{reset} -> {active_theme.link_target}{entry.link_target or ''}{reset}"
        )
    else:
        parts.append(f"{color}{entry.name}{NAME_PADDING}{reset}")
    return "".join(parts)


def render_entry_line(entry: ListingEntry, display: DisplayMode, theme: UITheme | None = None) -> str:
    """Format one listed entry, loading metadata and adding the newline as needed."""
    if display.long:
        entry = with_metadata(entry)
    text = format_entry(entry, display, theme)
    if display.line_per_entry:
        text += "\n"
    return text


def render_single_entry(entry: ListingEntry, display: DisplayMode, theme: UITheme | None = None) -> str:
    """Render a command-line path that is printed instead of enumerated.

    The line is always terminated, whatever the layout.
    """
    header = long_header(theme) if display.long else ""
    return f"{header}{format_entry(entry, display, theme)}\n"


def iter_listing(
    dir_entries: Iterable[os.DirEntry[str]],
    options: ResolvedOptions,
    theme: UITheme | None = None,
) -> Iterator[str]:
    """Yield listing text chunk by chunk, in enumeration order.

    Errors surface when the offending entry is reached; chunks already
    yielded stay valid output.
    """
    display = options.display
    if display.long:
        yield long_header(theme)

    for dir_entry in dir_entries:
        entry = entry_from_dir_entry(dir_entry)
        if not should_list(entry, options.filters):
            continue
        yield render_entry_line(entry, display, theme)

    if display.grid:
        yield "\n"


__all__ = [
    "entry_color",
    "type_glyph",
    "format_permissions",
    "format_size",
    "long_header",
    "format_entry",
    "render_entry_line",
    "render_single_entry",
    "iter_listing",
]
