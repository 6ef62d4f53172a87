"""Filesystem entries for listing: model, construction, and lazy enumeration.

This is the only module that talks to the host filesystem. Failures are
wrapped into ``PathError``/``MetadataError``/``InvalidName`` with the OS
message kept verbatim.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from .errors import InvalidName, MetadataError, PathError

PERMISSION_BITS = 0o777


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class ListingEntry:
    """One listable filesystem object.

    ``mode`` and ``size`` stay zero until metadata is loaded; enumeration
    only fetches them for entries that are actually rendered in long mode.
    """

    name: str
    path: Path
    kind: EntryKind
    mode: int = 0
    size: int = 0
    link_target: str | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK


def kind_from_mode(st_mode: int) -> EntryKind:
    """Map an ``lstat`` mode to an entry kind."""
    if stat.S_ISDIR(st_mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(st_mode):
        return EntryKind.FILE
    if stat.S_ISLNK(st_mode):
        return EntryKind.SYMLINK
    return EntryKind.OTHER


def read_link_target(path: str | Path) -> str:
    """Return the raw target text of symlink ``path``."""
    try:
        return os.readlink(path)
    except OSError as exc:
        raise PathError(str(exc)) from exc


def entry_from_path(path_text: str) -> ListingEntry:
    """Build a fully-populated entry for a path named on the command line.

    The raw argument text is inspected (symlinks are not followed), so an
    empty string or a trailing slash after a file fails as the OS reports it.
    The entry keeps ``path_text`` as typed for its display name.
    """
    path = Path(path_text)
    try:
        st = os.lstat(path_text)
    except OSError as exc:
        raise PathError(str(exc)) from exc
    kind = kind_from_mode(st.st_mode)
    link_target = read_link_target(path_text) if kind is EntryKind.SYMLINK else None
    return ListingEntry(
        name=path_text,
        path=path,
        kind=kind,
        mode=stat.S_IMODE(st.st_mode) & PERMISSION_BITS,
        size=int(st.st_size),
        link_target=link_target,
    )


def decode_entry_name(dir_entry: os.DirEntry[str]) -> str:
    """Return ``dir_entry.name`` or raise ``InvalidName`` if it is not valid text.

    ``os.scandir`` smuggles undecodable bytes through as lone surrogates;
    those names cannot be encoded back to UTF-8.
    """
    name = dir_entry.name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raw = os.fsencode(name)
        raise InvalidName(raw.decode("utf-8", errors="replace")) from None
    return name


def entry_kind(dir_entry: os.DirEntry[str]) -> EntryKind:
    """Classify ``dir_entry`` without following symlinks."""
    try:
        if dir_entry.is_symlink():
            return EntryKind.SYMLINK
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError as exc:
        raise MetadataError(str(exc)) from exc
    return EntryKind.OTHER


def entry_from_dir_entry(dir_entry: os.DirEntry[str]) -> ListingEntry:
    """Build a name/kind-only entry from one scandir result."""
    kind = entry_kind(dir_entry)
    name = decode_entry_name(dir_entry)
    return ListingEntry(name=name, path=Path(dir_entry.path), kind=kind)


def with_metadata(entry: ListingEntry) -> ListingEntry:
    """Return ``entry`` with permission bits, size and link target filled in."""
    try:
        st = entry.path.lstat()
    except OSError as exc:
        raise MetadataError(str(exc)) from exc
    link_target = entry.link_target
    if entry.is_symlink and link_target is None:
        link_target = read_link_target(entry.path)
    return replace(
        entry,
        mode=stat.S_IMODE(st.st_mode) & PERMISSION_BITS,
        size=int(st.st_size),
        link_target=link_target,
    )


def _iter_scandir(iterator) -> Iterator[os.DirEntry[str]]:
    with iterator:
        while True:
            try:
                dir_entry = next(iterator)
            except StopIteration:
                return
            except OSError as exc:
                raise PathError(str(exc)) from exc
            yield dir_entry


def scan_directory(directory: str | Path) -> Iterator[os.DirEntry[str]]:
    """Open ``directory`` now and return a lazy stream of its members.

    Opening happens eagerly so an unreadable target fails before anything is
    printed. Members arrive in filesystem order; nothing is sorted.
    """
    try:
        iterator = os.scandir(directory)
    except OSError as exc:
        raise PathError(str(exc)) from exc
    return _iter_scandir(iterator)


__all__ = [
    "EntryKind",
    "ListingEntry",
    "kind_from_mode",
    "read_link_target",
    "entry_from_path",
    "decode_entry_name",
    "entry_kind",
    "entry_from_dir_entry",
    "with_metadata",
    "scan_directory",
]
