"""Command-line option resolution.

Scans the argument vector once, left to right, applying each flag to an
``OptionsBuilder``. The scan ends with an immutable ``ResolvedOptions`` and a
target: either a directory to enumerate or a single entry to print.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .entries import ListingEntry, entry_from_path
from .errors import ArgumentParseError, InvalidOption, MissingOption


class Layout(Enum):
    ONELINE = "oneline"
    GRID = "grid"
    LONG = "long"


@dataclass(frozen=True)
class DisplayMode:
    layout: Layout = Layout.GRID
    recurse: bool = False

    @property
    def long(self) -> bool:
        return self.layout is Layout.LONG

    @property
    def grid(self) -> bool:
        return self.layout is Layout.GRID

    @property
    def line_per_entry(self) -> bool:
        """Long output implies one entry per line, same as oneline."""
        return self.layout is not Layout.GRID


@dataclass(frozen=True)
class FilterPolicy:
    all: bool = False
    list_dirs: bool = False
    only_dirs: bool = False
    only_files: bool = False


@dataclass(frozen=True)
class ResolvedOptions:
    display: DisplayMode = field(default_factory=DisplayMode)
    filters: FilterPolicy = field(default_factory=FilterPolicy)


@dataclass(frozen=True)
class DirectoryTarget:
    """Enumerate the members of ``path``."""

    path: Path


@dataclass(frozen=True)
class EntryTarget:
    """Print ``entry`` on its own and stop."""

    entry: ListingEntry


Target = DirectoryTarget | EntryTarget

LONG_OPTIONS: dict[str, str] = {
    "--oneline": "oneline",
    "--long": "long",
    "--grid": "grid",
    "--recurse": "recurse",
    "--all": "all",
    "--list-dirs": "list_dirs",
    "--only-dirs": "only_dirs",
    "--only-files": "only_files",
}

SHORT_OPTIONS: dict[str, str] = {
    "1": "oneline",
    "l": "long",
    "G": "grid",
    "R": "recurse",
    "a": "all",
    "d": "list_dirs",
    "D": "only_dirs",
    "f": "only_files",
}


class OptionsBuilder:
    """Mutable option state, alive only for the duration of one scan."""

    def __init__(self) -> None:
        self.layout = Layout.GRID
        self.recurse = False
        self.all = False
        self.list_dirs = False
        self.only_dirs = False
        self.only_files = False

    def apply(self, flag: str) -> None:
        """Apply one named flag, clearing whatever it conflicts with."""
        if flag == "oneline":
            self.layout = Layout.ONELINE
        elif flag == "long":
            self.layout = Layout.LONG
        elif flag == "grid":
            self.layout = Layout.GRID
        elif flag == "recurse":
            self.recurse = True
            if self.layout is Layout.GRID:
                self.layout = Layout.ONELINE
        elif flag == "all":
            self.all = True
        elif flag == "list_dirs":
            self.list_dirs = True
        elif flag == "only_dirs":
            self.only_dirs = True
            self.only_files = False
            self.all = False
        elif flag == "only_files":
            self.only_files = True
            self.only_dirs = False
            self.all = False
        else:
            raise ValueError(f"unknown flag: {flag!r}")

    def build(self) -> ResolvedOptions:
        return ResolvedOptions(
            display=DisplayMode(layout=self.layout, recurse=self.recurse),
            filters=FilterPolicy(
                all=self.all,
                list_dirs=self.list_dirs,
                only_dirs=self.only_dirs,
                only_files=self.only_files,
            ),
        )


def apply_long_option(builder: OptionsBuilder, argument: str) -> None:
    flag = LONG_OPTIONS.get(argument)
    if flag is None:
        raise InvalidOption(argument)
    builder.apply(flag)


def apply_short_cluster(builder: OptionsBuilder, argument: str) -> None:
    """Apply each character after the dash in order."""
    cluster = argument[1:]
    if not cluster:
        raise MissingOption()
    for char in cluster:
        flag = SHORT_OPTIONS.get(char)
        if flag is None:
            raise InvalidOption(char)
        builder.apply(flag)


def resolve_target(path_text: str, filters: FilterPolicy) -> Target:
    """Decide whether ``path_text`` is enumerated or printed as one entry.

    Directories (symlinks followed) are enumerated unless ``list_dirs`` is
    set. Anything else, or any directory under ``list_dirs``, becomes a
    single entry described by its own metadata.
    """
    if not filters.list_dirs and os.path.isdir(path_text):
        return DirectoryTarget(Path(path_text))
    return EntryTarget(entry_from_path(path_text))


def resolve_arguments(argv: Sequence[str]) -> tuple[ResolvedOptions, Target]:
    """Resolve ``argv`` (program name first) into options and a target.

    Only the final argument may be a path; a bare word anywhere earlier is
    an error. Without a path the current directory is listed.
    """
    builder = OptionsBuilder()
    arguments = list(argv[1:])
    last_index = len(arguments) - 1

    for index, argument in enumerate(arguments):
        if argument.startswith("--"):
            apply_long_option(builder, argument)
        elif argument.startswith("-"):
            apply_short_cluster(builder, argument)
        elif index == last_index:
            options = builder.build()
            return options, resolve_target(argument, options.filters)
        else:
            raise ArgumentParseError(argument)

    return builder.build(), DirectoryTarget(Path("."))


__all__ = [
    "Layout",
    "DisplayMode",
    "FilterPolicy",
    "ResolvedOptions",
    "DirectoryTarget",
    "EntryTarget",
    "Target",
    "LONG_OPTIONS",
    "SHORT_OPTIONS",
    "OptionsBuilder",
    "apply_long_option",
    "apply_short_cluster",
    "resolve_target",
    "resolve_arguments",
]
