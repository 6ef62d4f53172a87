"""Inclusion rules applied to each enumerated entry."""

from __future__ import annotations

from .entries import ListingEntry
from .options import FilterPolicy


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def passes_dotfile_gate(name: str, policy: FilterPolicy) -> bool:
    """Dotfiles are shown only when ``all`` is set."""
    return policy.all or not is_hidden(name)


def should_list(entry: ListingEntry, policy: FilterPolicy) -> bool:
    """Return whether ``entry`` survives ``policy``.

    ``only_dirs``/``only_files`` narrow by kind first; everything else,
    symlinks included, goes through the dotfile gate alone.
    """
    if policy.only_dirs:
        return entry.is_dir and passes_dotfile_gate(entry.name, policy)
    if policy.only_files:
        return entry.is_file and passes_dotfile_gate(entry.name, policy)
    return passes_dotfile_gate(entry.name, policy)


__all__ = [
    "is_hidden",
    "passes_dotfile_gate",
    "should_list",
]
