"""Error taxonomy for argument resolution and directory listing.

Every error is terminal: ``cli.main`` turns any ``ListingError`` into a
one-line diagnostic on stderr and exit status 1.
"""

from __future__ import annotations

HELP_HINT = "For help, try running 'minils --help'"


class ListingError(Exception):
    """Base class for every failure that ends a minils run."""


class InvalidOption(ListingError):
    """Unknown long option or unknown character in a short-option cluster."""

    def __init__(self, option: str) -> None:
        super().__init__(f"{option}: Invalid option. {HELP_HINT}")
        self.option = option


class MissingOption(ListingError):
    """A bare ``-`` with no option characters after it."""

    def __init__(self) -> None:
        super().__init__(f"Option not specified. {HELP_HINT}")


class ArgumentParseError(ListingError):
    """A positional argument somewhere other than the last position."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Error parsing option. {HELP_HINT}")
        self.argument = argument


class PathError(ListingError):
    """Target lookup or directory enumeration failed; OS message kept verbatim."""


class InvalidName(ListingError):
    """Directory entry whose name does not decode to text."""

    def __init__(self, lossy_name: str) -> None:
        super().__init__(f"Invalid Unicode in name {lossy_name}")
        self.lossy_name = lossy_name


class MetadataError(ListingError):
    """Per-entry type, metadata or link-target lookup failed."""


__all__ = [
    "HELP_HINT",
    "ListingError",
    "InvalidOption",
    "MissingOption",
    "ArgumentParseError",
    "PathError",
    "InvalidName",
    "MetadataError",
]
