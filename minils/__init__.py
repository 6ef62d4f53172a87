"""Public package surface for minils.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``minils``.
"""

from __future__ import annotations

PROGRAM_NAME = "minils"
DESCRIPTION = "List directory contents"
__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "PROGRAM_NAME", "DESCRIPTION", "__version__"]
