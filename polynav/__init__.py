"""Public package surface for polynav.

Exports ``main`` for programmatic CLI invocation.
The host-independent navigation logic lives in ``polynav.workspace``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
