"""Public package surface for dirls.

Exports ``main`` for programmatic CLI invocation.
The listing pipeline lives in ``dirls.listing_model``, ``dirls.render`` and
``dirls.walk``.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main", "__version__"]
