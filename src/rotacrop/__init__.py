"""rotacrop: constrained crop geometry for rotated images with undo history."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._version import get_version

__version__ = get_version()

if TYPE_CHECKING:  # pragma: no cover - only for type checkers
    from .app import main as _main_type  # noqa: F401


def main() -> int:
    """Entry point for ``python -m rotacrop`` and console scripts."""
    from .app import main as _main

    return _main()


__all__ = ["main", "__version__", "get_version"]
