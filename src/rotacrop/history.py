"""Linear undo/redo history with a separate staged (live) value.

The staged value follows every interaction so the display can update
immediately, while only committed values become undoable entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

import logging

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)

_STAGED = object()  # commit() default: use the staged value


@dataclass(frozen=True)
class HistorySnapshot(Generic[T]):
    """Copy of the history at one point in time."""

    past: List[T] = field(default_factory=list)
    present: Optional[T] = None
    future: List[T] = field(default_factory=list)


class History(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._past: List[T] = []
        self._present: T = initial
        self._future: List[T] = []
        self._staged: T = initial

    # ----------------------------- Properties ---------------------------------

    @property
    def state(self) -> T:
        """Live value, including anything staged but not yet committed."""
        return self._staged

    @property
    def committed(self) -> T:
        return self._present

    @property
    def can_undo(self) -> bool:
        return len(self._past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._future) > 0

    # ----------------------------- Operations ---------------------------------

    def stage(self, value: T) -> None:
        self._staged = value

    def commit(self, value: Any = _STAGED) -> bool:
        """Commit ``value`` (or the staged value) as a new history entry.

        An explicit ``value`` is staged as well. Committing something equal
        to the present entry leaves the history untouched; returns whether
        an entry was added.
        """
        if value is not _STAGED:
            self._staged = value
        to_commit = self._staged
        if to_commit == self._present:
            return False
        self._past.append(self._present)
        self._present = to_commit
        self._future.clear()
        _LOGGER.debug("commit: %d past, present=%r", len(self._past), to_commit)
        return True

    def undo(self) -> bool:
        if not self._past:
            return False
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        self._staged = self._present
        _LOGGER.debug("undo: present=%r", self._present)
        return True

    def redo(self) -> bool:
        if not self._future:
            return False
        self._past.append(self._present)
        self._present = self._future.pop(0)
        self._staged = self._present
        _LOGGER.debug("redo: present=%r", self._present)
        return True

    def reset(self, initial: T) -> None:
        self._past.clear()
        self._future.clear()
        self._present = initial
        self._staged = initial

    def get_history(self) -> HistorySnapshot[T]:
        return HistorySnapshot(
            past=list(self._past), present=self._present, future=list(self._future)
        )


__all__ = ["History", "HistorySnapshot"]
