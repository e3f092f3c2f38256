"""Undo/redo history for immutable documents.

Linear history with branch discard: any new value set after an undo
drops the redo branch for good. Both stacks grow without bound for the
lifetime of the manager.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class History(Generic[T]):
    """Present value plus past and future stacks (push/pop at the tail)."""

    present: T
    past: list[T] = field(default_factory=list)
    future: list[T] = field(default_factory=list)

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def set(self, value: T) -> None:
        """Make ``value`` the present and discard the redo branch."""
        self.past.append(self.present)
        self.present = value
        self.future.clear()

    def undo(self) -> bool:
        """Step back one value.

        Returns:
            True if a value was restored, False when there is nothing to undo.
        """
        if not self.past:
            logger.debug("Nothing to undo")
            return False
        previous = self.past.pop()
        self.future.append(self.present)
        self.present = previous
        return True

    def redo(self) -> bool:
        """Step forward one value. Returns False when there is nothing to redo."""
        if not self.future:
            logger.debug("Nothing to redo")
            return False
        following = self.future.pop()
        self.past.append(self.present)
        self.present = following
        return True

    def reset(self, value: T) -> None:
        """Start over from ``value`` with empty stacks."""
        self.past = []
        self.future = []
        self.present = value
