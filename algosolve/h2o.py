"""Pairing hydrogen and oxygen threads into water molecules."""

from __future__ import annotations

import threading
from collections.abc import Callable


class H2O:
    """Releases threads so that output always forms whole molecules: two
    hydrogens, then one oxygen."""

    def __init__(self) -> None:
        self._hydrogens = 0
        self._condition = threading.Condition()

    def hydrogen(self, release_hydrogen: Callable[[], None]) -> None:
        """Wait for a free hydrogen slot, then release."""
        with self._condition:
            self._condition.wait_for(lambda: self._hydrogens < 2)
            release_hydrogen()
            self._hydrogens += 1
            self._condition.notify_all()

    def oxygen(self, release_oxygen: Callable[[], None]) -> None:
        """Wait until two hydrogens are released, then release and start a new molecule."""
        with self._condition:
            self._condition.wait_for(lambda: self._hydrogens >= 2)
            release_oxygen()
            self._hydrogens = 0
            self._condition.notify_all()