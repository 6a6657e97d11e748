"""A thread-safe player counter."""

from __future__ import annotations

import threading


class PlayerCount:
    """Counts connected players; safe to use from several threads."""

    def __init__(self) -> None:
        self._players = 0
        self._lock = threading.Lock()

    def count(self) -> int:
        """Return the current player count."""
        with self._lock:
            return self._players

    def add_player(self) -> None:
        """Increase the player count by one."""
        with self._lock:
            self._players += 1

    def remove_player(self) -> None:
        """Decrease the player count by one."""
        with self._lock:
            self._players -= 1