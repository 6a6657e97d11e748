"""Allocation of the lowest free user ID."""

from __future__ import annotations

import heapq
import threading


class UidManager:
    """Hands out the lowest free user ID and takes released IDs back."""

    def __init__(self) -> None:
        self._heap: list[int] = []
        self._lock = threading.Lock()

    def init_heap(self, players: int) -> None:
        """Fill the pool with IDs 0 to players - 1."""
        with self._lock:
            self._heap = list(range(players))
            heapq.heapify(self._heap)

    def get_uid(self) -> int:
        """Take and return the lowest free ID; raise IndexError if none is free."""
        with self._lock:
            if not self._heap:
                raise IndexError("no free user IDs")
            return heapq.heappop(self._heap)

    def release_uid(self, uid: int) -> None:
        """Return a taken ID to the pool."""
        with self._lock:
            heapq.heappush(self._heap, uid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._heap)