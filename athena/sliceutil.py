"""Small helpers for sequences."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


def contains(container: Iterable[T], value: T) -> bool:
    """Return True if value equals any item of container."""
    return any(item == value for item in container)