"""Role permissions as bit flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

_FLAG_ORDER = (
    "CM",
    "KICK",
    "BAN",
    "BYPASS_LOCK",
    "MOD_EVI",
    "MODIFY_AREA",
    "MOVE_USERS",
    "MOD_SPEAK",
    "BAN_INFO",
    "MOD_CHAT",
    "MUTE",
    "LOG",
)

_ALL_BITS = 2**64 - 1

PERMISSION_FIELD: dict[str, int] = {
    "NONE": 0,
    **{name: 1 << shift for shift, name in enumerate(_FLAG_ORDER)},
    "ADMIN": _ALL_BITS,
}


@dataclass
class Role:
    """A named set of permissions."""

    name: str
    permissions: list[str] = field(default_factory=list)

    def get_permissions(self) -> int:
        """Return the combined permission bits of this role; unknown names count as none."""
        bits = 0
        for perm in self.permissions:
            bits |= PERMISSION_FIELD.get(perm, 0)
        return bits

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Role":
        """Build a role from a mapping with 'name' and 'permissions' keys."""
        return cls(
            name=str(data.get("name", "")),
            permissions=[str(p) for p in data.get("permissions", [])],
        )


def has_permission(perm: int, required: int) -> bool:
    """Return True if perm contains every bit of required."""
    return perm & required == required


def is_moderator(perm: int) -> bool:
    """Return True if perm holds any permission beyond CM."""
    return bool(perm & ~PERMISSION_FIELD["CM"])