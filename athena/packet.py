"""AO2 network packets: a header, '#'-separated fields and a closing '%'."""

from __future__ import annotations

from dataclasses import dataclass, field


class PacketError(ValueError):
    """Raised when data cannot be parsed as an AO2 packet."""


@dataclass
class Packet:
    """A single AO2 network packet."""

    header: str
    body: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return self.header + "#" + "#".join(self.body) + "#%"


def parse_packet(data: str) -> Packet:
    """Parse raw packet data (without the trailing '%') into a Packet."""
    header, *body = data.split("#")
    if not header.strip():
        raise PacketError("packet header cannot be empty")
    if len(body) > 1:
        # Drop the empty entry that follows the final '#'.
        body = body[:-1]
    return Packet(header, body)