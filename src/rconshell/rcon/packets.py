"""RCON packet codec.

Wire layout (all integers little-endian signed 32-bit)::

    length | request_id | type | body (UTF-8) | 0x00 0x00

``length`` counts everything after itself.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from ..errors import PacketError

HEADER = struct.Struct("<ii")
LENGTH = struct.Struct("<i")
TERMINATOR = b"\x00\x00"

# Request id + type + terminator.
MIN_PACKET_LENGTH = HEADER.size + len(TERMINATOR)
MAX_REQUEST_BODY_BYTES = 1446
MAX_RESPONSE_BODY_BYTES = 4096
MAX_PACKET_LENGTH = MIN_PACKET_LENGTH + MAX_RESPONSE_BODY_BYTES


class PacketType(IntEnum):
    RESPONSE_VALUE = 0
    EXEC_COMMAND = 2
    AUTH_RESPONSE = 2
    AUTH = 3


@dataclass(slots=True, frozen=True)
class Packet:
    request_id: int
    type: int
    body: str = ""


def encode_packet(packet: Packet) -> bytes:
    """Serialize ``packet`` including its length prefix."""
    body = packet.body.encode("utf-8")
    if len(body) > MAX_REQUEST_BODY_BYTES:
        raise PacketError(
            f"Command too long: {len(body)} bytes (limit {MAX_REQUEST_BODY_BYTES})"
        )
    length = MIN_PACKET_LENGTH + len(body)
    return (
        LENGTH.pack(length)
        + HEADER.pack(packet.request_id, packet.type)
        + body
        + TERMINATOR
    )


def decode_length(prefix: bytes) -> int:
    """Decode and validate the length prefix of an incoming packet."""
    if len(prefix) != LENGTH.size:
        raise PacketError("Truncated packet length")
    (length,) = LENGTH.unpack(prefix)
    if length < MIN_PACKET_LENGTH or length > MAX_PACKET_LENGTH:
        raise PacketError(f"Invalid packet length: {length}")
    return length


def split_payload(payload: bytes) -> tuple[int, int, bytes]:
    """Split the bytes following the length prefix into id, type and raw body.

    Bodies stay undecoded so fragments of one response can be joined before
    a multi-byte character split across them is decoded.
    """
    if len(payload) < MIN_PACKET_LENGTH:
        raise PacketError("Truncated packet")
    request_id, packet_type = HEADER.unpack_from(payload)
    body = payload[HEADER.size :]
    if not body.endswith(TERMINATOR):
        raise PacketError("Packet is missing its terminator")
    return request_id, packet_type, body[: -len(TERMINATOR)]


def decode_body(body: bytes) -> str:
    return body.decode("utf-8", "replace")


def decode_payload(payload: bytes) -> Packet:
    """Decode the bytes following the length prefix."""
    request_id, packet_type, body = split_payload(payload)
    return Packet(request_id, packet_type, decode_body(body))
