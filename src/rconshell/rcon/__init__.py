"""RCON transport."""

from .client import RconClient, parse_address
from .packets import Packet, PacketType, decode_length, decode_payload, encode_packet

__all__ = [
    "Packet",
    "PacketType",
    "RconClient",
    "decode_length",
    "decode_payload",
    "encode_packet",
    "parse_address",
]
