"""Tests for the RCON packet codec."""

import struct

import pytest

from rconshell.errors import PacketError
from rconshell.rcon import Packet, PacketType, decode_length, decode_payload, encode_packet
from rconshell.rcon.packets import MAX_REQUEST_BODY_BYTES


def test_encode_layout():
    data = encode_packet(Packet(7, PacketType.EXEC_COMMAND, "/list"))
    assert data == struct.pack("<iii", 15, 7, 2) + b"/list" + b"\x00\x00"


def test_encode_auth_packet():
    data = encode_packet(Packet(1, PacketType.AUTH, "pw"))
    length, request_id, packet_type = struct.unpack_from("<iii", data)
    assert (length, request_id, packet_type) == (12, 1, 3)
    assert len(data) == length + 4


def test_encode_rejects_oversized_body():
    with pytest.raises(PacketError, match="too long"):
        encode_packet(Packet(1, PacketType.EXEC_COMMAND, "x" * (MAX_REQUEST_BODY_BYTES + 1)))


def test_decode_response():
    payload = struct.pack("<ii", 7, 0) + "Hé".encode("utf-8") + b"\x00\x00"
    packet = decode_payload(payload)
    assert packet == Packet(7, PacketType.RESPONSE_VALUE, "Hé")


def test_decode_failed_auth_id():
    payload = struct.pack("<ii", -1, 2) + b"\x00\x00"
    assert decode_payload(payload).request_id == -1


@pytest.mark.parametrize("length", [0, 9, 5000])
def test_decode_length_bounds(length):
    with pytest.raises(PacketError):
        decode_length(struct.pack("<i", length))


def test_decode_length_truncated():
    with pytest.raises(PacketError):
        decode_length(b"\x0a\x00")


def test_decode_missing_terminator():
    with pytest.raises(PacketError):
        decode_payload(struct.pack("<ii", 1, 0) + b"abc")
