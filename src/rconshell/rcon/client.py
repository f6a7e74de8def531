"""Blocking RCON client: one request at a time, fragmented responses joined."""

from __future__ import annotations

import itertools
import logging
import socket
import time
from typing import Optional

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ..constants import (
    CONNECT_RETRY_ATTEMPTS,
    DEFAULT_RCON_PORT,
    DEFAULT_TIMEOUT_SEC,
    RETRY_BACKOFF_INITIAL_SEC,
    RETRY_BACKOFF_MAX_SEC,
)
from ..errors import AuthenticationError, ConfigError, RconError
from ..logging import before_sleep_log_event, log_event
from .packets import (
    LENGTH,
    MAX_RESPONSE_BODY_BYTES,
    Packet,
    PacketType,
    decode_body,
    decode_length,
    decode_payload,
    encode_packet,
    split_payload,
)

AUTH_FAILED_ID = -1


def parse_address(address: str) -> tuple[str, int]:
    """Split ``host[:port]`` into host and port.

    Raises:
        ConfigError: If the host is empty or the port is not a valid number.
    """
    address = address.strip()
    host, sep, port_text = address.rpartition(":")
    if not sep:
        host, port_text = address, ""
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not host:
        raise ConfigError(f"Invalid address: '{address}'")
    if not port_text:
        return host, DEFAULT_RCON_PORT
    try:
        port = int(port_text)
    except ValueError:
        raise ConfigError(f"Invalid port in address: '{address}'")
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range in address: '{address}'")
    return host, port


@retry(
    retry=retry_if_exception_type(OSError),
    wait=wait_exponential_jitter(
        initial=RETRY_BACKOFF_INITIAL_SEC,
        max=RETRY_BACKOFF_MAX_SEC,
    ),
    stop=stop_after_attempt(CONNECT_RETRY_ATTEMPTS),
    before_sleep=before_sleep_log_event(operation="connect", level=logging.WARNING),
    reraise=True,
)
def _open_socket(host: str, port: int, timeout: float) -> socket.socket:
    return socket.create_connection((host, port), timeout=timeout)


class RconClient:
    """Minimal RCON client.

    Usage:
        with RconClient("localhost", 25575) as client:
            client.authenticate(password)
            print(client.send_command("/list"))
    """

    def __init__(self, host: str, port: int = DEFAULT_RCON_PORT, timeout: float = DEFAULT_TIMEOUT_SEC):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sock: Optional[socket.socket] = None
        self._ids = itertools.count(1)

    def __enter__(self) -> RconClient:
        self.connect()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def connected(self) -> bool:
        return self._sock is not None

    def connect(self) -> None:
        """Open the TCP connection, retrying transient failures."""
        if self._sock is not None:
            return
        started = time.perf_counter()
        try:
            self._sock = _open_socket(self.host, self.port, self.timeout)
        except OSError as e:
            raise RconError(f"Cannot connect to {self.host}:{self.port}: {e}") from e
        log_event(
            "rcon_connect",
            level=logging.INFO,
            host=self.host,
            port=self.port,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
        )

    def close(self) -> None:
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None

    def authenticate(self, password: str) -> None:
        """Log in with ``password``.

        Raises:
            AuthenticationError: The server rejected the password.
            RconError: Transport failure.
        """
        request_id = next(self._ids)
        self._send(Packet(request_id, PacketType.AUTH, password))
        while True:
            response = self._receive()
            # Some servers send an empty value packet ahead of the auth reply.
            if response.type == PacketType.RESPONSE_VALUE:
                continue
            break
        if response.request_id == AUTH_FAILED_ID:
            raise AuthenticationError("Authentication failed: wrong RCON password")
        if response.request_id != request_id:
            raise RconError(
                f"Unexpected auth response id {response.request_id} (expected {request_id})"
            )

    def send_command(self, command: str) -> str:
        """Run ``command`` on the server and return the response body.

        Bodies longer than one packet arrive as several full-size fragments
        with the same id; they are joined until a short fragment arrives or
        the server stays quiet for the socket timeout. Packets left over from
        earlier requests are dropped.
        """
        request_id = next(self._ids)
        self._send(Packet(request_id, PacketType.EXEC_COMMAND, command))

        while True:
            response_id, _, body = split_payload(self._receive_raw())
            if response_id == AUTH_FAILED_ID:
                raise AuthenticationError("Not authenticated")
            if response_id >= request_id:
                break
            log_event(
                "rcon_stale_packet",
                level=logging.DEBUG,
                request_id=response_id,
                expected_id=request_id,
                body_bytes=len(body),
            )
        if response_id != request_id:
            raise RconError(f"Unexpected response id {response_id} (expected {request_id})")

        fragments = [body]
        while len(body) >= MAX_RESPONSE_BODY_BYTES:
            payload = self._receive_raw(end_on_timeout=True)
            if payload is None:
                break
            response_id, _, body = split_payload(payload)
            if response_id != request_id:
                raise RconError(
                    f"Unexpected response id {response_id} in fragmented response (expected {request_id})"
                )
            fragments.append(body)
        return decode_body(b"".join(fragments))

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise RconError("Not connected")
        return self._sock

    def _send(self, packet: Packet) -> None:
        data = encode_packet(packet)
        sock = self._require_socket()
        try:
            sock.sendall(data)
        except OSError as e:
            self.close()
            raise RconError(f"Send failed: {e}") from e

    def _recv_exact(self, size: int) -> bytes:
        sock = self._require_socket()
        chunks = bytearray()
        while len(chunks) < size:
            try:
                chunk = sock.recv(size - len(chunks))
            except OSError as e:
                self.close()
                raise RconError(f"Receive failed: {e}") from e
            if not chunk:
                self.close()
                raise RconError("Server closed the connection")
            chunks.extend(chunk)
        return bytes(chunks)

    def _receive_raw(self, end_on_timeout: bool = False) -> Optional[bytes]:
        """Read one packet after its length prefix.

        With ``end_on_timeout``, a timeout before any byte of the packet
        arrives returns None and leaves the connection open.
        """
        if not end_on_timeout:
            return self._recv_exact(decode_length(self._recv_exact(LENGTH.size)))
        sock = self._require_socket()
        try:
            first = sock.recv(LENGTH.size)
        except TimeoutError:
            return None
        except OSError as e:
            self.close()
            raise RconError(f"Receive failed: {e}") from e
        if not first:
            self.close()
            raise RconError("Server closed the connection")
        prefix = first + self._recv_exact(LENGTH.size - len(first))
        return self._recv_exact(decode_length(prefix))

    def _receive(self) -> Packet:
        return decode_payload(self._receive_raw())
