"""Asynchronous RADIUS client over UDP."""

from __future__ import annotations

import asyncio
import contextlib
import socket
from dataclasses import dataclass

from radiuskit.packet import (
    MAX_PACKET_LENGTH,
    Packet,
    is_authentic_response,
    parse,
)

_FAMILIES = {
    "udp": 0,
    "udp4": socket.AF_INET,
    "udp6": socket.AF_INET6,
}


class NonAuthenticResponseError(Exception):
    """Raised when no authentic response was received."""

    def __init__(self) -> None:
        super().__init__("radius: non-authentic response")


def _split_host_port(addr) -> tuple[str, int]:
    if isinstance(addr, tuple):
        host, port = addr[:2]
        return host, int(port)
    if addr.startswith("["):
        host, sep, rest = addr[1:].partition("]")
        if not sep or not rest.startswith(":"):
            raise ValueError(f"invalid address {addr!r}")
        port = rest[1:]
    else:
        host, sep, port = addr.rpartition(":")
        if not sep:
            raise ValueError(f"missing port in address {addr!r}")
    return host or "localhost", int(port)


class _ResponseProtocol(asyncio.DatagramProtocol):
    def __init__(self) -> None:
        self.queue: asyncio.Queue = asyncio.Queue()

    def datagram_received(self, data: bytes, addr) -> None:
        self.queue.put_nowait(data)

    def error_received(self, exc: Exception) -> None:
        self.queue.put_nowait(exc)

    def connection_lost(self, exc: Exception | None) -> None:
        if exc is not None:
            self.queue.put_nowait(exc)


@dataclass
class Client:
    """A RADIUS client that exchanges packets with a server.

    ``retry`` is the resend interval in seconds (zero or less: no resend).
    ``max_packet_errors`` is how many bad responses are tolerated before the
    last error is raised; zero drops bad responses forever.
    """

    net: str = "udp"
    retry: float = 0.0
    max_packet_errors: int = 0
    insecure_skip_verify: bool = False

    async def exchange(self, packet: Packet, addr) -> Packet:
        """Send the packet to the server at addr and wait for its response."""
        wire = packet.encode()
        family = _FAMILIES.get(self.net or "udp")
        if family is None:
            raise ValueError(f"unsupported network {self.net!r}")
        host, port = _split_host_port(addr)

        loop = asyncio.get_running_loop()
        transport, protocol = await loop.create_datagram_endpoint(
            _ResponseProtocol, remote_addr=(host, port), family=family
        )
        resender = None
        try:
            transport.sendto(wire)
            if self.retry > 0:
                resender = asyncio.ensure_future(self._resend(transport, wire))
            return await self._receive(protocol, wire, packet.secret)
        finally:
            if resender is not None:
                resender.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await resender
            transport.close()

    async def _resend(self, transport: asyncio.DatagramTransport, wire: bytes) -> None:
        while True:
            await asyncio.sleep(self.retry)
            transport.sendto(wire)

    def _too_many_errors(self, count: int) -> bool:
        return self.max_packet_errors > 0 and count >= self.max_packet_errors

    async def _receive(
        self, protocol: _ResponseProtocol, wire: bytes, secret: bytes
    ) -> Packet:
        error_count = 0
        while True:
            item = await protocol.queue.get()
            if isinstance(item, Exception):
                raise item
            data = item[:MAX_PACKET_LENGTH]

            try:
                received = parse(data, secret)
            except ValueError:
                error_count += 1
                if self._too_many_errors(error_count):
                    raise
                continue

            if not self.insecure_skip_verify and not is_authentic_response(
                data, wire, secret
            ):
                error_count += 1
                if self._too_many_errors(error_count):
                    raise NonAuthenticResponseError()
                continue

            return received


DEFAULT_CLIENT = Client(retry=1.0, max_packet_errors=10)
"""The client used by :func:`exchange`."""


async def exchange(packet: Packet, addr) -> Packet:
    """Exchange a packet with the server at addr using DEFAULT_CLIENT."""
    return await DEFAULT_CLIENT.exchange(packet, addr)