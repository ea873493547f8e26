import asyncio
import contextlib

import pytest

from radiuskit.client import Client, NonAuthenticResponseError, exchange
from radiuskit.code import Code
from radiuskit.packet import PacketError, new, parse

SECRET = b"secret"


class _Server(asyncio.DatagramProtocol):
    def __init__(self, handler):
        self.handler = handler
        self.transport = None

    def connection_made(self, transport):
        self.transport = transport

    def datagram_received(self, data, addr):
        self.handler(self, parse(data, SECRET), addr)

    def reply(self, packet, addr):
        self.transport.sendto(packet.encode(), addr)


@contextlib.asynccontextmanager
async def running_server(handler):
    loop = asyncio.get_running_loop()
    transport, server = await loop.create_datagram_endpoint(
        lambda: _Server(handler), local_addr=("127.0.0.1", 0)
    )
    try:
        host, port = transport.get_extra_info("sockname")[:2]
        yield f"{host}:{port}", server
    finally:
        transport.close()


def _ignore(server, request, addr):
    pass


def _accept(server, request, addr):
    server.reply(request.response(Code.ACCESS_ACCEPT), addr)


@pytest.mark.asyncio
async def test_exchange_expired():
    async with running_server(_ignore) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(Client().exchange(req, addr), timeout=0)


@pytest.mark.asyncio
async def test_exchange_retry():
    attempts = 0

    def handler(server, request, addr):
        nonlocal attempts
        attempts += 1
        if attempts == 4:
            server.reply(request.response(Code.ACCESS_ACCEPT), addr)

    async with running_server(handler) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        resp = await Client(retry=0.005).exchange(req, addr)
        seen = attempts
    assert resp.code is Code.ACCESS_ACCEPT
    assert seen == 4


@pytest.mark.asyncio
async def test_exchange_cancelled():
    async with running_server(_ignore) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        task = asyncio.ensure_future(Client(retry=0.005).exchange(req, addr))
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
    assert task.cancelled()


@pytest.mark.asyncio
async def test_exchange_invalid_packet():
    def handler(server, request, addr):
        server.transport.sendto(b"AAAA", addr)

    async with running_server(handler) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        client = Client(retry=0.005, max_packet_errors=2)
        with pytest.raises(PacketError, match="packet not at least 20 bytes long"):
            await client.exchange(req, addr)


def _non_authentic(server, request, addr):
    resp = request.response(Code.ACCESS_ACCEPT)
    resp.authenticator = bytes(16)
    server.reply(resp, addr)


@pytest.mark.asyncio
async def test_exchange_non_authentic_packet():
    async with running_server(_non_authentic) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        client = Client(retry=0.005, max_packet_errors=2)
        with pytest.raises(NonAuthenticResponseError, match="non-authentic response"):
            await client.exchange(req, addr)


@pytest.mark.asyncio
async def test_exchange_skip_verify_accepts_non_authentic():
    async with running_server(_non_authentic) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        client = Client(insecure_skip_verify=True)
        resp = await asyncio.wait_for(client.exchange(req, addr), timeout=5)
    assert resp.code is Code.ACCESS_ACCEPT
    assert resp.identifier == req.identifier


@pytest.mark.asyncio
async def test_exchange_response_attributes():
    def handler(server, request, addr):
        resp = request.response(Code.ACCESS_REJECT)
        resp.attributes.add(18, b"denied")
        server.reply(resp, addr)

    async with running_server(handler) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        resp = await asyncio.wait_for(Client().exchange(req, addr), timeout=5)
    assert resp.code is Code.ACCESS_REJECT
    assert resp.attributes.lookup(18) == b"denied"


@pytest.mark.asyncio
async def test_module_exchange_uses_default_client():
    async with running_server(_accept) as (addr, _):
        req = new(Code.ACCESS_REQUEST, SECRET)
        resp = await asyncio.wait_for(exchange(req, addr), timeout=5)
    assert resp.code is Code.ACCESS_ACCEPT
    assert resp.authenticator != req.authenticator


@pytest.mark.asyncio
async def test_exchange_unsupported_network():
    req = new(Code.ACCESS_REQUEST, SECRET)
    with pytest.raises(ValueError, match="unsupported network"):
        await Client(net="tcp").exchange(req, "127.0.0.1:1812")


@pytest.mark.asyncio
async def test_exchange_missing_port():
    req = new(Code.ACCESS_REQUEST, SECRET)
    with pytest.raises(ValueError, match="missing port"):
        await Client().exchange(req, "127.0.0.1")