import asyncio
import contextlib
import socket

import pytest
import websockets

from drills.chat_server import WELCOME, Broadcast, Lagged, handle_connection, serve


@contextlib.asynccontextmanager
async def _chat(broadcast):
    async with websockets.serve(
        lambda ws: handle_connection(ws, broadcast), "127.0.0.1", 0
    ) as server:
        port = server.sockets[0].getsockname()[1]
        yield f"ws://127.0.0.1:{port}"


def _free_port():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_broadcast_reaches_every_subscriber():
    broadcast = Broadcast()
    first, second = broadcast.subscribe(), broadcast.subscribe()
    assert broadcast.send("hello") == 2
    assert await first.recv() == "hello"
    assert await second.recv() == "hello"


@pytest.mark.asyncio
async def test_closed_subscription_no_longer_counts():
    broadcast = Broadcast()
    with broadcast.subscribe():
        assert broadcast.send("x") == 1
    assert broadcast.send("y") == 0


@pytest.mark.asyncio
async def test_lagging_subscriber_is_told_and_keeps_newest():
    broadcast = Broadcast(capacity=2)
    subscription = broadcast.subscribe()
    for message in ["a", "b", "c"]:
        broadcast.send(message)
    with pytest.raises(Lagged) as info:
        await subscription.recv()
    assert info.value.skipped == 1
    assert await subscription.recv() == "b"
    assert await subscription.recv() == "c"


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Broadcast(capacity=0)


@pytest.mark.asyncio
async def test_client_is_welcomed():
    async with _chat(Broadcast()) as uri:
        async with websockets.connect(uri) as client:
            assert await asyncio.wait_for(client.recv(), 5) == WELCOME


@pytest.mark.asyncio
async def test_message_is_relayed_to_all_clients():
    broadcast = Broadcast()
    async with _chat(broadcast) as uri:
        async with websockets.connect(uri) as alice, websockets.connect(uri) as bob:
            assert await asyncio.wait_for(alice.recv(), 5) == WELCOME
            assert await asyncio.wait_for(bob.recv(), 5) == WELCOME
            await alice.send("hi all")
            assert await asyncio.wait_for(bob.recv(), 5) == "hi all"
            assert await asyncio.wait_for(alice.recv(), 5) == "hi all"
    assert broadcast.send("after") == 0


@pytest.mark.asyncio
async def test_serve_accepts_clients():
    port = _free_port()
    task = asyncio.create_task(serve("127.0.0.1", port))
    try:
        client = None
        for _ in range(100):
            try:
                client = await websockets.connect(f"ws://127.0.0.1:{port}")
                break
            except OSError:
                await asyncio.sleep(0.05)
        assert client is not None
        try:
            assert await asyncio.wait_for(client.recv(), 5) == WELCOME
        finally:
            await client.close()
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task