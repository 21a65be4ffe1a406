"""A websocket chat server that broadcasts every message to every client."""

from __future__ import annotations

import argparse
import asyncio
from collections import deque
from collections.abc import Sequence
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedOK

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
WELCOME = "Welcome to chat! Type a message"


class Lagged(RuntimeError):
    """A subscriber fell behind and messages were dropped for it."""

    def __init__(self, skipped: int) -> None:
        super().__init__(f"receiver lagged by {skipped} messages")
        self.skipped = skipped


class Subscription:
    """One receiver of a Broadcast, holding at most `capacity` messages."""

    def __init__(self, broadcast: Broadcast, capacity: int) -> None:
        self._broadcast = broadcast
        self._capacity = capacity
        self._messages: deque[str] = deque()
        self._skipped = 0
        self._ready = asyncio.Event()

    def _push(self, message: str) -> None:
        if len(self._messages) >= self._capacity:
            self._messages.popleft()
            self._skipped += 1
        self._messages.append(message)
        self._ready.set()

    async def recv(self) -> str:
        """Wait for the next message; raise Lagged if some were dropped."""
        while not self._messages and not self._skipped:
            self._ready.clear()
            await self._ready.wait()
        if self._skipped:
            skipped, self._skipped = self._skipped, 0
            raise Lagged(skipped)
        return self._messages.popleft()

    def close(self) -> None:
        """Stop receiving messages."""
        self._broadcast._subscribers.discard(self)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class Broadcast:
    """A channel delivering every sent message to every subscriber."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: set[Subscription] = set()

    def subscribe(self) -> Subscription:
        """Return a new subscription that sees messages sent from now on."""
        subscription = Subscription(self, self.capacity)
        self._subscribers.add(subscription)
        return subscription

    def send(self, message: str) -> int:
        """Deliver the message to all subscribers and return how many there are."""
        for subscription in self._subscribers:
            subscription._push(message)
        return len(self._subscribers)


async def handle_connection(websocket: Any, broadcast: Broadcast) -> None:
    """Relay one client's text messages to everyone and everyone's to the client."""
    addr = websocket.remote_address
    with broadcast.subscribe() as subscription:
        await websocket.send(WELCOME)
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(subscription.recv())
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = incoming.result()
                    except ConnectionClosedOK:
                        return
                    if isinstance(message, str):
                        print(f"From client {addr!r} {message!r}")
                        broadcast.send(message)
                    incoming = asyncio.ensure_future(websocket.recv())
                if outgoing in done:
                    await websocket.send(outgoing.result())
                    outgoing = asyncio.ensure_future(subscription.recv())
        finally:
            incoming.cancel()
            outgoing.cancel()
            await asyncio.gather(incoming, outgoing, return_exceptions=True)


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept chat clients on the given address until cancelled."""
    broadcast = Broadcast()

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        try:
            await handle_connection(websocket, broadcast)
        except (ConnectionClosed, Lagged):
            pass

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.Future()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Websocket chat server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())