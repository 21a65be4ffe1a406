"""A websocket chat client that sends input lines and prints what arrives."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections.abc import AsyncIterable, AsyncIterator, Sequence
from typing import Optional

import websockets
from websockets.exceptions import ConnectionClosedOK, WebSocketException

DEFAULT_URI = "ws://127.0.0.1:2000"


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    lines: asyncio.Queue = asyncio.Queue()

    def pump() -> None:
        try:
            for line in sys.stdin:
                loop.call_soon_threadsafe(lines.put_nowait, line.rstrip("\n"))
            loop.call_soon_threadsafe(lines.put_nowait, None)
        except RuntimeError:
            return

    threading.Thread(target=pump, daemon=True).start()
    while (line := await lines.get()) is not None:
        yield line


async def _next_line(lines: AsyncIterator[str]) -> Optional[str]:
    try:
        return await lines.__anext__()
    except StopAsyncIteration:
        return None


async def run_client(
    uri: str = DEFAULT_URI, lines: Optional[AsyncIterable[str]] = None
) -> list[str]:
    """Send each line to the server and print the text messages it sends back.

    Stops when the lines run out or the server closes the connection, and
    returns the text messages received. Lines default to standard input.
    """
    source = (lines if lines is not None else _stdin_lines()).__aiter__()
    received: list[str] = []
    async with websockets.connect(uri) as websocket:
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(_next_line(source))
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = incoming.result()
                    except ConnectionClosedOK:
                        return received
                    if isinstance(message, str):
                        print(f"From server: {message}")
                        received.append(message)
                    incoming = asyncio.ensure_future(websocket.recv())
                if outgoing in done:
                    line = outgoing.result()
                    if line is None:
                        return received
                    await websocket.send(line)
                    outgoing = asyncio.ensure_future(_next_line(source))
        finally:
            incoming.cancel()
            outgoing.cancel()
            await asyncio.gather(incoming, outgoing, return_exceptions=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Chat with a server from the terminal."""
    parser = argparse.ArgumentParser(description="Websocket chat client.")
    parser.add_argument("uri", nargs="?", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except (OSError, WebSocketException) as err:
        print(err, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())