import asyncio
import contextlib
import socket

import pytest
import websockets

from drills.chat_client import main, run_client


@contextlib.asynccontextmanager
async def _server(handler):
    async with websockets.serve(handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        yield f"ws://127.0.0.1:{port}"


async def _idle_lines():
    await asyncio.Future()
    yield "never"


async def _no_lines():
    return
    yield


async def _lines_then_idle(*lines):
    for line in lines:
        yield line
    await asyncio.Future()


@pytest.mark.asyncio
async def test_prints_text_until_server_closes(capsys):
    async def replay(ws):
        await ws.send("first")
        await ws.send(b"\x00\x01")
        await ws.send("second")

    async with _server(replay) as uri:
        received = await asyncio.wait_for(run_client(uri, _idle_lines()), 5)
    assert received == ["first", "second"]
    assert "From server: first" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_sends_lines_to_server():
    async def echo_once(ws):
        message = await ws.recv()
        await ws.send(f"echo {message}")

    async with _server(echo_once) as uri:
        received = await asyncio.wait_for(run_client(uri, _lines_then_idle("hi")), 5)
    assert received == ["echo hi"]


@pytest.mark.asyncio
async def test_stops_when_lines_run_out():
    async def quiet(ws):
        await ws.wait_closed()

    async with _server(quiet) as uri:
        received = await asyncio.wait_for(run_client(uri, _no_lines()), 5)
    assert received == []


def test_main_reports_unreachable_server(capsys):
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    assert main([f"ws://127.0.0.1:{port}"]) == 1
    assert capsys.readouterr().err.strip() != "" and True