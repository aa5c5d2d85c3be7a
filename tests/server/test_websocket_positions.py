"""Tests for streaming positions over the WebSocket endpoint."""

import asyncio

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.main import _send_positions_until_disconnect
from tests.server.helpers import GGA_VALID, GLL_FORM_FEED, GLL_VALID


def test_valid_line_yields_position(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(GLL_VALID)
        data = websocket.receive_json()
        assert data["type"] == "position"
        assert data["lat"] == pytest.approx(49.2741667, rel=1e-6)


def test_invalid_lines_yield_nothing(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text("garbage\n" + GLL_VALID[:-2] + "32")
        websocket.send_text(GGA_VALID)
        data = websocket.receive_json()
        assert data["ele"] == pytest.approx(545.4)


def test_multiple_lines_in_one_frame(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(GGA_VALID + "\r\n" + GLL_VALID + "\r\n")
        assert websocket.receive_json()["ele"] == pytest.approx(545.4)
        assert websocket.receive_json()["ele"] == 0.0


def test_form_feed_does_not_split_line(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        websocket.send_text(GLL_FORM_FEED)
        data = websocket.receive_json()
        assert data["lat"] == pytest.approx(49.2741667, rel=1e-6)


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def receive_text(self) -> str:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        await _send_positions_until_disconnect(MockWebSocket())  # type: ignore[arg-type]

    asyncio.run(_run())
