"""Tests for websocket status streaming and connection lifecycle."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.broadcaster import _enqueue_message, _subscriber_queues
from server.main import _send_messages_until_disconnect, app
from tests.server.helpers import (
    GPGGA,
    GPGGA_NO_FIX,
    GPGSA,
    GPZDA,
    ControlledNMEAReader,
)


def test_altitude_update_is_streamed(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.sentence_queue.put(GPGGA)
        data = websocket.receive_json()
    assert data["type"] == "status"
    assert data["altitude"] == {"altitude_msl": 19.2, "height_of_geoid": -24.0}
    assert data["dop"] is None
    assert data["sentence_count"] == 1


def test_ignored_sentence_sends_nothing(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.sentence_queue.put(GPZDA)
        nmea_controller.sentence_queue.put(GPGSA)
        data = websocket.receive_json()
    assert data["dop"] == {
        "position_dop": 3.6,
        "horizontal_dop": 1.8,
        "vertical_dop": 3.1,
    }
    assert data["sentence_count"] == 1


def test_lost_fix_clears_altitude(nmea_controller: ControlledNMEAReader) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.sentence_queue.put(GPGGA)
        websocket.receive_json()
        nmea_controller.sentence_queue.put(GPGGA_NO_FIX)
        data = websocket.receive_json()
    assert data["altitude"] is None
    assert data["failure_counts"] == {"missing_value": 1}


def test_multiple_clients(nmea_controller: ControlledNMEAReader) -> None:
    with (
        TestClient(app) as client,
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        nmea_controller.sentence_queue.put(GPGSA)
        assert socket_one.receive_json()["type"] == "status"
        assert socket_two.receive_json()["type"] == "status"


def test_subscribed_once_handshake_completes() -> None:
    with TestClient(app) as client, client.websocket_connect("/ws"):
        assert len(_subscriber_queues) == 1
    assert _subscriber_queues == []


def test_drop_oldest_overflow() -> None:
    message_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=2)
    _enqueue_message(message_queue, "message_one")
    _enqueue_message(message_queue, "message_two")
    _enqueue_message(message_queue, "message_three")
    assert message_queue.qsize() == 2
    assert message_queue.get_nowait() == "message_two"
    assert message_queue.get_nowait() == "message_three"


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("server.main._TIMEOUT_SECONDS", 0.05)
    with (
        TestClient(app) as client,
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def send_text(self, _text: str) -> None:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        message_queue = MagicMock(spec=asyncio.Queue)
        message_queue.get = AsyncMock(return_value="message")
        websocket = MockWebSocket()
        await _send_messages_until_disconnect(message_queue, websocket)  # type: ignore[arg-type]

    asyncio.run(_run())
