"""Tests for the status and parse HTTP endpoints."""

from fastapi.testclient import TestClient

from server.main import app
from tests.server.helpers import (
    GPGGA,
    GPGGA_NO_FIX,
    GPGSA,
    GPZDA,
    ControlledNMEAReader,
)


def test_status_is_empty_before_any_sentence() -> None:
    with TestClient(app) as client:
        response = client.get("/status")
    assert response.status_code == 200
    assert response.json() == {
        "altitude": None,
        "dop": None,
        "sentence_count": 0,
        "failure_counts": {},
    }


def test_status_reflects_streamed_sentences(
    nmea_controller: ControlledNMEAReader,
) -> None:
    with TestClient(app) as client, client.websocket_connect("/ws") as websocket:
        nmea_controller.sentence_queue.put(GPGSA)
        websocket.receive_json()
        response = client.get("/status")
    assert response.json()["dop"]["vertical_dop"] == 3.1


def test_parse_altitude_sentence() -> None:
    response = TestClient(app).post("/parse", json={"sentence": GPGGA})
    assert response.status_code == 200
    assert response.json() == {
        "type": "altitude",
        "altitude_msl": 19.2,
        "height_of_geoid": -24.0,
    }


def test_parse_dop_sentence() -> None:
    response = TestClient(app).post("/parse", json={"sentence": GPGSA})
    assert response.status_code == 200
    assert response.json() == {
        "type": "dop",
        "position_dop": 3.6,
        "horizontal_dop": 1.8,
        "vertical_dop": 3.1,
    }


def test_parse_unsupported_sentence() -> None:
    response = TestClient(app).post("/parse", json={"sentence": GPZDA})
    assert response.status_code == 422
    assert response.json()["kind"] == "unsupported_sentence_type"


def test_parse_missing_value_names_field() -> None:
    response = TestClient(app).post("/parse", json={"sentence": GPGGA_NO_FIX})
    assert response.status_code == 422
    body = response.json()
    assert body["kind"] == "missing_value"
    assert body["field"] == "altitude_msl"


def test_parse_invalid_number_reports_value() -> None:
    sentence = GPGSA.replace("1.8", "1.8!")
    response = TestClient(app).post("/parse", json={"sentence": sentence})
    assert response.status_code == 422
    body = response.json()
    assert body["kind"] == "invalid_number"
    assert body["field"] == "horizontal_dop"
    assert body["value"] == "1.8!"


def test_parse_requires_sentence_field() -> None:
    response = TestClient(app).post("/parse", json={})
    assert response.status_code == 422


def test_parse_dispatches_on_six_character_prefix() -> None:
    sentence = GPGSA.replace("$GPGSA", "$GPGSAX")
    response = TestClient(app).post("/parse", json={"sentence": sentence})
    assert response.status_code == 200
    assert response.json()["type"] == "dop"
