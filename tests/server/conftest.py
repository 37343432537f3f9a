"""Pytest fixtures for server module testing."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from tests.server.helpers import ControlledNMEAReader


@pytest.fixture(autouse=True)
def nmea_controller() -> Iterator[ControlledNMEAReader]:
    controller = ControlledNMEAReader()
    with patch("server.main.NMEAReader", return_value=controller):
        yield controller
    controller.sentence_queue.put(None)
