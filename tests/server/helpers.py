"""Helpers shared by server tests."""

import queue
from collections.abc import Iterator

GPGGA = "$GPGGA,032739.0,2804.732835,N,08224.639709,W,1,08,0.8,19.2,M,-24.0,M,,*5B"
GPGGA_NO_FIX = "$GPGGA,032739.0,,,,,0,00,,,M,,M,,*5B"
GPGSA = "$GPGSA,A,3,03,14,16,22,23,26,,,,,,,3.6,1.8,3.1*38"
GPZDA = "$GPZDA,172809,12,07,1996,00,00*45"


class ControlledNMEAReader:
    """Stands in for ``NMEAReader``; tests push sentences onto its queue."""

    def __init__(self) -> None:
        self.sentence_queue: queue.Queue[str | None] = queue.Queue()

    def __enter__(self) -> "ControlledNMEAReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.sentence_queue.put(None)

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self.sentence_queue.get()
            if item is None:
                break
            yield item
