"""Background NMEA reading loop."""

import asyncio
import logging

from gnssdiag.gnss import NMEAReader, NMEATracker
from server.broadcaster import broadcast_message
from server.formatters import format_status_message

__all__ = ["run_nmea_loop"]

logger = logging.getLogger(__name__)


def run_nmea_loop(
    loop: asyncio.AbstractEventLoop,
    nmea: NMEAReader,
    tracker: NMEATracker,
) -> None:
    """Feed gpsd sentences to *tracker* and broadcast every status change.

    The caller owns *nmea* and must use it as an open context manager. The
    loop exits when ``nmea.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        nmea: An open ``NMEAReader`` instance managed by the caller.
        tracker: Tracker accumulating the latest altitude and DOP.
    """
    try:
        for sentence in nmea:
            status = tracker.update(sentence)
            if status is not None:
                broadcast_message(format_status_message(status), loop)
    except EOFError:
        logger.info("NMEA stream closed after %d sentences", tracker.status.sentence_count)
        return
