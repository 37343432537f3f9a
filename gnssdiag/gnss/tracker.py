"""NMEATracker: keeps the latest altitude and DOP from an NMEA stream.

The parsers in ``gnssdiag.nmea`` are pure and never log. This module is the
consumer that decides what each failure means for a live display:

* ``MISSING_VALUE``: the receiver has no value right now (e.g. no fix). The
  stored value is cleared so stale data is not shown. Logged at INFO.
* ``MALFORMED_SENTENCE`` / ``INVALID_NUMBER``: a corrupt sentence. The stored
  value is kept. Logged at ERROR.
* ``UNSUPPORTED_SENTENCE_TYPE``: a GGA/GNS/GSA variant from another talker
  (e.g. ``$GLGSA``). The stored value is kept. Logged at DEBUG.
"""

import logging
from collections.abc import Callable

from gnssdiag.gnss.types import GNSSStatus
from gnssdiag.nmea import (
    DilutionOfPrecision,
    FailureKind,
    GeoidAltitude,
    ParseFailure,
    parse_altitude,
    parse_dop,
)
from gnssdiag.nmea.fields import sentence_type

__all__ = ["NMEATracker"]

logger = logging.getLogger(__name__)

_LOG_LEVELS: dict[FailureKind, int] = {
    FailureKind.UNSUPPORTED_SENTENCE_TYPE: logging.DEBUG,
    FailureKind.MISSING_VALUE: logging.INFO,
    FailureKind.MALFORMED_SENTENCE: logging.ERROR,
    FailureKind.INVALID_NUMBER: logging.ERROR,
}

_ALTITUDE_TYPES = ("GGA", "GNS")
_DOP_TYPES = ("GSA",)


class NMEATracker:
    """Feed NMEA sentences one at a time and read back the latest values.

    Typical use with a gpsd stream::

        tracker = NMEATracker()
        with NMEAReader() as nmea:
            for sentence in nmea:
                status = tracker.update(sentence)
                if status is not None:
                    publish(status)

    Sentences other than GGA, GNS and GSA are ignored without logging.
    Not thread-safe; use one tracker per reader thread.
    """

    def __init__(self) -> None:
        self._status = GNSSStatus()

    @property
    def status(self) -> GNSSStatus:
        """The current snapshot (updated in place)."""
        return self._status

    def update(self, sentence: str) -> GNSSStatus | None:
        """Apply one sentence and return the status if it changed.

        Args:
            sentence: One complete NMEA sentence.

        Returns:
            The updated ``GNSSStatus`` when a stored value was replaced or
            cleared, otherwise None (ignored sentence type, or a failure that
            keeps the previous value).
        """
        kind = sentence_type(sentence)
        if kind in _ALTITUDE_TYPES:
            return self._apply(sentence, parse_altitude, "altitude")
        if kind in _DOP_TYPES:
            return self._apply(sentence, parse_dop, "dop")
        return None

    def _apply(
        self,
        sentence: str,
        parser: Callable[[str], GeoidAltitude | DilutionOfPrecision | ParseFailure],
        attribute: str,
    ) -> GNSSStatus | None:
        self._status.sentence_count += 1
        result = parser(sentence)

        if not isinstance(result, ParseFailure):
            setattr(self._status, attribute, result)
            return self._status

        self._record_failure(result)
        if result.kind is FailureKind.MISSING_VALUE:
            if getattr(self._status, attribute) is None:
                return None
            setattr(self._status, attribute, None)
            return self._status
        return None

    def _record_failure(self, failure: ParseFailure) -> None:
        counts = self._status.failure_counts
        counts[failure.kind] = counts.get(failure.kind, 0) + 1
        logger.log(_LOG_LEVELS[failure.kind], failure.message)
