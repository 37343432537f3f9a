"""GNSS status snapshot built from parsed sentences."""

from dataclasses import asdict, dataclass, field
from typing import Any

from gnssdiag.nmea.types import DilutionOfPrecision, FailureKind, GeoidAltitude


@dataclass
class GNSSStatus:
    """The latest altitude and DOP seen on an NMEA stream.

    ``NMEATracker`` owns one ``GNSSStatus`` and updates it in place as GGA,
    GNS and GSA sentences arrive. A field is ``None`` until its first
    successful parse, and goes back to ``None`` when the receiver starts
    reporting the value as empty (no fix).

    Attributes:
        altitude: Most recent altitude MSL and geoid height, or None.

        dop: Most recent PDOP/HDOP/VDOP, or None.

        sentence_count: Number of GGA, GNS and GSA sentences handled,
            including those that failed to parse.

        failure_counts: Number of failed sentences per ``FailureKind``.

    Example:
        >>> from gnssdiag.gnss import NMEATracker
        >>> tracker = NMEATracker()
        >>> status = tracker.update("$GPGSA,A,3,03,14,16,22,23,26,,,,,,,3.6,1.8,3.1*38")
        >>> status.dop.horizontal_dop
        1.8
        >>> status.altitude is None
        True
    """

    altitude: GeoidAltitude | None = None
    dop: DilutionOfPrecision | None = None
    sentence_count: int = 0
    failure_counts: dict[FailureKind, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable copy of the snapshot.

        Safe to call from another thread while the tracker updates it; each
        field is read once.
        """
        altitude = self.altitude
        dop = self.dop
        failure_counts = dict(self.failure_counts)
        return {
            "altitude": asdict(altitude) if altitude else None,
            "dop": asdict(dop) if dop else None,
            "sentence_count": self.sentence_count,
            "failure_counts": {
                kind.value: count for kind, count in failure_counts.items()
            },
        }
