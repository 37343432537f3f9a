"""NMEA data types for parse results.

This module defines the immutable values returned by the altitude and DOP
parsers, and the typed failure returned in place of a value when a sentence
cannot be parsed.

Design Decisions:
    1. Failures are values, not exceptions: every parser returns either a
       result dataclass or a ``ParseFailure``. Callers match on the return
       type and decide for themselves whether to log, count, or skip.

    2. Distinct failure kinds: an empty field (receiver has no fix) is an
       expected, temporary condition, while a non-numeric field points at a
       receiver bug or corruption. ``FailureKind`` keeps the two apart so a
       consumer never has to guess from a ``None``.

    3. No zero defaults: a missing altitude is a ``MISSING_VALUE`` failure,
       never ``0.0``.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class GeoidAltitude:
    """Altitude parsed from a GGA or GNS sentence.

    Attributes:
        altitude_msl: Altitude above mean sea level (geoid) in meters,
            exactly as reported by the receiver.

        height_of_geoid: Signed height of the geoid above the WGS84
            ellipsoid at the fix location, in meters. Ellipsoidal height is
            ``altitude_msl + height_of_geoid``.

    Example:
        >>> parse_altitude("$GPGGA,032739.0,2804.732835,N,08224.639709,W,1,08,0.8,19.2,M,-24.0,M,,*5B")
        GeoidAltitude(altitude_msl=19.2, height_of_geoid=-24.0)
    """

    altitude_msl: float
    height_of_geoid: float


@dataclass(frozen=True)
class DilutionOfPrecision:
    """Dilution of precision parsed from a GSA sentence.

    All values are unitless; lower is better (< 1 = ideal, 1-2 = excellent,
    2-5 = good, > 10 = poor).

    Attributes:
        position_dop: PDOP, 3D position dilution.
        horizontal_dop: HDOP, horizontal dilution.
        vertical_dop: VDOP, vertical dilution.
    """

    position_dop: float
    horizontal_dop: float
    vertical_dop: float


class FailureKind(Enum):
    """Why a sentence produced no result."""

    # Prefix is not one this parser handles; expected in mixed streams.
    UNSUPPORTED_SENTENCE_TYPE = "unsupported_sentence_type"
    # Fewer tokens than the fixed field indices require (truncated).
    MALFORMED_SENTENCE = "malformed_sentence"
    # A required field is empty; the receiver has no value right now.
    MISSING_VALUE = "missing_value"
    # A required field is present but not a decimal number.
    INVALID_NUMBER = "invalid_number"


@dataclass(frozen=True)
class ParseFailure:
    """A typed, non-fatal parse failure.

    Attributes:
        kind: The failure category.
        sentence: The sentence that failed, for diagnostics.
        field: Name of the offending field (e.g. ``"vertical_dop"``) when the
            failure is attributable to a single field, otherwise None.
        value: The raw token that failed to parse, for ``INVALID_NUMBER``.
    """

    kind: FailureKind
    sentence: str
    field: str | None = None
    value: str | None = None

    @property
    def message(self) -> str:
        """Human-readable description suitable for a log line."""
        if self.kind is FailureKind.UNSUPPORTED_SENTENCE_TYPE:
            return f"Unsupported NMEA sentence type: {self.sentence}"
        if self.kind is FailureKind.MALFORMED_SENTENCE:
            return f"Bad NMEA sentence, too few fields: {self.sentence}"
        if self.kind is FailureKind.MISSING_VALUE:
            return f"Empty {self.field} in NMEA sentence: {self.sentence}"
        return f"Bad {self.field} value of '{self.value}' in NMEA sentence: {self.sentence}"
