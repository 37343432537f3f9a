"""Altitude parser for GGA and GNS sentences.

GGA (Global Positioning System Fix Data) and GNS (GNSS Fix Data) both report
the altitude above mean sea level at index 9. They differ in what follows it:
GGA carries an altitude units field before the geoid height, GNS does not.

GGA Sentence Format:
    $GPGGA,032739.0,2804.732835,N,08224.639709,W,1,08,0.8,19.2,M,-24.0,M,,*5B
           |        |             |            | | |  |   |    | |
           1        2             4            6 7 8  9   |    | +-- 12: geoid units
                                                          |    +-- 11: geoid height
                                                          +-- 10: altitude units
GNS Sentence Format:
    $GNGNS,015002.0,2804.733672,N,08224.631117,W,AAN,09,1.1,78.9,-24.0,,*23
                                                           |    |
                                                           9    +-- 10: geoid height
                                                           +-- altitude MSL
"""

from gnssdiag.nmea.fields import field_at, parse_decimal, split_fields
from gnssdiag.nmea.types import FailureKind, GeoidAltitude, ParseFailure

_ALTITUDE_INDEX = 9

# Geoid height index per supported sentence prefix
_GEOID_HEIGHT_INDEX: dict[str, int] = {
    "$GPGGA": 11,
    "$GNGGA": 11,
    "$GNGNS": 10,
}


def _geoid_height_index(sentence: str) -> int | None:
    for prefix, index in _GEOID_HEIGHT_INDEX.items():
        if sentence.startswith(prefix):
            return index
    return None


def parse_altitude(sentence: str) -> GeoidAltitude | ParseFailure:
    """Parse altitude MSL and geoid height from a GGA or GNS sentence.

    Accepted prefixes are ``$GPGGA``, ``$GNGGA`` and ``$GNGNS`` (exact,
    case-sensitive). Checks run in order and the first failure is returned:

    1. Prefix recognized, else ``UNSUPPORTED_SENTENCE_TYPE``
    2. Both field indices present, else ``MALFORMED_SENTENCE``
    3. Both fields non-empty, else ``MISSING_VALUE``
    4. Altitude, then geoid height, parse as decimals, else ``INVALID_NUMBER``

    Args:
        sentence: One complete NMEA sentence. Trailing ``\\r\\n`` is ignored.

    Returns:
        GeoidAltitude with both values in meters, unmodified, or a
        ParseFailure. Never raises and never returns a partial result.

    Example:
        >>> parse_altitude("$GNGNS,015002.0,2804.733672,N,08224.631117,W,AAN,09,1.1,78.9,-24.0,,*23")
        GeoidAltitude(altitude_msl=78.9, height_of_geoid=-24.0)
        >>> parse_altitude("$GPZDA,172809,12,07,1996,00,00*45").kind
        <FailureKind.UNSUPPORTED_SENTENCE_TYPE: 'unsupported_sentence_type'>
    """
    geoid_index = _geoid_height_index(sentence)
    if geoid_index is None:
        return ParseFailure(FailureKind.UNSUPPORTED_SENTENCE_TYPE, sentence)

    fields = split_fields(sentence)
    altitude = field_at(fields, _ALTITUDE_INDEX)
    geoid_height = field_at(fields, geoid_index)
    if altitude is None or geoid_height is None:
        return ParseFailure(FailureKind.MALFORMED_SENTENCE, sentence)

    if not altitude:
        return ParseFailure(FailureKind.MISSING_VALUE, sentence, "altitude_msl")
    if not geoid_height:
        return ParseFailure(FailureKind.MISSING_VALUE, sentence, "height_of_geoid")

    altitude_msl = parse_decimal(altitude)
    if altitude_msl is None:
        return ParseFailure(
            FailureKind.INVALID_NUMBER, sentence, "altitude_msl", altitude
        )

    height_of_geoid = parse_decimal(geoid_height)
    if height_of_geoid is None:
        return ParseFailure(
            FailureKind.INVALID_NUMBER, sentence, "height_of_geoid", geoid_height
        )

    return GeoidAltitude(altitude_msl=altitude_msl, height_of_geoid=height_of_geoid)
