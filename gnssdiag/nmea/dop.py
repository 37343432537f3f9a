"""DOP parser for GSA sentences.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix
followed by the three dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,03,14,16,22,23,26,,,,,,,3.6,1.8,3.1*38
           | | |                       |   |   |
           | | +-- 3-14: satellite IDs |   |   +-- 17: VDOP (+ checksum)
           | |     (12 slots)          |   +-- 16: HDOP
           | +-- fix type              +-- 15: PDOP
           +-- selection mode

NMEA 4.10+ receivers append a GNSS system ID after VDOP
(``...,3.1,1*3B``). VDOP stays at index 17 in both layouts; the checksum
suffix is only present on it in the older one.
"""

from gnssdiag.nmea.fields import field_at, parse_decimal, split_fields, strip_checksum
from gnssdiag.nmea.types import DilutionOfPrecision, FailureKind, ParseFailure

_SUPPORTED_PREFIXES = ("$GPGSA", "$GNGSA")

_POSITION_DOP_INDEX = 15
_HORIZONTAL_DOP_INDEX = 16
_VERTICAL_DOP_INDEX = 17


def _extract_dop_fields(fields: list[str]) -> dict[str, str] | None:
    """Locate the three DOP tokens, or None if the sentence is truncated.

    The VDOP token has any ``*<checksum>`` suffix removed.
    """
    position = field_at(fields, _POSITION_DOP_INDEX)
    horizontal = field_at(fields, _HORIZONTAL_DOP_INDEX)
    vertical = field_at(fields, _VERTICAL_DOP_INDEX)
    if position is None or horizontal is None or vertical is None:
        return None

    return {
        "position_dop": position,
        "horizontal_dop": horizontal,
        "vertical_dop": strip_checksum(vertical),
    }


def parse_dop(sentence: str) -> DilutionOfPrecision | ParseFailure:
    """Parse PDOP, HDOP and VDOP from a GSA sentence.

    Accepted prefixes are ``$GPGSA`` and ``$GNGSA``. The first failing
    check wins: unsupported prefix, truncated sentence, any empty DOP field,
    then any non-numeric DOP field (in PDOP, HDOP, VDOP order).

    Args:
        sentence: One complete NMEA sentence. Trailing ``\\r\\n`` is ignored.

    Returns:
        DilutionOfPrecision with the three values unmodified, or a
        ParseFailure. The checksum is discarded, never validated.

    Example:
        >>> parse_dop("$GNGSA,A,3,03,14,16,22,23,26,,,,,,,3.6,1.8,3.1,1*3B")
        DilutionOfPrecision(position_dop=3.6, horizontal_dop=1.8, vertical_dop=3.1)
    """
    if not sentence.startswith(_SUPPORTED_PREFIXES):
        return ParseFailure(FailureKind.UNSUPPORTED_SENTENCE_TYPE, sentence)

    raw = _extract_dop_fields(split_fields(sentence))
    if raw is None:
        return ParseFailure(FailureKind.MALFORMED_SENTENCE, sentence)

    for name, value in raw.items():
        if not value:
            return ParseFailure(FailureKind.MISSING_VALUE, sentence, name)

    parsed: dict[str, float] = {}
    for name, value in raw.items():
        number = parse_decimal(value)
        if number is None:
            return ParseFailure(FailureKind.INVALID_NUMBER, sentence, name, value)
        parsed[name] = number

    return DilutionOfPrecision(**parsed)
