"""NMEA 0183 altitude and DOP extraction for GGA, GNS and GSA sentences."""

from gnssdiag.nmea.altitude import parse_altitude
from gnssdiag.nmea.dop import parse_dop
from gnssdiag.nmea.types import (
    DilutionOfPrecision,
    FailureKind,
    GeoidAltitude,
    ParseFailure,
)

__all__ = [
    "DilutionOfPrecision",
    "FailureKind",
    "GeoidAltitude",
    "ParseFailure",
    "parse_altitude",
    "parse_dop",
]
