"""GNSS diagnostics: altitude and dilution of precision from NMEA 0183 data."""

from gnssdiag.gnss import GNSSStatus, NMEAReader, NMEATracker
from gnssdiag.nmea import (
    DilutionOfPrecision,
    FailureKind,
    GeoidAltitude,
    ParseFailure,
    parse_altitude,
    parse_dop,
)

__all__ = [
    "DilutionOfPrecision",
    "FailureKind",
    "GNSSStatus",
    "GeoidAltitude",
    "NMEAReader",
    "NMEATracker",
    "ParseFailure",
    "parse_altitude",
    "parse_dop",
]
