"""GNSS module for reading NMEA sentences from gpsd and tracking their values."""

from gnssdiag.gnss.reader import NMEAReader
from gnssdiag.gnss.tracker import NMEATracker
from gnssdiag.gnss.types import GNSSStatus

__all__ = ["GNSSStatus", "NMEAReader", "NMEATracker"]
