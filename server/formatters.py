"""JSON formatting utilities for GNSS status and parse results."""

import json
from dataclasses import asdict
from typing import Any

from gnssdiag.gnss import GNSSStatus
from gnssdiag.nmea import DilutionOfPrecision, GeoidAltitude, ParseFailure

__all__ = ["format_failure", "format_result", "format_status_message"]


def format_status_message(status: GNSSStatus) -> str:
    """Serialize a status snapshot into a JSON string for WebSocket transmission."""
    return json.dumps({"type": "status", **status.to_dict()})


def format_result(result: GeoidAltitude | DilutionOfPrecision) -> dict[str, Any]:
    """Tag a successful parse result with its type."""
    result_type = "altitude" if isinstance(result, GeoidAltitude) else "dop"
    return {"type": result_type, **asdict(result)}


def format_failure(failure: ParseFailure) -> dict[str, Any]:
    return {
        "kind": failure.kind.value,
        "field": failure.field,
        "value": failure.value,
        "message": failure.message,
    }
