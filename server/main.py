"""FastAPI web server for live GNSS altitude and DOP diagnostics.

Start with::

    python -m server.main

or, to choose the host, port and logging yourself::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

The server connects to a local gpsd, feeds every GGA, GNS and GSA sentence to
an ``NMEATracker`` and exposes the result three ways:

* ``GET /status`` returns the latest altitude and DOP snapshot.
* ``POST /parse`` parses a single sentence supplied by the client.
* ``ws://<host>:8000/ws`` streams one ``type="status"`` JSON message per
  tracker change.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from gnssdiag.gnss import NMEAReader, NMEATracker
from gnssdiag.nmea import ParseFailure, parse_altitude, parse_dop
from gnssdiag.nmea.fields import sentence_type
from server.broadcaster import subscribe
from server.formatters import format_failure, format_result
from server.sensors import run_nmea_loop

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 5.0
_GOING_AWAY = 1001


class SentenceRequest(BaseModel):
    """Body of ``POST /parse``."""

    sentence: str


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    tracker = NMEATracker()
    application.state.tracker = tracker
    executor = ThreadPoolExecutor(max_workers=1)
    with NMEAReader() as nmea:
        logger.info("Reading NMEA sentences from gpsd")
        reader_done = loop.run_in_executor(
            executor, run_nmea_loop, loop, nmea, tracker
        )
        try:
            yield
        finally:
            nmea.cancel()
            await reader_done
            executor.shutdown(wait=False)
            logger.info("Stopped reading NMEA sentences")


app = FastAPI(lifespan=_lifespan)


@app.get("/status")
async def get_status(request: Request) -> dict[str, Any]:
    """Return the latest altitude, DOP and failure counts."""
    tracker: NMEATracker = request.app.state.tracker
    return tracker.status.to_dict()


@app.post("/parse")
async def parse_sentence(body: SentenceRequest) -> JSONResponse:
    """Parse one GGA, GNS or GSA sentence.

    GSA sentences go to the DOP parser; everything else goes to the altitude
    parser, which reports unrelated types as ``unsupported_sentence_type``.

    Returns:
        200 with ``{"type": "altitude" | "dop", ...values}``, or 422 with the
        failure kind, offending field and raw value.
    """
    if sentence_type(body.sentence) == "GSA":
        result = parse_dop(body.sentence)
    else:
        result = parse_altitude(body.sentence)

    if isinstance(result, ParseFailure):
        return JSONResponse(status_code=422, content=format_failure(result))
    return JSONResponse(content=format_result(result))


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=_GOING_AWAY)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream status JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue. The oldest message is dropped
    when the queue is full so slow clients do not stall the reader thread.
    The connection closes with code 1001, and the client should reconnect,
    if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    # Subscribe before the handshake completes so no status change that
    # happens right after connecting is missed
    with subscribe() as queue:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)


def main() -> None:
    """Configure logging and serve the app on port 8000."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
