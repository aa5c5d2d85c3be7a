"""FastAPI web service converting NMEA 0183 logs into positions.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Endpoints:
    ``POST /positions`` takes a whole NMEA log as the request body and
    returns every position found in it, in log order.

    ``GET /formats`` lists the supported sentence formats.

    ``ws://<host>:8000/ws`` accepts text frames of one or more NMEA lines
    and answers with one ``type="position"`` JSON message per line that
    yields a position. Lines that do not yield one produce no message.
"""

import io
import logging

from fastapi import FastAPI, Request, Response, WebSocket, WebSocketDisconnect

from gpslog import DEFAULT_REGISTRY, parse_log, parse_sentence
from server.formatters import (
    format_formats_message,
    format_position_message,
    format_positions_message,
)

_logger = logging.getLogger(__name__)

_REGISTRY = DEFAULT_REGISTRY
_JSON_MEDIA_TYPE = "application/json"


def _split_lines(text: str) -> list[str]:
    # Lines end at "\n" only, as when reading a log file; "\r" is left for
    # parse_sentence to strip.
    return list(io.StringIO(text, newline="\n"))


def _decode_lines(body: bytes) -> list[str]:
    # Undecodable bytes are kept as surrogates for the checksum.
    return _split_lines(body.decode("utf-8", errors="surrogateescape"))


app = FastAPI()


@app.post("/positions")
async def positions_endpoint(request: Request) -> Response:
    """Parse an NMEA log sent as the request body.

    Invalid lines are skipped, so a log without any usable sentence yields
    an empty ``positions`` list rather than an error.

    Args:
        request: The incoming request; its body is the raw log text.
    """
    lines = _decode_lines(await request.body())
    positions = parse_log(lines, registry=_REGISTRY)
    _logger.info("Parsed %d positions from %d lines.", len(positions), len(lines))
    return Response(
        content=format_positions_message(positions),
        media_type=_JSON_MEDIA_TYPE,
    )


@app.get("/formats")
async def formats_endpoint() -> Response:
    """Report the sentence formats accepted by the parser."""
    return Response(
        content=format_formats_message(_REGISTRY),
        media_type=_JSON_MEDIA_TYPE,
    )


async def _send_positions_until_disconnect(websocket: WebSocket) -> None:
    try:
        while True:
            text = await websocket.receive_text()
            for line in _split_lines(text):
                position = parse_sentence(line, registry=_REGISTRY)
                if position is not None:
                    await websocket.send_text(format_position_message(position))
    except WebSocketDisconnect:
        _logger.debug("WebSocket client disconnected.")


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream positions back to a client sending NMEA lines.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    _logger.debug("WebSocket client connected.")
    await _send_positions_until_disconnect(websocket)
