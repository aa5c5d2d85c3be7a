"""JSON formatting utilities for parsed positions."""

import json
from collections.abc import Sequence

from gpslog import FormatRegistry, Position

__all__ = [
    "format_formats_message",
    "format_position_message",
    "format_positions_message",
]


def _position_fields(position: Position) -> dict[str, float]:
    return {
        "lat": position.latitude_degrees,
        "lon": position.longitude_degrees,
        "ele": position.elevation_meters,
    }


def format_position_message(position: Position) -> str:
    """Serialize a single position into a JSON string for WebSocket transmission."""
    return json.dumps({"type": "position", **_position_fields(position)})


def format_positions_message(positions: Sequence[Position]) -> str:
    """Serialize the positions of a whole log into a JSON string."""
    return json.dumps({
        "type": "positions",
        "count": len(positions),
        "positions": [_position_fields(position) for position in positions],
    })


def format_formats_message(registry: FormatRegistry) -> str:
    """Serialize the supported sentence formats into a JSON string."""
    return json.dumps({
        "formats": list(registry.formats),
        "elevation_format": registry.elevation_format,
    })
