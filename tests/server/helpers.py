"""Helper factories for server tests."""

from gpslog import Position

GLL_VALID = "$GPGLL,4916.45,N,12311.12,W,225444,A*31"
GGA_VALID = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
XXX_VALID = "$GPXXX,4916.45,N,12311.12,W*6E"
GLL_FORM_FEED = "$GPGLL,4916.45,N,12311.12,W,2254\x0c44,A*3D"


def make_log(*lines: str) -> bytes:
    return "\r\n".join(lines).encode("utf-8") + b"\r\n"


def make_position() -> Position:
    return Position(
        latitude_degrees=45.0,
        longitude_degrees=9.0,
        elevation_meters=100.0,
    )
