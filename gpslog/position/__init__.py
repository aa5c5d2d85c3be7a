"""Position model built from interpreted NMEA sentences."""

from gpslog.position.coordinates import convert_to_decimal_degrees, make_position
from gpslog.position.types import Position

__all__ = ["Position", "convert_to_decimal_degrees", "make_position"]
