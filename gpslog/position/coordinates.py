"""Position construction from NMEA coordinate strings.

This module turns the five strings of a ``PositionRequest`` into a
``Position``. NMEA coordinates use degrees-decimal-minutes with a separate
hemisphere indicator; these are converted to signed decimal degrees with the
convention:
- North/East = positive
- South/West = negative

All numeric parsing and range checking of positions happens here. Every
failure raises ``ValueError`` so that log parsing can drop the sentence.
"""

import math

from gpslog.nmea.types import PositionRequest
from gpslog.position.types import Position

__all__ = ["convert_to_decimal_degrees", "make_position"]

_MINUTES_PER_DEGREE = 60.0
_COORDINATE_CHARACTERS = frozenset("0123456789.")
_NEGATIVE_DIRECTIONS = ("S", "W")

_LATITUDE_DIRECTIONS = ("N", "S")
_LONGITUDE_DIRECTIONS = ("E", "W")
_MAXIMUM_LATITUDE = 90.0
_MAXIMUM_LONGITUDE = 180.0


def _parse_coordinate_parts(value: str) -> tuple[int, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    NMEA coordinates use DDDMM.MMMM format where:
    - DDD (or DD for latitude) = degrees
    - MM.MMMM = decimal minutes

    The decimal point position determines the split between degrees and minutes:
    the 2 digits before the decimal point are always minutes. A value without
    a decimal point is treated as whole minutes.

    Args:
        value: Coordinate string in DDDMM.MMMM format

    Returns:
        Tuple of (degrees, minutes)

    Raises:
        ValueError: If the value is empty, contains anything other than
            digits and a decimal point, has no degrees component, or its
            minutes are not below 60.

    Example:
        >>> _parse_coordinate_parts("4807.038")  # 48° 07.038'
        (48, 7.038)
        >>> _parse_coordinate_parts("01131.000")  # 11° 31.000'
        (11, 31.0)
    """
    if not value or not set(value) <= _COORDINATE_CHARACTERS:
        raise ValueError(f"Invalid coordinate {value!r}.")

    dot_position = value.find(".")
    if dot_position == -1:
        dot_position = len(value)

    # Minutes are always 2 digits before the decimal point
    if dot_position < 3:
        raise ValueError(f"Coordinate {value!r} has no degrees component.")

    degrees = int(value[: dot_position - 2])
    minutes = float(value[dot_position - 2 :])

    if minutes >= _MINUTES_PER_DEGREE:
        raise ValueError(f"Coordinate {value!r} has minutes out of range.")

    return degrees, minutes


def convert_to_decimal_degrees(value: str, direction: str) -> float:
    """Convert NMEA coordinate (DDDMM.MMMM) to decimal degrees.

    The conversion formula is:
        decimal_degrees = degrees + (minutes / 60)

    Args:
        value: Coordinate in DDDMM.MMMM format (e.g., "4807.038")
        direction: Hemisphere indicator ("N", "S", "E", or "W")

    Returns:
        Decimal degrees (positive for N/E, negative for S/W)

    Raises:
        ValueError: If the coordinate cannot be parsed.

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.1173  # 48° + 7.038'/60
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.5166667  # negative for West
    """
    degrees, minutes = _parse_coordinate_parts(value)
    decimal_degrees = degrees + minutes / _MINUTES_PER_DEGREE

    if direction in _NEGATIVE_DIRECTIONS:
        return -decimal_degrees

    return decimal_degrees


def _convert_axis(
    value: str,
    direction: str,
    directions: tuple[str, str],
    maximum: float,
) -> float:
    if direction not in directions:
        raise ValueError(f"Direction {direction!r} is not one of {directions}.")

    degrees = convert_to_decimal_degrees(value, direction)
    if abs(degrees) > maximum:
        raise ValueError(f"Coordinate {value!r} exceeds {maximum} degrees.")

    return degrees


def _parse_elevation(value: str) -> float:
    elevation = float(value)
    if not math.isfinite(elevation):
        raise ValueError(f"Elevation {value!r} is not a finite number.")
    return elevation


def make_position(request: PositionRequest) -> Position:
    """Construct a ``Position`` from an interpreted sentence.

    This is the default position factory of ``parse_log``. It validates
    what the parsing core deliberately leaves unchecked: that the strings
    are numeric, that latitude uses N/S and longitude E/W, and that the
    coordinates fall within +/-90 and +/-180 degrees.

    Args:
        request: The five position strings of one sentence

    Returns:
        Position in signed decimal degrees and metres

    Raises:
        ValueError: If any component is malformed or out of range.

    Example:
        >>> request = PositionRequest("4916.45", "N", "12311.12", "W", "0")
        >>> make_position(request).longitude_degrees
        -123.185333...
    """
    return Position(
        latitude_degrees=_convert_axis(
            request.latitude,
            request.latitude_direction,
            _LATITUDE_DIRECTIONS,
            _MAXIMUM_LATITUDE,
        ),
        longitude_degrees=_convert_axis(
            request.longitude,
            request.longitude_direction,
            _LONGITUDE_DIRECTIONS,
            _MAXIMUM_LONGITUDE,
        ),
        elevation_meters=_parse_elevation(request.elevation),
    )
