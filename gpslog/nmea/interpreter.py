"""Sentence interpretation into position-construction requests.

GLL, GGA and RMC all carry a latitude/hemisphere pair followed by a
longitude/hemisphere pair, but at different field indices:

    GLL: 4916.45,N,12311.12,W,225444,A
    GGA: 123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,
    RMC: 123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W

Values are found through their markers (see ``gpslog.nmea.fields``), so the
same interpretation applies to every supported format. Only the elevation
format (GGA by default) carries an altitude, located before its "M" unit
marker; other formats report an elevation of "0".
"""

from gpslog.nmea.errors import InsufficientFieldsError, UnsupportedFormatError
from gpslog.nmea.fields import resolve_direction, value_before
from gpslog.nmea.formats import DEFAULT_REGISTRY, FormatRegistry
from gpslog.nmea.types import PositionRequest, SentenceData

__all__ = ["interpret"]

# Latitude value, latitude hemisphere, longitude value, longitude hemisphere
_MINIMUM_FIELD_COUNT = 4

_ELEVATION_MARKER = "M"
_DEFAULT_ELEVATION = "0"


def _extract_elevation(data: SentenceData, registry: FormatRegistry) -> str:
    if data.format_code != registry.elevation_format:
        return _DEFAULT_ELEVATION
    return value_before(data, _ELEVATION_MARKER)


def interpret(
    data: SentenceData,
    registry: FormatRegistry = DEFAULT_REGISTRY,
) -> PositionRequest:
    """Assemble the position fields of a split sentence.

    The checks run in this order:
    1. Format must be registered
    2. At least 4 data fields must be present
    3. Elevation is looked up (elevation format only)
    4. Latitude resolves via "N" (preferred) or "S"
    5. Longitude resolves via "E" (preferred) or "W"

    Args:
        data: Split sentence data
        registry: Supported formats (default: ``DEFAULT_REGISTRY``)

    Returns:
        PositionRequest with the five position strings forwarded verbatim

    Raises:
        UnsupportedFormatError: If the format is not registered.
        InsufficientFieldsError: If fewer than 4 data fields are present.
        MarkerNotFoundError: If a hemisphere or elevation marker is missing.
        NoPrecedingValueError: If a marker is the first data field.

    Example:
        >>> request = interpret(split_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31"))
        >>> (request.latitude, request.longitude_direction, request.elevation)
        ('4916.45', 'W', '0')
    """
    if not registry.is_supported(data.format_code):
        raise UnsupportedFormatError(data.format_code)

    if len(data.data_fields) < _MINIMUM_FIELD_COUNT:
        raise InsufficientFieldsError(len(data.data_fields), _MINIMUM_FIELD_COUNT)

    elevation = _extract_elevation(data, registry)
    latitude = resolve_direction(data, "N", "S", "N", "S")
    longitude = resolve_direction(data, "E", "W", "E", "W")

    return PositionRequest(
        latitude=latitude.value,
        latitude_direction=latitude.direction,
        longitude=longitude.value,
        longitude_direction=longitude.direction,
        elevation=elevation,
    )
