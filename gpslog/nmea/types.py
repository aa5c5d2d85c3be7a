"""Data types passed between the NMEA parsing stages.

Design Decisions:
    1. Strings all the way down: the core never converts coordinates or
       elevations to numbers. ``PositionRequest`` carries the raw field text
       so the position model owns every numeric and range check.

    2. Tuples for data fields: ``SentenceData.data_fields`` is a tuple so a
       parsed sentence cannot be altered by the stages that read it. Order
       and empty fields are preserved exactly as they appear on the wire.
"""

from dataclasses import dataclass


@dataclass
class SentenceData:
    """A well-formed sentence split into its format code and data fields.

    Attributes:
        format_code: Three-letter sentence type following the ``$GP`` talker
            prefix (e.g. ``"GGA"``).

        data_fields: Comma-separated fields between the first comma and the
            ``*`` checksum delimiter, in order of appearance. Empty fields
            (consecutive commas) are kept as ``""``.

    Example:
        >>> split_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31")
        SentenceData(format_code='GLL', data_fields=('4916.45', 'N', '12311.12', 'W', '225444', 'A'))
    """

    format_code: str
    data_fields: tuple[str, ...]


@dataclass
class DirectedValue:
    """A field value paired with the hemisphere marker that follows it.

    Attributes:
        value: The field immediately preceding the marker (e.g. ``"4916.45"``).
        direction: One of ``"N"``, ``"S"``, ``"E"`` or ``"W"``.
    """

    value: str
    direction: str


@dataclass
class PositionRequest:
    """The five strings handed to a position constructor.

    Attributes:
        latitude: Latitude in degrees-decimal-minutes (``DDMM.MMMM``).
        latitude_direction: ``"N"`` or ``"S"``.
        longitude: Longitude in degrees-decimal-minutes (``DDDMM.MMMM``).
        longitude_direction: ``"E"`` or ``"W"``.
        elevation: Elevation in metres, ``"0"`` for formats without one.

    Example:
        >>> interpret(split_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31"))
        PositionRequest(latitude='4916.45', latitude_direction='N', longitude='12311.12', longitude_direction='W', elevation='0')
    """

    latitude: str
    latitude_direction: str
    longitude: str
    longitude_direction: str
    elevation: str
