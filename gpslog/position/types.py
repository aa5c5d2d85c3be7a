"""Position data type produced from interpreted NMEA sentences."""

from dataclasses import dataclass


@dataclass
class Position:
    """A geographic position in decimal degrees.

    Attributes:
        latitude_degrees: Latitude in decimal degrees, positive=North.
            Range: -90.0 to +90.0.
            Converted from NMEA's DDMM.MMMM format.

        longitude_degrees: Longitude in decimal degrees, positive=East.
            Range: -180.0 to +180.0.
            Converted from NMEA's DDDMM.MMMM format.

        elevation_meters: Elevation in metres. 0.0 for sentence formats
            that carry no altitude (GLL, RMC).

    Example:
        >>> parse_log(["$GPGLL,4916.45,N,12311.12,W,225444,A*31"])[0]
        Position(latitude_degrees=49.274166..., longitude_degrees=-123.185333..., elevation_meters=0.0)
    """

    latitude_degrees: float
    longitude_degrees: float
    elevation_meters: float
