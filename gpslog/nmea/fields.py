"""Marker-based field lookup within sentence data.

NMEA position sentences place a unit or hemisphere marker immediately after
the value it qualifies:

    4916.45,N,12311.12,W     545.4,M
    |       | |        |     |     |
    +-------+ +--------+     +-----+
    latitude  longitude      elevation (GGA)

Values are therefore located by finding the marker among the data fields
and taking the field just before it, rather than by fixed index. This lets
one lookup serve every supported format.
"""

from gpslog.nmea.errors import MarkerNotFoundError, NoPrecedingValueError
from gpslog.nmea.types import DirectedValue, SentenceData

__all__ = ["resolve_direction", "value_before"]


def value_before(data: SentenceData, marker: str) -> str:
    """Return the field immediately preceding the first occurrence of *marker*.

    The marker must match a whole field exactly; ``"N"`` does not match
    ``"NE"`` or ``"n"``.

    Args:
        data: Split sentence data
        marker: Field value to search for (e.g. ``"N"`` or ``"M"``)

    Returns:
        The field just before the marker

    Raises:
        MarkerNotFoundError: If no field equals *marker*.
        NoPrecedingValueError: If the marker is the first field.

    Example:
        >>> data = SentenceData("GLL", ("4916.45", "N", "12311.12", "W"))
        >>> value_before(data, "W")
        '12311.12'
    """
    try:
        index = data.data_fields.index(marker)
    except ValueError:
        raise MarkerNotFoundError(marker) from None

    if index == 0:
        raise NoPrecedingValueError(marker)

    return data.data_fields[index - 1]


def resolve_direction(
    data: SentenceData,
    positive_marker: str,
    negative_marker: str,
    positive_direction: str,
    negative_direction: str,
) -> DirectedValue:
    """Find a value by whichever of two opposing hemisphere markers is present.

    The positive marker is always tried first, so when both markers occur
    the positive one wins. If the positive marker is absent the negative
    one is looked up, and its lookup error propagates unchanged when it is
    missing too.

    Args:
        data: Split sentence data
        positive_marker: Marker for the positive hemisphere (``"N"`` or ``"E"``)
        negative_marker: Marker for the negative hemisphere (``"S"`` or ``"W"``)
        positive_direction: Direction reported with the positive marker
        negative_direction: Direction reported with the negative marker

    Returns:
        DirectedValue holding the preceding field and its direction

    Raises:
        MarkerNotFoundError: If neither marker is present.
        NoPrecedingValueError: If the chosen marker is the first field.

    Example:
        >>> data = SentenceData("GLL", ("4916.45", "N", "12311.12", "W"))
        >>> resolve_direction(data, "E", "W", "E", "W")
        DirectedValue(value='12311.12', direction='W')
    """
    if positive_marker in data.data_fields:
        return DirectedValue(
            value=value_before(data, positive_marker),
            direction=positive_direction,
        )

    return DirectedValue(
        value=value_before(data, negative_marker),
        direction=negative_direction,
    )
