"""Sentence splitting into format code and data fields.

    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
       |   |                                                    |
       |   +------------------ data fields ---------------------+
       +-- format code (characters 3-5)

Data fields run from one character after the first comma up to the '*'
checksum delimiter. Every well-formed sentence ends in "*HH", so no comma
can fall inside the checksum region.
"""

from gpslog.nmea.types import SentenceData
from gpslog.nmea.validation import require_well_formed

__all__ = ["split_sentence"]

_FORMAT_SLICE = slice(3, 6)
_DELIMITER_OFFSET = 3


def split_sentence(sentence: str) -> SentenceData:
    """Split a well-formed sentence into its format code and data fields.

    Empty fields are preserved, so ``"A,,B"`` yields ``("A", "", "B")``.
    A sentence without any comma (e.g. ``"$GPGLLA*11"``) has no data
    fields; a sentence whose only comma directly precedes the '*'
    (``"$GPGLL,*7C"``) has a single empty field.

    Args:
        sentence: A sentence that already passed ``is_well_formed``.

    Returns:
        SentenceData with the format code and the ordered data fields.

    Raises:
        AssertionError: If *sentence* is not well-formed.

    Example:
        >>> split_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31").data_fields
        ('4916.45', 'N', '12311.12', 'W', '225444', 'A')
    """
    require_well_formed(sentence)

    format_code = sentence[_FORMAT_SLICE]

    first_comma = sentence.find(",")
    if first_comma == -1:
        return SentenceData(format_code=format_code, data_fields=())

    content = sentence[first_comma + 1 : -_DELIMITER_OFFSET]
    return SentenceData(format_code=format_code, data_fields=tuple(content.split(",")))
