"""NMEA checksum verification.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all bytes between '$' and '*' (exclusive),
then represented as a two-digit hexadecimal number after the '*'.

Example sentence structure:
    $GPGLL,4916.45,N,12311.12,W,225444,A*31
     ^        checksum content          ^ ^^
     start                        delimiter checksum (0x31 = 49)
"""

from gpslog.nmea.validation import require_well_formed

__all__ = ["calculate_checksum", "has_correct_checksum"]

_CHECKSUM_DIGITS = 2
_DELIMITER_OFFSET = 3


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum XORs the byte values of the content. The content is
    encoded as UTF-8 first so that the result is computed over raw bytes,
    as a receiver would, rather than over Unicode code points. Lone
    surrogates left by decoding with ``errors="surrogateescape"`` map back
    to the undecodable bytes they stand for.

    Args:
        content: The text between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum("GPGLL,4916.45,N,12311.12,W,225444,A")
        49
    """
    result = 0
    for byte in content.encode("utf-8", "surrogateescape"):
        result ^= byte
    return result


def has_correct_checksum(sentence: str) -> bool:
    """Verify the trailing checksum of a well-formed sentence.

    Performs the comparison by:
    1. Reading the last two characters as a base-16 integer
    2. XOR-ing every byte strictly between the leading '$' and the '*'
    3. Comparing the two values for equality

    Args:
        sentence: A sentence that already passed ``is_well_formed``.

    Returns:
        True if the provided checksum matches the computed one. False also
        when the content holds a surrogate that stands for no byte.

    Raises:
        AssertionError: If *sentence* is not well-formed.

    Example:
        >>> has_correct_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A*31")
        True
        >>> has_correct_checksum("$GPGLL,4916.45,N,12311.12,W,225444,A*32")
        False
    """
    require_well_formed(sentence)

    provided = int(sentence[-_CHECKSUM_DIGITS:], 16)

    try:
        calculated = calculate_checksum(sentence[1:-_DELIMITER_OFFSET])
    except UnicodeEncodeError:
        return False

    return calculated == provided
