"""Structural well-formedness check for raw NMEA sentences.

A well-formed sentence has the skeleton checked below before any other
stage looks at it:

    $GPGLL,4916.45,N,12311.12,W,225444,A*31
    ^^^^^^                              ^^^
    |  |                                |+-- two hex checksum digits
    |  +-- three-letter format code     +-- '*' three characters from the end
    +-- "$GP" talker prefix

Only the structure is checked here. Whether the checksum matches and
whether the format is supported are decided by later stages.
"""

import string

__all__ = ["is_well_formed", "require_well_formed"]

_MINIMUM_SENTENCE_LENGTH = 10
_PREFIX = "$GP"
_FORMAT_SLICE = slice(3, 6)

# ASCII-only classes: str.isalpha() and friends accept non-ASCII letters.
_ALPHABETIC = frozenset(string.ascii_letters)
_HEXADECIMAL = frozenset(string.hexdigits)


def _has_bounded_delimiters(sentence: str) -> bool:
    """Check there is at most one '*' and at most one '$'.

    Absence of either delimiter passes this rule; the prefix and
    checksum-position rules catch those sentences instead.
    """
    return sentence.count("*") <= 1 and sentence.count("$") <= 1


def is_well_formed(sentence: str) -> bool:
    """Check the structural shape of a candidate NMEA sentence.

    A sentence is well-formed when all of the following hold:
    1. It is at least 10 characters long
    2. It contains at most one '*' and at most one '$'
    3. It starts with the "$GP" prefix
    4. Characters 3-5 (the format code) are ASCII letters
    5. The character three from the end is '*'
    6. The last two characters are hexadecimal digits (either case)

    This check never raises; anything that is not a well-formed sentence,
    including empty strings and non-string values, yields False.

    Args:
        sentence: Candidate sentence without its line terminator.

    Returns:
        True if the sentence passes every structural rule.

    Example:
        >>> is_well_formed("$GPGLL,4916.45,N,12311.12,W,225444,A*31")
        True
        >>> is_well_formed("$GPGLL,4916.45,N*3")  # truncated checksum
        False
    """
    if not isinstance(sentence, str):
        return False

    if len(sentence) < _MINIMUM_SENTENCE_LENGTH:
        return False

    if not _has_bounded_delimiters(sentence):
        return False

    if not sentence.startswith(_PREFIX):
        return False

    if not all(character in _ALPHABETIC for character in sentence[_FORMAT_SLICE]):
        return False

    if sentence[-3] != "*":
        return False

    return all(character in _HEXADECIMAL for character in sentence[-2:])


def require_well_formed(sentence: str) -> None:
    """Assert the well-formedness precondition of the parsing stages.

    The checksum verifier and the sentence splitter may only be called on
    sentences that already passed ``is_well_formed``. Breaking that
    contract is a programming error, so it is reported as an
    ``AssertionError`` rather than one of the recoverable ``SentenceError``
    kinds.

    Raises:
        AssertionError: If *sentence* is not well-formed.
    """
    if not is_well_formed(sentence):
        raise AssertionError(f"Sentence is not well-formed: {sentence!r}")
