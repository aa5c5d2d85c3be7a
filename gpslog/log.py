"""Log stream processing: NMEA lines in, positions out.

Each line of a log passes through the parsing stages in order:

    line -> is_well_formed -> split_sentence -> has_correct_checksum
                                             -> registry.is_supported
                                             -> interpret -> position_factory

A line failing any stage is dropped and processing continues with the next
one. Skipping is best-effort by error kind: the stages report data-quality
problems as ``ValueError`` (``SentenceError`` and its subclasses, or the
position factory's own ``ValueError``) and only those are discarded.
Contract violations and unrelated exceptions propagate to the caller.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

from gpslog.nmea.checksum import has_correct_checksum
from gpslog.nmea.formats import DEFAULT_REGISTRY, FormatRegistry
from gpslog.nmea.interpreter import interpret
from gpslog.nmea.sentence import split_sentence
from gpslog.nmea.types import PositionRequest
from gpslog.nmea.validation import is_well_formed
from gpslog.position.coordinates import make_position
from gpslog.position.types import Position

__all__ = ["parse_log", "parse_sentence"]

_T = TypeVar("_T")

_LINE_TERMINATORS = "\r\n"


@overload
def parse_sentence(
    line: str,
    registry: FormatRegistry = ...,
) -> Position | None: ...


@overload
def parse_sentence(
    line: str,
    registry: FormatRegistry = ...,
    *,
    position_factory: Callable[[PositionRequest], _T],
) -> _T | None: ...


def parse_sentence(
    line: str,
    registry: FormatRegistry = DEFAULT_REGISTRY,
    position_factory: Callable[[PositionRequest], Any] = make_position,
) -> Any:
    """Convert one log line into a position.

    Args:
        line: Raw NMEA sentence. A trailing line terminator is ignored.
        registry: Supported formats (default: ``DEFAULT_REGISTRY``).
        position_factory: Builds a position from a ``PositionRequest``,
            raising ``ValueError`` on invalid data (default:
            ``make_position``).

    Returns:
        The constructed position, or None if the line is not well-formed,
        has a wrong checksum, uses an unsupported format, or fails
        interpretation or construction.

    Example:
        >>> parse_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*31\\n")
        Position(latitude_degrees=49.274166..., ...)
        >>> parse_sentence("$GPGLL,4916.45,N,12311.12,W,225444,A*32") is None
        True
    """
    sentence = line.rstrip(_LINE_TERMINATORS)

    if not is_well_formed(sentence):
        return None

    data = split_sentence(sentence)

    if not has_correct_checksum(sentence) or not registry.is_supported(data.format_code):
        return None

    try:
        return position_factory(interpret(data, registry))
    except ValueError:
        return None


@overload
def parse_log(
    lines: Iterable[str],
    registry: FormatRegistry = ...,
) -> list[Position]: ...


@overload
def parse_log(
    lines: Iterable[str],
    registry: FormatRegistry = ...,
    *,
    position_factory: Callable[[PositionRequest], _T],
) -> list[_T]: ...


def parse_log(
    lines: Iterable[str],
    registry: FormatRegistry = DEFAULT_REGISTRY,
    position_factory: Callable[[PositionRequest], Any] = make_position,
) -> list[Any]:
    """Parse every line of an NMEA log into an ordered list of positions.

    The input is consumed to exhaustion before the result is returned. An
    open text file works directly since it iterates over its lines::

        with open("track.nmea", encoding="utf-8", errors="surrogateescape") as log:
            positions = parse_log(log)

    Invalid lines never abort parsing and are not reported; their only
    effect is their absence from the result.

    Args:
        lines: Raw NMEA sentences, one per item.
        registry: Supported formats (default: ``DEFAULT_REGISTRY``).
        position_factory: Builds a position from a ``PositionRequest``
            (default: ``make_position``).

    Returns:
        One position per successfully interpreted line, in input order.
    """
    positions: list[Any] = []
    for line in lines:
        position = parse_sentence(line, registry, position_factory=position_factory)
        if position is not None:
            positions.append(position)
    return positions
