"""Drive log records and their parsing.

A drive log line looks like ``13:01:00.100 500.0``: an elapsed-time token
followed by the distance in meters covered since the previous sample. The
hour component may exceed 23 because it counts time since the start of the
log day rather than wall-clock time.
"""

import logging
import math
import re
from collections.abc import Iterable, Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import FormatError

logger = logging.getLogger(__name__)

MAX_ELAPSED_HOURS = 99
HOURS_PER_DAY = 24

# Upper bound on samples per ride the meter is sized for; not enforced.
MAX_EXPECTED_RECORDS = 500_000

# Elapsed times are placed on a synthetic calendar starting at day 1 so that
# two records can be subtracted. Year and month carry no meaning.
_SYNTHETIC_EPOCH = datetime(2006, 1, 1)

# Two hour digits, or three for hours of 100 and up so they reach the range check
_TIME_PATTERN = re.compile(r"(\d{2}|[1-9]\d{2}):(\d{2}):(\d{2})\.(\d{3})", re.ASCII)

# Plain decimal or exponent notation; no digit separators or non-ASCII digits
_DISTANCE_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


class DriveRecord(BaseModel):
    """One odometer sample of a ride."""

    model_config = ConfigDict(frozen=True)

    elapsed_time: datetime
    distance: float = Field(ge=0, allow_inf_nan=False)

    @property
    def hour(self) -> int:
        """Residual hour-of-day in [0, 24)."""
        return self.elapsed_time.hour

    @property
    def day(self) -> int:
        """Synthetic day the sample falls on, starting at 1."""
        return self.elapsed_time.day


def parse_elapsed_time(token: str) -> datetime:
    """Parse an ``HH:MM:SS.mmm`` elapsed-time token.

    Hours above 23 roll over into following synthetic days, so ``25:00:00.000``
    becomes day 2, 01:00.

    Args:
        token: Elapsed-time token, hours 00-99

    Returns:
        Point on the synthetic calendar

    Raises:
        FormatError: If the token does not match the grammar or a component
            is out of range
    """
    match = _TIME_PATTERN.fullmatch(token)
    if match is None:
        raise FormatError(
            f"Invalid time format: {token!r} (expected HH:MM:SS.mmm)",
            details={"token": token},
        )

    hours, minutes, seconds, millis = (int(group) for group in match.groups())

    if hours > MAX_ELAPSED_HOURS:
        raise FormatError(
            f"Unexpected running time: {hours} hours exceeds {MAX_ELAPSED_HOURS}",
            details={"token": token},
        )
    if minutes > 59 or seconds > 59:
        raise FormatError(
            f"Invalid time format: {token!r} (minutes and seconds must be 00-59)",
            details={"token": token},
        )

    extra_days, hour = divmod(hours, HOURS_PER_DAY)
    return _SYNTHETIC_EPOCH.replace(
        day=_SYNTHETIC_EPOCH.day + extra_days,
        hour=hour,
        minute=minutes,
        second=seconds,
        microsecond=millis * 1000,
    )


def parse_distance(token: str) -> float:
    """Parse a distance token in meters.

    Raises:
        FormatError: If the token is not a finite, non-negative real number
    """
    if _DISTANCE_PATTERN.fullmatch(token) is None:
        raise FormatError(
            f"Invalid distance: {token!r} is not a number",
            details={"token": token},
        )

    distance = float(token)
    if not math.isfinite(distance) or distance < 0:
        raise FormatError(
            f"Invalid distance: {token!r} must be a finite non-negative number",
            details={"token": token},
        )
    return distance


def parse_drive_record(line: str, line_number: int | None = None) -> DriveRecord:
    """Parse one drive log line into a DriveRecord.

    Args:
        line: ``"<time-token> <distance-token>"``
        line_number: 1-based position in the log, reported on failure

    Raises:
        FormatError: If the line does not hold exactly two valid tokens
    """
    details: dict[str, object] = {"line": line}
    if line_number is not None:
        details["line_number"] = line_number
    prefix = f"line {line_number}: " if line_number is not None else ""

    tokens = line.split()
    if len(tokens) != 2:
        raise FormatError(
            f"{prefix}expected '<time> <distance>', got {len(tokens)} field(s)",
            details=details,
        )

    time_token, distance_token = tokens
    try:
        elapsed_time = parse_elapsed_time(time_token)
        distance = parse_distance(distance_token)
    except FormatError as e:
        raise FormatError(f"{prefix}{e.message}", details={**e.details, **details}) from e

    return DriveRecord(elapsed_time=elapsed_time, distance=distance)


def scan_drive_records(lines: Iterable[str]) -> Iterator[DriveRecord]:
    """Yield a DriveRecord for every non-blank line of a drive log.

    Parsing stops at the first malformed line.

    Raises:
        FormatError: On a malformed line, or when the underlying text stream
            cannot decode its input
    """
    count = 0
    try:
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            yield parse_drive_record(line, line_number=line_number)
            count += 1
    except UnicodeDecodeError as e:
        raise FormatError(
            f"Drive log is not valid {e.encoding} text: {e.reason}",
            details={"encoding": e.encoding, "records_read": count},
        ) from e
    logger.debug("Scanned %d drive records", count)
