"""Taxi fare CLI entry point.

Reads a drive log from stdin and prints the fare on stdout.
"""

import logging
import sys
from typing import TextIO

from .drive_record import MAX_EXPECTED_RECORDS, scan_drive_records
from .exceptions import FareError
from .fare_engine import calc_taxi_fare
from .logging_setup import setup_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read every record, then compute and write the fare.

    Raises:
        FareError: If any line of the log is malformed
    """
    records = list(scan_drive_records(stdin))
    if len(records) > MAX_EXPECTED_RECORDS:
        logger.warning(
            "Drive log holds %d records, more than the expected %d",
            len(records),
            MAX_EXPECTED_RECORDS,
        )

    fare = calc_taxi_fare(records)
    print(fare, file=stdout)


def main() -> None:
    """Main entry point for the taxi fare CLI."""
    settings = get_settings()

    setup_logging(
        level=settings.logging.level,
        json_output=settings.logging.format == "json",
        environment=settings.logging.environment,
    )

    try:
        run(sys.stdin, sys.stdout)
    except FareError as e:
        logger.error("Failed to calculate taxi fare: %s", e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
