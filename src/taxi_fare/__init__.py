"""Taxi fare calculation from timestamped odometer logs."""

from .drive_record import DriveRecord, parse_drive_record, scan_drive_records
from .exceptions import FareError, FormatError
from .fare_engine import FareBreakdown, FareCalculator, calc_taxi_fare

__all__ = [
    "DriveRecord",
    "FareBreakdown",
    "FareCalculator",
    "FareError",
    "FormatError",
    "calc_taxi_fare",
    "parse_drive_record",
    "scan_drive_records",
]
