"""Fare engine: one forward pass over a ride's drive records."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from .drive_record import DriveRecord
from .fare_schedule import (
    LOW_SPEED_THRESHOLD_KMH,
    calc_taxi_distance_fare,
    calc_taxi_low_speed_drive_fare,
    night_multiplier,
)

logger = logging.getLogger(__name__)


class FareBreakdown(BaseModel):
    """Accumulated ride totals and the fare derived from them."""

    model_config = ConfigDict(frozen=True)

    record_count: int
    surcharged_distance: float
    surcharged_low_speed_seconds: float
    distance_fare: int
    low_speed_fare: int

    @property
    def total_fare(self) -> int:
        return self.distance_fare + self.low_speed_fare


def average_speed_kmh(distance_m: float, elapsed_seconds: float) -> float | None:
    """Average speed over a step in km/h, or None for a zero-length interval."""
    if elapsed_seconds == 0:
        return None
    return (distance_m / 1000.0) / (elapsed_seconds / 3600.0)


def is_low_speed_step(distance_m: float, elapsed_seconds: float) -> bool:
    """Whether a step counts toward low-speed driving time.

    Steps without positive duration never count, whatever their distance.
    """
    if elapsed_seconds <= 0:
        return False
    speed = average_speed_kmh(distance_m, elapsed_seconds)
    return speed is not None and speed <= LOW_SPEED_THRESHOLD_KMH


class FareCalculator:
    """Computes the fare of a single ride from its drive records.

    Each record carries the distance covered since the previous record.
    A step between two consecutive records is surcharged according to the
    hour of its later record. The first record opens the ride and adds
    nothing on its own.
    """

    def calculate(self, records: Iterable[DriveRecord]) -> FareBreakdown:
        surcharged_distance = 0.0
        surcharged_low_speed_seconds = 0.0
        previous: DriveRecord | None = None
        count = 0

        for record in records:
            count += 1
            if previous is not None:
                multiplier = night_multiplier(record.hour)
                step_seconds = (record.elapsed_time - previous.elapsed_time).total_seconds()

                if step_seconds < 0:
                    logger.warning(
                        "Drive record %d is earlier than its predecessor (%.3fs), "
                        "skipping low-speed check",
                        count,
                        step_seconds,
                    )

                surcharged_distance += record.distance * multiplier
                if is_low_speed_step(record.distance, step_seconds):
                    surcharged_low_speed_seconds += step_seconds * multiplier
            previous = record

        breakdown = FareBreakdown(
            record_count=count,
            surcharged_distance=surcharged_distance,
            surcharged_low_speed_seconds=surcharged_low_speed_seconds,
            distance_fare=calc_taxi_distance_fare(surcharged_distance),
            low_speed_fare=calc_taxi_low_speed_drive_fare(surcharged_low_speed_seconds),
        )
        logger.debug(
            "Fare for %d records: distance=%.3fm low_speed=%.3fs -> %d + %d",
            breakdown.record_count,
            breakdown.surcharged_distance,
            breakdown.surcharged_low_speed_seconds,
            breakdown.distance_fare,
            breakdown.low_speed_fare,
        )
        return breakdown


def calc_taxi_fare(records: Iterable[DriveRecord]) -> int:
    """Total fare for a ride, in the smallest currency unit."""
    return FareCalculator().calculate(records).total_fare
