"""Fixed fare schedule and tiering functions.

The distance fare and the low-speed fare are both step functions of a single
accumulated value, so each is a pure function that can be checked against
tier boundaries on its own.
"""

BASE_FARE = 410  # Covers up to BASE_DISTANCE_LIMIT_M
ADDITIONAL_FARE = 80  # Added per tier step

BASE_DISTANCE_LIMIT_M = 1052
DISTANCE_TIER_START_M = BASE_DISTANCE_LIMIT_M + 1
DISTANCE_TIER_STEP_M = 237

LOW_SPEED_TIER_START_S = 90
LOW_SPEED_TIER_STEP_S = 90
LOW_SPEED_THRESHOLD_KMH = 10.0

NIGHT_SURCHARGE_MULTIPLIER = 1.25
# Half-open [start, end) hour ranges
NIGHT_WINDOWS: tuple[tuple[int, int], ...] = ((0, 5), (22, 24))


def is_night(hour: int) -> bool:
    """Return True when the hour-of-day falls in a night surcharge window.

    Args:
        hour: Residual hour-of-day in [0, 24) after day normalization

    Returns:
        True for hours in [0, 5) or [22, 24)
    """
    return any(start <= hour < end for start, end in NIGHT_WINDOWS)


def night_multiplier(hour: int) -> float:
    """Multiplier applied to distance and low-speed time arriving at `hour`."""
    return NIGHT_SURCHARGE_MULTIPLIER if is_night(hour) else 1.0


def _tier_count(value: float, start: float, step: float) -> int:
    # int() truncates toward zero; value >= start keeps the operand non-negative
    return int(value - start) // step + 1


def calc_taxi_distance_fare(distance: float) -> int:
    """Calculate the distance fare from the surcharged total distance.

    The base fare covers the first 1052m. From 1053m on, every started
    237m adds one additional fare step.

    Args:
        distance: Total surcharged distance in meters

    Returns:
        Distance fare in the smallest currency unit
    """
    fare = BASE_FARE
    if distance >= DISTANCE_TIER_START_M:
        fare += (
            _tier_count(distance, DISTANCE_TIER_START_M, DISTANCE_TIER_STEP_M)
            * ADDITIONAL_FARE
        )
    return fare


def calc_taxi_low_speed_drive_fare(low_speed_seconds: float) -> int:
    """Calculate the additional fare for total low-speed driving time.

    The first 89 seconds are free. From 90 seconds on, every started
    90 seconds adds one additional fare step.

    Args:
        low_speed_seconds: Total surcharged low-speed time in seconds

    Returns:
        Additional fare in the smallest currency unit
    """
    if low_speed_seconds < LOW_SPEED_TIER_START_S:
        return 0
    return (
        _tier_count(low_speed_seconds, LOW_SPEED_TIER_START_S, LOW_SPEED_TIER_STEP_S)
        * ADDITIONAL_FARE
    )
