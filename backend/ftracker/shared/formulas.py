"""
Shared formulas for training metrics.

Distance and speed helpers reused by several training calculators.
"""

from ftracker.shared.constants import STEP_LENGTH_M, M_IN_KM


def distance(action: int) -> float:
    """
    Distance covered during a training.

    Args:
        action: Number of actions (steps for running/walking,
                strokes for swimming)

    Returns:
        Distance in km
    """
    return action * STEP_LENGTH_M / M_IN_KM


def mean_speed(action: int, duration: float) -> float:
    """
    Mean speed over the whole training.

    Args:
        action: Number of actions
        duration: Training duration in hours

    Returns:
        Speed in km/h, 0 when duration is 0
    """
    if duration == 0:
        return 0.0
    return distance(action) / duration


def swimming_mean_speed(length_pool: int, count_pool: int, duration: float) -> float:
    """
    Mean swimming speed from pool length and number of laps.

    Args:
        length_pool: Pool length in meters
        count_pool: How many times the pool was crossed
        duration: Training duration in hours

    Returns:
        Speed in km/h, 0 when duration is 0
    """
    if duration == 0:
        return 0.0
    return length_pool * count_pool / M_IN_KM / duration
