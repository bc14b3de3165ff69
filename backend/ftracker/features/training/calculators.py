"""
Calorie calculators.

One calculator per training type. Each one knows which distance,
speed and calorie formulas apply to its type:

- Running: step distance, mean speed, running calories
- Walking: step distance, mean speed, walking calories
- Swimming: step distance, pool speed, swimming calories
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math

from ftracker.shared.constants import (
    TrainingType,
    STEP_LENGTH_M,
    M_IN_KM,
    MIN_IN_H,
    SEC_IN_H,
    RUNNING_SPEED_MULTIPLIER,
    RUNNING_SPEED_SHIFT,
    WALKING_WEIGHT_MULTIPLIER,
    WALKING_SPEED_HEIGHT_MULTIPLIER,
    SWIMMING_SPEED_SHIFT,
    SWIMMING_WEIGHT_MULTIPLIER,
)
from ftracker.shared.formulas import distance, mean_speed, swimming_mean_speed


# =============================================================================
# Calorie formulas
# =============================================================================

def running_calories(action: int, weight: float, duration: float) -> float:
    """
    Calories spent while running.

    Formula: (18 * mean_speed + 1.79) * weight * duration * 60

    Args:
        action: Number of steps
        weight: Body weight in kg
        duration: Training duration in hours

    Returns:
        kcal, 0 for non-positive duration
    """
    if duration <= 0:
        return 0.0

    speed = mean_speed(action, duration)
    return (
        (RUNNING_SPEED_MULTIPLIER * speed + RUNNING_SPEED_SHIFT)
        * weight * duration * MIN_IN_H
    )


def walking_calories(action: int, duration: float, weight: float, height: float) -> float:
    """
    Calories spent while walking.

    Formula: (0.035 * weight + (speed_ms^2 / height) * 0.029 * weight) * duration * 60

    Speed here is in m/s and derived straight from the step count,
    not from mean_speed(). Height is taken in cm as is.

    Args:
        action: Number of steps
        duration: Training duration in hours
        weight: Body weight in kg
        height: Body height in cm

    Returns:
        kcal, 0 for non-positive duration. Zero height gives inf
        (nan when there are no steps either) instead of raising.
    """
    if duration <= 0:
        return 0.0

    speed_ms = action * STEP_LENGTH_M / (duration * SEC_IN_H)
    if height == 0:
        speed_term = math.nan if speed_ms == 0 else math.inf
    else:
        speed_term = speed_ms ** 2 / height
    return (
        WALKING_WEIGHT_MULTIPLIER * weight
        + speed_term * WALKING_SPEED_HEIGHT_MULTIPLIER * weight
    ) * duration * MIN_IN_H


def swimming_calories(length_pool: int, count_pool: int, duration: float, weight: float) -> float:
    """
    Calories spent while swimming.

    Formula: (pool_speed + 1.1) * 2 * weight * duration

    Args:
        length_pool: Pool length in meters
        count_pool: Number of laps
        duration: Training duration in hours
        weight: Body weight in kg

    Returns:
        kcal, 0 for non-positive duration
    """
    if duration <= 0:
        return 0.0

    total_distance_km = length_pool * count_pool / M_IN_KM
    avg_speed = total_distance_km / duration
    return (avg_speed + SWIMMING_SPEED_SHIFT) * SWIMMING_WEIGHT_MULTIPLIER * weight * duration


# =============================================================================
# Calculators
# =============================================================================

@dataclass
class TrainingInput:
    """Raw counters of one training."""
    action: int
    duration: float
    weight: float
    height: float = 0.0
    length_pool: int = 0
    count_pool: int = 0


class TrainingCalculator(ABC):
    """
    Abstract base class for training calculators.

    Distance is step-based for every type; speed and
    calories depend on the type.
    """

    training_type: TrainingType

    def distance_km(self, data: TrainingInput) -> float:
        return distance(data.action)

    @abstractmethod
    def speed_kmh(self, data: TrainingInput) -> float:
        """Mean speed in km/h."""
        pass

    @abstractmethod
    def calories(self, data: TrainingInput) -> float:
        """Spent calories in kcal."""
        pass


class RunningCalculator(TrainingCalculator):
    training_type = TrainingType.RUNNING

    def speed_kmh(self, data: TrainingInput) -> float:
        return mean_speed(data.action, data.duration)

    def calories(self, data: TrainingInput) -> float:
        return running_calories(data.action, data.weight, data.duration)


class WalkingCalculator(TrainingCalculator):
    training_type = TrainingType.WALKING

    def speed_kmh(self, data: TrainingInput) -> float:
        return mean_speed(data.action, data.duration)

    def calories(self, data: TrainingInput) -> float:
        return walking_calories(data.action, data.duration, data.weight, data.height)


class SwimmingCalculator(TrainingCalculator):
    """Speed and calories come from pool length and laps, not strokes."""

    training_type = TrainingType.SWIMMING

    def speed_kmh(self, data: TrainingInput) -> float:
        return swimming_mean_speed(data.length_pool, data.count_pool, data.duration)

    def calories(self, data: TrainingInput) -> float:
        return swimming_calories(data.length_pool, data.count_pool, data.duration, data.weight)


CALCULATORS: dict[TrainingType, TrainingCalculator] = {
    TrainingType.RUNNING: RunningCalculator(),
    TrainingType.WALKING: WalkingCalculator(),
    TrainingType.SWIMMING: SwimmingCalculator(),
}


def get_calculator(training_type: TrainingType) -> TrainingCalculator:
    """Get the calculator for a training type."""
    return CALCULATORS[training_type]
