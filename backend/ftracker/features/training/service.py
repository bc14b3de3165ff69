"""
Training Service

Main entry point for training summaries:
- Resolves the training type label
- Picks the calculator for that type
- Builds a typed summary or the fixed-layout text
"""

import logging
from dataclasses import dataclass

from ftracker.shared.constants import (
    TrainingType,
    UNKNOWN_TRAINING_TYPE,
    UnknownTrainingTypeError,
)
from ftracker.shared.formatters import format_training_info
from ftracker.features.training.calculators import TrainingInput, get_calculator

logger = logging.getLogger(__name__)


@dataclass
class TrainingSummary:
    """Computed metrics of one training."""
    training_type: TrainingType
    label: str  # Label as given by the caller
    duration_hours: float
    distance_km: float
    speed_kmh: float
    calories: float

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "training_type": self.training_type.value,
            "label": self.label,
            "duration_hours": round(self.duration_hours, 2),
            "distance_km": round(self.distance_km, 2),
            "speed_kmh": round(self.speed_kmh, 2),
            "calories": round(self.calories, 2),
        }

    def to_text(self) -> str:
        return format_training_info(
            self.label,
            self.duration_hours,
            self.distance_km,
            self.speed_kmh,
            self.calories,
        )


class TrainingService:
    """Computes training summaries."""

    @staticmethod
    def summarize(
        action: int,
        training_type: str,
        duration: float,
        weight: float,
        height: float = 0.0,
        length_pool: int = 0,
        count_pool: int = 0,
    ) -> TrainingSummary:
        """
        Compute distance, speed and calories for a training.

        Args:
            action: Steps (running/walking) or strokes (swimming)
            training_type: Training type label or TrainingType
            duration: Duration in hours
            weight: Body weight in kg
            height: Body height in cm (walking only)
            length_pool: Pool length in meters (swimming only)
            count_pool: Number of laps (swimming only)

        Raises:
            UnknownTrainingTypeError: training_type is not a known label
        """
        resolved = TrainingType.from_label(training_type)
        calculator = get_calculator(resolved)

        data = TrainingInput(
            action=action,
            duration=duration,
            weight=weight,
            height=height,
            length_pool=length_pool,
            count_pool=count_pool,
        )

        summary = TrainingSummary(
            training_type=resolved,
            label=training_type.value if isinstance(training_type, TrainingType) else training_type,
            duration_hours=duration,
            distance_km=calculator.distance_km(data),
            speed_kmh=calculator.speed_kmh(data),
            calories=calculator.calories(data),
        )
        logger.debug(
            f"{resolved.value}: {summary.distance_km:.2f} km, "
            f"{summary.speed_kmh:.2f} km/h, {summary.calories:.2f} kcal"
        )
        return summary


def render_summary(
    action: int,
    training_type: str,
    duration: float,
    weight: float,
    height: float,
    length_pool: int,
    count_pool: int,
) -> str:
    """
    Training summary as text.

    Returns UNKNOWN_TRAINING_TYPE instead of raising when the
    training type is not recognized. Use TrainingService.summarize
    to get a typed result and error.
    """
    try:
        summary = TrainingService.summarize(
            action, training_type, duration, weight, height, length_pool, count_pool
        )
    except UnknownTrainingTypeError as e:
        logger.warning(str(e))
        return UNKNOWN_TRAINING_TYPE
    return summary.to_text()
