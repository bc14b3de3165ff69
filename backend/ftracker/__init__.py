"""
ftracker: distance, speed and calories for running, walking and swimming.

Usage:
    from ftracker import render_summary, TrainingService, TrainingType
"""

__version__ = "0.1.0"

from .shared.constants import (
    TrainingType,
    UNKNOWN_TRAINING_TYPE,
    UnknownTrainingTypeError,
)
from .shared.formulas import distance, mean_speed, swimming_mean_speed
from .features.training.calculators import (
    running_calories,
    walking_calories,
    swimming_calories,
)
from .features.training.service import TrainingService, TrainingSummary, render_summary

__all__ = [
    "__version__",
    "TrainingType",
    "UNKNOWN_TRAINING_TYPE",
    "UnknownTrainingTypeError",
    "distance",
    "mean_speed",
    "swimming_mean_speed",
    "running_calories",
    "walking_calories",
    "swimming_calories",
    "TrainingService",
    "TrainingSummary",
    "render_summary",
]
