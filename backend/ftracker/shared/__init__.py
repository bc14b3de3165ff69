"""
Shared utilities (NOT business logic).

Usage:
    from ftracker.shared import distance, mean_speed, TrainingType
    from ftracker.shared.formatters import format_training_info
"""
from .constants import (
    TrainingType,
    TRAINING_TYPE_ALIASES,
    UNKNOWN_TRAINING_TYPE,
    UnknownTrainingTypeError,
    STEP_LENGTH_M,
    M_IN_KM,
    MIN_IN_H,
    SEC_IN_H,
)
from .formulas import (
    distance,
    mean_speed,
    swimming_mean_speed,
)
from .formatters import format_training_info

__all__ = [
    # constants
    "TrainingType",
    "TRAINING_TYPE_ALIASES",
    "UNKNOWN_TRAINING_TYPE",
    "UnknownTrainingTypeError",
    "STEP_LENGTH_M",
    "M_IN_KM",
    "MIN_IN_H",
    "SEC_IN_H",
    # formulas
    "distance",
    "mean_speed",
    "swimming_mean_speed",
    # formatters
    "format_training_info",
]
