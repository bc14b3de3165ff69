"""
Unified constants for training types and calculations.

This module provides a single source of truth for training type naming
and the fixed coefficients used by the calorie formulas.
"""

from enum import Enum


# === Units ===
STEP_LENGTH_M = 0.65  # Average step length
M_IN_KM = 1000
MIN_IN_H = 60
SEC_IN_H = 3600

# === Running calories ===
RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79

# === Walking calories ===
WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

# === Swimming calories ===
SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2


# Returned by render_summary for labels it cannot dispatch.
# Consumers compare against this text, keep it exact.
UNKNOWN_TRAINING_TYPE = "unknown activity type"


class UnknownTrainingTypeError(ValueError):
    """Raised when a label does not name any known training type."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Unknown training type: {label!r}")


class TrainingType(str, Enum):
    """
    Supported training types.

    Values are the canonical labels. The localized labels used by
    older clients are accepted as aliases (see TRAINING_TYPE_ALIASES).
    """
    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"

    @classmethod
    def from_label(cls, label: str) -> "TrainingType":
        """
        Resolve a label to a training type.

        Matching is exact: no case folding, no trimming.

        Raises:
            UnknownTrainingTypeError: label is not a known label or alias
        """
        try:
            return cls(label)
        except ValueError:
            pass
        try:
            return TRAINING_TYPE_ALIASES[label]
        except (KeyError, TypeError):
            raise UnknownTrainingTypeError(label) from None

    @property
    def labels(self) -> list[str]:
        """All labels accepted for this type, canonical first."""
        aliases = [
            alias for alias, member in TRAINING_TYPE_ALIASES.items()
            if member is self
        ]
        return [self.value] + aliases


# Localized label -> TrainingType
TRAINING_TYPE_ALIASES: dict[str, TrainingType] = {
    "Бег": TrainingType.RUNNING,
    "Ходьба": TrainingType.WALKING,
    "Плавание": TrainingType.SWIMMING,
}
