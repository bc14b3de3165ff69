"""
Training metrics module.

Usage:
    from ftracker.features.training import TrainingService, render_summary
    from ftracker.features.training.calculators import running_calories

Components:
- TrainingService: Typed summary with explicit unknown-type error
- render_summary: Text summary with sentinel for unknown types
- Running/Walking/SwimmingCalculator: Per-type formulas
"""

from .calculators import (
    TrainingInput,
    TrainingCalculator,
    RunningCalculator,
    WalkingCalculator,
    SwimmingCalculator,
    get_calculator,
    running_calories,
    walking_calories,
    swimming_calories,
)
from .schemas import TrainingRequest, TrainingSummaryResponse, TrainingTypesResponse
from .service import TrainingService, TrainingSummary, render_summary

__all__ = [
    # Calculators
    "TrainingInput",
    "TrainingCalculator",
    "RunningCalculator",
    "WalkingCalculator",
    "SwimmingCalculator",
    "get_calculator",
    "running_calories",
    "walking_calories",
    "swimming_calories",
    # Schemas
    "TrainingRequest",
    "TrainingSummaryResponse",
    "TrainingTypesResponse",
    # Service
    "TrainingService",
    "TrainingSummary",
    "render_summary",
]
