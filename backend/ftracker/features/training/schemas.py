"""
Training Schemas

Pydantic models for training summary requests and responses.
"""

from typing import Dict, List

from pydantic import BaseModel, Field, model_validator

from ftracker.shared.constants import TrainingType, UnknownTrainingTypeError


class TrainingRequest(BaseModel):
    """Request for a training summary."""
    action: int = Field(description="Steps (running/walking) or strokes (swimming)")
    training_type: str = Field(description="Training type label, e.g. 'Running'")
    duration: float = Field(description="Duration in hours")
    weight: float = Field(description="Body weight in kg")

    # Walking only
    height: float = Field(default=0.0, description="Body height in cm")

    # Swimming only
    length_pool: int = Field(default=0, description="Pool length in meters")
    count_pool: int = Field(default=0, description="Number of laps")

    @model_validator(mode='after')
    def require_height_for_walking(self):
        """Walking calories divide by height, so it must be positive."""
        try:
            training_type = TrainingType.from_label(self.training_type)
        except UnknownTrainingTypeError:
            # Reported by the route as 400
            return self
        if training_type is TrainingType.WALKING and self.height <= 0:
            raise ValueError("height must be positive for walking")
        return self


class TrainingSummaryResponse(BaseModel):
    """Computed training metrics, rounded to 2 decimals."""
    training_type: str
    label: str
    duration_hours: float
    distance_km: float
    speed_kmh: float
    calories: float
    text: str  # Fixed-layout summary


class TrainingTypesResponse(BaseModel):
    """Accepted labels per training type."""
    types: Dict[str, List[str]]
