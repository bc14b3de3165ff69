"""
Training Routes

Endpoints for training summaries.
"""

from fastapi import APIRouter, HTTPException

from ftracker.shared.constants import TrainingType, UnknownTrainingTypeError
from ftracker.features.training import (
    TrainingService,
    TrainingRequest,
    TrainingSummaryResponse,
    TrainingTypesResponse,
)

router = APIRouter()


@router.post("/summary", response_model=TrainingSummaryResponse)
async def training_summary(request: TrainingRequest):
    """
    Compute distance, speed and calories for a training.

    Returns 400 if the training type is not recognized.
    """
    try:
        summary = TrainingService.summarize(
            action=request.action,
            training_type=request.training_type,
            duration=request.duration,
            weight=request.weight,
            height=request.height,
            length_pool=request.length_pool,
            count_pool=request.count_pool,
        )
    except UnknownTrainingTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TrainingSummaryResponse(**summary.to_dict(), text=summary.to_text())


@router.get("/types", response_model=TrainingTypesResponse)
async def training_types():
    """List accepted labels for each training type."""
    return TrainingTypesResponse(
        types={t.value: t.labels for t in TrainingType}
    )
