"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from ftracker.api.v1.routes import trainings

api_router = APIRouter()

api_router.include_router(trainings.router, prefix="/trainings", tags=["Trainings"])
