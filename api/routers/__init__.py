"""
Router package for the fitness dashboard API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- dashboard: Home screen stat cards, weekly chart, recent workouts
- progress: Progress screen totals and weekly chart
- workouts: Per-workout derived statistics
- exercises: Exercise library lookup
"""

from api.routers.health import router as health_router
from api.routers.dashboard import router as dashboard_router
from api.routers.progress import router as progress_router
from api.routers.workouts import router as workouts_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "dashboard_router",
    "progress_router",
    "workouts_router",
    "exercises_router",
]
