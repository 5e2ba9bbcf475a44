"""
Router package for the Workout Tracker API.

This package contains all API routers organized by domain:
- health: Health check and testing endpoints
- users: Local user sync
- workout_programs: Workout program CRUD
- exercises: Exercises, set logging, reports and analytics
"""

from api.routers.health import router as health_router
from api.routers.users import router as users_router
from api.routers.workout_programs import router as workout_programs_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "users_router",
    "workout_programs_router",
    "exercises_router",
]
