"""API routes."""

from fastapi import APIRouter

from app.api import auth, goals, health, users, workouts

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
router.include_router(goals.router, prefix="/goals", tags=["goals"])
