"""HTTP routes."""

from fastapi import APIRouter

from app.api import auth, health, users

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
