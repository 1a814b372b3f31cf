"""API routes."""

from fastapi import APIRouter

from app.api import auth, dashboard, damages, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
router.include_router(damages.router, prefix="/damages", tags=["damages"])
