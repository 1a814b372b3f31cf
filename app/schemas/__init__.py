"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
    UserResponse,
)
from app.schemas.damages import (
    Coordinates,
    DamageCreate,
    DamageOut,
    DamageStatus,
    DashboardStats,
    SeverityLevel,
)
from app.schemas.health import HealthResponse

__all__ = [
    "Coordinates",
    "DamageCreate",
    "DamageOut",
    "DamageStatus",
    "DashboardStats",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "SeverityLevel",
    "TokenClaims",
    "UserPublic",
    "UserResponse",
]
