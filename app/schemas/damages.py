"""Pydantic schemas for road damage reports and dashboard statistics."""

from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from app.models.damage import Damage

SeverityLevel = Literal["Low", "Medium", "High", "Critical"]
DamageStatus = Literal["Pending", "In Progress", "Completed"]

# Ordered from least to most severe; index is the rank.
SEVERITY_ORDER: tuple[str, ...] = ("Low", "Medium", "High", "Critical")
STATUS_VALUES: tuple[str, ...] = ("Pending", "In Progress", "Completed")

_SEVERITY_BY_KEY = {s.lower(): s for s in SEVERITY_ORDER}
_STATUS_BY_KEY = {s.lower(): s for s in STATUS_VALUES}


def normalize_severity(value: str) -> str:
    """Map a severity (any case) to its canonical spelling. Raises ValueError if unknown."""
    if not value or not value.strip():
        raise ValueError("severity must be non-empty")
    canonical = _SEVERITY_BY_KEY.get(value.strip().lower())
    if canonical is None:
        raise ValueError(f"severity must be one of {list(SEVERITY_ORDER)}, got {value!r}")
    return canonical


def normalize_status(value: str) -> str:
    """Map a status (any case; '_' or '-' for the space) to its canonical spelling."""
    if not value or not value.strip():
        raise ValueError("status must be non-empty")
    key = " ".join(value.strip().lower().replace("_", " ").replace("-", " ").split())
    canonical = _STATUS_BY_KEY.get(key)
    if canonical is None:
        raise ValueError(f"status must be one of {list(STATUS_VALUES)}, got {value!r}")
    return canonical


def severity_rank(value: str) -> int:
    """0 for Low up to 3 for Critical."""
    return SEVERITY_ORDER.index(normalize_severity(value))


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinates(_CamelModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class DamageCreate(_CamelModel):
    """Damage report as accepted from the ingestion path (dashboard JSON shape)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: int = Field(..., ge=1)
    type: str = Field(..., min_length=1, max_length=255)
    severity: SeverityLevel
    location: str = ""
    coords: Coordinates
    description: str = ""
    reported_date: datetime | None = None
    status: DamageStatus = "Pending"

    @field_validator("severity", mode="before")
    @classmethod
    def _severity(cls, v: object) -> object:
        return normalize_severity(v) if isinstance(v, str) else v

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, v: object) -> object:
        return normalize_status(v) if isinstance(v, str) else v


class DamageOut(_CamelModel):
    """Damage report as served to the dashboard."""

    id: int
    type: str
    severity: SeverityLevel
    location: str
    coords: Coordinates
    description: str
    reported_date: datetime | None
    status: DamageStatus

    @classmethod
    def from_model(cls, damage: "Damage") -> "DamageOut":
        return cls(
            id=damage.id,
            type=damage.type,
            severity=damage.severity,
            location=damage.location,
            coords=Coordinates(lat=damage.latitude, lng=damage.longitude),
            description=damage.description,
            reported_date=damage.reported_date,
            status=damage.status,
        )


class DashboardStats(_CamelModel):
    """Aggregates shown on the dashboard header cards."""

    total_damages: int
    critical_damages: int
    recent_reports: int
    resolved_issues: int
    total_users: int
    system_health: str = "Operational"
    last_updated: datetime
