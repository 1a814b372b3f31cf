"""Protected dashboard aggregates."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth import get_current_claims
from app.core.database import get_db
from app.schemas.auth import TokenClaims
from app.schemas.damages import DashboardStats
from app.services.damages import damage_statistics

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def get_stats(
    _claims: Annotated[TokenClaims, Depends(get_current_claims)],
    db: Annotated[Session, Depends(get_db)],
) -> DashboardStats:
    """Totals by severity and status, registered user count, and lastUpdated timestamp."""
    return damage_statistics(db)
