"""Damage report listing for the dashboard map, charts and tables."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.api.auth import get_current_claims, security
from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.auth import TokenClaims
from app.schemas.damages import DamageOut
from app.services.damages import get_damage, list_damages

router = APIRouter()


def require_damage_access(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims | None:
    """Apply the auth gate unless DAMAGES_REQUIRE_AUTH is switched off."""
    if not get_settings().DAMAGES_REQUIRE_AUTH:
        return None
    return get_current_claims(request, credentials)


@router.get("", response_model=list[DamageOut])
@router.get("/fetch-damages", response_model=list[DamageOut], include_in_schema=False)
def get_damages(
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims | None, Depends(require_damage_access)],
    severity: Annotated[str | None, Query(description="Exact severity, or 'All'")] = None,
    status: Annotated[str | None, Query(description="Exact status, or 'All'")] = None,
    min_severity: Annotated[
        str | None, Query(description="Lowest severity to include (Low < Medium < High < Critical)")
    ] = None,
) -> list[DamageOut]:
    damages = list_damages(db, severity=severity, status=status, min_severity=min_severity)
    return [DamageOut.from_model(d) for d in damages]


@router.get("/{damage_id}", response_model=DamageOut)
def get_damage_by_id(
    damage_id: int,
    db: Annotated[Session, Depends(get_db)],
    _claims: Annotated[TokenClaims | None, Depends(require_damage_access)],
) -> DamageOut:
    return DamageOut.from_model(get_damage(db, damage_id))
