"""Damage report access: listing with filters, lookup, ingestion, dashboard aggregates."""

import logging
from datetime import UTC, datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError, DuplicateKeyError, NotFoundError
from app.models import Damage
from app.schemas.damages import (
    SEVERITY_ORDER,
    DamageCreate,
    DashboardStats,
    normalize_severity,
    normalize_status,
    severity_rank,
)
from app.services.users import UserStore

logger = logging.getLogger(__name__)


def _parse_filter(value: str | None, normalize, name: str) -> str | None:
    if value is None or not value.strip() or value.strip().lower() == "all":
        return None
    try:
        return normalize(value)
    except ValueError as e:
        raise BadRequestError(f"Invalid {name} filter: {value!r}") from e


def list_damages(
    db: Session,
    severity: str | None = None,
    status: str | None = None,
    min_severity: str | None = None,
) -> list[Damage]:
    """
    Return damage reports ordered by id.

    severity/status filter on exact value (case-insensitive, "All" means no filter);
    min_severity keeps reports at or above that level in Low < Medium < High < Critical.
    """
    severity = _parse_filter(severity, normalize_severity, "severity")
    status = _parse_filter(status, normalize_status, "status")
    min_severity = _parse_filter(min_severity, normalize_severity, "min_severity")

    query = db.query(Damage)
    if severity is not None:
        query = query.filter(Damage.severity == severity)
    if status is not None:
        query = query.filter(Damage.status == status)
    if min_severity is not None:
        allowed = SEVERITY_ORDER[severity_rank(min_severity):]
        query = query.filter(Damage.severity.in_(allowed))
    return query.order_by(Damage.id).all()


def get_damage(db: Session, damage_id: int) -> Damage:
    damage = db.query(Damage).filter(Damage.id == damage_id).first()
    if damage is None:
        raise NotFoundError(f"Damage report {damage_id} not found")
    return damage


def create_damage(db: Session, payload: DamageCreate) -> Damage:
    """Persist one report. Raises DuplicateKeyError if the id is already taken."""
    damage = Damage(
        id=payload.id,
        type=payload.type,
        severity=payload.severity,
        location=payload.location,
        latitude=payload.coords.lat,
        longitude=payload.coords.lng,
        description=payload.description,
        reported_date=payload.reported_date,
        status=payload.status,
    )
    db.add(damage)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateKeyError(f"Damage report {payload.id} already exists") from e
    db.refresh(damage)
    return damage


def damage_statistics(db: Session) -> DashboardStats:
    """Counts for the dashboard cards plus the number of registered users."""
    by_severity = dict(
        db.query(Damage.severity, func.count(Damage.id)).group_by(Damage.severity).all()
    )
    by_status = dict(
        db.query(Damage.status, func.count(Damage.id)).group_by(Damage.status).all()
    )
    return DashboardStats(
        total_damages=sum(by_severity.values()),
        critical_damages=by_severity.get("Critical", 0),
        recent_reports=by_status.get("Pending", 0),
        resolved_issues=by_status.get("Completed", 0),
        total_users=UserStore(db).count(),
        last_updated=datetime.now(UTC),
    )
