"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.damage import Damage
from app.models.user import User

__all__ = ["Base", "Damage", "User"]
