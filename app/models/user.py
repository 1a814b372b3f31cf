"""ORM model for portal user accounts (credential store)."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class User(Base):
    """
    Portal account for JWT authentication.

    role: free-form (e.g. 'admin', 'officer'); username is the unique lookup key.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False, default="")
    role = Column(String(32), nullable=False, default="officer")
    department = Column(String(255), nullable=False, default="")
