"""ORM model for reported road damage."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from app.models.base import Base


class Damage(Base):
    """
    One road damage report. The id comes from the ingestion source, not the database.

    severity: Low, Medium, High or Critical. status: Pending, In Progress or Completed.
    """

    __tablename__ = "damages"

    id = Column(Integer, primary_key=True, autoincrement=False)
    type = Column(String(255), nullable=False)
    severity = Column(String(16), nullable=False, index=True)
    location = Column(String(1024), nullable=False, default="")
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(Text, nullable=False, default="")
    reported_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(32), nullable=False, default="Pending", index=True)
