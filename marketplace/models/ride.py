"""Ride database model."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from marketplace.database import Base
from marketplace.models.driver import Driver


class RideStatus(str, Enum):
    """Ride lifecycle states."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"


class Ride(Base):
    """Ride request model."""

    __tablename__ = "rides"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pickup: Mapped[str] = mapped_column(Text, nullable=False)
    destination: Mapped[str] = mapped_column(Text, nullable=False)
    driver_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("drivers.id"), nullable=True, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), default=RideStatus.PENDING.value, server_default=RideStatus.PENDING.value, index=True
    )  # pending, accepted, completed
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    driver: Mapped["Driver | None"] = relationship(
        "Driver", back_populates="rides", lazy="joined"
    )

    @property
    def driver_name(self) -> str | None:
        """Display name of the assigned driver."""
        return self.driver.name if self.driver else None
