"""Driver database model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from marketplace.database import Base

if TYPE_CHECKING:
    from marketplace.models.ride import Ride


class Driver(Base):
    """Driver model."""

    __tablename__ = "drivers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Free-form; only changed through an explicit status update
    status: Mapped[str] = mapped_column(String(50), default="available", server_default="available")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    # Relationships
    rides: Mapped[list["Ride"]] = relationship("Ride", back_populates="driver")
