"""Hotel inventory database model."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from marketplace.database import Base


class Hotel(Base):
    """Hotel with a pool of bookable rooms."""

    __tablename__ = "hotels"
    __table_args__ = (
        CheckConstraint("available_rooms >= 0", name="ck_hotels_available_rooms_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    price_per_night: Mapped[float] = mapped_column(Float, nullable=False)
    rating: Mapped[float] = mapped_column(Float, default=4.0, server_default="4.0")
    amenities: Mapped[str | None] = mapped_column(Text, default="")
    description: Mapped[str | None] = mapped_column(Text, default="")
    # Never negative; decremented only through a conditional update
    available_rooms: Mapped[int] = mapped_column(Integer, default=10, server_default="10")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
