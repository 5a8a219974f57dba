from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import JSON, DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from .session import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ------------------- DOCTORS -------------------
class Doctor(Base):
    """Doctor model backing the /api/doctors resource"""

    __tablename__ = "doctors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Uniqueness lives in the database; the repository maps violations to 409s
    registration: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True
    )
    expertise: Mapped[str] = mapped_column(String(255), nullable=False)
    appointment_type: Mapped[List[str]] = mapped_column(JSON, nullable=False)
    appointment_price: Mapped[float] = mapped_column(Float, nullable=False)

    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<Doctor id={self.id} registration={self.registration}>"
