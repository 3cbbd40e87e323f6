"""Preference ORM — key-value rows backing the PreferenceStore port.

Invariants:
    - key is the primary key: one value per key, overwritten on set
    - value is opaque text (encoded criteria or a view mode)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from pursuit.db.base import Base


class Preference(Base):
    """Persisted user preference."""
    __tablename__ = "preferences"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
