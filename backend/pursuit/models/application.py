"""Application ORM — persists the procurement opportunities shown in results.

Invariants:
    - id is the opportunity's external reference (e.g. "RFP-001"), not generated
    - tags and keywords are JSON string lists
    - status holds an ApplicationStatus value
    - Conversion to/from the core Application record happens only in the repository

Design Decisions:
    - JSON columns for tags/keywords: read whole, filtered in the pure core, never queried in SQL
"""

from datetime import date

from sqlalchemy import String, Text, Integer, Float, Date, JSON
from sqlalchemy.orm import Mapped, mapped_column

from pursuit.db.base import Base


class ApplicationRow(Base):
    """One procurement opportunity."""
    __tablename__ = "applications"

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    organization: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    vehicle: Mapped[str] = mapped_column(String(100), nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Draft",
    )
    percent_complete: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    fit_score: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    ceiling: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    keywords: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
