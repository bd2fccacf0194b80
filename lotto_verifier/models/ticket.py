"""User tickets stored in one wide table.

Columns:
- id (PK)
- user_id (owner, issued by the auth layer)
- group_name (optional free-text label)
- number1..number6 (ascending, unique per user)
- created_at
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lotto_verifier.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ticket(Base):
    """One row per ticket with its 6 numbers."""

    __tablename__ = "tickets"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "number1", "number2", "number3", "number4", "number5", "number6",
            name="uq_tickets_user_numbers",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    group_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    number1: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number2: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number3: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number4: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number5: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number6: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
