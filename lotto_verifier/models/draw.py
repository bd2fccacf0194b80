"""Official draw results stored in one wide table.

Besides the six numbers, a row may carry the four prize tiers published for
the draw (tier 1 = 6 hits ... tier 4 = 3 hits): winner count and amount.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, Integer, Numeric, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lotto_verifier.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Draw(Base):
    """One row per (draw_date, lotto_type)."""

    __tablename__ = "draws"
    __table_args__ = (UniqueConstraint("draw_date", "lotto_type", name="uq_draws_date_type"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    draw_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    lotto_type: Mapped[str] = mapped_column(String(20), nullable=False)  # LOTTO | LOTTO PLUS
    draw_system_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    ticket_price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    number1: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number2: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number3: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number4: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number5: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    number6: Mapped[int] = mapped_column(SmallInteger, nullable=False)

    win_pool_count1: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_pool_amount1: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    win_pool_count2: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_pool_amount2: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    win_pool_count3: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_pool_amount3: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)
    win_pool_count4: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_pool_amount4: Mapped[Decimal | None] = mapped_column(Numeric(14, 2), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
