"""Repository layer for official draw results."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from lotto_verifier.models.draw import Draw
from lotto_verifier.services.number_set import NumberSet


PRIZE_TIER_COUNT = 4


@dataclass(frozen=True)
class PrizeTier:
    """Published winners count and amount for one tier (both optional)."""

    count: int | None = None
    amount: Decimal | None = None


@dataclass(frozen=True)
class DrawRecord:
    id: int
    draw_date: date
    lotto_type: str
    numbers: NumberSet
    draw_system_id: int | None = None
    ticket_price: Decimal | None = None
    prize_tiers: tuple[PrizeTier, PrizeTier, PrizeTier, PrizeTier] = (
        PrizeTier(),
        PrizeTier(),
        PrizeTier(),
        PrizeTier(),
    )
    created_at: datetime | None = None


def _to_record(row: Draw) -> DrawRecord:
    tiers = tuple(
        PrizeTier(
            count=getattr(row, f"win_pool_count{i}"),
            amount=getattr(row, f"win_pool_amount{i}"),
        )
        for i in range(1, PRIZE_TIER_COUNT + 1)
    )
    return DrawRecord(
        id=int(row.id),
        draw_date=row.draw_date,
        lotto_type=str(row.lotto_type),
        numbers=NumberSet.from_row(row),
        draw_system_id=row.draw_system_id,
        ticket_price=row.ticket_price,
        prize_tiers=(tiers[0], tiers[1], tiers[2], tiers[3]),
        created_at=row.created_at,
    )


def _draw_columns(
    draw_date: date,
    lotto_type: str,
    numbers: NumberSet,
    draw_system_id: int | None,
    ticket_price: Decimal | None,
    prize_tiers: list[PrizeTier] | None,
) -> dict[str, object]:
    columns: dict[str, object] = {
        "draw_date": draw_date,
        "lotto_type": lotto_type,
        "draw_system_id": draw_system_id,
        "ticket_price": ticket_price,
        **numbers.as_columns(),
    }
    tiers = list(prize_tiers or [])[:PRIZE_TIER_COUNT]
    tiers += [PrizeTier()] * (PRIZE_TIER_COUNT - len(tiers))
    for i, tier in enumerate(tiers, start=1):
        columns[f"win_pool_count{i}"] = tier.count
        columns[f"win_pool_amount{i}"] = tier.amount
    return columns


class DrawRepository:
    """Read/write operations for draw results."""

    def list_between(
        self,
        session: Session,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[DrawRecord]:
        """Draws with ``date_from <= draw_date <= date_to`` (open ends allowed), oldest first."""

        stmt = select(Draw)
        if date_from is not None:
            stmt = stmt.where(Draw.draw_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(Draw.draw_date <= date_to)
        stmt = stmt.order_by(Draw.draw_date.asc(), Draw.lotto_type.asc(), Draw.id.asc())
        return [_to_record(row) for row in session.scalars(stmt).all()]

    def get(self, session: Session, draw_id: int) -> DrawRecord | None:
        row = session.get(Draw, draw_id)
        return _to_record(row) if row is not None else None

    def get_by_date_and_type(self, session: Session, draw_date: date, lotto_type: str) -> DrawRecord | None:
        stmt = select(Draw).where(Draw.draw_date == draw_date, Draw.lotto_type == lotto_type)
        row = session.scalars(stmt).first()
        return _to_record(row) if row is not None else None

    def add(
        self,
        session: Session,
        draw_date: date,
        lotto_type: str,
        numbers: NumberSet,
        draw_system_id: int | None = None,
        ticket_price: Decimal | None = None,
        prize_tiers: list[PrizeTier] | None = None,
    ) -> DrawRecord:
        row = Draw(**_draw_columns(draw_date, lotto_type, numbers, draw_system_id, ticket_price, prize_tiers))
        session.add(row)
        session.flush()  # assign PK
        return _to_record(row)

    def update(
        self,
        session: Session,
        draw_id: int,
        draw_date: date,
        lotto_type: str,
        numbers: NumberSet,
        draw_system_id: int | None = None,
        ticket_price: Decimal | None = None,
        prize_tiers: list[PrizeTier] | None = None,
    ) -> DrawRecord | None:
        """Replace every column of an existing draw; tiers left out are cleared."""

        row = session.get(Draw, draw_id)
        if row is None:
            return None
        columns = _draw_columns(draw_date, lotto_type, numbers, draw_system_id, ticket_price, prize_tiers)
        for name, value in columns.items():
            setattr(row, name, value)
        session.flush()
        return _to_record(row)

    def delete(self, session: Session, draw_id: int) -> bool:
        row = session.get(Draw, draw_id)
        if row is None:
            return False
        session.delete(row)
        session.flush()
        return True
