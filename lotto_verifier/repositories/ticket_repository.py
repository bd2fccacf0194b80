"""Repository layer for ticket persistence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from lotto_verifier.models.ticket import Ticket
from lotto_verifier.services.number_set import NumberSet


@dataclass(frozen=True)
class TicketRecord:
    id: int
    user_id: int
    numbers: NumberSet
    group_name: str | None = None
    created_at: datetime | None = None


def _to_record(row: Ticket) -> TicketRecord:
    return TicketRecord(
        id=int(row.id),
        user_id=int(row.user_id),
        numbers=NumberSet.from_row(row),
        group_name=row.group_name,
        created_at=row.created_at,
    )


class TicketRepository:
    """Read/write operations for user tickets."""

    def list_for_user(
        self,
        session: Session,
        user_id: int,
        group_name: str | None = None,
    ) -> list[TicketRecord]:
        """Tickets owned by ``user_id``, oldest first.

        ``group_name`` is a case-insensitive substring filter; blank means no filter.
        Matching runs in Python: SQLite's lower() only folds ASCII, and a user
        owns at most a few hundred rows.
        """

        stmt = (
            select(Ticket)
            .where(Ticket.user_id == user_id)
            .order_by(Ticket.created_at.asc(), Ticket.id.asc())
        )
        rows = session.scalars(stmt).all()

        needle = (group_name or "").strip().casefold()
        if needle:
            rows = [row for row in rows if needle in (row.group_name or "").casefold()]
        return [_to_record(row) for row in rows]

    def get(self, session: Session, ticket_id: int) -> TicketRecord | None:
        row = session.get(Ticket, ticket_id)
        return _to_record(row) if row is not None else None

    def count_for_user(self, session: Session, user_id: int) -> int:
        stmt = select(func.count()).select_from(Ticket).where(Ticket.user_id == user_id)
        return int(session.scalar(stmt) or 0)

    def exists_for_user(
        self,
        session: Session,
        user_id: int,
        numbers: NumberSet,
        exclude_id: int | None = None,
    ) -> bool:
        columns = numbers.as_columns()
        stmt = select(Ticket.id).where(
            Ticket.user_id == user_id,
            *(getattr(Ticket, name) == value for name, value in columns.items()),
        )
        if exclude_id is not None:
            stmt = stmt.where(Ticket.id != exclude_id)
        return session.scalar(stmt.limit(1)) is not None

    def add_many(
        self,
        session: Session,
        user_id: int,
        number_sets: list[NumberSet],
        group_name: str | None = None,
    ) -> list[TicketRecord]:
        created_at = datetime.now(timezone.utc)
        rows = [
            Ticket(user_id=user_id, group_name=group_name, created_at=created_at, **numbers.as_columns())
            for numbers in number_sets
        ]
        session.add_all(rows)
        session.flush()  # assign PKs
        return [_to_record(row) for row in rows]

    def update(
        self,
        session: Session,
        ticket_id: int,
        numbers: NumberSet,
        group_name: str | None = None,
    ) -> TicketRecord | None:
        row = session.get(Ticket, ticket_id)
        if row is None:
            return None
        for name, value in numbers.as_columns().items():
            setattr(row, name, value)
        row.group_name = group_name
        session.flush()
        return _to_record(row)

    def delete(self, session: Session, ticket_id: int) -> bool:
        row = session.get(Ticket, ticket_id)
        if row is None:
            return False
        session.delete(row)
        session.flush()
        return True

    def delete_all_for_user(self, session: Session, user_id: int) -> int:
        result = session.execute(delete(Ticket).where(Ticket.user_id == user_id))
        return int(result.rowcount or 0)
