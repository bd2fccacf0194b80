"""Service layer for ticket generation and persistence."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from lotto_verifier.errors import ConflictError, ForbiddenError, NotFoundError
from lotto_verifier.repositories.ticket_repository import TicketRecord, TicketRepository
from lotto_verifier.services.generator_service import (
    SYSTEM_TICKET_COUNT,
    CoverageSetGenerator,
    RandomSetGenerator,
)
from lotto_verifier.services.number_set import NumberSet


logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKETS = 100


class TicketService:
    """Ticket use-cases."""

    def __init__(
        self,
        repository: TicketRepository | None = None,
        random_generator: RandomSetGenerator | None = None,
        system_generator: CoverageSetGenerator | None = None,
    ) -> None:
        self._repo = repository or TicketRepository()
        self._random = random_generator or RandomSetGenerator()
        self._system = system_generator or CoverageSetGenerator()

    def generate_random(self, user_id: int | None = None) -> NumberSet:
        numbers = self._random.generate()
        logger.info("Generated random numbers for user %s: %s", user_id, numbers.to_list())
        return numbers

    def generate_system(self, user_id: int | None = None) -> list[NumberSet]:
        sets = self._system.generate()
        logger.info(
            "Generated %d system sets for user %s: %s",
            len(sets),
            user_id,
            [s.to_list() for s in sets],
        )
        return sets

    def list_tickets(self, session: Session, user_id: int, group_name: str | None = None) -> list[TicketRecord]:
        return self._repo.list_for_user(session, user_id, group_name=group_name)

    def get_ticket(self, session: Session, user_id: int, ticket_id: int) -> TicketRecord:
        """Ticket ``ticket_id`` if ``user_id`` owns it."""

        record = self._repo.get(session, ticket_id)
        if record is None:
            raise NotFoundError(message=f"Ticket {ticket_id} not found")
        if record.user_id != user_id:
            raise ForbiddenError(message="You do not own this ticket")
        return record

    def _ensure_capacity(self, session: Session, user_id: int, needed: int, max_tickets: int) -> None:
        current = self._repo.count_for_user(session, user_id)
        available = max(max_tickets - current, 0)
        if needed > available:
            raise ConflictError(
                message=f"Ticket limit reached ({current}/{max_tickets})",
                details={
                    "limit": max_tickets,
                    "current": current,
                    "requested": needed,
                    "to_delete": needed - available,
                },
            )

    def create_ticket(
        self,
        session: Session,
        user_id: int,
        numbers: NumberSet,
        group_name: str | None = None,
        max_tickets: int = DEFAULT_MAX_TICKETS,
    ) -> TicketRecord:
        self._ensure_capacity(session, user_id, 1, max_tickets)
        if self._repo.exists_for_user(session, user_id, numbers):
            raise ConflictError(
                message="Duplicate ticket",
                details={"numbers": [f"You already own a ticket with numbers {numbers.to_list()}"]},
            )

        label = (group_name or "").strip() or None
        (record,) = self._repo.add_many(session, user_id, [numbers], group_name=label)
        logger.info("Created ticket %s for user %s with numbers %s", record.id, user_id, numbers.to_list())
        return record

    def save_system_tickets(
        self,
        session: Session,
        user_id: int,
        max_tickets: int = DEFAULT_MAX_TICKETS,
    ) -> list[TicketRecord]:
        self._ensure_capacity(session, user_id, SYSTEM_TICKET_COUNT, max_tickets)

        sets = self.generate_system(user_id)
        label = f"System9: {datetime.now():%Y-%m-%d %H:%M:%S}"
        records = self._repo.add_many(session, user_id, sets, group_name=label)
        logger.info(
            "Saved %d system tickets for user %s: %s",
            len(records),
            user_id,
            [r.id for r in records],
        )
        return records

    def update_ticket(
        self,
        session: Session,
        user_id: int,
        ticket_id: int,
        numbers: NumberSet,
        group_name: str | None = None,
    ) -> TicketRecord:
        self.get_ticket(session, user_id, ticket_id)
        if self._repo.exists_for_user(session, user_id, numbers, exclude_id=ticket_id):
            raise ConflictError(
                message="Duplicate ticket",
                details={"numbers": [f"You already own a ticket with numbers {numbers.to_list()}"]},
            )

        label = (group_name or "").strip() or None
        record = self._repo.update(session, ticket_id, numbers, group_name=label)
        if record is None:
            raise NotFoundError(message=f"Ticket {ticket_id} not found")
        logger.info("Updated ticket %s for user %s to %s", ticket_id, user_id, numbers.to_list())
        return record

    def delete_ticket(self, session: Session, user_id: int, ticket_id: int) -> None:
        self.get_ticket(session, user_id, ticket_id)
        self._repo.delete(session, ticket_id)
        logger.info("Deleted ticket %s of user %s", ticket_id, user_id)

    def delete_all_tickets(self, session: Session, user_id: int) -> int:
        deleted = self._repo.delete_all_for_user(session, user_id)
        logger.info("Deleted %d tickets of user %s", deleted, user_id)
        return deleted
