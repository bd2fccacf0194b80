"""Service layer for official draw results."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from enum import Enum

from sqlalchemy.orm import Session

from lotto_verifier.errors import ConflictError, NotFoundError, ValidationError
from lotto_verifier.repositories.draw_repository import DrawRecord, DrawRepository, PrizeTier
from lotto_verifier.services.number_set import NumberSet


logger = logging.getLogger(__name__)


class LottoType(str, Enum):
    LOTTO = "LOTTO"
    LOTTO_PLUS = "LOTTO PLUS"


class DrawService:
    """Draw result use-cases."""

    def __init__(self, repository: DrawRepository | None = None) -> None:
        self._repo = repository or DrawRepository()

    @staticmethod
    def _parse_type(lotto_type: str) -> LottoType:
        try:
            return LottoType(lotto_type)
        except ValueError as exc:
            raise ValidationError(
                message="Invalid lotto_type",
                details={"lotto_type": ["Must be one of LOTTO|LOTTO PLUS"]},
            ) from exc

    def _ensure_unique(
        self,
        session: Session,
        draw_date: date,
        kind: LottoType,
        draw_id: int | None = None,
    ) -> None:
        existing = self._repo.get_by_date_and_type(session, draw_date, kind.value)
        if existing is not None and existing.id != draw_id:
            raise ConflictError(
                message=f"A {kind.value} draw for {draw_date.isoformat()} already exists",
                details={"draw_date": [draw_date.isoformat()], "lotto_type": [kind.value]},
            )

    def list_draws(
        self,
        session: Session,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[DrawRecord]:
        if date_from is not None and date_to is not None and date_to < date_from:
            raise ValidationError(
                message="Invalid date range",
                details={"date_to": ["date_to must be greater than or equal to date_from"]},
            )
        return self._repo.list_between(session, date_from, date_to)

    def get_draw(self, session: Session, draw_id: int) -> DrawRecord:
        record = self._repo.get(session, draw_id)
        if record is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        return record

    def create_draw(
        self,
        session: Session,
        draw_date: date,
        lotto_type: str,
        numbers: NumberSet,
        draw_system_id: int | None = None,
        ticket_price: Decimal | None = None,
        prize_tiers: list[PrizeTier] | None = None,
    ) -> DrawRecord:
        kind = self._parse_type(lotto_type)
        self._ensure_unique(session, draw_date, kind)

        record = self._repo.add(
            session,
            draw_date=draw_date,
            lotto_type=kind.value,
            numbers=numbers,
            draw_system_id=draw_system_id,
            ticket_price=ticket_price,
            prize_tiers=prize_tiers,
        )
        logger.info("Registered %s draw %s on %s: %s", kind.value, record.id, draw_date, numbers.to_list())
        return record

    def update_draw(
        self,
        session: Session,
        draw_id: int,
        draw_date: date,
        lotto_type: str,
        numbers: NumberSet,
        draw_system_id: int | None = None,
        ticket_price: Decimal | None = None,
        prize_tiers: list[PrizeTier] | None = None,
    ) -> DrawRecord:
        kind = self._parse_type(lotto_type)
        self.get_draw(session, draw_id)
        self._ensure_unique(session, draw_date, kind, draw_id=draw_id)

        record = self._repo.update(
            session,
            draw_id,
            draw_date=draw_date,
            lotto_type=kind.value,
            numbers=numbers,
            draw_system_id=draw_system_id,
            ticket_price=ticket_price,
            prize_tiers=prize_tiers,
        )
        if record is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        logger.info("Updated %s draw %s on %s: %s", kind.value, draw_id, draw_date, numbers.to_list())
        return record

    def delete_draw(self, session: Session, draw_id: int) -> None:
        if not self._repo.delete(session, draw_id):
            raise NotFoundError(message=f"Draw {draw_id} not found")
        logger.info("Deleted draw %s", draw_id)
