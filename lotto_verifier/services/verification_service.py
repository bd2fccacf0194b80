"""Business logic for checking user tickets against official draws."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from lotto_verifier.errors import ValidationError
from lotto_verifier.repositories.draw_repository import DrawRecord, DrawRepository, PrizeTier
from lotto_verifier.repositories.ticket_repository import TicketRecord, TicketRepository


logger = logging.getLogger(__name__)

# Lowest prize tier: 3 matching numbers.
WINNING_THRESHOLD = 3
DEFAULT_MAX_DAYS = 31


@dataclass(frozen=True)
class MatchResult:
    ticket_id: int
    matched_numbers: list[int]


@dataclass(frozen=True)
class TicketSummary:
    ticket_id: int
    group_name: str
    numbers: list[int]


@dataclass(frozen=True)
class DrawVerification:
    draw_id: int
    draw_date: date
    lotto_type: str
    numbers: list[int]
    draw_system_id: int | None
    ticket_price: Decimal | None
    prize_tiers: tuple[PrizeTier, ...]
    winners: list[MatchResult]


@dataclass(frozen=True)
class VerificationOutcome:
    tickets: list[TicketSummary]
    draws: list[DrawVerification]
    execution_time_ms: int


class VerificationMatcher:
    """Cross every ticket with every draw and keep the pairs with >= 3 hits.

    Pure function over its inputs: no filtering besides the winning threshold,
    draws without winners stay in the result, and every ticket is echoed once.
    """

    def __init__(self, threshold: int = WINNING_THRESHOLD) -> None:
        self._threshold = threshold

    def winners_for(self, draw: DrawRecord, tickets: Sequence[TicketRecord]) -> list[MatchResult]:
        winners: list[MatchResult] = []
        for ticket in tickets:
            matched = ticket.numbers.intersection(draw.numbers)
            if len(matched) >= self._threshold:
                winners.append(MatchResult(ticket_id=ticket.id, matched_numbers=list(matched)))
        return winners

    def check(self, tickets: Sequence[TicketRecord], draws: Sequence[DrawRecord]) -> VerificationOutcome:
        started = time.perf_counter()

        ticket_summaries = [
            TicketSummary(
                ticket_id=t.id,
                group_name=t.group_name or "",
                numbers=t.numbers.to_list(),
            )
            for t in tickets
        ]

        draw_results = [
            DrawVerification(
                draw_id=d.id,
                draw_date=d.draw_date,
                lotto_type=d.lotto_type,
                numbers=d.numbers.to_list(),
                draw_system_id=d.draw_system_id,
                ticket_price=d.ticket_price,
                prize_tiers=tuple(d.prize_tiers),
                winners=self.winners_for(d, tickets),
            )
            for d in draws
        ]

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        return VerificationOutcome(
            tickets=ticket_summaries,
            draws=draw_results,
            execution_time_ms=elapsed_ms,
        )


class VerificationService:
    """Load a user's tickets and the draws of a date window, then match them."""

    def __init__(
        self,
        ticket_repository: TicketRepository | None = None,
        draw_repository: DrawRepository | None = None,
        matcher: VerificationMatcher | None = None,
    ) -> None:
        self._tickets = ticket_repository or TicketRepository()
        self._draws = draw_repository or DrawRepository()
        self._matcher = matcher or VerificationMatcher()

    @staticmethod
    def validate_window(date_from: date, date_to: date, max_days: int = DEFAULT_MAX_DAYS) -> None:
        if date_to < date_from:
            raise ValidationError(
                message="Invalid date range",
                details={"date_to": ["date_to must be greater than or equal to date_from"]},
            )
        if (date_to - date_from).days > max_days:
            raise ValidationError(
                message="Invalid date range",
                details={"date_range": [f"Date range must not exceed {max_days} days"]},
            )

    def verify(
        self,
        session: Session,
        user_id: int,
        date_from: date,
        date_to: date,
        group_name: str | None = None,
        max_days: int = DEFAULT_MAX_DAYS,
    ) -> VerificationOutcome:
        started = time.perf_counter()
        self.validate_window(date_from, date_to, max_days)

        tickets = self._tickets.list_for_user(session, user_id, group_name=group_name)
        draws = self._draws.list_between(session, date_from, date_to)
        logger.debug(
            "Verification: loaded %d tickets and %d draws for user %s",
            len(tickets),
            len(draws),
            user_id,
        )

        outcome = self._matcher.check(tickets, draws)

        # Report the whole call, loading included.
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.debug("Verification finished in %dms", elapsed_ms)
        return VerificationOutcome(
            tickets=outcome.tickets,
            draws=outcome.draws,
            execution_time_ms=elapsed_ms,
        )
