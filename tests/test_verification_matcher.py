from datetime import date
from decimal import Decimal

import pytest

from lotto_verifier.errors import ValidationError
from lotto_verifier.repositories.draw_repository import DrawRecord, PrizeTier
from lotto_verifier.repositories.ticket_repository import TicketRecord
from lotto_verifier.services.number_set import NumberSet
from lotto_verifier.services.verification_service import (
    WINNING_THRESHOLD,
    VerificationMatcher,
    VerificationService,
)


def _ticket(ticket_id: int, numbers: list[int], group_name: str | None = None) -> TicketRecord:
    return TicketRecord(id=ticket_id, user_id=1, numbers=NumberSet(numbers), group_name=group_name)


def _draw(draw_id: int, numbers: list[int], **kwargs) -> DrawRecord:
    return DrawRecord(
        id=draw_id,
        draw_date=kwargs.pop("draw_date", date(2025, 1, 4)),
        lotto_type=kwargs.pop("lotto_type", "LOTTO"),
        numbers=NumberSet(numbers),
        **kwargs,
    )


def test_threshold_is_three():
    assert WINNING_THRESHOLD == 3


def test_three_matches_reported_with_numbers():
    ticket = _ticket(10, [5, 14, 23, 29, 37, 41])
    draw = _draw(1, [3, 14, 23, 31, 37, 48])

    outcome = VerificationMatcher().check([ticket], [draw])

    assert len(outcome.draws) == 1
    winners = outcome.draws[0].winners
    assert len(winners) == 1
    assert winners[0].ticket_id == 10
    assert winners[0].matched_numbers == [14, 23, 37]


def test_two_matches_are_not_a_win():
    ticket = _ticket(1, [1, 2, 10, 11, 12, 13])
    draw = _draw(1, [1, 2, 20, 21, 22, 23])

    outcome = VerificationMatcher().check([ticket], [draw])

    assert outcome.draws[0].winners == []


def test_six_matches():
    ticket = _ticket(1, [6, 5, 4, 3, 2, 1])
    draw = _draw(1, [1, 2, 3, 4, 5, 6])

    winners = VerificationMatcher().check([ticket], [draw]).draws[0].winners

    assert winners[0].matched_numbers == [1, 2, 3, 4, 5, 6]


def test_draws_without_winners_are_kept():
    tickets = [_ticket(1, [1, 2, 3, 4, 5, 6])]
    draws = [
        _draw(1, [1, 2, 3, 40, 41, 42]),
        _draw(2, [30, 31, 32, 33, 34, 35]),
        _draw(3, [1, 31, 32, 33, 34, 35]),
    ]

    outcome = VerificationMatcher().check(tickets, draws)

    assert [d.draw_id for d in outcome.draws] == [1, 2, 3]
    assert [len(d.winners) for d in outcome.draws] == [1, 0, 0]


def test_every_ticket_echoed_once_in_order():
    tickets = [
        _ticket(3, [1, 2, 3, 4, 5, 6], "A"),
        _ticket(1, [10, 11, 12, 13, 14, 15]),
        _ticket(2, [20, 21, 22, 23, 24, 25], "B"),
    ]
    draws = [_draw(1, [1, 2, 3, 4, 5, 6])]

    outcome = VerificationMatcher().check(tickets, draws)

    assert [t.ticket_id for t in outcome.tickets] == [3, 1, 2]
    assert [t.group_name for t in outcome.tickets] == ["A", "", "B"]
    assert outcome.tickets[1].numbers == [10, 11, 12, 13, 14, 15]


def test_ticket_can_win_several_draws_and_draw_several_tickets():
    tickets = [
        _ticket(1, [1, 2, 3, 4, 5, 6]),
        _ticket(2, [1, 2, 3, 40, 41, 42]),
        _ticket(3, [7, 8, 9, 10, 11, 12]),
    ]
    draws = [
        _draw(1, [1, 2, 3, 43, 44, 45]),
        _draw(2, [4, 5, 6, 40, 41, 49], lotto_type="LOTTO PLUS"),
    ]

    outcome = VerificationMatcher().check(tickets, draws)

    first, second = outcome.draws
    assert [(w.ticket_id, w.matched_numbers) for w in first.winners] == [
        (1, [1, 2, 3]),
        (2, [1, 2, 3]),
    ]
    assert [(w.ticket_id, w.matched_numbers) for w in second.winners] == [(1, [4, 5, 6])]
    assert second.lotto_type == "LOTTO PLUS"


def test_empty_ticket_list():
    outcome = VerificationMatcher().check([], [_draw(1, [1, 2, 3, 4, 5, 6])])

    assert outcome.tickets == []
    assert len(outcome.draws) == 1
    assert outcome.draws[0].winners == []


def test_empty_draw_list():
    outcome = VerificationMatcher().check([_ticket(1, [1, 2, 3, 4, 5, 6])], [])

    assert outcome.draws == []
    assert len(outcome.tickets) == 1
    assert outcome.execution_time_ms >= 0


def test_draw_fields_are_echoed():
    tiers = (
        PrizeTier(count=0, amount=None),
        PrizeTier(count=2, amount=Decimal("150000.00")),
        PrizeTier(),
        PrizeTier(count=1000, amount=Decimal("24.00")),
    )
    draw = _draw(
        7,
        [3, 14, 23, 31, 37, 48],
        draw_date=date(2025, 2, 1),
        draw_system_id=7120,
        ticket_price=Decimal("3.00"),
        prize_tiers=tiers,
    )

    result = VerificationMatcher().check([], [draw]).draws[0]

    assert result.draw_id == 7
    assert result.draw_date == date(2025, 2, 1)
    assert result.numbers == [3, 14, 23, 31, 37, 48]
    assert result.draw_system_id == 7120
    assert result.ticket_price == Decimal("3.00")
    assert result.prize_tiers == tiers


def test_window_validation():
    VerificationService.validate_window(date(2025, 1, 1), date(2025, 1, 1))
    VerificationService.validate_window(date(2025, 1, 1), date(2025, 2, 1), max_days=31)

    with pytest.raises(ValidationError):
        VerificationService.validate_window(date(2025, 1, 2), date(2025, 1, 1))
    with pytest.raises(ValidationError):
        VerificationService.validate_window(date(2025, 1, 1), date(2025, 2, 2), max_days=31)
