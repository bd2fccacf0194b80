import pytest

from lotto_verifier.errors import InvalidNumbersError, ValidationError
from lotto_verifier.services.number_set import NumberSet


def test_numbers_are_sorted_on_construction():
    s = NumberSet([41, 5, 37, 14, 29, 23])
    assert s.numbers == (5, 14, 23, 29, 37, 41)
    assert s.to_list() == [5, 14, 23, 29, 37, 41]
    assert list(s) == [5, 14, 23, 29, 37, 41]


def test_equality_ignores_input_order():
    a = NumberSet([1, 2, 3, 4, 5, 6])
    b = NumberSet([6, 5, 4, 3, 2, 1])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_boundaries_are_accepted():
    s = NumberSet([1, 49, 2, 48, 3, 47])
    assert s.numbers[0] == 1
    assert s.numbers[-1] == 49


@pytest.mark.parametrize(
    "numbers",
    [
        [1, 2, 3, 4, 5],
        [1, 2, 3, 4, 5, 6, 7],
        [0, 2, 3, 4, 5, 6],
        [1, 2, 3, 4, 5, 50],
        [1, 1, 3, 4, 5, 6],
        [1, 2, 3, 4, 5, "6"],
        [True, 2, 3, 4, 5, 6],
        [],
    ],
)
def test_invalid_sets_are_rejected(numbers):
    with pytest.raises(InvalidNumbersError) as exc_info:
        NumberSet(numbers)
    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.status_code == 400
    assert "numbers" in exc_info.value.details


def test_number_set_is_immutable():
    s = NumberSet([1, 2, 3, 4, 5, 6])
    with pytest.raises(AttributeError):
        s._numbers = (7, 8, 9, 10, 11, 12)


def test_intersection_is_ascending():
    ticket = NumberSet([5, 14, 23, 29, 37, 41])
    draw = NumberSet([3, 14, 23, 31, 37, 48])
    assert ticket.intersection(draw) == (14, 23, 37)
    assert draw.intersection(ticket) == (14, 23, 37)
    assert ticket.match_count(draw) == 3
    assert ticket.intersection([41, 5]) == (5, 41)


def test_from_row_reads_wide_columns():
    class Row:
        number1, number2, number3, number4, number5, number6 = 9, 8, 7, 6, 5, 4

    assert NumberSet.from_row(Row()).to_list() == [4, 5, 6, 7, 8, 9]


def test_as_columns():
    assert NumberSet([6, 5, 4, 3, 2, 1]).as_columns() == {
        "number1": 1,
        "number2": 2,
        "number3": 3,
        "number4": 4,
        "number5": 5,
        "number6": 6,
    }
