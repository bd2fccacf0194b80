"""Six-number value type shared by tickets, draws and the generators."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from lotto_verifier.errors import InvalidNumbersError


NUMBERS_PER_SET = 6
MIN_NUMBER = 1
MAX_NUMBER = 49
NUMBER_DOMAIN = range(MIN_NUMBER, MAX_NUMBER + 1)

NumberTuple6 = tuple[int, int, int, int, int, int]


class NumberSet:
    """Immutable set of 6 distinct integers in 1..49, kept in ascending order.

    Sorting and validation happen here and nowhere else: anything holding a
    NumberSet can rely on it being well-formed. Equality ignores the order the
    numbers were given in.
    """

    __slots__ = ("_numbers",)

    _numbers: NumberTuple6

    def __init__(self, numbers: Iterable[int]) -> None:
        values = list(numbers)

        errors: list[str] = []
        if any(isinstance(n, bool) or not isinstance(n, int) for n in values):
            errors.append("All numbers must be integers")
        else:
            if len(values) != NUMBERS_PER_SET:
                errors.append(f"Exactly {NUMBERS_PER_SET} numbers are required (got {len(values)})")
            if any(n < MIN_NUMBER or n > MAX_NUMBER for n in values):
                errors.append(f"All numbers must be within {MIN_NUMBER}..{MAX_NUMBER}")
            if len(set(values)) != len(values):
                errors.append("Numbers must be unique")

        if errors:
            raise InvalidNumbersError(details={"numbers": errors})

        ordered = sorted(values)
        object.__setattr__(
            self,
            "_numbers",
            (ordered[0], ordered[1], ordered[2], ordered[3], ordered[4], ordered[5]),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("NumberSet is immutable")

    @classmethod
    def from_row(cls, row: object) -> "NumberSet":
        """Build from an object exposing number1..number6 (ORM rows)."""

        return cls(int(getattr(row, f"number{i}")) for i in range(1, NUMBERS_PER_SET + 1))

    @property
    def numbers(self) -> NumberTuple6:
        return self._numbers

    def to_list(self) -> list[int]:
        return list(self._numbers)

    def as_columns(self) -> dict[str, int]:
        """Map onto the number1..number6 columns of the wide tables."""

        return {f"number{i}": n for i, n in enumerate(self._numbers, start=1)}

    def intersection(self, other: "NumberSet | Iterable[int]") -> tuple[int, ...]:
        """Numbers present in both sets, ascending."""

        other_values = set(other.numbers if isinstance(other, NumberSet) else other)
        return tuple(n for n in self._numbers if n in other_values)

    def match_count(self, other: "NumberSet | Iterable[int]") -> int:
        return len(self.intersection(other))

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers)

    def __len__(self) -> int:
        return NUMBERS_PER_SET

    def __contains__(self, item: object) -> bool:
        return item in self._numbers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberSet):
            return NotImplemented
        return self._numbers == other._numbers

    def __hash__(self) -> int:
        return hash(self._numbers)

    def __repr__(self) -> str:
        return f"NumberSet({list(self._numbers)!r})"
