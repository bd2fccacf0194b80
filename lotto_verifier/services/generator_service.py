"""Random and system (full-coverage) number set generation."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from lotto_verifier.services.number_set import NUMBER_DOMAIN, NUMBERS_PER_SET, NumberSet


logger = logging.getLogger(__name__)

SYSTEM_TICKET_COUNT = 9


def shuffle(values: Sequence[int], rng: random.Random, count: int | None = None) -> list[int]:
    """Fisher-Yates shuffle returning a new list.

    With ``count`` only the first ``count`` positions are settled, which is
    all a draw of ``count`` values without replacement needs.
    """

    out = list(values)
    n = len(out)
    steps = n if count is None else min(count, n)
    for i in range(steps):
        j = rng.randrange(i, n)
        out[i], out[j] = out[j], out[i]
    return out


class RandomSetGenerator:
    """One uniformly random NumberSet per call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def _source(self) -> random.Random:
        # A fresh OS-seeded generator per call unless one was injected.
        return self._rng if self._rng is not None else random.Random()

    def generate(self) -> NumberSet:
        picked = shuffle(NUMBER_DOMAIN, self._source(), count=NUMBERS_PER_SET)
        return NumberSet(picked[:NUMBERS_PER_SET])


class CoverageSetGenerator:
    """Nine NumberSets that together cover every number from 1 to 49.

    The first 48 values of a random permutation are cut into 8 disjoint sets.
    The 49th value opens the 9th set, which is topped up with 5 values drawn
    from the rest of the domain. Coverage therefore holds by construction, and
    the 9 sets are pairwise distinct: only the 9th holds the leftover value.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def _source(self) -> random.Random:
        return self._rng if self._rng is not None else random.Random()

    def generate(self) -> list[NumberSet]:
        rng = self._source()
        permutation = shuffle(NUMBER_DOMAIN, rng)

        full_groups = SYSTEM_TICKET_COUNT - 1
        sets = [
            NumberSet(permutation[i * NUMBERS_PER_SET : (i + 1) * NUMBERS_PER_SET])
            for i in range(full_groups)
        ]

        leftover = permutation[full_groups * NUMBERS_PER_SET]
        pool = [n for n in NUMBER_DOMAIN if n != leftover]
        filler = shuffle(pool, rng, count=NUMBERS_PER_SET - 1)[: NUMBERS_PER_SET - 1]
        sets.append(NumberSet([leftover, *filler]))

        logger.debug("Generated %d system sets, leftover=%d", len(sets), leftover)
        return sets
