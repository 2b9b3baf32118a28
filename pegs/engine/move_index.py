"""Rank-indexable set of reverse-move candidates.

The same logical set is exposed through two orderings:

- by identity ``(y, x, dy, dx)``, used to look candidates up and drop them;
- by ``(cost, y, x, dy, dx)``, used to count candidates below a cost and to
  pick the candidate at a given rank.

Both views are ``sortedcontainers`` structures, so insert, delete, rank and
select are all logarithmic.
"""

from __future__ import annotations

from typing import Iterator, Optional

from sortedcontainers import SortedDict, SortedList

from ..core.models import MoveCandidate, MoveKey
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

VALID_COSTS = (0, 1, 2)


class CandidateMoveIndex:
    """Candidate reverse moves ordered by identity and by cost."""

    def __init__(self) -> None:
        self._by_move: SortedDict = SortedDict()
        self._by_cost: SortedList = SortedList()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def upsert_or_remove(self, key: MoveKey, cost: Optional[int]) -> bool:
        """Reconcile a freshly evaluated candidate with the stored set.

        ``cost`` is ``None`` when the footprint is not a legal reverse move.
        Returns ``True`` when the index changed.
        """

        stored = self._by_move.get(key)
        if cost is None:
            if stored is None:
                return False
            LOGGER.debug("deleting %d%+d,%d%+d at cost %d", key[1], key[3], key[0], key[2], stored)
            self._remove(key, stored)
            return True

        assert cost in VALID_COSTS, f"cost {cost} out of range"
        if stored == cost:
            return False
        if stored is not None:
            LOGGER.debug("correcting %d%+d,%d%+d at cost %d", key[1], key[3], key[0], key[2], stored)
            self._remove(key, stored)
        LOGGER.debug("adding %d%+d,%d%+d at cost %d", key[1], key[3], key[0], key[2], cost)
        self._by_move[key] = cost
        self._by_cost.add((cost,) + key)
        return True

    def _remove(self, key: MoveKey, cost: int) -> None:
        del self._by_move[key]
        self._by_cost.remove((cost,) + key)

    def clear(self) -> None:
        self._by_move.clear()
        self._by_cost.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def count_with_cost_less_than(self, cost: int) -> int:
        # (cost,) sorts before every 5-tuple that starts with ``cost``.
        return self._by_cost.bisect_left((cost,))

    def count_in_cost_range(self, lo: int, hi: int) -> int:
        return self.count_with_cost_less_than(hi + 1) - self.count_with_cost_less_than(lo)

    def select_uniform_among_cost_range(self, lo: int, hi: int, index: int) -> MoveCandidate:
        """Return the candidate at rank ``index`` among costs ``lo..hi``."""

        available = self.count_in_cost_range(lo, hi)
        if not 0 <= index < available:
            raise IndexError(f"rank {index} outside cost range {lo}..{hi} of size {available}")
        entry = self._by_cost[self.count_with_cost_less_than(lo) + index]
        return MoveCandidate.from_key(entry[1:], entry[0])

    def get(self, key: MoveKey) -> Optional[MoveCandidate]:
        cost = self._by_move.get(key)
        if cost is None:
            return None
        return MoveCandidate.from_key(key, cost)

    def __contains__(self, key: object) -> bool:
        return key in self._by_move

    def __len__(self) -> int:
        return len(self._by_move)

    def __iter__(self) -> Iterator[MoveCandidate]:
        for key, cost in self._by_move.items():
            yield MoveCandidate.from_key(key, cost)

    def by_cost(self) -> Iterator[MoveCandidate]:
        for entry in self._by_cost:
            yield MoveCandidate.from_key(entry[1:], entry[0])

    def check_consistency(self) -> bool:
        """True when both views hold exactly the same candidates."""

        if len(self._by_move) != len(self._by_cost):
            return False
        from_moves = {(cost,) + key for key, cost in self._by_move.items()}
        return from_moves == set(self._by_cost)

