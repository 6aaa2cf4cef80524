"""Rank-balanced incremental folding.

This module provides ``MergeFold``, a container that folds a stream of values with
a user-supplied combiner the way tiles merge in the game 2048. Every pushed value
enters the stack at rank 0. Whenever the newest entry has the same rank as the
entry right before it, the two are combined with ``combiner(older, newer)`` and
replaced by a single entry one rank higher. The cascade of merges triggered by a
push mirrors carry propagation when incrementing a binary counter, so after ``n``
pushes the stack holds at most ``log2(n) + 1`` entries.

Key Features:
    - Generic over the value type; the combiner is opaque and never sees ranks
    - Merge order is always (older, newer), so non-commutative combiners are safe
    - ``push`` is all-or-nothing: a failing combiner leaves the stack untouched
    - Ranks are bounded and never wrap; overflow raises ``RankOverflowError``
    - ``fold`` consumes the container, further use raises ``FoldConsumedError``

Examples:
    >>> from mergefold.core import MergeFold
    >>>
    >>> mf = MergeFold(lambda a, b: a + b)
    >>> mf.extend([1, 2, 3, 4, 5])
    >>> mf.ranks
    (2, 0)
    >>> mf.count()
    5
    >>> mf.fold()
    15
"""

from typing import Any, Generic, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr

from mergefold.logger.logger import get_logger

from .base_models import Entry
from .config import settings
from .exceptions import FoldConsumedError, RankOverflowError
from .types import Combiner, Rank, T

__all__ = [
    "MergeFold",
]

logger = get_logger(__name__)


class MergeFold(BaseModel, Generic[T]):
    """Stack of ranked values folded pairwise when their ranks collide.

    The stack is ordered oldest first. After every ``push`` no two adjacent entries
    share a rank, although ranks are not necessarily sorted. A rank-``r`` entry is
    the fold of exactly ``2 ** r`` pushed values, which is how ``count`` recovers
    the number of pushes without a separate counter.

    ``fold`` reduces what is left from the newest entry to the oldest, seeding the
    accumulator with the newest value and calling ``combiner(acc, older)`` for each
    remaining entry. The very first pushed value is therefore folded in last and
    ends up nearest the root of the resulting fold tree.

    Attributes:
        combiner: Callable invoked as ``combiner(older, newer)``.
        max_rank: Largest rank a merge cascade may produce.
    """

    combiner: Combiner = Field(
        ...,
        description="Binary function merging an older and a newer value.",
        exclude=True,
    )
    max_rank: Rank = Field(
        default_factory=lambda: settings.MAX_RANK,
        description="Largest rank a merge may produce before RankOverflowError.",
    )

    # Internal state
    _entries: List[Entry] = PrivateAttr(default_factory=list)
    _consumed: bool = PrivateAttr(default=False)

    def __init__(self, combiner: Optional[Combiner] = None, /, **data: Any) -> None:
        if combiner is not None:
            data["combiner"] = combiner
        super().__init__(**data)

    @classmethod
    def new(cls, combiner: Combiner, **kwargs: Any) -> "MergeFold":
        """Create an empty MergeFold owning ``combiner``."""
        return cls(combiner, **kwargs)

    @property
    def ranks(self) -> Tuple[int, ...]:
        """Ranks of the live entries, oldest first."""
        return tuple(entry.rank for entry in self._entries)

    @property
    def is_empty(self) -> bool:
        """True when no values are held."""
        return not self._entries

    @property
    def is_consumed(self) -> bool:
        """True once fold() has been called."""
        return self._consumed

    def __repr__(self) -> str:
        if self._consumed:
            return "MergeFold(consumed)"
        return f"MergeFold(entries={len(self._entries)}, count={self.count()})"

    def __len__(self) -> int:
        if self._consumed:
            return 0
        return self.count()

    def _ensure_live(self, operation: str) -> None:
        if self._consumed:
            raise FoldConsumedError(operation)

    def _cascade_depth(self) -> int:
        """Number of tail entries the next push will merge with.

        The tail merges with a fresh rank-0 value only if its rank is 0, the entry
        before it only if its rank is 1, and so on.
        """
        depth = 0
        for entry in reversed(self._entries):
            if entry.rank != depth:
                break
            depth += 1
        return depth

    def count(self) -> int:
        """Number of values pushed so far.

        Returns:
            Sum of ``2 ** rank`` over all live entries.

        Raises:
            FoldConsumedError: If the container was already folded.
        """
        self._ensure_live("count")
        return sum(entry.weight for entry in self._entries)

    def push(self, value: T) -> None:
        """Push a value at rank 0 and merge equal-rank neighbours.

        The combiner is called as ``combiner(older, newer)`` once per merge. The
        stack is only modified after every merge of the cascade succeeded, so an
        exception from the combiner propagates with the container unchanged.

        Args:
            value: Value to add to the fold.

        Raises:
            RankOverflowError: If the cascade would produce a rank above
                ``max_rank``. Raised before the combiner is called.
            FoldConsumedError: If the container was already folded.
        """
        self._ensure_live("push")
        entries = self._entries

        depth = self._cascade_depth()
        if depth > self.max_rank:
            logger.error(
                f"Rank overflow: push would produce rank {depth} (max_rank={self.max_rank})"
            )
            raise RankOverflowError(depth, self.max_rank)

        rank = 0
        for older in reversed(entries[len(entries) - depth :]):
            value = self.combiner(older.value, value)
            rank += 1

        if depth:
            logger.debug(f"Merged {depth + 1} entries into rank {rank}")
        # _entries is only ever rebound; copies made by model_copy() share the old list
        self._entries = [*entries[: len(entries) - depth], Entry(value=value, rank=rank)]

    def extend(self, values: Iterable[T]) -> None:
        """Push every value of ``values`` in iteration order."""
        for value in values:
            self.push(value)

    def fold(self) -> Optional[T]:
        """Combine all live entries into one value and consume the container.

        Entries are reduced from newest to oldest: the accumulator starts as the
        newest value and each older value is merged in with
        ``combiner(accumulator, older)``.

        Returns:
            The folded value, or None if nothing was pushed.

        Raises:
            FoldConsumedError: If the container was already folded.
        """
        self._ensure_live("fold")
        # Consumed even if the combiner raises below
        self._consumed = True
        entries, self._entries = self._entries, []

        if not entries:
            logger.debug("Folded an empty MergeFold")
            return None

        logger.debug(f"Folding {len(entries)} entries")
        values = (entry.value for entry in reversed(entries))
        accumulator = next(values)
        for older in values:
            accumulator = self.combiner(accumulator, older)
        return accumulator
