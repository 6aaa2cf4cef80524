"""Core data structures for rank-balanced folding."""

from mergefold.core.merge_fold import MergeFold
from mergefold.core.base_models import Entry
from mergefold.core.exceptions import (
    MergeFoldError,
    RankOverflowError,
    FoldConsumedError,
)
from mergefold.core.types import MAX_RANK, Combiner, Rank

__all__ = [
    "MergeFold",
    "Entry",
    "MergeFoldError",
    "RankOverflowError",
    "FoldConsumedError",
    "MAX_RANK",
    "Combiner",
    "Rank",
]
