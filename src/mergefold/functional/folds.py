"""One-shot folding helpers built on ``MergeFold``."""

import typing as tp

from mergefold.core.merge_fold import MergeFold
from mergefold.core.types import Combiner, T

__all__ = [
    "merge_fold",
]


def merge_fold(
    values: tp.Iterable[T],
    combiner: Combiner,
    max_rank: tp.Optional[int] = None,
) -> tp.Optional[T]:
    """Fold an iterable with ``combiner`` using rank-balanced merging.

    Equivalent to pushing every value into a fresh ``MergeFold`` and calling
    ``fold`` on it, so the combination tree is the same as the incremental one.

    Args:
        values: Values to fold, in the order they should be combined.
        combiner: Called as ``combiner(older, newer)``.
        max_rank: Optional per-call rank bound. Defaults to the configured
            ``MAX_RANK``.

    Returns:
        The folded value, or None if ``values`` is empty.

    Examples:
        >>> merge_fold(["a", "b", "c", "d"], lambda a, b: a + b)
        'abcd'
        >>> merge_fold([], max) is None
        True
    """
    kwargs = {} if max_rank is None else {"max_rank": max_rank}
    folder = MergeFold(combiner, **kwargs)
    folder.extend(values)
    return folder.fold()
