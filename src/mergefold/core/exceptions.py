"""Exceptions raised by MergeFold containers."""

__all__ = [
    "MergeFoldError",
    "RankOverflowError",
    "FoldConsumedError",
]


class MergeFoldError(RuntimeError):
    """Base class for errors raised by the MergeFold package."""


class RankOverflowError(MergeFoldError, OverflowError):
    """Raised when a merge cascade would push a rank past the allowed maximum.

    Attributes:
        rank: The rank the cascade would have produced.
        max_rank: The largest rank the container accepts.
    """

    def __init__(self, rank: int, max_rank: int):
        self.rank = rank
        self.max_rank = max_rank
        super().__init__(
            f"Merge cascade would produce rank {rank}, exceeding max_rank={max_rank}."
        )


class FoldConsumedError(MergeFoldError):
    """Raised when a MergeFold is used after fold() consumed it."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call {operation}() on a MergeFold that was folded.")
