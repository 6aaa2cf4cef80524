"""Base models for the MergeFold stack.

An ``Entry`` is the record kept on a MergeFold stack: a value together with the
rank it was produced at. A rank-``r`` entry is the fold of exactly ``2 ** r``
pushed values, so ranks double as a compact push counter.

Entries are frozen pydantic models. A merge never edits an entry in place; it
removes the two operands from the stack and appends a new entry one rank up.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import Rank

__all__ = [
    "Entry",
]


class Entry(BaseModel):
    """A value on the MergeFold stack tagged with its rank.

    Attributes:
        value: The (possibly already merged) value.
        rank: Number of merges that produced the value; it subsumes 2**rank pushes.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = Field(..., description="The held value, opaque to the container.")
    rank: Rank = Field(0, description="Merge depth of the value (0 for a fresh push).")

    @property
    def weight(self) -> int:
        """Number of pushed values this entry subsumes."""
        return 1 << self.rank

    def __repr__(self) -> str:
        return f"Entry(value={self.value!r}, rank={self.rank})"
