"""Reusable type definitions for the MergeFold package.

Type Aliases:
    Combiner: A two-argument callable merging an older and a newer value.
    Rank: An integer rank constrained to the range of the 8-bit rank counter.

These types are shared by the models and the functional helpers so that rank
bounds are validated the same way everywhere.
"""

from typing import Annotated, Any, Callable, TypeVar

import annotated_types as at

__all__ = [
    "MAX_RANK",
    "Combiner",
    "Rank",
    "T",
]

T = TypeVar("T")

# Ranks are stored in an 8-bit counter; a rank-255 entry already subsumes 2**255 pushes.
MAX_RANK = 255

# Called as combiner(older, newer) and returns the merged value
Combiner = Callable[[Any, Any], Any]

# A rank that fits the 8-bit counter
Rank = Annotated[int, at.Ge(0), at.Le(MAX_RANK)]
