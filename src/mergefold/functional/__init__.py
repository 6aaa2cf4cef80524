"""Functional primitives for MergeFold.

Stateless helpers that wrap a MergeFold container so a whole iterable can be
folded in one call.
"""

from mergefold.functional.folds import merge_fold

__all__ = ["merge_fold"]
