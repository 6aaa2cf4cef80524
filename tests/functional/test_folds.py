import operator

import pytest

from mergefold.core import MergeFold, RankOverflowError
from mergefold.functional import merge_fold


def test_merge_fold_empty():
    assert merge_fold([], operator.add) is None


def test_merge_fold_sum():
    assert merge_fold(range(1, 6), operator.add) == 15


@pytest.mark.parametrize("word", ["a", "abc", "abcd", "abcdefg", "mergefold"])
def test_merge_fold_matches_incremental(word):
    mf = MergeFold(operator.add)
    for letter in word:
        mf.push(letter)

    assert merge_fold(word, operator.add) == mf.fold()


def test_merge_fold_accepts_generators():
    assert merge_fold((str(i) for i in range(4)), operator.add) == "0123"


def test_merge_fold_max_rank():
    with pytest.raises(RankOverflowError):
        merge_fold([1, 2, 3, 4], operator.add, max_rank=1)
    assert merge_fold([1, 2, 3], operator.add, max_rank=1) == 6


def test_merge_fold_propagates_combiner_errors():
    def boom(a, b):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        merge_fold([1, 2], boom)
