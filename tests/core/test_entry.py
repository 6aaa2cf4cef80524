import pytest
from pydantic import ValidationError

from mergefold.core import Entry, MAX_RANK


def test_entry_defaults_to_rank_zero():
    entry = Entry(value="a")
    assert entry.rank == 0
    assert entry.weight == 1


@pytest.mark.parametrize("rank, weight", [(0, 1), (1, 2), (3, 8), (10, 1024)])
def test_entry_weight(rank, weight):
    assert Entry(value=None, rank=rank).weight == weight


def test_entry_rank_bounds():
    assert Entry(value=1, rank=MAX_RANK).weight == 2**MAX_RANK
    with pytest.raises(ValidationError):
        Entry(value=1, rank=MAX_RANK + 1)
    with pytest.raises(ValidationError):
        Entry(value=1, rank=-1)


def test_entry_is_frozen():
    entry = Entry(value=[1, 2], rank=1)
    with pytest.raises(ValidationError):
        entry.rank = 2


def test_entry_keeps_value_identity():
    payload = {"k": [1, 2, 3]}
    assert Entry(value=payload).value is payload


def test_entry_repr():
    assert repr(Entry(value="ab", rank=1)) == "Entry(value='ab', rank=1)"
