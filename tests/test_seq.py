import pytest

from mipconv.seq import Sequence
from mipconv.textutils import SplitOverflowError

FIRST = 1
LAST = 100


CASES = [
    ("  1   10   15   ", [1, 10, 15]),
    ("  ,  1 ,  10,   15,  ", [1, 10, 15]),
    ("  10:12   ", [10, 11, 12]),
    ("  10:14:2   ", [10, 12, 14]),
    ("  10:15:3   ", [10, 13]),
    ("  10:16:3   ", [10, 13, 16]),
    ("  10:17:3   ", [10, 13, 16]),
    ("  10:18:3   ", [10, 13, 16]),
    ("  10:4:-3   ", [10, 7, 4]),
    ("  10:3:-3   ", [10, 7, 4]),
    ("  10:2:-3   ", [10, 7, 4]),
    ("  10:1:-3   ", [10, 7, 4, 1]),
    ("  :3   -1:1   ", [1, 2, 3, -1, 0, 1]),
    ("  90::3  4:1:-1   ", [90, 93, 96, 99, 4, 3, 2, 1]),
    ("  2:1   1:2:-1   ", []),
    ("  10:1  1:10:-1  ", []),
    ("  10:10 20:20:3 30:30:-1    ", [10, 20, 30]),
]


@pytest.mark.parametrize("spec, expected", CASES)
def test_advance_and_count(spec, expected):
    seq = Sequence(spec, FIRST, LAST)
    num = len(expected)
    for i, value in enumerate(expected):
        assert seq.count() == num - i
        assert seq.advance() is True
        assert seq.curr == value
    assert seq.advance() is False
    assert seq.count() == 0
    assert seq.advance() is False


@pytest.mark.parametrize("spec, expected", CASES)
def test_next_token_expansion(spec, expected):
    seq = Sequence(spec, FIRST, LAST)
    values = []
    while seq.next_token():
        if seq.step == 0:
            values.append(seq.curr)
        else:
            n = (seq.tail + seq.step - seq.head) // seq.step
            values.extend(seq.head + k * seq.step for k in range(max(n, 0)))
    assert values == expected


@pytest.mark.parametrize("spec, expected", CASES)
def test_iteration_matches(spec, expected):
    seq = Sequence(spec, FIRST, LAST)
    assert list(seq) == expected
    # iterating does not consume the sequence
    assert seq.count() == len(expected)


@pytest.mark.parametrize(
    "spec, first, last, step",
    [
        ("2", 2, 2, 1),
        ("2,3,4", 2, 4, 1),
        ("4,3,2", 4, 2, -1),
        ("2:5", 2, 5, 1),
        ("2:5,6", 2, 6, 1),
        ("2:5,6,7", 2, 7, 1),
        ("2:5,6,7,9", 2, 9, 0),
        ("2:10:2", 2, 10, 2),
        ("2:10:2,12", 2, 12, 2),
        ("2:10:2,12,13", 2, 13, 0),
        ("10:5:-1", 10, 5, -1),
        ("10:5:-1,4", 10, 4, -1),
        ("10:5:-1,4,2", 10, 2, 0),
    ],
)
def test_check(spec, first, last, step):
    seq = Sequence(spec, 1, 100)
    assert seq.check() == (first, last, step)


def test_check_empty_raises():
    seq = Sequence("2:1", 1, 100)
    with pytest.raises(ValueError):
        seq.check()


def test_defaults_use_first_and_last():
    seq = Sequence("::2", 1, 9)
    assert list(seq) == [1, 3, 5, 7, 9]
    seq.reinit(2, 6)
    assert list(seq) == [2, 4, 6]


def test_rewind_restarts():
    seq = Sequence("1:3", FIRST, LAST)
    assert seq.advance() and seq.advance()
    assert seq.curr == 2
    seq.rewind()
    assert seq.advance()
    assert seq.curr == 1
    assert seq.count() == 2


def test_invalid_item_raises():
    seq = Sequence("1 2x", FIRST, LAST)
    assert seq.advance()
    assert seq.curr == 1
    with pytest.raises(ValueError):
        seq.advance()


def test_overlong_item_raises():
    seq = Sequence("1" * 80, FIRST, LAST)
    with pytest.raises(SplitOverflowError):
        seq.advance()