"""Integer sequence generator driven by a textual specifier.

A specifier holds white-space (or comma) separated items, each of which
is a single integer or a ``head:tail:step`` triplet::

    "2  3  5  7"  ->  2 3 5 7
    "1:10"        ->  1 2 ... 10
    "2:10:2"      ->  2 4 6 8 10
    "10:"         ->  10 11 ... LAST
    ":10"         ->  FIRST ... 10
    "4:1:-1"      ->  4 3 2 1
"""

from __future__ import annotations

import copy
from typing import Iterator, Tuple

from .textutils import get_ints, split

_TOKEN_SIZE = 64


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Sequence:
    """Iterator state over the integers described by a specifier.

    ``curr`` holds the current value after a successful ``advance()``.
    Malformed items raise ValueError when they are reached.
    """

    def __init__(self, spec: str, first: int, last: int) -> None:
        self.spec = spec.replace(",", " ")
        self.reinit(first, last)

    def reinit(self, first: int, last: int) -> None:
        """Set the default bounds and start over."""
        self.first = first
        self.last = last
        self.rewind()

    def rewind(self) -> None:
        """Go back to the beginning of the specifier."""
        self._rest = self.spec
        self.curr = 0
        self.head = 0
        self.tail = 0
        self.step = 0

    def next_token(self) -> bool:
        """Move to the next non-empty item; return False at the end."""
        while True:
            fields, rest = split(self._rest, _TOKEN_SIZE, 1)
            if not fields:
                return False
            self._rest = rest

            nfields, values = get_ints(
                fields[0], 3, ":", [self.first, self.last, 1]
            )
            head, tail, step = values
            if nfields > 1:
                self.head, self.tail, self.step = head, tail, step
            else:
                self.head = self.tail = head
                self.step = 0
            self.curr = head

            empty = (self.step > 0 and self.tail < self.head) or (
                self.step < 0 and self.tail > self.head
            )
            if not empty:
                return True

    def advance(self) -> bool:
        """Step to the next value; return False at the end."""
        if self.step != 0:
            candidate = self.curr + self.step
            if (self.step > 0 and candidate <= self.tail) or (
                self.step < 0 and candidate >= self.tail
            ):
                self.curr = candidate
                return True
        return self.next_token()

    def count(self) -> int:
        """Return the number of values remaining, without consuming them."""
        temp = copy.copy(self)
        total = 0
        if temp.step != 0:
            remaining = _trunc_div(temp.tail - temp.curr, temp.step)
            if remaining > 0:
                total += remaining
        while temp.next_token():
            if temp.step == 0:
                total += 1
            else:
                n = _trunc_div(temp.tail - temp.head + temp.step, temp.step)
                if n > 0:
                    total += n
        return total

    def check(self) -> Tuple[int, int, int]:
        """Return ``(first, last, step)`` of the remaining values.

        ``step`` is 0 if the values are not uniformly spaced. Raises
        ValueError if no value remains.
        """
        values = iter(self)
        try:
            first = next(values)
        except StopIteration:
            raise ValueError("empty sequence") from None
        prev = first
        diff = 1
        uniform = True
        for index, value in enumerate(values):
            if index == 0:
                diff = value - prev
            if value != prev + diff:
                uniform = False
            prev = value
        return first, prev, diff if uniform else 0

    def __iter__(self) -> Iterator[int]:
        """Yield the remaining values without consuming this sequence."""
        temp = copy.copy(self)
        while temp.advance():
            yield temp.curr