"""Small counting problems: range bookings and the copy-paste keyboard."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt


def corp_flight_bookings(bookings: Iterable[Sequence[int]], n: int) -> list[int]:
    """Return the total seats booked on each of flights 1 to ``n``.

    Each booking is ``(first, last, seats)`` covering flights ``first`` to
    ``last`` inclusive.
    """
    if n < 0:
        raise ValueError("number of flights must not be negative")
    deltas = [0] * n
    for first, last, seats in bookings:
        if not 1 <= first <= last <= n:
            raise ValueError(f"booking range {first}..{last} is outside 1..{n}")
        deltas[first - 1] += seats
        if last < n:
            deltas[last] -= seats
    return list(accumulate(deltas))


def is_prime(n: int) -> bool:
    """Return whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def min_steps(n: int) -> int:
    """Return the fewest copy-all and paste steps to get ``n`` characters."""
    steps = 0
    while n > 1:
        if is_prime(n):
            steps += n
            break
        factor = next(d for d in range(2, isqrt(n) + 1) if n % d == 0)
        steps += factor
        n //= factor
    return steps