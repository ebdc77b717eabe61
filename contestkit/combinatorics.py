"""Counting problems reduced modulo a large prime, and small number-theory games."""

from __future__ import annotations

import math
from itertools import accumulate

MOD = 10**9 + 7
MAX_PERMUTATION_SIZE = 10
MAX_PART = 100
MAX_TOTAL = 10001

FIRST_PLAYER = "Arpa"
SECOND_PLAYER = "Dishant"


def color_boxes(n: int, m: int) -> int:
    """Return the ways to give m distinct colours to the boxes: m! mod MOD.

    The number of boxes ``n`` does not change the count.
    """
    ways = 1
    for i in range(1, m + 1):
        ways = ways * i % MOD
    return ways


def largest_coprime_below(n: int) -> int:
    """Return the largest a <= n - 2 with gcd(a, n) == 1."""
    if n < 3:
        raise ValueError(f"no coprime value at most n - 2 exists for n = {n}")
    return next(a for a in range(n - 2, 0, -1) if math.gcd(a, n) == 1)


def game_winner(n: int, k: int) -> str:
    """Return the name of the winning player for a pile of n and a move limit of k."""
    if n == k:
        return FIRST_PLAYER
    if k == n - 1:
        return SECOND_PLAYER
    if (n % 2 == 0 and k == 1) or (n % 3 == 0 and k == 2) or n % (k + 1) == 0:
        return SECOND_PLAYER
    return FIRST_PLAYER


def permutation_difference_sum(n: int) -> int:
    """Return (0 + 1 + ... + (n - 1)) * n! for 0 <= n <= 10."""
    if not 0 <= n <= MAX_PERMUTATION_SIZE:
        raise ValueError(f"n must be between 0 and {MAX_PERMUTATION_SIZE}, got {n}")
    return sum(range(n)) * math.factorial(n)


def count_partitions(x: int, k: int) -> int:
    """Return the number of ordered ways to write x as parts of size 1..k, mod MOD."""
    if not 0 <= x <= MAX_TOTAL:
        raise ValueError(f"x must be between 0 and {MAX_TOTAL}, got {x}")
    if not 1 <= k <= MAX_PART:
        raise ValueError(f"k must be between 1 and {MAX_PART}, got {k}")
    ways = [1] + [0] * x
    window = 1
    for i in range(1, x + 1):
        ways[i] = window
        window = (window + ways[i]) % MOD
        if i >= k:
            window = (window - ways[i - k]) % MOD
    return ways[x]


def special_sets(n: int) -> int:
    """Return the number of ordered selections from 1..n with no two consecutive values, mod MOD.

    Every non-empty subset without neighbouring numbers is counted once per
    ordering of its elements.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    largest = (n + 1) // 2
    total = n
    pairs = (n - 2) * (n - 1) // 2 % MOD
    total = (total + pairs * 2) % MOD

    factorial = 2
    row = list(range(1, n - 1))
    for size in range(3, largest + 1):
        factorial = factorial * size % MOD
        if not row:
            break
        row = list(accumulate(row[: max(len(row) - 2, 1)], lambda p, q: (p + q) % MOD))
        total = (total + sum(row) % MOD * factorial) % MOD
    return total