"""String puzzles: capping ones in windows, rotations, chosen words and brackets."""

from __future__ import annotations


def limit_ones(s: str, k: int, m: int) -> tuple[int, str]:
    """Turn ones into zeros so that no window of ``k`` characters holds more than ``m`` ones.

    The first window keeps its earliest ``m`` ones. After that, a one that
    would overflow the window it closes is cleared. Returns the number of
    changed characters and the resulting string.
    """
    if not 1 <= k <= len(s):
        raise ValueError(f"window length must be between 1 and {len(s)}, got {k}")
    if m < 0:
        raise ValueError(f"limit must be non-negative, got {m}")

    chars = list(s)
    changes = 0
    window_ones = [i for i, ch in enumerate(chars[:k]) if ch == "1"]
    for i in window_ones[m:]:
        chars[i] = "0"
        changes += 1
    count = min(len(window_ones), m)

    for i in range(k, len(chars)):
        if chars[i - k] == "1":
            count -= 1
        if chars[i] == "1":
            if count < m:
                count += 1
            else:
                chars[i] = "0"
                changes += 1
    return changes, "".join(chars)


def rotation_shift(s: str, t: str) -> int:
    """Return how many leading characters of ``s`` must move to its end to give ``t``.

    When no shorter shift is found, or the only one found moves all but one
    character, the result is the length of the strings.
    """
    n = len(s)
    if len(t) != n:
        raise ValueError("both strings must have the same length")

    best = n
    start = -1
    matched = 0
    i = 0
    while i < n and matched < n:
        if s[i] == t[matched]:
            if start < 0:
                start = i
            matched += 1
            if start + n - i - 1 == n - matched:
                best = min(best, n - matched)
        else:
            matched = 0
            if start > 0:
                i = start + 1
            start = -1
        i += 1
    return n if best == n - 1 else best


def smallest_chosen_word(prefix: str, pool: str, suffix: str) -> str:
    """Return ``prefix`` + a subsequence of ``pool`` + ``suffix``, chosen to be small.

    Characters of ``pool`` are taken in sorted order while their positions
    keep increasing: those below the first character of ``suffix``, and
    those equal to it when ``suffix`` continues with a larger character.
    """
    if not suffix:
        raise ValueError("suffix must not be empty")

    head = suffix[0]
    following = next((ch for ch in suffix[1:] if ch != head), None)
    chosen: list[str] = []
    last = -1
    for ch, position in sorted((ch, i) for i, ch in enumerate(pool)):
        if position <= last:
            continue
        if ch < head or (ch == head and following is not None and ch < following):
            chosen.append(ch)
            last = position
    return prefix + "".join(chosen) + suffix


def super_balanced_length(s: str) -> int:
    """Return twice the number of opening brackets in the first half of ``s``."""
    return 2 * s[: len(s) // 2].count("(")