"""Command line runner for the test-case driven sequence problems."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from itertools import islice

from contestkit.sequences import merge_sorted, single_number


def _tokens(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None


def _take(tokens: Iterator[int], count: int) -> list[int]:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def _take_one(tokens: Iterator[int]) -> int:
    return _take(tokens, 1)[0]


def _run_single_number(tokens: Iterator[int]) -> Iterator[str]:
    for _ in range(_take_one(tokens)):
        size = _take_one(tokens)
        yield str(single_number(_take(tokens, size)))


def _run_merge_sorted(tokens: Iterator[int]) -> Iterator[str]:
    for _ in range(_take_one(tokens)):
        n, m = _take(tokens, 2)
        a = _take(tokens, n)
        b = _take(tokens, m)
        yield " ".join(map(str, merge_sorted(a, b)))


_COMMANDS = {
    "single-number": _run_single_number,
    "merge-sorted": _run_merge_sorted,
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer line per case."""
    parser = argparse.ArgumentParser(prog="contestkit")
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin.read())
    try:
        lines = list(_COMMANDS[args.command](tokens))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())