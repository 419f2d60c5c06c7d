"""Knuth-Morris-Pratt search and descending range sorting of strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

MAX_CASES = 1000
MAX_LEN = 10000


def build_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table for ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length == 0:
            lps[i] = 0
            i += 1
        else:
            length = lps[length - 1]
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start index of every, possibly overlapping, match of ``pattern``."""
    if not pattern:
        return []
    lps = build_lps(pattern)
    matches: list[int] = []
    matched = 0
    for pos, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = lps[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                matches.append(pos - matched + 1)
                matched = lps[matched - 1]
    return matches


def count_occurrences(pattern: str, text: str) -> int:
    """Return how many times ``pattern`` occurs in ``text``."""
    return len(kmp_search(pattern, text))


def sort_range_descending(text: str, start: int, end: int) -> str:
    """Return ``text`` with the characters at ``start..end`` (inclusive) sorted descending."""
    if start >= end:
        return text
    if start < 0 or end >= len(text):
        raise IndexError(f"range [{start}, {end}] is outside a string of length {len(text)}")
    middle = "".join(sorted(text[start:end + 1], reverse=True))
    return text[:start] + middle + text[end + 1:]


def solve_cases(lines: Iterable[str]) -> list[str]:
    """Process input holding a case count followed by ``string start end`` cases."""
    tokens = iter([token for line in lines for token in line.split()])
    try:
        count = int(next(tokens))
    except (StopIteration, ValueError) as exc:
        raise ValueError("Invalid number of cases") from exc
    if not 1 <= count <= MAX_CASES:
        raise ValueError("Invalid number of cases")

    results = []
    for _ in range(count):
        try:
            text, start, end = next(tokens), int(next(tokens)), int(next(tokens))
        except StopIteration as exc:
            raise ValueError("Incomplete test case") from exc
        if len(text) >= MAX_LEN:
            raise ValueError(f"String longer than {MAX_LEN - 1} characters")
        results.append(sort_range_descending(text, start, end))
    return results


def _read_tokens(stream) -> Sequence[str]:
    return stream.read().split()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="dsakit-strings", description="String algorithms.")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("count", help="read a pattern and a text, print the number of matches")
    commands.add_parser("sort-range", help="sort character ranges in descending order")
    args = parser.parse_args(argv)

    if args.command == "count":
        tokens = _read_tokens(sys.stdin)
        if len(tokens) < 2:
            print("Expected a pattern and a text", file=sys.stderr)
            return 1
        print(count_occurrences(tokens[0], tokens[1]))
        return 0

    try:
        results = solve_cases(sys.stdin.read().splitlines())
    except (ValueError, IndexError) as exc:
        print(exc)
        return 1
    print("Output:")
    for line in results:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())