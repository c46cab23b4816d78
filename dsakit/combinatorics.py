"""Recursive enumeration: Fibonacci, permutations, subsets and partitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def permutations(nums: Iterable[T]) -> list[list[T]]:
    """Return every permutation of ``nums`` in the order produced by in-place swapping."""
    items = list(nums)
    result: list[list[T]] = []

    def place(start: int) -> None:
        if start == len(items):
            result.append(items.copy())
            return
        for pos in range(start, len(items)):
            items[start], items[pos] = items[pos], items[start]
            place(start + 1)
            items[start], items[pos] = items[pos], items[start]

    place(0)
    return result


def subsequences(items: Sequence[T]) -> list[list[T]]:
    """Return every subsequence, choosing to take each element before skipping it."""
    values = list(items)
    result: list[list[T]] = []
    chosen: list[T] = []

    def walk(index: int) -> None:
        if index >= len(values):
            result.append(chosen.copy())
            return
        chosen.append(values[index])
        walk(index + 1)
        chosen.pop()
        walk(index + 1)

    walk(0)
    return result


def unique_subsets(nums: Iterable[T]) -> list[list[T]]:
    """Return the distinct subsets of ``nums``, sorted lexicographically."""
    values = sorted(nums)
    seen: set[tuple[T, ...]] = set()
    chosen: list[T] = []

    def walk(index: int) -> None:
        seen.add(tuple(chosen))
        if index == len(values):
            return
        chosen.append(values[index])
        walk(index + 1)
        chosen.pop()
        walk(index + 1)

    walk(0)
    return [list(subset) for subset in sorted(seen)]


def unique_subsets_backtracking(nums: Iterable[T]) -> list[list[T]]:
    """Return the distinct subsets of ``nums`` by skipping repeated choices while backtracking."""
    values = sorted(nums)
    result: list[list[T]] = []
    chosen: list[T] = []

    def walk(start: int) -> None:
        result.append(chosen.copy())
        for pos in range(start, len(values)):
            if pos != start and values[pos] == values[pos - 1]:
                continue
            chosen.append(values[pos])
            walk(pos + 1)
            chosen.pop()

    walk(0)
    return result


def subset_sums(values: Sequence[int]) -> list[int]:
    """Return the sum of every subset, taking each element before leaving it out."""
    numbers = list(values)
    result: list[int] = []

    def walk(index: int, total: int) -> None:
        if index == len(numbers):
            result.append(total)
            return
        walk(index + 1, total + numbers[index])
        walk(index + 1, total)

    walk(0, 0)
    return result


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to split ``text`` into palindromic pieces."""
    result: list[list[str]] = []
    pieces: list[str] = []

    def walk(start: int) -> None:
        if start == len(text):
            result.append(pieces.copy())
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if piece == piece[::-1]:
                pieces.append(piece)
                walk(end)
                pieces.pop()

    walk(0)
    return result