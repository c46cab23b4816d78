"""Counting inversions with merge sort."""

from __future__ import annotations

from collections.abc import Iterable


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    merged: list[int] = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Return the number of pairs i < j with values[i] > values[j]."""
    _, count = _sort_and_count(list(values))
    return count