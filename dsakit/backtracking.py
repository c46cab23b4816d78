"""Backtracking searches: graph colouring, N-queens and maze paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _colour_nodes(adjacency: list[list[int]], colours: int) -> list[int] | None:
    """Assign colours 1..colours node by node; return the assignment or None."""
    assigned = [0] * len(adjacency)

    def place(node: int) -> bool:
        if node == len(adjacency):
            return True
        for colour in range(1, colours + 1):
            if all(assigned[other] != colour for other in adjacency[node]):
                assigned[node] = colour
                if place(node + 1):
                    return True
                assigned[node] = 0
        return False

    return assigned if place(0) else None


def graph_coloring(matrix: Sequence[Sequence[int | bool]], m: int) -> bool:
    """Return whether the graph given by an adjacency matrix can be coloured with ``m`` colours."""
    n = len(matrix)
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for i, row in enumerate(matrix):
        for j, linked in enumerate(row):
            if linked and j < n:
                adjacency[i].append(j)
                adjacency[j].append(i)
    return _colour_nodes(adjacency, m) is not None


def garden_no_adjacent(n: int, paths: Iterable[Sequence[int]]) -> list[int]:
    """Choose a flower type 1-4 for gardens 1..n so that joined gardens differ."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for first, second in paths:
        adjacency[first - 1].append(second - 1)
        adjacency[second - 1].append(first - 1)
    return _colour_nodes(adjacency, 4) or []


def n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens, filling columns left to right."""
    if n < 0:
        raise ValueError("n must be non-negative")
    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()
    result: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            result.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return result


_MOVES = (("R", 0, 1), ("L", 0, -1), ("D", 1, 0), ("U", -1, 0))


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of R/L/D/U moves from the top-left to the bottom-right open cell."""
    n = len(grid)
    if n == 0 or grid[0][0] == 0:
        return []
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []
    result: list[str] = []

    def walk(row: int, col: int) -> None:
        if row == n - 1 and col == n - 1:
            result.append("".join(steps))
            return
        visited.add((row, col))
        for letter, d_row, d_col in _MOVES:
            nrow, ncol = row + d_row, col + d_col
            if 0 <= nrow < n and 0 <= ncol < n:
                if grid[nrow][ncol] == 1 and (nrow, ncol) not in visited:
                    steps.append(letter)
                    walk(nrow, ncol)
                    steps.pop()
                    visited.discard((nrow, ncol))

    walk(0, 0)
    return result