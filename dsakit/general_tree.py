"""Problems on rooted and unrooted trees with nodes numbered 1..n."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _bfs(adjacency: list[list[int]], start: int) -> tuple[int, list[int]]:
    """Return the last node reached from ``start`` and every node's distance (-1 if unreached)."""
    distance = [-1] * len(adjacency)
    distance[start] = 0
    queue = deque([start])
    last = start
    while queue:
        node = queue.popleft()
        last = node
        for other in adjacency[node]:
            if distance[other] == -1:
                distance[other] = distance[node] + 1
                queue.append(other)
    return last, distance


def _parent_order(adjacency: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    """Return nodes in breadth-first order from ``root`` and each node's parent (0 for the root)."""
    parent = [0] * len(adjacency)
    seen = [False] * len(adjacency)
    seen[root] = True
    order = [root]
    for node in order:
        for other in adjacency[node]:
            if not seen[other]:
                seen[other] = True
                parent[other] = node
                order.append(other)
    return order, parent


def subordinate_counts(n: int, bosses: Sequence[int]) -> list[int]:
    """Return how many subordinates employees 1..n have; ``bosses[i]`` directs employee i + 2."""
    if len(bosses) != max(n - 1, 0):
        raise ValueError("expected one boss for each employee after the first")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} outside 1..{n}")
        children[boss].append(employee)
    if n == 0:
        return []
    order = [1]
    for node in order:
        order.extend(children[node])
    size = [1] * (n + 1)
    for node in reversed(order):
        size[node] += sum(size[child] for child in children[node])
    return [size[node] - 1 for node in range(1, n + 1)]


def tree_diameter(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the number of edges on the longest path of the tree."""
    if n <= 1:
        return 0
    adjacency = _adjacency(n, edges)
    end, _ = _bfs(adjacency, 1)
    other, distance = _bfs(adjacency, end)
    return distance[other]


def distance_sums(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return, for each node 1..n, the sum of its distances to all other nodes."""
    if n == 0:
        return []
    adjacency = _adjacency(n, edges)
    order, parent = _parent_order(adjacency, 1)
    size = [1] * (n + 1)
    inner = [0] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
        inner[parent[node]] += inner[node] + size[node]
    total = [0] * (n + 1)
    total[1] = inner[1]
    for node in order[1:]:
        total[node] = total[parent[node]] + n - 2 * size[node]
    return total[1:]


def max_distances(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Return, for each node 1..n, the distance to the node farthest from it."""
    if n == 0:
        return []
    if n == 1:
        return [0]
    adjacency = _adjacency(n, edges)
    first_end, _ = _bfs(adjacency, 1)
    second_end, from_first = _bfs(adjacency, first_end)
    _, from_second = _bfs(adjacency, second_end)
    return [max(from_first[node], from_second[node]) for node in range(1, n + 1)]


def greedy_matching(edges: Iterable[Sequence[int]]) -> int:
    """Match edges in the given order whenever both ends are still free; return the pair count."""
    matched: set[int] = set()
    for u, v in edges:
        if u not in matched and v not in matched:
            matched.add(u)
            matched.add(v)
    return len(matched) // 2