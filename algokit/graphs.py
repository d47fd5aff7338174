"""Graph traversal, shortest paths, spanning trees and grid filling."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from .structures import DisjointSet


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


class NegativeCycleError(ValueError):
    """Raised when a weighted graph contains a cycle of negative total weight."""


def _check_node(node: int, count: int) -> None:
    if not 0 <= node < count:
        raise IndexError(f"node {node} is out of range for {count} nodes")


def bfs(start: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Nodes reachable from ``start`` in breadth-first order."""
    _check_node(start, len(adjacency))
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def dfs(start: int, adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Nodes reachable from ``start`` in depth-first (preorder) order."""
    _check_node(start, len(adjacency))
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order


def dijkstra(
    start: int, adjacency: Sequence[Iterable[tuple[int, float]]]
) -> list[float]:
    """Shortest distance from ``start`` to every node; ``math.inf`` if unreachable.

    ``adjacency[u]`` holds ``(neighbor, weight)`` pairs with non-negative weights.
    """
    _check_node(start, len(adjacency))
    dist: list[float] = [math.inf] * len(adjacency)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbor, weight in adjacency[node]:
            candidate = distance + weight
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))
    return dist


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> tuple[float, list[tuple[int, int, float]]]:
    """Minimum spanning forest: its total weight and its edges in the order chosen.

    ``edges`` are ``(u, v, weight)`` triples of an undirected graph.
    """
    components = DisjointSet(vertex_count)
    total: float = 0
    chosen: list[tuple[int, int, float]] = []
    for u, v, weight in sorted(edges, key=lambda edge: edge[2]):
        if components.union(u, v):
            total += weight
            chosen.append((u, v, weight))
    return total, chosen


def topological_sort(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Order the nodes so every edge points forward (Kahn's algorithm)."""
    count = len(adjacency)
    indegree = [0] * count
    for neighbors in adjacency:
        for neighbor in neighbors:
            indegree[neighbor] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)
    if len(order) != count:
        raise CycleError("graph contains a cycle")
    return order


def floyd_warshall(matrix: Sequence[Sequence[float | None]]) -> list[list[float]]:
    """All-pairs shortest distances of a weighted adjacency matrix.

    Off the diagonal, ``0``, ``None`` and ``math.inf`` all mean "no edge".
    Unreachable pairs come back as ``math.inf``.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    dist: list[list[float]] = [
        [
            math.inf if weight is None or (i != j and weight == 0) else weight
            for j, weight in enumerate(row)
        ]
        for i, row in enumerate(matrix)
    ]
    for k, via in enumerate(dist):
        for row in dist:
            to_via = row[k]
            if to_via == math.inf:
                continue
            for j, onward in enumerate(via):
                if to_via + onward < row[j]:
                    row[j] = to_via + onward
    if any(row[i] < 0 for i, row in enumerate(dist)):
        raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected components of a graph given as a 0/1 matrix."""
    size = len(is_connected)
    visited = [False] * size
    provinces = 0
    for start in range(size):
        if visited[start]:
            continue
        provinces += 1
        visited[start] = True
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbor, linked in enumerate(is_connected[node]):
                if linked == 1 and not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)
    return provinces


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, new_color: int
) -> list[list[int]]:
    """Copy of ``image`` with the 4-connected region around (row, col) recoloured."""
    filled = [list(line) for line in image]
    if not (0 <= row < len(filled) and 0 <= col < len(filled[row])):
        raise IndexError(f"pixel ({row}, {col}) is outside the image")
    old_color = filled[row][col]
    if old_color == new_color:
        return filled
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(filled) and 0 <= c < len(filled[r])):
            continue
        if filled[r][c] != old_color:
            continue
        filled[r][c] = new_color
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return filled