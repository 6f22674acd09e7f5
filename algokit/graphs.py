"""Traversals of undirected graphs given as edge lists."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Iterable


def depth_first_search(
    vertex_count: int, edges: Iterable[Iterable[int]]
) -> list[list[int]]:
    """Connected components of vertices ``0..vertex_count-1`` in DFS order.

    Neighbours are visited in the order their edges were given.
    """
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited: set[int] = set()
    components: list[list[int]] = []
    for start in range(vertex_count):
        if start in visited:
            continue
        component: list[int] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            component.append(node)
            stack.extend(n for n in reversed(adjacency[node]) if n not in visited)
        components.append(component)
    return components


def breadth_first_search(
    vertex_count: int, edges: Iterable[Iterable[int]]
) -> list[int]:
    """BFS order over vertices ``0..vertex_count-1``, neighbours in ascending order."""
    adjacency: defaultdict[int, set[int]] = defaultdict(set)
    for u, v in edges:
        adjacency[u].add(v)
        adjacency[v].add(u)

    visited: set[int] = set()
    order: list[int] = []
    for start in range(vertex_count):
        if start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in sorted(adjacency[node]):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
    return order