"""Single-source and all-pairs shortest paths on adjacency matrices.

Results are lists of :class:`Hop`: entry ``v`` holds the length of the best
path found to ``v`` and the vertex preceding ``v`` on it (-1 if none).
"""

from __future__ import annotations

import math
import operator
from typing import List, Sequence, Tuple

from algokit.graph import INF, Hop
from algokit.heap import priority_dequeue, priority_enqueue

__all__ = ["relax", "bellman_ford", "dijkstra", "dijkstra_priority", "floyd_warshall"]


def _check_source(graph: Sequence[Sequence[float]], source: int) -> None:
    if not 0 <= source < len(graph):
        raise ValueError(f"source {source} is not a vertex of a graph with {len(graph)} vertices")


def _initial_paths(size: int, source: int) -> List[Hop]:
    paths = [Hop(INF) for _ in range(size)]
    paths[source] = Hop(0.0)
    return paths


def relax(graph: Sequence[Sequence[float]], dp: List[Hop], r: int, v: int) -> bool:
    """Improve the path to ``v`` by going through ``r``; return whether it improved."""
    via_r = dp[r].weight + graph[r][v]
    if via_r < dp[v].weight:
        dp[v] = Hop(via_r, r)
        return True
    return False


def bellman_ford(graph: Sequence[Sequence[float]], source: int) -> Tuple[List[Hop], bool]:
    """Return the shortest paths from ``source`` and whether a negative cycle was seen.

    The flag is set when the last of the ``V - 1`` rounds still improved a path.
    """
    _check_source(graph, source)
    size = len(graph)
    dp = _initial_paths(size, source)
    has_negative_cycle = False
    for _ in range(size - 1):
        has_negative_cycle = False
        for r in range(size):
            for v in range(size):
                has_negative_cycle |= relax(graph, dp, r, v)
    return dp, has_negative_cycle


def dijkstra(graph: Sequence[Sequence[float]], source: int) -> List[Hop]:
    """Return the shortest paths from ``source``; weights must not be negative."""
    _check_source(graph, source)
    size = len(graph)
    dp = _initial_paths(size, source)
    is_open = [True] * size

    while True:
        reachable = [v for v in range(size) if is_open[v] and dp[v].weight < INF]
        if not reachable:
            break
        v_star = min(reachable, key=lambda v: dp[v].weight)
        is_open[v_star] = False
        for v, weight in enumerate(graph[v_star]):
            if is_open[v] and math.isfinite(weight):
                relax(graph, dp, v_star, v)

    return dp


def dijkstra_priority(graph: Sequence[Sequence[float]], source: int) -> List[Hop]:
    """Dijkstra's algorithm driven by a min-priority queue of tentative distances."""
    _check_source(graph, source)
    dp = _initial_paths(len(graph), source)

    queue: List[Hop] = []
    priority_enqueue(queue, Hop(0.0, source), operator.lt)
    while queue:
        v_star = priority_dequeue(queue, operator.lt).vertex
        for v, weight in enumerate(graph[v_star]):
            if math.isfinite(weight) and relax(graph, dp, v_star, v):
                priority_enqueue(queue, Hop(dp[v].weight, v), operator.lt)

    return dp


def floyd_warshall(graph: Sequence[Sequence[float]]) -> List[List[Hop]]:
    """Return the shortest paths between every pair of vertices.

    Entry ``[u][v]`` holds the path length and the vertex preceding ``v``.
    """
    size = len(graph)
    dp = [
        [
            Hop(0.0) if u == v else Hop(weight, u) if math.isfinite(weight) else Hop(INF)
            for v, weight in enumerate(row)
        ]
        for u, row in enumerate(graph)
    ]

    for r in range(size):
        for u in range(size):
            for v in range(size):
                through_r = dp[u][r].weight + dp[r][v].weight
                if through_r < dp[u][v].weight:
                    dp[u][v] = Hop(through_r, dp[r][v].vertex)

    return dp