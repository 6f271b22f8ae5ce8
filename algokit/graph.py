"""Weighted directed graphs as adjacency matrices and adjacency lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Sequence

from algokit.formatting import format_value

__all__ = [
    "INF",
    "Hop",
    "TEST_GRAPH",
    "SPARSE_TEST_GRAPH",
    "dense_to_sparse",
    "graph_to_dot",
    "percent_encode_dot",
    "print_graph",
]

INF = math.inf


@dataclass(frozen=True)
class Hop:
    """An edge weight paired with a vertex; ordered by weight alone."""

    weight: float
    vertex: int = -1

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Hop):
            return NotImplemented
        return self.weight < other.weight

    def __str__(self) -> str:
        return f"({format_value(self.weight)},{self.vertex})"


# Adjacency matrix: graph[u][v] is the weight of edge u -> v, INF if absent.
Graph = List[List[float]]
# Adjacency list: graph[u] holds a Hop(weight, v) for each edge u -> v.
SparseGraph = List[List[Hop]]

TEST_GRAPH: Graph = [
    [INF, 4, INF, INF, INF, INF, INF, 8, INF],
    [INF, INF, INF, INF, INF, INF, INF, 11, INF],
    [INF, INF, INF, INF, INF, 4, INF, INF, 2],
    [INF, INF, INF, INF, 9, 14, INF, INF, INF],
    [INF, INF, INF, INF, INF, 10, INF, INF, INF],
    [INF, INF, INF, INF, INF, INF, 2, INF, INF],
    [INF, INF, INF, 3, INF, INF, INF, 1, 6],
    [INF, INF, INF, INF, INF, INF, INF, INF, 7],
    [INF, INF, INF, INF, INF, INF, INF, INF, INF],
]

SPARSE_TEST_GRAPH: SparseGraph = [
    [Hop(4, 1), Hop(8, 7)],
    [Hop(11, 7)],
    [Hop(4, 5), Hop(2, 8)],
    [Hop(9, 4), Hop(14, 5)],
    [Hop(10, 5)],
    [Hop(2, 6)],
    [Hop(3, 3), Hop(1, 7), Hop(6, 8)],
    [Hop(7, 8)],
    [],
]


def dense_to_sparse(graph: Sequence[Sequence[float]]) -> SparseGraph:
    """Convert an adjacency matrix to adjacency lists, dropping infinite weights."""
    return [
        [Hop(weight, vertex) for vertex, weight in enumerate(row) if math.isfinite(weight)]
        for row in graph
    ]


def _as_sparse(graph: Sequence[Sequence[Any]]) -> SparseGraph:
    if all(isinstance(entry, Hop) for row in graph for entry in row):
        return [list(row) for row in graph]
    return dense_to_sparse(graph)


def graph_to_dot(graph: Sequence[Sequence[Any]]) -> str:
    """Return the Graphviz description of a dense or sparse graph."""
    lines = ["digraph G {"]
    for source, row in enumerate(_as_sparse(graph)):
        for hop in row:
            lines.append(
                f"    {source} -> {hop.vertex} [label= {format_value(hop.weight)}];"
            )
    lines.append("}")
    return "\n".join(lines) + "\n"


def percent_encode_dot(graph: Sequence[Sequence[Any]]) -> str:
    """Return the Graphviz description with every byte written as ``%xx``."""
    return "".join(f"%{byte:02x}" for byte in graph_to_dot(graph).encode("utf-8"))


def print_graph(
    graph: Sequence[Sequence[Any]],
    as_url: bool = False,
    url_prefix: str = "",
) -> None:
    """Print the graph in Graphviz form, or percent-encoded after ``url_prefix``."""
    if as_url:
        print(url_prefix + percent_encode_dot(graph))
    else:
        print(graph_to_dot(graph))