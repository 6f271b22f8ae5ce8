"""Locality-sensitive hashing for approximate nearest-neighbour search.

Keys are unit vectors compared by cosine distance. Each LSH function hashes a
vector to a bit pattern built from signs of random projections.
"""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from algokit.hash_table import HashTable

__all__ = [
    "DATA_DIM",
    "CODE_BITS",
    "LSHResult",
    "LSHFamily",
    "LSHTable",
    "sample_unit_vector",
    "sample_dataset",
    "cosine_distance",
    "sample_lsh_function",
    "sample_amplified_lsh_function",
    "naive_retrieve",
    "benchmark",
    "main",
]

DATA_DIM = 3
CODE_BITS = 32
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
RANDOM_SEED = 0

Vector = Tuple[float, ...]
LSHFunction = Callable[[Sequence[float]], int]
DistanceFunction = Callable[[Sequence[float], Sequence[float]], float]


def sample_unit_vector(rng: random.Random, dim: int = DATA_DIM) -> Vector:
    """Sample a vector uniformly on the unit hypersphere."""
    components = [rng.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(sum(x * x for x in components))
    return tuple(x / norm for x in components)


def sample_dataset(rng: random.Random, num_data: int, dim: int = DATA_DIM) -> List[Vector]:
    """Sample ``num_data`` unit vectors."""
    return [sample_unit_vector(rng, dim) for _ in range(num_data)]


def cosine_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Return one minus the cosine of the angle between two non-zero vectors."""
    xnorm2 = sum(x * x for x in vec1)
    ynorm2 = sum(y * y for y in vec2)
    dot = sum(x * y for x, y in zip(vec1, vec2))
    return 1 - dot / math.sqrt(xnorm2 * ynorm2)


def sample_lsh_function(rng: random.Random, dim: int = DATA_DIM) -> LSHFunction:
    """Sample a binary function ``f(x) = 1 if <w, x> >= 0 else 0``."""
    weights = sample_unit_vector(rng, dim)

    def lsh(vec: Sequence[float]) -> int:
        dot = sum(w * x for w, x in zip(weights, vec))
        return 1 if dot >= 0 else 0

    return lsh


def sample_amplified_lsh_function(
    rng: random.Random, r: int, dim: int = DATA_DIM
) -> LSHFunction:
    """Sample ``F(x) = [f1(x), ..., fr(x)]`` packed into an ``r``-bit integer."""
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification must be between 1 and {CODE_BITS}, got {r}")
    functions = [sample_lsh_function(rng, dim) for _ in range(r)]

    def amplified(vec: Sequence[float]) -> int:
        code = 0
        for function in functions:
            code = (code << 1) | function(vec)
        return code

    return amplified


@dataclass
class LSHFamily:
    """A family of amplified LSH functions; calling it samples one."""

    amplification: int
    rng: random.Random = field(default_factory=lambda: random.Random(RANDOM_SEED))
    dim: int = DATA_DIM

    def __call__(self) -> LSHFunction:
        return sample_amplified_lsh_function(self.rng, self.amplification, self.dim)


@dataclass
class LSHResult:
    """Outcome of a retrieval: best distance, matching key and comparisons made."""

    distance: float
    key: Optional[Any]
    num_comparisons: int


class LSHTable:
    """Several hash tables, each keyed by the code of its own LSH function."""

    def __init__(
        self,
        num_chains: int,
        num_tables: int,
        lsh_family: Callable[[], LSHFunction],
        distance: DistanceFunction = cosine_distance,
    ) -> None:
        self._tables: List[HashTable] = []
        self._functions: List[LSHFunction] = []
        for _ in range(num_tables):
            self._tables.append(HashTable(num_chains, hash_function=int))
            self._functions.append(lsh_family())
        self._distance = distance

    def insert(self, key: Any) -> None:
        """Add ``key`` to every table under the code its function gives it."""
        for table, function in zip(self._tables, self._functions):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query: Any, m: int = 1, tau: float = 0) -> LSHResult:
        """Search for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen is returned
        even if it is farther than ``tau``. With no candidate at all the
        distance is infinite and the key is ``None``.
        """
        result = LSHResult(math.inf, None, 0)
        for table, function in zip(self._tables, self._functions):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = self._distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= m:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(dataset: Iterable[Any], query: Any) -> LSHResult:
    """Scan the whole dataset for the key closest to ``query`` by cosine distance."""
    result = LSHResult(math.inf, None, 1)
    for key in dataset:
        d = cosine_distance(key, query)
        result.num_comparisons += 1
        if d < result.distance:
            result.distance = d
            result.key = key
    return result


def benchmark(
    queries: Iterable[Any], get: Callable[[Any], float]
) -> Tuple[float, float, float]:
    """Return mean and variance of the finite distances and the share that were finite."""
    total = 0.0
    total_sq = 0.0
    n = 0
    nok = 0
    for query in queries:
        d = get(query)
        if math.isfinite(d):
            total += d
            total_sq += d * d
            nok += 1
        n += 1
    if nok == 0:
        return math.nan, math.nan, 0.0
    mean = total / nok
    variance = total_sq / nok - mean * mean
    return mean, variance, nok / n


def _cell(value: Any, spec: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    return format(value, spec)


def _result_row(nt, nc, r, sp, mean, stddev, rate, rel) -> str:
    return (
        "| " + _cell(nt, "g").ljust(7)
        + " | " + _cell(nc, "g").ljust(7)
        + " | " + _cell(r, "g").ljust(7)
        + " | " + _cell(mean, ".3g").ljust(10)
        + " " + _cell(stddev, ".3g").ljust(10)
        + " | " + _cell(sp, ".1g").ljust(7)
        + " | " + _cell(rate, ".1f").rjust(6)
        + " | " + _cell(rel, ".1f").rjust(6)
        + "|"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare LSH retrieval with a linear scan on random unit vectors."""
    parser = argparse.ArgumentParser(description="Benchmark LSH tables against a linear scan.")
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queryset-size", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    dataset = sample_dataset(rng, args.dataset_size)
    queries = sample_dataset(rng, args.queryset_size)
    sqrt_queries = math.sqrt(args.queryset_size)

    print(_result_row("#tables", "#comp.", "amplif.", "speedup",
                      "distance", "(stddev)", "succ.", "rel d."))
    print(_result_row("-", "-", "-", "-", "-", "", "-", "-"))

    mean, variance, rate = benchmark(
        queries, lambda query: naive_retrieve(dataset, query).distance
    )
    print(_result_row("-", args.dataset_size, "-", 1, mean,
                      variance / sqrt_queries, rate, 1))
    best = mean

    for num_comparisons in (1, 10, 100, 1000):
        for num_tables in (1, 2, 3):
            for amplification in (1, 4, 8, 16, 32):
                num_chains = min(1 << amplification, 256)
                table = LSHTable(num_chains, num_tables, LSHFamily(amplification, rng))
                for key in dataset:
                    table.insert(key)

                mean, variance, rate = benchmark(
                    queries,
                    lambda query: table.get(query, num_comparisons, 0).distance,
                )
                print(_result_row(
                    num_tables, num_comparisons, amplification,
                    args.dataset_size / num_comparisons, mean,
                    variance / sqrt_queries, rate * 100, mean / best,
                ))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())