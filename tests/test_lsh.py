import math
import random

import pytest

from algokit.lsh import (
    CODE_BITS,
    LSHFamily,
    LSHResult,
    LSHTable,
    benchmark,
    cosine_distance,
    main,
    naive_retrieve,
    sample_amplified_lsh_function,
    sample_dataset,
    sample_lsh_function,
    sample_unit_vector,
)


@pytest.fixture
def rng():
    return random.Random(7)


def _negate(vec):
    return tuple(-x for x in vec)


@pytest.mark.parametrize("dim", [2, 3, 5])
def test_unit_vector_has_unit_norm(rng, dim):
    vec = sample_unit_vector(rng, dim)
    assert len(vec) == dim
    assert math.isclose(math.sqrt(sum(x * x for x in vec)), 1.0)


def test_sampling_is_reproducible():
    first = sample_dataset(random.Random(3), 5)
    second = sample_dataset(random.Random(3), 5)
    assert first == second
    assert len(first) == 5


def test_cosine_distance_identical_is_zero(rng):
    vec = sample_unit_vector(rng)
    assert cosine_distance(vec, vec) == pytest.approx(0.0, abs=1e-12)


def test_cosine_distance_opposite_and_orthogonal():
    assert cosine_distance((1.0, 0.0, 0.0), (-2.0, 0.0, 0.0)) == pytest.approx(2.0)
    assert cosine_distance((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(1.0)


def test_cosine_distance_is_symmetric(rng):
    a, b = sample_dataset(rng, 2)
    assert cosine_distance(a, b) == pytest.approx(cosine_distance(b, a))


def test_lsh_function_splits_opposite_vectors(rng):
    f = sample_lsh_function(rng)
    for vec in sample_dataset(rng, 20):
        assert f(vec) in (0, 1)
        assert f(vec) + f(_negate(vec)) == 1


def test_amplified_function_code_fits_and_complements(rng):
    r = 6
    f = sample_amplified_lsh_function(rng, r)
    for vec in sample_dataset(rng, 20):
        code = f(vec)
        assert 0 <= code < 2 ** r
        assert code ^ f(_negate(vec)) == 2 ** r - 1


@pytest.mark.parametrize("r", [0, CODE_BITS + 1])
def test_amplified_function_rejects_bad_amplification(rng, r):
    with pytest.raises(ValueError):
        sample_amplified_lsh_function(rng, r)


def test_family_samples_functions_of_its_amplification(rng):
    family = LSHFamily(4, rng)
    f = family()
    codes = {f(vec) for vec in sample_dataset(rng, 50)}
    assert all(0 <= code < 2 ** 4 for code in codes)


def test_empty_table_finds_nothing(rng):
    table = LSHTable(4, 2, LSHFamily(2, rng))
    result = table.get(sample_unit_vector(rng), 10)
    assert result == LSHResult(math.inf, None, 0)


def test_table_finds_inserted_key_exactly(rng):
    dataset = sample_dataset(rng, 100)
    table = LSHTable(16, 2, LSHFamily(4, rng))
    for key in dataset:
        table.insert(key)
    query = dataset[17]
    result = table.get(query, 1000, 0)
    assert result.key == query
    assert result.distance == pytest.approx(0.0, abs=1e-12)
    assert 1 <= result.num_comparisons <= 1000


def test_table_respects_comparison_budget(rng):
    dataset = sample_dataset(rng, 100)
    table = LSHTable(2, 3, LSHFamily(1, rng))
    for key in dataset:
        table.insert(key)
    result = table.get(dataset[0], 1, 0)
    assert result.num_comparisons == 1
    assert math.isfinite(result.distance)


def test_naive_retrieve_counts_and_finds(rng):
    dataset = sample_dataset(rng, 30)
    result = naive_retrieve(dataset, dataset[4])
    assert result.key == dataset[4]
    assert result.num_comparisons == len(dataset) + 1
    assert result.distance == pytest.approx(0.0, abs=1e-12)


def test_naive_retrieve_is_never_worse_than_lsh(rng):
    dataset = sample_dataset(rng, 200)
    table = LSHTable(256, 1, LSHFamily(8, rng))
    for key in dataset:
        table.insert(key)
    for query in sample_dataset(rng, 20):
        lsh = table.get(query, 10, 0)
        naive = naive_retrieve(dataset, query)
        assert naive.distance <= lsh.distance


def test_benchmark_constant_distance():
    mean, variance, rate = benchmark(range(4), lambda _: 0.5)
    assert mean == pytest.approx(0.5)
    assert variance == pytest.approx(0.0, abs=1e-12)
    assert rate == 1.0


def test_benchmark_counts_only_finite_results():
    values = {0: 0.25, 1: math.inf}
    mean, _, rate = benchmark([0, 1], values.__getitem__)
    assert mean == pytest.approx(0.25)
    assert rate == pytest.approx(0.5)


def test_benchmark_without_success():
    mean, variance, rate = benchmark([0, 1], lambda _: math.inf)
    assert math.isnan(mean) and math.isnan(variance)
    assert rate == 0.0


def test_main_prints_table(capsys):
    assert main(["--dataset-size", "40", "--queryset-size", "5", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("| #tables")
    assert "#comp." in lines[0] and "rel d." in lines[0]
    assert len(lines) == 3 + 4 * 3 * 5
    assert all(line.startswith("| ") and line.endswith("|") for line in lines)
    assert lines[2].startswith("| -       | 40")