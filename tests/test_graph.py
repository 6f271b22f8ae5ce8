from urllib.parse import unquote

from algokit.graph import (
    SPARSE_TEST_GRAPH,
    TEST_GRAPH,
    Hop,
    dense_to_sparse,
    graph_to_dot,
    percent_encode_dot,
    print_graph,
)


def test_dense_to_sparse_matches_sparse_test_graph():
    assert dense_to_sparse(TEST_GRAPH) == SPARSE_TEST_GRAPH


def test_hop_string_form():
    assert str(Hop(4, 1)) == "(4,1)"
    assert str(Hop(float("inf"), -1)) == "(inf,-1)"


def test_hops_order_by_weight_only():
    hops = [Hop(3, 0), Hop(1, 2), Hop(2, 9)]
    assert sorted(hops) == [Hop(1, 2), Hop(2, 9), Hop(3, 0)]
    assert not Hop(2, 0) < Hop(2, 5)


def test_dot_layout():
    dot = graph_to_dot(SPARSE_TEST_GRAPH)
    lines = dot.splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert "    0 -> 1 [label= 4];" in lines
    assert len(lines) == sum(len(row) for row in SPARSE_TEST_GRAPH) + 2
    assert dot.endswith("}\n")


def test_dot_same_for_dense_and_sparse():
    assert graph_to_dot(TEST_GRAPH) == graph_to_dot(SPARSE_TEST_GRAPH)


def test_percent_encoding_round_trips():
    encoded = percent_encode_dot(TEST_GRAPH)
    dot = graph_to_dot(TEST_GRAPH)
    assert unquote(encoded) == dot
    assert len(encoded) == 3 * len(dot)
    assert encoded.startswith("%64%69")


def test_print_graph_plain(capsys):
    print_graph(TEST_GRAPH)
    assert capsys.readouterr().out == graph_to_dot(TEST_GRAPH) + "\n"


def test_print_graph_as_url(capsys):
    print_graph(SPARSE_TEST_GRAPH, as_url=True, url_prefix="view#")
    assert capsys.readouterr().out == "view#" + percent_encode_dot(SPARSE_TEST_GRAPH) + "\n"


def test_empty_graph_dot():
    assert graph_to_dot([]) == "digraph G {\n}\n"