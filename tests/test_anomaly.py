import pytest

from graphwizard.anomaly import degree_z_score, isolation_score, structural_outliers
from graphwizard.graph import UndirectedGraph

EPSILON = 1e-9


def star_graph(center: int, leaves: int) -> UndirectedGraph:
    g = UndirectedGraph()
    g.add_node(center)
    for i in range(leaves):
        leaf = center + i + 1
        g.add_node(leaf)
        g.add_edge(center, leaf)
    return g


def test_degree_z_score_star():
    scores = degree_z_score(star_graph(0, 4))
    assert scores[0] > 0
    for leaf in range(1, 5):
        assert scores[leaf] < 0


def test_degree_z_score_regular_graph():
    g = UndirectedGraph()
    for i in range(4):
        g.add_node(i)
    for i in range(4):
        for j in range(i + 1, 4):
            g.add_edge(i, j)
    scores = degree_z_score(g)
    for i in range(4):
        assert abs(scores[i]) <= EPSILON


def test_degree_z_score_empty():
    assert degree_z_score(UndirectedGraph()) == {}


def test_degree_z_score_single_node():
    g = UndirectedGraph()
    g.add_node(0)
    assert degree_z_score(g) == {0: 0.0}


def test_degree_z_score_example():
    g = UndirectedGraph()
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    assert degree_z_score(g)[0] > 0


def test_isolation_score_star():
    scores = isolation_score(star_graph(0, 4))
    assert scores[0] > 0
    leaf = scores[1]
    for i in range(2, 5):
        assert scores[i] == pytest.approx(leaf, abs=EPSILON)


def test_isolation_score_empty():
    assert isolation_score(UndirectedGraph()) == {}


def test_isolation_score_example_count():
    g = UndirectedGraph()
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    g.add_edge(3, 4)
    assert len(isolation_score(g)) == 5


def test_isolation_score_in_unit_range():
    g = UndirectedGraph()
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    g.add_edge(3, 4)
    for value in isolation_score(g).values():
        assert 0.0 <= value <= 1.0


def test_isolation_score_hub_and_spoke():
    g = UndirectedGraph()
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)
    g.add_edge(3, 4)
    g.add_edge(4, 5)
    g.add_edge(5, 3)
    g.add_edge(6, 0)
    g.add_edge(6, 3)
    scores = isolation_score(g)
    assert sorted(scores) == list(range(7))
    assert 0.0 < scores[6] <= 1.0


def test_structural_outliers_star():
    outliers = structural_outliers(star_graph(0, 4), 1)
    assert len(outliers) == 1
    assert 0 <= outliers[0] <= 4


def test_structural_outliers_example_count():
    g = UndirectedGraph()
    for leaf in range(1, 5):
        g.add_edge(0, leaf)
    assert len(structural_outliers(g, 1)) == 1


def test_structural_outliers_k_larger_than_graph():
    g = UndirectedGraph()
    g.add_node(0)
    g.add_node(1)
    g.add_edge(0, 1)
    assert sorted(structural_outliers(g, 10)) == [0, 1]


def test_structural_outliers_sorted_by_score():
    g = UndirectedGraph()
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    g.add_edge(3, 4)
    scores = isolation_score(g)
    ranked = structural_outliers(g, 5)
    assert sorted(ranked) == sorted(scores)
    values = [scores[n] for n in ranked]
    assert values == sorted(values, reverse=True)