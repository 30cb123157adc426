from __future__ import annotations

import itertools
import random

import networkx as nx
import pytest

from adjgraph.algorithms.rlf import color_graph, restricted_degree
from adjgraph.model.matrix import Matrix
from adjgraph.parse import parse_unweighted
from adjgraph.results.coloring import ColorClass
from adjgraph.types.base import UNCOLORED


def _random_symmetric(n: int, density: float, rng: random.Random) -> Matrix:
    cells = [[0] * n for _ in range(n)]
    for i, j in itertools.combinations(range(n), 2):
        if rng.random() < density:
            cells[i][j] = cells[j][i] = 1
    return Matrix.from_rows(cells)


def _assert_proper(matrix: Matrix, result) -> None:
    n = matrix.size
    members = [v for c in result.classes for v in c.vertices]
    assert sorted(members) == list(range(n))
    assert UNCOLORED not in result.assignment
    for c in result.classes:
        for v in c.vertices:
            assert result.assignment[v] == c.color_index
    for u, v in itertools.product(range(n), repeat=2):
        if u != v and matrix[u][v] == 1:
            assert result.assignment[u] != result.assignment[v]
    assert 1 <= result.chromatic_number <= n


class TestRLF:
    def test_complete_graph_needs_n_singletons(self, complete4):
        result = color_graph(complete4)
        assert result.chromatic_number == 4
        assert all(len(c) == 1 for c in result.classes)
        assert [c.color_index for c in result.classes] == [0, 1, 2, 3]

    def test_no_edges_single_class(self, empty5):
        result = color_graph(empty5)
        assert result.classes == (ColorClass(0, (0, 1, 2, 3, 4)),)
        assert result.assignment == (0, 0, 0, 0, 0)

    def test_single_vertex(self):
        for text in ("0", "1"):
            result = color_graph(parse_unweighted(text))
            assert result.classes == (ColorClass(0, (0,)),)
            assert result.assignment == (0,)

    def test_path_graph(self, path4):
        """B and C tie at degree 2; B has the lower index and opens class 0."""
        result = color_graph(path4)
        assert [c.vertices for c in result.classes] == [(1, 3), (0, 2)]
        assert result.assignment == (1, 0, 1, 0)

    def test_star_graph(self, star4):
        result = color_graph(star4)
        assert [c.vertices for c in result.classes] == [(0,), (1, 2, 3)]

    def test_odd_cycle_uses_three_colors(self, cycle5):
        result = color_graph(cycle5)
        assert [c.vertices for c in result.classes] == [(0, 2), (3, 1), (4,)]
        assert result.assignment == (0, 1, 0, 1, 2)

    def test_directed_uses_out_edges(self):
        # A -> B only: A has out-degree 1 and is colored first
        forward = color_graph(parse_unweighted("0,1\n0,0"))
        assert [c.vertices for c in forward.classes] == [(0,), (1,)]
        # B -> A only: B has out-degree 1 and is colored first
        backward = color_graph(parse_unweighted("0,0\n1,0"))
        assert [c.vertices for c in backward.classes] == [(1,), (0,)]

    def test_idempotent(self, cycle5):
        assert color_graph(cycle5) == color_graph(cycle5)

    def test_random_symmetric_graphs_are_properly_colored(self):
        rng = random.Random(7)
        for _ in range(200):
            n = rng.randint(1, 9)
            matrix = _random_symmetric(n, rng.random(), rng)
            _assert_proper(matrix, color_graph(matrix))

    @pytest.mark.parametrize("n", [1, 2, 5, 8])
    def test_complete_graphs(self, n):
        graph = nx.complete_graph(n)
        matrix = Matrix.from_rows(nx.to_numpy_array(graph, dtype=int).tolist())
        result = color_graph(matrix)
        assert result.chromatic_number == n

    def test_bipartite_graph_two_colors(self):
        graph = nx.complete_bipartite_graph(3, 4)
        matrix = Matrix.from_rows(
            nx.to_numpy_array(graph, nodelist=range(7), dtype=int).tolist()
        )
        result = color_graph(matrix)
        _assert_proper(matrix, result)
        assert result.chromatic_number == 2

    def test_not_worse_than_nx_proper_coloring_bound(self):
        """Class count never exceeds max degree + 1."""
        rng = random.Random(11)
        for _ in range(50):
            matrix = _random_symmetric(8, 0.5, rng)
            graph = nx.Graph(matrix.to_networkx())
            max_degree = max((d for _, d in graph.degree()), default=0)
            assert color_graph(matrix).chromatic_number <= max_degree + 1


def test_restricted_degree():
    matrix = parse_unweighted("0,1,1\n1,0,0\n1,0,0")
    assert restricted_degree(matrix, 0, {0, 1, 2}) == 2
    assert restricted_degree(matrix, 0, {2}) == 1
    assert restricted_degree(matrix, 1, set()) == 0
