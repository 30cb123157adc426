"""Tests for the immutable Matrix model."""

from __future__ import annotations

import dataclasses

import networkx as nx
import numpy as np
import pytest

from adjgraph.errors import EmptyMatrixError, InvalidTokenError, NotSquareError
from adjgraph.model.matrix import Matrix


def test_from_rows_and_accessors():
    matrix = Matrix.from_rows([[0, 2], [-1, 0]])
    assert matrix.size == 2
    assert len(matrix) == 2
    assert matrix[0] == (0, 2)
    assert matrix[1][0] == -1
    assert matrix.row(1) == (-1, 0)
    assert list(matrix) == [(0, 2), (-1, 0)]


def test_rows_are_immutable():
    matrix = Matrix.from_rows([[0, 1], [1, 0]])
    with pytest.raises(dataclasses.FrozenInstanceError):
        matrix.rows = ((0,),)  # type: ignore[misc]
    with pytest.raises(TypeError):
        matrix[0][1] = 5  # type: ignore[index]


def test_direct_construction_freezes_list_rows():
    cells = [[0, 1], [1, 0]]
    matrix = Matrix(cells)  # type: ignore[arg-type]
    assert matrix.rows == ((0, 1), (1, 0))
    assert isinstance(matrix.rows[0], tuple)
    assert matrix == Matrix.from_rows(cells)
    assert hash(matrix) == hash(Matrix.from_rows(cells))
    cells[0][1] = 7
    assert matrix[0][1] == 1


def test_huge_integer_cell_is_invalid_token():
    with pytest.raises(InvalidTokenError) as exc_info:
        Matrix.from_rows([[0, 10**400], [0, 0]])
    assert (exc_info.value.row, exc_info.value.column) == (0, 1)


def test_to_list_is_a_copy():
    matrix = Matrix.from_rows([[0, 1], [1, 0]])
    cells = matrix.to_list()
    cells[0][1] = 9
    assert matrix[0][1] == 1


def test_validation_errors():
    with pytest.raises(EmptyMatrixError):
        Matrix.from_rows([])
    with pytest.raises(NotSquareError):
        Matrix.from_rows([[0, 1], [1]])
    with pytest.raises(InvalidTokenError):
        Matrix.from_rows([[0, float("nan")], [1, 0]])
    with pytest.raises(InvalidTokenError):
        Matrix.from_rows([[0, "1"], [1, 0]])
    with pytest.raises(InvalidTokenError):
        Matrix.from_rows([[0, True], [1, 0]])


def test_numpy_scalars_are_accepted():
    matrix = Matrix.from_rows(np.array([[0, 3], [0, 0]]))
    assert matrix.edges() == [(0, 1, 3)]


def test_edges_row_major_and_skip_zero():
    matrix = Matrix.from_rows([[1, 0, 2], [0, 0, 0], [-4, 5, 0]])
    assert matrix.edges() == [(0, 0, 1), (0, 2, 2), (2, 0, -4), (2, 1, 5)]
    assert matrix.neighbors(2) == [0, 1]
    assert matrix.neighbors(1) == []


def test_is_symmetric():
    assert Matrix.from_rows([[0, 1], [1, 0]]).is_symmetric()
    assert not Matrix.from_rows([[0, 1], [0, 0]]).is_symmetric()
    assert Matrix.from_rows([[7]]).is_symmetric()


def test_to_numpy():
    arr = Matrix.from_rows([[0, 1], [2, 0]]).to_numpy()
    assert arr.shape == (2, 2)
    assert np.array_equal(arr, np.array([[0, 1], [2, 0]]))

    arr_f = Matrix.from_rows([[0, 1.5], [2, 0]]).to_numpy()
    assert arr_f.dtype.kind == "f"


def test_to_networkx_keeps_isolated_vertices_and_weights():
    graph = Matrix.from_rows([[0, 3, 0], [0, 0, 0], [0, -2, 0]]).to_networkx()
    assert isinstance(graph, nx.DiGraph)
    assert sorted(graph.nodes) == [0, 1, 2]
    assert sorted(graph.edges(data="weight")) == [(0, 1, 3), (2, 1, -2)]


def test_value_equality_and_hash():
    a = Matrix.from_rows([[0, 1], [1, 0]])
    b = Matrix.from_rows(((0, 1), (1, 0)))
    assert a == b
    assert hash(a) == hash(b)
