"""Shared matrix fixtures.

Unweighted fixtures are 0/1 adjacency matrices for coloring; weighted fixtures
use zero for "no edge". Diagrams use letters for vertex indices (A = 0).
"""

from __future__ import annotations

import pytest

from adjgraph.model.matrix import Matrix
from adjgraph.parse import parse_unweighted, parse_weighted


@pytest.fixture
def complete4() -> Matrix:
    # K4: every pair adjacent
    return parse_unweighted("0,1,1,1\n1,0,1,1\n1,1,0,1\n1,1,1,0")


@pytest.fixture
def empty5() -> Matrix:
    # Five isolated vertices
    return Matrix.from_rows([[0] * 5 for _ in range(5)])


@pytest.fixture
def path4() -> Matrix:
    #  A───B───C───D
    return parse_unweighted("0,1,0,0\n1,0,1,0\n0,1,0,1\n0,0,1,0")


@pytest.fixture
def star4() -> Matrix:
    #      B
    #      │
    #  C───A───D
    return parse_unweighted("0,1,1,1\n1,0,0,0\n1,0,0,0\n1,0,0,0")


@pytest.fixture
def cycle5() -> Matrix:
    #  A───B───C───D───E───A
    return parse_unweighted(
        "0,1,0,0,1\n1,0,1,0,0\n0,1,0,1,0\n0,0,1,0,1\n1,0,0,1,0"
    )


@pytest.fixture
def directed_cycle3() -> Matrix:
    #      [1]     [1]
    #  A──────►B──────►C
    #  ▲               │
    #  └───────────────┘
    #         [1]
    return parse_weighted("0,1,0\n0,0,1\n1,0,0")


@pytest.fixture
def chain4() -> Matrix:
    #  A──[1]──►B──[1]──►C──[1]──►D
    return parse_weighted("0 1 0 0\n0 0 1 0\n0 0 0 1\n0 0 0 0")


@pytest.fixture
def fan4() -> Matrix:
    # A reaches B, C and D directly with weight 1
    return parse_weighted("0 1 1 1\n0 0 0 0\n0 0 0 0\n0 0 0 0")


@pytest.fixture
def negative_detour() -> Matrix:
    #       [4]
    #  A─────────►B
    #  │          ▲
    #  │ [5]      │ [-3]
    #  ▼          │
    #  C──────────┘
    return parse_weighted("0 4 5\n0 0 0\n0 -3 0")


@pytest.fixture
def negative_pair() -> Matrix:
    #      [-1]
    #  A◄────────►B
    return parse_weighted("0,-1\n-1,0")


@pytest.fixture
def unreachable_negative_cycle() -> Matrix:
    # A is isolated; B and C form a negative cycle A cannot reach
    return parse_weighted("0 0 0\n0 0 -1\n0 -1 0")
