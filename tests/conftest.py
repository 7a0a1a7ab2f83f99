"""Pytest fixtures shared across all test modules."""

import pytest

from csrgraph import DirectedGraph


# Two-edge path, a shortcut and a self-loop on an otherwise isolated node
SCENARIO_EDGES = [(0, 1), (1, 2), (0, 2), (3, 3)]


@pytest.fixture
def graph():
    """The four-edge scenario graph, mutable."""
    return DirectedGraph.from_edges(SCENARIO_EDGES)


@pytest.fixture
def compiled(graph):
    """The four-edge scenario graph, compiled."""
    return graph.compile()


@pytest.fixture
def dag():
    """Diamond with a tail: 0 -> {1, 2} -> 3 -> 4."""
    return DirectedGraph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])
