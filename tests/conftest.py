"""Pytest configuration and shared fixtures for depgraph tests."""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from depgraph import DependencyGraph


@pytest.fixture
def empty_graph():
    """Create an empty graph that checks its invariants on every mutation."""
    return DependencyGraph(check_invariants=True)


@pytest.fixture
def example_graph():
    """Create the graph {("a", "b"), ("a", "c"), ("b", "d"), ("d", "d")}."""
    graph = DependencyGraph(check_invariants=True)
    graph.add_dependency("a", "b")
    graph.add_dependency("a", "c")
    graph.add_dependency("b", "d")
    graph.add_dependency("d", "d")
    return graph
