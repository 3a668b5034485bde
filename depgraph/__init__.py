"""
depgraph - dependency index for reactive recalculation.

Tracks a set of dependencies (s, t), meaning "t depends on s", and answers
both "what depends on s" and "what does t depend on" without scanning the
whole set. Recalculation engines (spreadsheet formulas, notebook cells, build
targets) use it to find what must be recomputed after a change.

Example:
    >>> from depgraph import DependencyGraph
    >>> graph = DependencyGraph()
    >>> graph.add_dependency("a", "b")
    >>> sorted(graph.get_dependents("a"))
    ['b']
"""

__version__ = "0.1.0"

from depgraph.core.config import settings
from depgraph.core.logging import configure_logging
from depgraph.core.graph import DependencyGraph, InvalidArgumentError
from depgraph.models.dependency import Dependency

__all__ = [
    "DependencyGraph",
    "InvalidArgumentError",
    "Dependency",
    "configure_logging",
    "settings",
]
