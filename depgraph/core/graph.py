"""Bidirectional dependency index for reactive recalculation."""
import logging
from typing import Hashable, Iterable, List, Optional, FrozenSet

import networkx as nx

from .config import settings

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when None is passed where a node identifier is required."""
    pass


class DependencyGraph:
    """
    A mutable set of dependencies (s, t), indexed in both directions.

    Given a dependency (s, t):
    - t is a dependent of s (t must be recomputed when s changes)
    - s is a dependee of t

    For example, with dependencies {("a", "b"), ("a", "c"), ("b", "d"), ("d", "d")}:
        dependents("a") = {"b", "c"}
        dependents("c") = {}
        dependees("d") = {"b", "d"}

    Storage is a networkx DiGraph whose successor map is the dependents index
    and whose predecessor map is the dependees index. Every edge lookup, insert
    and removal is O(1) expected and neither direction requires a scan of the
    full pair set. The edge count is tracked separately so size stays O(1).

    Nodes are opaque hashable identifiers; None is rejected everywhere with
    InvalidArgumentError before any state changes. A node only exists in the
    index while it has at least one incident dependency.

    Not thread-safe: callers sharing an instance across threads must lock
    around every mutating call.
    """

    def __init__(self, check_invariants: Optional[bool] = None):
        """
        Create an empty dependency graph.

        Args:
            check_invariants: Verify index consistency after every mutation.
                Defaults to settings.DEBUG. O(E) per call, for tests only.
        """
        self._graph = nx.DiGraph()
        self._size = 0
        self._check_invariants = settings.DEBUG if check_invariants is None else check_invariants

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def size(self) -> int:
        """The number of dependencies in the graph."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, dependency) -> bool:
        """Report whether the pair (s, t) is a dependency. Accepts any 2-item iterable."""
        s, t = dependency
        self._require_node("s", s)
        self._require_node("t", t)
        return self._graph.has_edge(s, t)

    def __repr__(self) -> str:
        return f"DependencyGraph(size={self._size}, nodes={self._graph.number_of_nodes()})"

    def has_dependents(self, s: Hashable) -> bool:
        """Report whether dependents(s) is non-empty."""
        self._require_node("s", s)
        return s in self._graph and len(self._graph.succ[s]) > 0

    def has_dependees(self, t: Hashable) -> bool:
        """Report whether dependees(t) is non-empty."""
        self._require_node("t", t)
        return t in self._graph and len(self._graph.pred[t]) > 0

    def get_dependents(self, s: Hashable) -> FrozenSet[Hashable]:
        """
        Get dependents(s).

        Args:
            s: The dependee node

        Returns:
            Snapshot of every t such that (s, t) is a dependency. Empty if s
            is unknown. Later mutations do not affect the returned set.
        """
        self._require_node("s", s)
        if s not in self._graph:
            return frozenset()
        return frozenset(self._graph.succ[s])

    def get_dependees(self, t: Hashable) -> FrozenSet[Hashable]:
        """
        Get dependees(t).

        Args:
            t: The dependent node

        Returns:
            Snapshot of every s such that (s, t) is a dependency. Empty if t
            is unknown. Later mutations do not affect the returned set.
        """
        self._require_node("t", t)
        if t not in self._graph:
            return frozenset()
        return frozenset(self._graph.pred[t])

    def view(self) -> nx.DiGraph:
        """
        Get a read-only networkx view of the dependencies.

        The view tracks later changes to this graph but cannot be modified
        through (mutators raise networkx.NetworkXError). Edge direction is
        dependee -> dependent, so networkx.topological_sort on the view yields
        a recalculation order.
        """
        return self._graph.copy(as_view=True)

    # ========================================================================
    # MUTATIONS
    # ========================================================================

    def add_dependency(self, s: Hashable, t: Hashable) -> None:
        """
        Add the dependency (s, t). No effect if it is already present.

        Raises:
            InvalidArgumentError: If s or t is None
        """
        self._require_node("s", s)
        self._require_node("t", t)
        self._add(s, t)
        self._verify()

    def remove_dependency(self, s: Hashable, t: Hashable) -> None:
        """
        Remove the dependency (s, t). No effect if it is not present.

        Raises:
            InvalidArgumentError: If s or t is None
        """
        self._require_node("s", s)
        self._require_node("t", t)
        self._remove(s, t)
        self._verify()

    def replace_dependents(self, s: Hashable, new_dependents: Iterable[Hashable]) -> None:
        """
        Remove every dependency (s, r), then add (s, t) for each t in new_dependents.

        The whole of new_dependents is validated before anything is removed,
        so a bad element leaves the graph untouched.

        Args:
            s: The dependee whose dependents are replaced
            new_dependents: Replacement dependents; duplicates collapse

        Raises:
            InvalidArgumentError: If s, new_dependents or any element is None
        """
        self._require_node("s", s)
        targets = self._require_nodes("new_dependents", new_dependents)

        removed = 0
        if s in self._graph:
            for r in list(self._graph.succ[s]):
                removed += self._remove(s, r)

        added = 0
        for t in targets:
            added += self._add(s, t)

        logger.debug("Replaced dependents of %r: removed %d, added %d", s, removed, added)
        self._verify()

    def replace_dependees(self, t: Hashable, new_dependees: Iterable[Hashable]) -> None:
        """
        Remove every dependency (r, t), then add (s, t) for each s in new_dependees.

        The whole of new_dependees is validated before anything is removed,
        so a bad element leaves the graph untouched.

        Args:
            t: The dependent whose dependees are replaced
            new_dependees: Replacement dependees; duplicates collapse

        Raises:
            InvalidArgumentError: If t, new_dependees or any element is None
        """
        self._require_node("t", t)
        sources = self._require_nodes("new_dependees", new_dependees)

        removed = 0
        if t in self._graph:
            for r in list(self._graph.pred[t]):
                removed += self._remove(r, t)

        added = 0
        for s in sources:
            added += self._add(s, t)

        logger.debug("Replaced dependees of %r: removed %d, added %d", t, removed, added)
        self._verify()

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _add(self, s: Hashable, t: Hashable) -> bool:
        """Insert edge (s, t) into both indices. Returns False if it already existed."""
        if self._graph.has_edge(s, t):
            return False
        self._graph.add_edge(s, t)
        self._size += 1
        return True

    def _remove(self, s: Hashable, t: Hashable) -> bool:
        """Delete edge (s, t) from both indices. Returns False if it was absent."""
        if not self._graph.has_edge(s, t):
            return False
        self._graph.remove_edge(s, t)
        self._size -= 1
        self._discard_if_isolated(s)
        if t != s:
            self._discard_if_isolated(t)
        return True

    def _discard_if_isolated(self, node: Hashable) -> None:
        if not self._graph.succ[node] and not self._graph.pred[node]:
            self._graph.remove_node(node)

    @staticmethod
    def _require_node(name: str, node: Hashable) -> None:
        if node is None:
            raise InvalidArgumentError(f"{name} must not be None")
        # Unhashable nodes fail here rather than halfway through a mutation
        hash(node)

    @staticmethod
    def _require_nodes(name: str, nodes: Optional[Iterable[Hashable]]) -> List[Hashable]:
        if nodes is None:
            raise InvalidArgumentError(f"{name} must not be None")
        items = list(nodes)
        for i, node in enumerate(items):
            if node is None:
                raise InvalidArgumentError(f"{name}[{i}] must not be None")
            hash(node)
        return items

    def _verify(self) -> None:
        """Check that both indices mirror each other and match the edge count."""
        if not self._check_invariants:
            return

        succ = self._graph.succ
        pred = self._graph.pred
        count = 0

        for s, targets in succ.items():
            if not targets and not pred[s]:
                raise AssertionError(f"Node {s!r} has no dependencies but is still indexed")
            for t in targets:
                if s not in pred[t]:
                    raise AssertionError(f"({s!r}, {t!r}) missing from dependees index")
            count += len(targets)

        for t, sources in pred.items():
            for s in sources:
                if t not in succ[s]:
                    raise AssertionError(f"({s!r}, {t!r}) missing from dependents index")

        if count != self._size:
            raise AssertionError(f"Edge count {self._size} does not match {count} indexed dependencies")
