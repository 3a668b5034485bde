import pytest
from dataclasses import FrozenInstanceError

from depgraph import Dependency


def test_dependency_unpacks():
    s, t = Dependency("a", "b")
    assert (s, t) == ("a", "b")


def test_dependency_is_hashable():
    deps = {Dependency("a", "b"), Dependency("a", "b"), Dependency("b", "a")}
    assert len(deps) == 2


def test_dependency_is_frozen():
    dep = Dependency("a", "b")
    with pytest.raises(FrozenInstanceError):
        dep.dependee = "c"
