from dataclasses import dataclass
from typing import Hashable, Iterator


@dataclass(frozen=True)
class Dependency:
    """Ordered pair (dependee, dependent): dependent depends on dependee"""
    dependee: Hashable
    dependent: Hashable

    def __iter__(self) -> Iterator[Hashable]:
        yield self.dependee
        yield self.dependent
