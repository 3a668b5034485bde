from .dependency import Dependency

__all__ = ["Dependency"]
