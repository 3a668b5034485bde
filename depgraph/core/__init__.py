from .config import settings, Settings
from .logging import configure_logging
from .graph import DependencyGraph, InvalidArgumentError

__all__ = [
    "settings", "Settings",
    "configure_logging",
    "DependencyGraph", "InvalidArgumentError",
]
