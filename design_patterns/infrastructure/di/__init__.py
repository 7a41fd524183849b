"""Dependency injection."""

from .container import DIContainer
from .exceptions import (
    DependencyResolutionError,
    FactoryError,
    UnregisteredDependencyError,
)

__all__ = [
    "DIContainer",
    "DependencyResolutionError",
    "UnregisteredDependencyError",
    "FactoryError",
]
