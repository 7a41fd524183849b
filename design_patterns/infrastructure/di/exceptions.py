"""Dependency injection exceptions."""
from typing import Optional, Type

from design_patterns.domain.core.exceptions import DomainException


class DependencyResolutionError(DomainException):
    """Base exception for dependency resolution failures."""

    def __init__(self, dependency_type: Type, message: str, cause: Optional[Exception] = None):
        self.dependency_type = dependency_type
        self.cause = cause
        super().__init__(f"Cannot resolve {dependency_type.__name__}: {message}")


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type was never registered with the container."""

    def __init__(self, dependency_type: Type):
        super().__init__(dependency_type, "type is not registered")


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails to build its instance."""
