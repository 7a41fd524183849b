"""Standard singleton access functions."""

from typing import Type, TypeVar

from design_patterns.infrastructure.di.container import DIContainer
from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar("T")


def get_singleton(singleton_class: Type[T], container: DIContainer) -> T:
    """
    Standard way to get singleton instances.

    The container passed in is the owner of the shared instance. A class
    that has not been registered yet is registered as a lazily built
    singleton, so every later call with the same container returns the
    same object.

    Args:
        singleton_class: The class to get an instance of
        container: Container owning the shared instance

    Returns:
        The singleton instance
    """
    if not container.has(singleton_class):
        get_logger(__name__).debug(
            "%s not registered, registering as singleton", singleton_class.__name__
        )
        container.register_singleton(singleton_class)
    return container.get(singleton_class)
