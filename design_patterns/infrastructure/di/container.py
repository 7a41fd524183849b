"""
Dependency Injection Container implementation.

Shared instances are registered once at the composition root and passed to
their consumers by reference, instead of living in hidden global state.
"""
from typing import Any, Callable, Dict, Type, TypeVar, cast

from design_patterns.infrastructure.di.exceptions import (
    FactoryError,
    UnregisteredDependencyError,
)
from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)


class DIContainer:
    """
    Minimal dependency injection container.

    Features:
    - Singletons registered as a type (built lazily on first resolution),
      a ready instance, or a factory taking the container
    - Transient factories that build a new instance on every resolution
    """

    def __init__(self):
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[["DIContainer"], Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._singletons or
            cls in self._factories or
            cls in self._instances
        )

    def has(self, service_type: Type[T]) -> bool:
        """Check if service is registered in container."""
        return self.is_registered(service_type)

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional pre-created instance or factory function
        """
        if instance_or_factory is None:
            # Built on first resolution
            self._singletons[cls] = cls
            logger.debug(f"Registered singleton type {cls.__name__}")
        elif callable(instance_or_factory) and not isinstance(instance_or_factory, type):
            self._singletons[cls] = self._build(cls, instance_or_factory)
            logger.debug(f"Registered singleton from factory for {cls.__name__}")
        else:
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered singleton instance for {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[["DIContainer"], T]) -> None:
        """Register a factory producing a new instance on every resolution."""
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """Register an already constructed instance."""
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def get(self, cls: Type[T]) -> T:
        """
        Resolve a registered type.

        Raises:
            UnregisteredDependencyError: If the type is not registered
            FactoryError: If building the instance fails
        """
        if cls in self._instances:
            return cast(T, self._instances[cls])

        if cls in self._singletons:
            registered = self._singletons[cls]
            if isinstance(registered, type):
                registered = self._build(cls, lambda _container: registered())
                self._singletons[cls] = registered
                logger.debug(f"Created singleton instance of {cls.__name__}")
            return cast(T, registered)

        if cls in self._factories:
            return cast(T, self._build(cls, self._factories[cls]))

        raise UnregisteredDependencyError(cls)

    def _build(self, cls: Type, factory: Callable[["DIContainer"], Any]) -> Any:
        try:
            return factory(self)
        except Exception as e:
            logger.error(f"Failed to create instance for {cls.__name__}: {str(e)}")
            raise FactoryError(cls, f"Factory function failed: {str(e)}", e)
