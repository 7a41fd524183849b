"""Demo Registry - Registry pattern for demonstration drivers.

Drivers are looked up by name, so the CLI never hard-codes which patterns
exist.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from design_patterns.application import demos
from design_patterns.domain.core.exceptions import UnknownDemoError
from design_patterns.domain.core.output import OutputSink, default_sink
from design_patterns.infrastructure.logging.logger import get_logger

DemoRunner = Callable[[Optional[OutputSink]], None]


@dataclass(frozen=True)
class DemoRegistration:
    """Container for demo registration information."""
    name: str
    category: str
    summary: str
    runner: DemoRunner

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "category": self.category, "summary": self.summary}


class DemoRegistry:
    """Registry of demonstration drivers, kept in registration order."""

    def __init__(self):
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)

    def register(self, name: str, category: str, summary: str, runner: DemoRunner) -> None:
        """
        Register a demonstration driver.

        Registering an existing name replaces the previous driver.
        """
        if name in self._registrations:
            self._logger.warning("Replacing demo registration", demo=name)
        self._registrations[name] = DemoRegistration(name, category, summary, runner)
        self._logger.debug("Registered demo", demo=name, category=category)

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def get(self, name: str) -> DemoRegistration:
        try:
            return self._registrations[name]
        except KeyError:
            raise UnknownDemoError(name, self.names()) from None

    def names(self) -> List[str]:
        return list(self._registrations)

    def list_demos(self) -> List[DemoRegistration]:
        return list(self._registrations.values())

    def run(self, name: str, emit: Optional[OutputSink] = None) -> None:
        """Run one demonstration, writing its lines through ``emit``."""
        registration = self.get(name)
        self._logger.debug("Running demo", demo=name)
        registration.runner(emit or default_sink)


def create_default_registry() -> DemoRegistry:
    """Create a registry holding every demonstration in catalog order."""
    registry = DemoRegistry()
    registry.register(
        "singleton", "creational",
        "One shared instance, handed out by the DI container",
        demos.run_singleton_demo,
    )
    registry.register(
        "inheritance", "structural",
        "Subclasses reuse behavior defined on the parent class",
        demos.run_inheritance_demo,
    )
    registry.register(
        "prototype", "creational",
        "New objects are created by cloning existing ones",
        demos.run_prototype_demo,
    )
    registry.register(
        "builder", "creational",
        "Step-by-step construction with a fluent builder",
        demos.run_builder_demo,
    )
    registry.register(
        "factory", "creational",
        "A factory decides which concrete class to instantiate",
        demos.run_factory_demo,
    )
    registry.register(
        "facade", "structural",
        "One simple call hides several cooperating services",
        demos.run_facade_demo,
    )
    registry.register(
        "proxy", "structural",
        "A placeholder loads the real object on first use",
        demos.run_proxy_demo,
    )
    registry.register(
        "iterator", "behavioral",
        "Sequential access without exposing the collection",
        demos.run_iterator_demo,
    )
    registry.register(
        "observer", "behavioral",
        "A publisher broadcasts messages to attached subscribers",
        demos.run_observer_demo,
    )
    registry.register(
        "mediator", "behavioral",
        "Colleagues communicate only through a mediator",
        demos.run_mediator_demo,
    )
    registry.register(
        "state", "behavioral",
        "Behavior changes as the context cycles through states",
        demos.run_state_demo,
    )
    return registry
