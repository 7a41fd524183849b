"""Application layer - demonstration drivers and the demo catalog."""

from .catalog import DemoRegistration, DemoRegistry, create_default_registry

__all__ = ["DemoRegistration", "DemoRegistry", "create_default_registry"]
