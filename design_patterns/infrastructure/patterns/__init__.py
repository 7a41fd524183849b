"""Infrastructure patterns package."""

from design_patterns.infrastructure.patterns.singleton_access import get_singleton

__all__ = ["get_singleton"]
