"""Singleton pattern - one shared Database per composition root.

The instance is not held in a hidden class attribute. It is constructed once
by the dependency injection container and handed to whoever asks for it
(see ``design_patterns.infrastructure.di``).
"""
import uuid
from dataclasses import dataclass, field


@dataclass(eq=False)
class Database:
    """Shared database handle."""
    url: str = "memory://catalog"
    instance_id: str = field(default_factory=lambda: str(uuid.uuid4()))
