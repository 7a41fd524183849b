"""Factory pattern - the factory decides which Animal to instantiate."""
from abc import ABC
from typing import Optional

from design_patterns.domain.core.output import OutputSink, default_sink


class Animal(ABC):
    """Base class for animals; concrete classes define ``sound``."""
    sound: str

    def __init__(self, emit: Optional[OutputSink] = None):
        self._emit = emit or default_sink

    def make_sound(self) -> None:
        self._emit(self.sound)


class Dog(Animal):
    sound = "Bark"


class Cat(Animal):
    sound = "Meow"


class AnimalFactory:
    """Creates animals by type name."""

    def __init__(self, emit: Optional[OutputSink] = None):
        self._emit = emit

    def create_animal(self, animal_type: str) -> Animal:
        """Return a Dog for ``"dog"`` and a Cat for any other type."""
        if animal_type == "dog":
            return Dog(self._emit)
        return Cat(self._emit)
