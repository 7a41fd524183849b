"""Inheritance - subclasses reuse behavior defined once on the parent."""
from typing import Optional

from design_patterns.domain.core.output import OutputSink, default_sink


class Vehicle:
    def __init__(self, brand: str, emit: Optional[OutputSink] = None):
        self.brand = brand
        self._emit = emit or default_sink

    def honk(self) -> None:
        self._emit("Honk")


class Car(Vehicle):
    pass


class Motorcycle(Vehicle):
    pass
