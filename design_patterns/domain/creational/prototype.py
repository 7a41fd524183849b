"""Prototype pattern - create new objects by cloning existing ones."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


class Shape(ABC):
    @abstractmethod
    def clone(self) -> "Shape":
        """Return a new shape equal to, but distinct from, this one."""


@dataclass
class Circle(Shape):
    radius: float

    def clone(self) -> "Circle":
        return replace(self)


@dataclass
class Square(Shape):
    side_length: float

    def clone(self) -> "Square":
        return replace(self)
