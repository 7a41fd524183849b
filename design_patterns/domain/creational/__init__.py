"""Creational patterns."""

from .builder import House, HouseBuilder
from .factory import Animal, AnimalFactory, Cat, Dog
from .prototype import Circle, Shape, Square
from .singleton import Database

__all__ = [
    "Database",
    "Shape",
    "Circle",
    "Square",
    "House",
    "HouseBuilder",
    "Animal",
    "Dog",
    "Cat",
    "AnimalFactory",
]
