"""Builder pattern - assemble a House step by step."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class House:
    builders: List[str] = field(default_factory=list)


class HouseBuilder:
    """Collects structures fluently and builds an independent House."""

    def __init__(self):
        self._builders: List[str] = []

    def add_structure(self, builder: str) -> "HouseBuilder":
        self._builders.append(builder)
        return self

    def build(self) -> House:
        return House(builders=list(self._builders))
