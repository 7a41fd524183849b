"""Proxy pattern - defer loading an image until it is first displayed."""
from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.domain.core.output import OutputSink, default_sink


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    """Image that is loaded from disk as soon as it is created."""

    def __init__(self, filename: str, emit: Optional[OutputSink] = None):
        self.filename = filename
        self._emit = emit or default_sink
        self._load_image_from_disk()

    def _load_image_from_disk(self) -> None:
        self._emit(f"Loading image: {self.filename}")

    def display(self) -> None:
        self._emit(f"Displaying image: {self.filename}")


class ProxyImage(Image):
    """Stands in for a RealImage and creates it on the first display."""

    def __init__(self, filename: str, emit: Optional[OutputSink] = None):
        self.filename = filename
        self._emit = emit
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            self._real_image = RealImage(self.filename, self._emit)
        self._real_image.display()
