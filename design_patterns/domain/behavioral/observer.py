"""Observer pattern - a publisher broadcasting messages to subscribers."""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from design_patterns.domain.core.output import OutputSink, default_sink

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Base class for subscribers."""
    @abstractmethod
    def update(self, message: str) -> None:
        pass


class User(Observer):
    """Subscriber that reports every message it receives."""

    def __init__(self, name: str, emit: Optional[OutputSink] = None):
        self.name = name
        self._emit = emit or default_sink

    def update(self, message: str) -> None:
        self._emit(f"{self.name} received message: {message}")

    def __repr__(self) -> str:
        return f"User({self.name!r})"


class MessagePublisher:
    """
    Publishes messages to an ordered list of subscribers.

    Subscribers are owned by the caller. The same subscriber may be attached
    more than once and is then notified once per attachment.
    """

    def __init__(self):
        self._observers: List[Observer] = []

    @property
    def subscribers(self) -> Tuple[Observer, ...]:
        """Current subscribers in attachment order."""
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        """Append a subscriber to the end of the list."""
        self._observers.append(observer)
        logger.debug(f"Attached {observer!r} ({len(self._observers)} subscribers)")

    def detach(self, observer: Observer) -> None:
        """Remove the first attachment of ``observer``; do nothing if absent."""
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                logger.debug(f"Detached {observer!r} ({len(self._observers)} subscribers)")
                return
        logger.debug(f"Detach ignored, {observer!r} is not attached")

    def notify(self, message: str) -> None:
        """Deliver ``message`` to every subscriber attached when the call starts."""
        # Subscribers attached or detached during delivery do not affect this message
        snapshot = list(self._observers)
        for observer in snapshot:
            observer.update(message)
        logger.debug(f"Notified {len(snapshot)} subscribers")
