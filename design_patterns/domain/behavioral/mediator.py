"""Mediator pattern - colleagues talk through a chatroom, not to each other."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.domain.core.output import OutputSink, default_sink


class Mediator(ABC):
    @abstractmethod
    def send_message(self, message: str, sender: "Colleague") -> None:
        pass


class Chatroom(Mediator):
    """Relays each message to every colleague except its sender."""

    def __init__(self):
        self._colleagues: List["Colleague"] = []

    def add_colleague(self, colleague: "Colleague") -> None:
        self._colleagues.append(colleague)

    def send_message(self, message: str, sender: "Colleague") -> None:
        for colleague in self._colleagues:
            if colleague is not sender:
                colleague.receive_message(message)


class Colleague(ABC):
    """Participant that only knows its mediator."""

    def __init__(self, mediator: Mediator, emit: Optional[OutputSink] = None):
        self.mediator = mediator
        self._emit = emit or default_sink

    @abstractmethod
    def send_message(self, message: str) -> None:
        pass

    def receive_message(self, message: str) -> None:
        self._emit(f"Received message: {message}")


class ChatUser(Colleague):
    def __init__(self, mediator: Mediator, name: str, emit: Optional[OutputSink] = None):
        super().__init__(mediator, emit)
        self.name = name

    def send_message(self, message: str) -> None:
        self.mediator.send_message(message, self)
