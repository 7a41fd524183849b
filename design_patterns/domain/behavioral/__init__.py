"""Behavioral patterns."""

from .iterator import IteratorResult, NumberIterator
from .mediator import ChatUser, Chatroom, Colleague, Mediator
from .observer import MessagePublisher, Observer, User
from .state import Context, CycleState

__all__ = [
    "Context",
    "CycleState",
    "MessagePublisher",
    "Observer",
    "User",
    "IteratorResult",
    "NumberIterator",
    "Mediator",
    "Chatroom",
    "Colleague",
    "ChatUser",
]
