"""State pattern - a context whose behavior is driven by its current state.

The states form a closed set {A, B, C}. Each state's ``handle`` emits its
label and installs the fixed successor, so repeated requests cycle
A -> B -> C -> A indefinitely. There is no terminal state and no transition
can fail.
"""
import logging
from enum import Enum
from typing import Optional

from design_patterns.domain.core.output import OutputSink, default_sink

logger = logging.getLogger(__name__)


class CycleState(str, Enum):
    """States of the A -> B -> C cycle."""
    A = "A"
    B = "B"
    C = "C"

    @property
    def label(self) -> str:
        return f"State {self.value}"

    @property
    def successor(self) -> "CycleState":
        return _SUCCESSORS[self]

    def handle(self, context: "Context") -> None:
        """Emit this state's label and move the context to the successor."""
        context.emit(self.label)
        context.set_state(self.successor)


_SUCCESSORS = {
    CycleState.A: CycleState.B,
    CycleState.B: CycleState.C,
    CycleState.C: CycleState.A,
}


class Context:
    """Holds exactly one current state and delegates requests to it."""

    def __init__(self, initial_state: CycleState = CycleState.A, emit: Optional[OutputSink] = None):
        self._state = initial_state
        self._emit = emit or default_sink

    @property
    def state(self) -> CycleState:
        return self._state

    def set_state(self, state: CycleState) -> None:
        old_state = self._state
        self._state = state
        logger.debug(f"State transition {old_state.value} -> {state.value}")

    def emit(self, line: str) -> None:
        self._emit(line)

    def request(self) -> None:
        self._state.handle(self)
