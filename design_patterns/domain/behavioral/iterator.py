"""Iterator pattern - sequential access without exposing the collection."""
from dataclasses import dataclass
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class IteratorResult(Generic[T]):
    value: Optional[T]
    done: bool


class NumberIterator:
    """
    Walks a list of numbers front to back.

    Supports both the explicit ``has_next()``/``next()`` protocol and the
    Python iterator protocol.
    """

    def __init__(self, numbers: Iterable[int]):
        self._numbers = list(numbers)
        self._current = 0

    def has_next(self) -> bool:
        return self._current < len(self._numbers)

    def next(self) -> IteratorResult[int]:
        """Return the next number, or a ``done`` result once exhausted."""
        if self.has_next():
            value = self._numbers[self._current]
            self._current += 1
            return IteratorResult(value=value, done=False)
        return IteratorResult(value=None, done=True)

    def __iter__(self) -> "NumberIterator":
        return self

    def __next__(self) -> int:
        result = self.next()
        if result.done:
            raise StopIteration
        return result.value
