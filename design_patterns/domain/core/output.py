"""Line-oriented output sink shared by every demonstration."""
from typing import Callable

OutputSink = Callable[[str], None]


def default_sink(line: str) -> None:
    """Write a line to standard output."""
    print(line)
