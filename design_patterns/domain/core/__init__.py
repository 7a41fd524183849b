"""Shared kernel for all pattern modules."""

from .exceptions import ConfigurationError, DomainException, UnknownDemoError
from .output import OutputSink, default_sink

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnknownDemoError",
    "OutputSink",
    "default_sink",
]
