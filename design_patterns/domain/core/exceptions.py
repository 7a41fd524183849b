# design_patterns/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all catalog-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None, details: Any = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
        self.details = details


class UnknownDemoError(DomainException):
    """Raised when a demonstration name is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Unknown demo '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)
