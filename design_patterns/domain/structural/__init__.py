"""Structural patterns."""

from .facade import LoggingService, NotificationService, OrderFacade, PaymentService
from .inheritance import Car, Motorcycle, Vehicle
from .proxy import Image, ProxyImage, RealImage

__all__ = [
    "Vehicle",
    "Car",
    "Motorcycle",
    "NotificationService",
    "LoggingService",
    "PaymentService",
    "OrderFacade",
    "Image",
    "RealImage",
    "ProxyImage",
]
