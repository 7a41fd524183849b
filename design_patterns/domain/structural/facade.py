"""Facade pattern - one call hides three cooperating services."""
from typing import Optional

from design_patterns.domain.core.output import OutputSink, default_sink


class NotificationService:
    def __init__(self, emit: Optional[OutputSink] = None):
        self._emit = emit or default_sink

    def send_notification(self, message: str) -> None:
        self._emit(f"Sending notification: {message}")


class LoggingService:
    def __init__(self, emit: Optional[OutputSink] = None):
        self._emit = emit or default_sink

    def log_message(self, message: str) -> None:
        self._emit(f"Logging message: {message}")


class PaymentService:
    def __init__(self, emit: Optional[OutputSink] = None):
        self._emit = emit or default_sink

    def process_payment(self, amount: float) -> None:
        self._emit(f"Processing payment: {amount}")


class OrderFacade:
    """
    Simplified entry point for placing an order.

    Placing an order logs it, takes the payment and notifies the customer,
    always in that order.
    """

    def __init__(self, emit: Optional[OutputSink] = None):
        self.notification_service = NotificationService(emit)
        self.logging_service = LoggingService(emit)
        self.payment_service = PaymentService(emit)

    def place_order(self, amount: float) -> None:
        self.logging_service.log_message("Order placed")
        self.payment_service.process_payment(amount)
        self.notification_service.send_notification("Order placed successfully")
