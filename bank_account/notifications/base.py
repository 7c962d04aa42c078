"""Notification sink interface."""

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """Receiver of the side effects triggered by account operations.

    The account never inspects return values; every method is fire-and-forget.
    """

    @abstractmethod
    def send_email(self, recipient: str, subject: str, body: str) -> None:
        """Send an email."""

    @abstractmethod
    def send_sms(self, phone: str, body: str) -> None:
        """Send a text message."""

    @abstractmethod
    def log_activity(self, account_id: str, message: str) -> None:
        """Record an activity entry for an account."""
