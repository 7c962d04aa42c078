"""Notification sink that writes every notification to the log."""

import logging

from bank_account.logging import get_logger
from bank_account.notifications.base import NotificationSink


class LoggingNotificationSink(NotificationSink):
    """Emit notifications as log records for development and auditing."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        """Initialize logging sink.

        Parameters
        ----------
        logger : logging.Logger | None
            Target logger. Defaults to ``bank_account.notifications``.
        level : int
            Level used for every record.
        """
        self.logger = logger or get_logger("bank_account.notifications")
        self.level = level
        self._counts: dict[str, int] = {}

    def send_email(self, recipient: str, subject: str, body: str) -> None:
        self._emit(
            "email",
            "Email to %s: %s",
            recipient,
            subject,
            extra={"recipient": recipient, "subject": subject, "body": body},
        )

    def send_sms(self, phone: str, body: str) -> None:
        self._emit("sms", "SMS to %s: %s", phone, body, extra={"phone": phone, "body": body})

    def log_activity(self, account_id: str, message: str) -> None:
        self._emit(
            "activity",
            "[%s] %s",
            account_id,
            message,
            extra={"account_id": account_id, "activity": message},
        )

    @property
    def counts(self) -> dict[str, int]:
        """Number of notifications emitted per channel."""
        return dict(self._counts)

    def _emit(self, channel: str, msg: str, *args: object, extra: dict) -> None:
        self.logger.log(self.level, msg, *args, extra={"extra": {"channel": channel, **extra}})
        self._counts[channel] = self._counts.get(channel, 0) + 1
