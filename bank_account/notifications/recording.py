"""Notification sink that keeps an ordered, inspectable log of calls."""

from dataclasses import dataclass

from bank_account.notifications.base import NotificationSink

EMAIL = "send_email"
SMS = "send_sms"
ACTIVITY = "log_activity"


@dataclass(frozen=True)
class NotificationCall:
    """One recorded call: the method name and its positional arguments."""

    channel: str
    args: tuple[str, ...]


class RecordingNotificationSink(NotificationSink):
    """Record every call in order so interactions can be asserted afterwards.

    Usage::

        sink = RecordingNotificationSink()
        account = Account(10000, notifier=sink)
        account.deposit(60000)
        assert [c.channel for c in sink.calls] == ["log_activity", "send_email"]
    """

    def __init__(self) -> None:
        self.calls: list[NotificationCall] = []

    def send_email(self, recipient: str, subject: str, body: str) -> None:
        self.calls.append(NotificationCall(EMAIL, (recipient, subject, body)))

    def send_sms(self, phone: str, body: str) -> None:
        self.calls.append(NotificationCall(SMS, (phone, body)))

    def log_activity(self, account_id: str, message: str) -> None:
        self.calls.append(NotificationCall(ACTIVITY, (account_id, message)))

    def calls_for(self, channel: str) -> list[NotificationCall]:
        """Return the recorded calls of one channel, in call order."""
        return [call for call in self.calls if call.channel == channel]

    def count(self, channel: str) -> int:
        return len(self.calls_for(channel))

    @property
    def channels(self) -> list[str]:
        """Channel names in call order."""
        return [call.channel for call in self.calls]

    def reset(self) -> None:
        """Forget every recorded call."""
        self.calls.clear()
