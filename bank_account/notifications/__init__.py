"""Notification sinks for large-movement alerts and activity logging."""

from bank_account.notifications.base import NotificationSink
from bank_account.notifications.logging_sink import LoggingNotificationSink
from bank_account.notifications.recording import (
    ACTIVITY,
    EMAIL,
    SMS,
    NotificationCall,
    RecordingNotificationSink,
)

__all__ = [
    "ACTIVITY",
    "EMAIL",
    "SMS",
    "LoggingNotificationSink",
    "NotificationCall",
    "NotificationSink",
    "RecordingNotificationSink",
]
