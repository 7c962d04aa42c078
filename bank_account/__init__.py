"""In-memory bank account with transfers, currency conversion and notifications."""

from bank_account.account import Account
from bank_account.config import AccountLimits, BankConfig, NotificationConfig, RateConfig
from bank_account.exceptions import (
    BankAccountError,
    ConfigurationError,
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    RateProviderError,
)
from bank_account.models import Transaction, TransactionType
from bank_account.notifications import (
    LoggingNotificationSink,
    NotificationSink,
    RecordingNotificationSink,
)
from bank_account.rates import BnrRateProvider, FixedRateProvider, RateProvider

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountLimits",
    "BankAccountError",
    "BankConfig",
    "BnrRateProvider",
    "ConfigurationError",
    "FixedRateProvider",
    "InsufficientFundsError",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggingNotificationSink",
    "NotificationConfig",
    "NotificationSink",
    "RateConfig",
    "RateProvider",
    "RateProviderError",
    "RecordingNotificationSink",
    "Transaction",
    "TransactionType",
    "__version__",
]
