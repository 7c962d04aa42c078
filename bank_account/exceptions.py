"""Custom exception hierarchy for bank_account."""


class BankAccountError(Exception):
    """Base exception for all bank_account errors."""


class InvalidArgumentError(BankAccountError):
    """Raised when an amount that must be positive is zero or negative."""


class InsufficientFundsError(BankAccountError):
    """Raised when a checked transfer would leave the source at or below its floor."""

    def __init__(self, message: str = "Not enough funds in account!") -> None:
        super().__init__(message)


class InvalidStateError(BankAccountError):
    """Raised when an operation is not allowed in the account's current state."""


class RateProviderError(BankAccountError):
    """Raised when the exchange-rate source fails or returns an unusable rate."""


class ConfigurationError(BankAccountError):
    """Raised when configuration is invalid or missing."""
