"""Configuration management for bank_account."""

from dataclasses import dataclass, field, fields
from decimal import Decimal

from bank_account.exceptions import ConfigurationError, InvalidArgumentError
from bank_account.money import to_decimal


def _normalise_decimals(instance: object, *names: str) -> None:
    """Coerce the named fields of a frozen dataclass to finite ``Decimal``."""
    for name in names:
        value = getattr(instance, name)
        try:
            object.__setattr__(instance, name, to_decimal(value))
        except InvalidArgumentError as exc:
            raise ConfigurationError(
                f"{type(instance).__name__}.{name} is not a finite number: {value!r}"
            ) from exc


@dataclass(frozen=True)
class AccountLimits:
    """Balance floor, daily withdrawal ceiling and annual interest rate.

    Numeric fields accept anything :func:`bank_account.money.to_decimal`
    does and are stored as ``Decimal``.
    """

    min_balance: Decimal = Decimal("1")
    daily_limit: Decimal = Decimal("10000")
    interest_rate: Decimal = Decimal("0.02")

    def __post_init__(self) -> None:
        _normalise_decimals(self, *(f.name for f in fields(self)))


@dataclass(frozen=True)
class NotificationConfig:
    """Thresholds and fixed targets for large-movement notifications."""

    large_deposit_threshold: Decimal = Decimal("50000")
    large_withdrawal_threshold: Decimal = Decimal("5000")
    email_recipient: str = "owner@example.com"
    email_subject: str = "Large deposit"
    sms_phone: str = "+40712345678"

    def __post_init__(self) -> None:
        _normalise_decimals(self, "large_deposit_threshold", "large_withdrawal_threshold")


@dataclass(frozen=True)
class RateConfig:
    """Exchange-rate configuration."""

    # RON per 1 EUR
    reference_eur_to_ron: Decimal = Decimal("4.97")

    def __post_init__(self) -> None:
        _normalise_decimals(self, "reference_eur_to_ron")
        if self.reference_eur_to_ron <= 0:
            raise ConfigurationError(
                f"reference_eur_to_ron must be positive, got {self.reference_eur_to_ron}"
            )


@dataclass
class BankConfig:
    """Main configuration for bank_account."""

    limits: AccountLimits = field(default_factory=AccountLimits)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    rates: RateConfig = field(default_factory=RateConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        import os

        defaults_limits = AccountLimits()
        defaults_notify = NotificationConfig()

        limits = AccountLimits(
            min_balance=_env_decimal("BANK_MIN_BALANCE", defaults_limits.min_balance),
            daily_limit=_env_decimal("BANK_DAILY_LIMIT", defaults_limits.daily_limit),
            interest_rate=_env_decimal("BANK_INTEREST_RATE", defaults_limits.interest_rate),
        )

        notifications = NotificationConfig(
            large_deposit_threshold=_env_decimal(
                "BANK_LARGE_DEPOSIT_THRESHOLD", defaults_notify.large_deposit_threshold
            ),
            large_withdrawal_threshold=_env_decimal(
                "BANK_LARGE_WITHDRAWAL_THRESHOLD", defaults_notify.large_withdrawal_threshold
            ),
            email_recipient=os.getenv("BANK_EMAIL_RECIPIENT", defaults_notify.email_recipient),
            email_subject=defaults_notify.email_subject,
            sms_phone=os.getenv("BANK_SMS_PHONE", defaults_notify.sms_phone),
        )

        rate = _env_decimal("BANK_EUR_TO_RON_RATE", RateConfig().reference_eur_to_ron)
        if rate <= 0:
            raise ConfigurationError("BANK_EUR_TO_RON_RATE must be positive")

        return cls(
            limits=limits,
            notifications=notifications,
            rates=RateConfig(reference_eur_to_ron=rate),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )

    def configure_logging(self) -> None:
        """Apply ``log_level`` and ``log_format`` to the process logging setup."""
        from bank_account.logging import setup_logging

        setup_logging(self.log_level, self.log_format)


def _env_decimal(name: str, default: Decimal) -> Decimal:
    """Read a finite decimal environment variable, falling back to ``default``."""
    import os

    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return to_decimal(raw.strip())
    except InvalidArgumentError as exc:
        raise ConfigurationError(f"{name} is not a finite number: {raw!r}") from exc
