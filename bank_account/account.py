"""Bank account entity.

The account owns its balance, its daily withdrawal counter and its
transaction history. Every mutation goes through the public operations
below; each operation either completes or raises before touching state.

Shared use across threads:

- Each account guards its state with an ``RLock``.
- Transfers take both accounts' locks in ``(account_id, id())`` order so two
  opposite transfers cannot deadlock.
"""

from __future__ import annotations

import uuid
from contextlib import ExitStack, contextmanager
from decimal import Decimal
from threading import RLock
from typing import Iterator

from bank_account.config import AccountLimits, BankConfig, NotificationConfig
from bank_account.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    RateProviderError,
)
from bank_account.logging import get_logger
from bank_account.models import Transaction, TransactionType
from bank_account.money import Amount, format_money, to_decimal
from bank_account.notifications.base import NotificationSink
from bank_account.rates.base import RateProvider
from bank_account.rates.bnr import BnrRateProvider

logger = get_logger(__name__)

DAYS_PER_YEAR = Decimal("365")


@contextmanager
def _locked(*accounts: "Account") -> Iterator[None]:
    """Hold the locks of ``accounts`` in a globally consistent order."""
    unique = {id(acc): acc for acc in accounts}.values()
    ordered = sorted(unique, key=lambda acc: (acc.account_id, id(acc)))
    with ExitStack() as stack:
        for acc in ordered:
            stack.enter_context(acc._lock)
        yield


class Account:
    """In-memory bank account.

    Parameters
    ----------
    balance : Amount
        Opening balance in the account's own currency.
    account_id : str | None
        Identifier; a random uuid4 hex string when omitted.
    rate_provider : RateProvider | None
        EUR -> RON rate source. Defaults to :class:`BnrRateProvider`.
    notifier : NotificationSink | None
        Receiver of email / SMS / activity calls. ``None`` skips them.
    limits : AccountLimits | None
        Floor, daily limit and interest rate.
    notifications : NotificationConfig | None
        Notification thresholds and targets.
    """

    def __init__(
        self,
        balance: Amount = 0,
        *,
        account_id: str | None = None,
        rate_provider: RateProvider | None = None,
        notifier: NotificationSink | None = None,
        limits: AccountLimits | None = None,
        notifications: NotificationConfig | None = None,
    ) -> None:
        self._account_id = account_id or uuid.uuid4().hex
        self._balance = to_decimal(balance)
        self._limits = limits or AccountLimits()
        self._notifications = notifications or NotificationConfig()
        self.rate_provider = rate_provider if rate_provider is not None else BnrRateProvider()
        self.notifier = notifier
        self._daily_withdrawn = Decimal("0")
        self._history: list[Transaction] = []
        self._lock = RLock()

    @classmethod
    def from_config(
        cls,
        config: BankConfig,
        balance: Amount = 0,
        *,
        account_id: str | None = None,
        notifier: NotificationSink | None = None,
    ) -> Account:
        """Create an account whose limits, thresholds and rate come from ``config``."""
        return cls(
            balance,
            account_id=account_id,
            rate_provider=BnrRateProvider.from_config(config.rates),
            notifier=notifier,
            limits=config.limits,
            notifications=config.notifications,
        )

    def __repr__(self) -> str:
        return f"Account({self._account_id}, balance={self._balance})"

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def min_balance(self) -> Decimal:
        return self._limits.min_balance

    @property
    def daily_limit(self) -> Decimal:
        return self._limits.daily_limit

    @property
    def interest_rate(self) -> Decimal:
        return self._limits.interest_rate

    @property
    def daily_withdrawn(self) -> Decimal:
        with self._lock:
            return self._daily_withdrawn

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Snapshot of the transaction history, oldest first."""
        with self._lock:
            return tuple(self._history)

    # ------------------------------------------------------------------
    # Balance operations
    # ------------------------------------------------------------------

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance.

        The amount is not range-checked. Every deposit is logged to the
        notifier; deposits above the large-deposit threshold also send an
        email to the account owner.
        """
        amt = to_decimal(amount)
        with self._lock:
            self._credit(amt, TransactionType.DEPOSIT, "Deposit")

    def withdraw(self, amount: Amount) -> None:
        """Subtract ``amount`` from the balance within the daily limit.

        Every withdrawal is logged to the notifier; withdrawals above the
        large-withdrawal threshold also send an SMS.

        Raises
        ------
        InvalidStateError
            If the amount would push today's withdrawals over the daily limit.
        """
        amt = to_decimal(amount)
        with self._lock:
            self._ensure_within_daily_limit(amt)
            self._daily_withdrawn += amt
            self._debit(amt, TransactionType.WITHDRAW, "Withdraw")

    def start_new_day(self) -> None:
        """Open a new daily window: today's withdrawn total goes back to zero."""
        with self._lock:
            logger.debug("New day for %s, resetting %s withdrawn", self._account_id, self._daily_withdrawn)
            self._daily_withdrawn = Decimal("0")

    def apply_interest(self, amount: Amount) -> None:
        """Credit caller-computed interest."""
        amt = to_decimal(amount)
        with self._lock:
            self._balance += amt
            self._record(TransactionType.INTEREST, amt)

    def calculate_interest(self, days: int | Decimal) -> Decimal:
        """Simple interest the current balance earns over ``days`` days."""
        with self._lock:
            return self._balance * self.interest_rate * to_decimal(days) / DAYS_PER_YEAR

    def accrue_interest(self, days: int | Decimal) -> Decimal:
        """Compute interest for ``days`` days, apply it and return it."""
        with self._lock:
            interest = self.calculate_interest(days)
            self.apply_interest(interest)
            return interest

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    # Transfer legs are recorded as TRANSFER_IN / TRANSFER_OUT and notify like
    # deposits / withdrawals, but do not count against the daily cash limit.

    def transfer_funds(self, destination: Account, amount: Amount) -> None:
        """Move ``amount`` to ``destination`` without any check."""
        amt = to_decimal(amount)
        with _locked(self, destination):
            destination._credit(amt, TransactionType.TRANSFER_IN, "Transfer in")
            self._debit(amt, TransactionType.TRANSFER_OUT, "Transfer out")

    def transfer_min_funds(self, destination: Account, amount: Amount) -> Account:
        """Move ``amount`` to ``destination`` keeping the source above its floor.

        Returns
        -------
        Account
            ``destination``.

        Raises
        ------
        InsufficientFundsError
            If ``amount`` is not positive or the source would end at or
            below ``min_balance``.
        """
        amt = to_decimal(amount)
        if amt <= 0:
            logger.warning("Rejected transfer of non-positive amount %s from %s", amt, self._account_id)
            raise InsufficientFundsError()

        with _locked(self, destination):
            self._ensure_above_floor(amt)
            destination._credit(amt, TransactionType.TRANSFER_IN, "Transfer in")
            self._debit(amt, TransactionType.TRANSFER_OUT, "Transfer out")
        return destination

    # ------------------------------------------------------------------
    # Currency conversion
    # ------------------------------------------------------------------

    def convert_ron_to_eur(self, amount_ron: Amount) -> Decimal:
        """Convert RON to EUR at the provider's current rate."""
        amt = self._require_positive(amount_ron)
        return amt / self._eur_to_ron_rate()

    def convert_eur_to_ron(self, amount_eur: Amount) -> Decimal:
        """Convert EUR to RON at the provider's current rate."""
        amt = self._require_positive(amount_eur)
        return amt * self._eur_to_ron_rate()

    def transfer_ron_to_eur(self, destination: Account, amount_ron: Amount) -> None:
        """Withdraw RON here and deposit the EUR equivalent into ``destination``."""
        amt = self._require_positive(amount_ron)
        with _locked(self, destination):
            self._ensure_above_floor(amt)
            amount_eur = self.convert_ron_to_eur(amt)
            self._debit(amt, TransactionType.TRANSFER_OUT, "Transfer out")
            destination._credit(amount_eur, TransactionType.TRANSFER_IN, "Transfer in")

    def transfer_eur_to_ron(self, destination: Account, amount_eur: Amount) -> None:
        """Withdraw EUR here and deposit the RON equivalent into ``destination``."""
        amt = self._require_positive(amount_eur)
        with _locked(self, destination):
            self._ensure_above_floor(amt)
            amount_ron = self.convert_eur_to_ron(amt)
            self._debit(amt, TransactionType.TRANSFER_OUT, "Transfer out")
            destination._credit(amount_ron, TransactionType.TRANSFER_IN, "Transfer in")

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def generate_account_report(self) -> str:
        """Render a plain-text summary of the account."""
        with self._lock:
            lines = [
                "=== Account Report ===",
                f"Account ID: {self._account_id}",
                f"Current balance: {format_money(self._balance)}",
                f"Minimum balance: {format_money(self.min_balance)}",
                f"Daily withdrawal limit: {format_money(self.daily_limit)}",
                f"Withdrawn today: {format_money(self._daily_withdrawn)}",
                f"Interest rate: {self.interest_rate * 100:.2f}%",
                f"Transaction count: {len(self._history)}",
                f"Total deposited: {format_money(self._total(TransactionType.DEPOSIT))}",
                f"Total withdrawn: {format_money(self._total(TransactionType.WITHDRAW))}",
            ]
            self._log_activity("Account report generated")
        return "\n".join(lines)

    def get_transactions_by_type(self, transaction_type: TransactionType | str) -> list[Transaction]:
        """Return the history entries of one type, oldest first."""
        try:
            wanted = TransactionType(transaction_type)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown transaction type: {transaction_type!r}") from exc
        with self._lock:
            return [tx for tx in self._history if tx.transaction_type == wanted]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _credit(self, amount: Decimal, transaction_type: TransactionType, label: str) -> None:
        self._balance += amount
        self._record(transaction_type, amount)
        logger.debug("%s of %s into %s, balance %s", label, amount, self._account_id, self._balance)

        self._log_activity(f"{label}: {amount}")
        if amount > self._notifications.large_deposit_threshold and self.notifier is not None:
            self.notifier.send_email(
                self._notifications.email_recipient,
                self._notifications.email_subject,
                f"{label} of {amount} into account {self._account_id}.",
            )

    def _debit(self, amount: Decimal, transaction_type: TransactionType, label: str) -> None:
        self._balance -= amount
        self._record(transaction_type, amount)
        logger.debug("%s of %s from %s, balance %s", label, amount, self._account_id, self._balance)

        self._log_activity(f"{label}: {amount}")
        if amount > self._notifications.large_withdrawal_threshold and self.notifier is not None:
            self.notifier.send_sms(
                self._notifications.sms_phone,
                f"{label} of {amount} from account {self._account_id}.",
            )

    def _record(self, transaction_type: TransactionType, amount: Decimal) -> None:
        self._history.append(
            Transaction(
                transaction_type=transaction_type,
                amount=amount,
                sequence=len(self._history) + 1,
                account_id=self._account_id,
            )
        )

    def _total(self, transaction_type: TransactionType) -> Decimal:
        return sum(
            (tx.amount for tx in self._history if tx.transaction_type == transaction_type),
            Decimal("0"),
        )

    def _log_activity(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier.log_activity(self._account_id, message)

    def _require_positive(self, amount: Amount) -> Decimal:
        amt = to_decimal(amount)
        if amt <= 0:
            logger.warning("Rejected non-positive amount %s on %s", amt, self._account_id)
            raise InvalidArgumentError("Amount must be positive")
        return amt

    def _ensure_above_floor(self, amount: Decimal) -> None:
        if self._balance - amount <= self.min_balance:
            logger.warning(
                "Rejected transfer of %s from %s: balance %s would not stay above %s",
                amount,
                self._account_id,
                self._balance,
                self.min_balance,
            )
            raise InsufficientFundsError()

    def _ensure_within_daily_limit(self, amount: Decimal) -> None:
        if self._daily_withdrawn + amount > self.daily_limit:
            logger.warning(
                "Rejected withdrawal of %s from %s: %s already withdrawn today, limit %s",
                amount,
                self._account_id,
                self._daily_withdrawn,
                self.daily_limit,
            )
            raise InvalidStateError(
                f"Daily withdrawal limit of {self.daily_limit} exceeded "
                f"({self._daily_withdrawn} withdrawn, {amount} requested)"
            )

    def _eur_to_ron_rate(self) -> Decimal:
        try:
            rate = to_decimal(self.rate_provider.get_eur_to_ron_rate())
        except RateProviderError:
            raise
        except Exception as exc:
            raise RateProviderError("Could not obtain the EUR -> RON rate") from exc
        if rate <= 0:
            raise RateProviderError(f"EUR -> RON rate must be positive, got {rate}")
        return rate
