"""Synthetic account activity: generation and replay.

A workload is a list of :class:`Operation` values. :func:`replay` applies
it to a set of accounts and counts what succeeded and why the rest failed.
With a transfer-only workload the sum of all balances must not change.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterable, Iterator, Sequence

from bank_account.account import Account
from bank_account.exceptions import (
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
)
from bank_account.generators.base import BaseGenerator
from bank_account.logging import get_logger
from bank_account.money import Amount, to_decimal

logger = get_logger(__name__)


class OperationKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER = "TRANSFER"


@dataclass(frozen=True)
class Operation:
    """One generated account operation."""

    kind: OperationKind
    amount: Decimal


class ActivityGenerator(BaseGenerator):
    """Generate synthetic deposit / withdrawal / transfer workloads."""

    OPERATION_KINDS = list(OperationKind)
    DEFAULT_WEIGHTS = [0.25, 0.25, 0.50]

    def __init__(
        self,
        seed: int | None = None,
        min_amount: Amount = "0.01",
        max_amount: Amount = "50.00",
        weights: Sequence[float] | None = None,
    ) -> None:
        super().__init__(seed)
        self.min_amount = to_decimal(min_amount)
        self.max_amount = to_decimal(max_amount)
        if self.min_amount <= 0 or self.max_amount < self.min_amount:
            raise InvalidArgumentError(
                f"Invalid amount range [{self.min_amount}, {self.max_amount}]"
            )
        self.weights = list(weights) if weights is not None else self.DEFAULT_WEIGHTS
        if len(self.weights) != len(self.OPERATION_KINDS):
            raise InvalidArgumentError("One weight per operation kind is required")

    def amount(self) -> Decimal:
        """Draw a two-decimal amount inside the configured range."""
        if self.min_amount == self.max_amount:
            return self.min_amount
        value = self.fake.pydecimal(
            right_digits=2,
            positive=True,
            min_value=float(self.min_amount),
            max_value=float(self.max_amount),
        )
        return min(max(value.quantize(Decimal("0.01")), self.min_amount), self.max_amount)

    def generate(self) -> Operation:
        """Generate a single operation."""
        kind = self.rng.choices(self.OPERATION_KINDS, weights=self.weights, k=1)[0]
        return Operation(kind=kind, amount=self.amount())

    def generate_batch(self, count: int) -> Iterator[Operation]:
        """Generate ``count`` operations."""
        for _ in range(count):
            yield self.generate()


@dataclass
class ReplayStats:
    """Outcome counters of a replayed workload."""

    attempted: int = 0
    succeeded: int = 0
    failed_by_reason: dict[str, int] = field(
        default_factory=lambda: {
            "insufficient_funds": 0,
            "invalid_state": 0,
            "invalid_argument": 0,
            "same_account": 0,
        }
    )

    @property
    def failed(self) -> int:
        return sum(self.failed_by_reason.values())

    def merge(self, other: ReplayStats) -> None:
        """Add ``other``'s counters to this one."""
        self.attempted += other.attempted
        self.succeeded += other.succeeded
        for reason, count in other.failed_by_reason.items():
            self.failed_by_reason[reason] = self.failed_by_reason.get(reason, 0) + count


def replay(
    operations: Iterable[Operation],
    accounts: Sequence[Account],
    rng: random.Random | None = None,
) -> ReplayStats:
    """Apply ``operations`` to randomly chosen ``accounts``.

    Deposits and withdrawals target one account; transfers go through
    :meth:`Account.transfer_min_funds` between two distinct accounts.
    Business-rule rejections are counted, anything else propagates.
    """
    if not accounts:
        raise InvalidArgumentError("replay needs at least one account")
    rng = rng or random.Random()
    stats = ReplayStats()

    for op in operations:
        stats.attempted += 1
        try:
            if op.kind == OperationKind.TRANSFER:
                if len(accounts) < 2:
                    stats.failed_by_reason["same_account"] += 1
                    continue
                src, dst = rng.sample(list(accounts), 2)
                src.transfer_min_funds(dst, op.amount)
            elif op.kind == OperationKind.DEPOSIT:
                rng.choice(accounts).deposit(op.amount)
            else:
                rng.choice(accounts).withdraw(op.amount)
        except InsufficientFundsError:
            stats.failed_by_reason["insufficient_funds"] += 1
        except InvalidStateError:
            stats.failed_by_reason["invalid_state"] += 1
        except InvalidArgumentError:
            stats.failed_by_reason["invalid_argument"] += 1
        else:
            stats.succeeded += 1

    logger.debug(
        "Replayed %d operations: %d succeeded, %d failed",
        stats.attempted,
        stats.succeeded,
        stats.failed,
    )
    return stats
