"""Transaction record appended to an account's history."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from bank_account.models.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Single balance movement.

    ``sequence`` is the logical timestamp: 1 for the first entry of an
    account's history, increasing by one per entry. ``recorded_at`` is
    informational only; ordering never depends on it.
    """

    transaction_type: TransactionType
    amount: Decimal
    sequence: int
    account_id: str
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
