"""Exchange-rate provider interface."""

from abc import ABC, abstractmethod
from decimal import Decimal


class RateProvider(ABC):
    """Source of the EUR -> RON exchange rate.

    Implementations return how many RON buy one EUR. A provider that
    cannot produce a rate raises :class:`~bank_account.exceptions.RateProviderError`.
    """

    @abstractmethod
    def get_eur_to_ron_rate(self) -> Decimal:
        """Return the current rate as RON per 1 EUR."""
