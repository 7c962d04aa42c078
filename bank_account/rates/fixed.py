"""Deterministic rate provider."""

from decimal import Decimal

from bank_account.money import Amount, to_decimal
from bank_account.rates.base import RateProvider


class FixedRateProvider(RateProvider):
    """Always return the same rate and count how often it was asked."""

    def __init__(self, eur_to_ron_rate: Amount) -> None:
        self.rate = to_decimal(eur_to_ron_rate)
        self.calls = 0

    def get_eur_to_ron_rate(self) -> Decimal:
        self.calls += 1
        return self.rate
