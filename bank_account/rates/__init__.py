"""Exchange-rate providers."""

from bank_account.rates.base import RateProvider
from bank_account.rates.bnr import BnrRateProvider
from bank_account.rates.fixed import FixedRateProvider

__all__ = ["BnrRateProvider", "FixedRateProvider", "RateProvider"]
