"""Default rate provider based on the National Bank of Romania reference rate."""

from decimal import Decimal

from bank_account.config import RateConfig
from bank_account.logging import get_logger
from bank_account.money import Amount, to_decimal
from bank_account.rates.base import RateProvider

logger = get_logger(__name__)


class BnrRateProvider(RateProvider):
    """Serve the BNR EUR reference rate.

    The rate is the published daily reference value taken from
    configuration; no request is made to https://www.bnr.ro/nbrfxrates.xml.
    """

    def __init__(self, reference_rate: Amount | None = None) -> None:
        """Initialize the provider.

        Parameters
        ----------
        reference_rate : Amount | None
            RON per 1 EUR. Defaults to ``RateConfig().reference_eur_to_ron``.
        """
        if reference_rate is None:
            reference_rate = RateConfig().reference_eur_to_ron
        self.reference_rate = to_decimal(reference_rate)

    @classmethod
    def from_config(cls, config: RateConfig) -> "BnrRateProvider":
        """Build a provider from a :class:`RateConfig`."""
        return cls(config.reference_eur_to_ron)

    def get_eur_to_ron_rate(self) -> Decimal:
        """Return the reference rate."""
        logger.debug("BNR reference rate served: %s RON/EUR", self.reference_rate)
        return self.reference_rate
