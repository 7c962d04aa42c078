"""Base generator class for synthetic account activity."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides a Faker instance and a private ``random.Random`` so that a
    given seed reproduces the same sequence regardless of other callers
    of the ``random`` module.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``ro_RO``).
    """

    def __init__(self, seed: int | None = None, locale: str = "ro_RO") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
