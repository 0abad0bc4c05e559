"""Base generator class for sample data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for sample data generators.

    Provides a Faker instance and seed-based reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``pt_BR``).
    """

    def __init__(self, seed: int | None = None, locale: str = "pt_BR") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
