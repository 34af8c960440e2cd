"""Seeded randomness shared by ledger generators."""

from __future__ import annotations

import random
from collections.abc import Sequence
from decimal import Decimal
from typing import TypeVar

from faker import Faker

T = TypeVar("T")


class BaseGenerator:
    """Holds one Faker and one ``random.Random``, both seeded from ``seed``.

    Two generators built with the same seed and locale produce the same
    sequence of names, e-mails and amounts.
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)

    def pick(self, options: Sequence[T], weights: Sequence[float]) -> T:
        """Weighted choice of one option."""
        return self.random.choices(options, weights=weights, k=1)[0]

    def money(self, low: Decimal | int, high: Decimal | int) -> Decimal:
        """Uniform amount in ``[low, high]`` at cent resolution."""
        cents = self.random.randint(int(Decimal(low) * 100), int(Decimal(high) * 100))
        return Decimal(cents) / 100
