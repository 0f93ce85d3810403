"""Shared setup for sample data generators."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Iterator

from faker import Faker


class BaseGenerator(ABC):
    """Faker-backed generator with reproducible output.

    A single seed drives both Faker and the generator's own
    ``random.Random``, so two generators built with the same seed and clock
    yield the same records.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    clock : Callable[[], datetime] | None
        Source of "now" for record timestamps (default: current UTC time).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        if seed is not None:
            self.fake.seed_instance(seed)

    @abstractmethod
    def generate(self) -> Any:
        """Generate one record."""

    def generate_batch(self, count: int) -> Iterator[Any]:
        """Yield ``count`` records with no repeated unique values among them."""
        self.fake.unique.clear()
        for _ in range(count):
            yield self.generate()
