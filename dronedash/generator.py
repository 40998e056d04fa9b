"""
Random order content generation.
"""

import random
from typing import Optional, Sequence, Tuple

from . import config
from .ledger import OrderLedger
from .models import Customer, Order


class RandomOrderGenerator:
    """Draws customers and addresses from fixed pools."""

    def __init__(
        self,
        seed: Optional[int] = None,
        names: Sequence[Tuple[str, str]] = config.CUSTOMER_NAMES,
        cities: Sequence[str] = config.CITIES,
        streets: Sequence[str] = config.STREETS,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility
            names: (first, last) name pairs to draw customers from
            cities: Cities to draw from
            streets: Streets to draw from
        """
        if not names or not cities or not streets:
            raise ValueError("Generator pools must not be empty")

        self.seed = seed
        self._rng = random.Random(seed)
        self.names = tuple(names)
        self.cities = tuple(cities)
        self.streets = tuple(streets)

    def next_content(self) -> Tuple[Customer, str, str]:
        """Return a random (customer, city, street) triple."""
        first, last = self._rng.choice(self.names)
        city = self._rng.choice(self.cities)
        street = self._rng.choice(self.streets)
        return Customer(first, last), city, street

    def generate_order(self, ledger: OrderLedger) -> Order:
        """Create an order with random content in the given ledger."""
        customer, city, street = self.next_content()
        return ledger.create_order(customer, city, street)
