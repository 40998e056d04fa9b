"""
Dispatch strategies for pairing pending orders with available drones.

A strategy only plans. DispatchCoordinator.dispatch_pending applies the plan
through assign_drone, so assignment rules are enforced in one place.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple
import random

from .models import Drone, Order

Pairing = Tuple[int, int]
"""(drone_id, order_id)"""


class DispatchStrategy(ABC):
    """Base class for dispatch strategies."""

    @abstractmethod
    def plan(self, drones: Sequence[Drone], orders: Sequence[Order]) -> List[Pairing]:
        """
        Pair orders with drones.

        Args:
            drones: Available drones, in creation order
            orders: Pending orders, in creation order

        Returns:
            List of (drone_id, order_id) pairs; each drone appears at most once
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return the name of the strategy."""
        pass


class FirstAvailableDispatch(DispatchStrategy):
    """Gives the oldest pending order the lowest-numbered available drone."""

    def get_name(self) -> str:
        return "First Available Dispatch"

    def plan(self, drones: Sequence[Drone], orders: Sequence[Order]) -> List[Pairing]:
        free = sorted((d for d in drones if d.is_available()), key=lambda d: d.drone_id)
        return [(drone.drone_id, order.order_id) for drone, order in zip(free, orders)]


class RandomDispatch(DispatchStrategy):
    """Randomly picks an available drone for each pending order."""

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random dispatch strategy.

        Args:
            seed: Random seed for reproducibility
        """
        self.seed = seed
        self._rng = random.Random(seed)

    def get_name(self) -> str:
        return "Random Dispatch"

    def plan(self, drones: Sequence[Drone], orders: Sequence[Order]) -> List[Pairing]:
        free = [d for d in drones if d.is_available()]
        pairings = []

        for order in orders:
            if not free:
                break
            drone = self._rng.choice(free)
            free.remove(drone)
            pairings.append((drone.drone_id, order.order_id))

        return pairings


class UserDefinedDispatch(DispatchStrategy):
    """Applies an explicit order-to-drone mapping."""

    def __init__(self, assignment_map: Dict[int, int]):
        """
        Initialize user-defined dispatch strategy.

        Args:
            assignment_map: Dictionary mapping order_id to drone_id
        """
        self.assignment_map = assignment_map

    def get_name(self) -> str:
        return "User-Defined Dispatch"

    def plan(self, drones: Sequence[Drone], orders: Sequence[Order]) -> List[Pairing]:
        free = {d.drone_id for d in drones if d.is_available()}
        pairings = []

        for order in orders:
            drone_id = self.assignment_map.get(order.order_id)
            # Unknown, busy or already used drones leave the order unassigned
            if drone_id is None or drone_id not in free:
                continue
            free.discard(drone_id)
            pairings.append((drone_id, order.order_id))

        return pairings
