"""
Fleet registry: sole owner of drones and their identities.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .config import SEED_DRONE_NAMES
from .models import Drone, DroneStatus, DroneCreated, DroneStatusChanged, DispatchError, Outcome

logger = logging.getLogger(__name__)


class FleetRegistry:
    """
    Creates, enumerates and updates drones.

    Drone ids come from a counter owned by the instance, so every registry
    starts numbering at 1 and never reuses an id.
    """

    def __init__(self, seed_names: Iterable[str] = SEED_DRONE_NAMES):
        """
        Initialize the registry.

        Args:
            seed_names: Names of drones created up front, in id order
        """
        self._drones: Dict[int, Drone] = {}
        self._next_id = 1
        for name in seed_names:
            self._create(name)

    def _create(self, name: str) -> Drone:
        drone = Drone(drone_id=self._next_id, name=name)
        self._drones[drone.drone_id] = drone
        self._next_id += 1
        logger.debug("Created drone %r with id %d", drone.name, drone.drone_id)
        return drone

    def add_drone(self, name: str) -> Outcome:
        """
        Add a new Inactive drone.

        Args:
            name: Display name; surrounding whitespace is stripped

        Returns:
            Outcome carrying DroneCreated, or INVALID_NAME for a blank name
        """
        cleaned = (name or "").strip()
        if not cleaned:
            logger.debug("Rejected blank drone name %r", name)
            return Outcome.failure(DispatchError.INVALID_NAME)

        drone = self._create(cleaned)
        return Outcome.success(DroneCreated(drone_id=drone.drone_id, name=drone.name))

    def find_drone(self, drone_id: int) -> Optional[Drone]:
        """Return the drone with the given id, or None."""
        return self._drones.get(drone_id)

    def set_status(self, drone_id: int, status: DroneStatus) -> Outcome:
        """
        Overwrite a drone's status with no transition checks.

        Returns:
            Outcome carrying DroneStatusChanged, or NO_SUCH_DRONE
        """
        if not isinstance(status, DroneStatus):
            raise TypeError(f"Expected DroneStatus, got {status!r}")

        drone = self._drones.get(drone_id)
        if drone is None:
            return Outcome.failure(DispatchError.NO_SUCH_DRONE)

        previous = drone.status
        drone.status = status
        logger.debug("Drone %d status %s -> %s", drone_id, previous.value, status.value)
        return Outcome.success(DroneStatusChanged(drone_id=drone.drone_id, name=drone.name, status=status))

    def list_drones(self, status_filter: Optional[DroneStatus] = None) -> List[Drone]:
        """
        List drones in creation order.

        Args:
            status_filter: Only return drones in this status (None for all)
        """
        if status_filter is None:
            return list(self._drones.values())
        return [drone for drone in self._drones.values() if drone.status is status_filter]

    def available_drones(self) -> List[Drone]:
        """Drones that can take an assignment right now."""
        return self.list_drones(DroneStatus.INACTIVE)

    def __len__(self) -> int:
        return len(self._drones)

    def __iter__(self) -> Iterator[Drone]:
        return iter(list(self._drones.values()))

    def __contains__(self, drone_id: object) -> bool:
        return drone_id in self._drones

    def __repr__(self) -> str:
        return f"FleetRegistry(drones={len(self._drones)}, next_id={self._next_id})"
