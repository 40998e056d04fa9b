"""
Dispatch coordinator: the only place where drone and order state are coupled.

Assignment and cascade release each touch both registries. They run under a
single re-entrant lock so an order is never seen closed while its drone is
still in Delivery, and a drone is never handed to two orders.
"""

import logging
import threading
import time
from typing import Optional

from .fleet import FleetRegistry
from .ledger import OrderLedger
from .models import (
    Customer,
    DispatchError,
    DispatchReport,
    Drone,
    DroneAssigned,
    DroneStatus,
    Order,
    OrderCreated,
    OrderStatus,
    OrderStatusChanged,
    Outcome,
)
from .strategies import DispatchStrategy

logger = logging.getLogger(__name__)


class DispatchCoordinator:
    """
    Validates and applies cross-entity actions against a fleet and a ledger.

    The coordinator holds no domain state of its own; everything is read and
    written through the two registries.
    """

    def __init__(self, fleet: Optional[FleetRegistry] = None, ledger: Optional[OrderLedger] = None):
        """
        Initialize the coordinator.

        Args:
            fleet: Fleet registry to use (a seeded one is created if omitted)
            ledger: Order ledger to use (an empty one is created if omitted)
        """
        self.fleet = fleet if fleet is not None else FleetRegistry()
        self.ledger = ledger if ledger is not None else OrderLedger()
        self._lock = threading.RLock()

    def add_drone(self, name: str) -> Outcome:
        with self._lock:
            return self.fleet.add_drone(name)

    def set_drone_status(self, drone_id: int, status: DroneStatus) -> Outcome:
        """Manual override; allowed from any status, including mid-delivery."""
        with self._lock:
            return self.fleet.set_status(drone_id, status)

    def create_order(self, customer: Customer, city: str, street: str) -> Outcome:
        with self._lock:
            order = self.ledger.create_order(customer, city, street)
        return Outcome.success(OrderCreated(
            order_id=order.order_id,
            customer=order.customer,
            city=order.city,
            street=order.street,
        ))

    def assign_drone(self, drone_id: int, order_id: int) -> Outcome:
        """
        Bind an Inactive drone to an order and put the drone in Delivery.

        The order's own status is left alone. An order that already has a
        drone is rebound without releasing the previous one.

        Args:
            drone_id: Drone to assign
            order_id: Order receiving the drone

        Returns:
            Outcome carrying DroneAssigned, or NO_SUCH_DRONE, DRONE_BUSY
            or NO_SUCH_ORDER
        """
        with self._lock:
            drone = self.fleet.find_drone(drone_id)
            if drone is None:
                return Outcome.failure(DispatchError.NO_SUCH_DRONE)
            if not drone.is_available():
                logger.debug("Drone %d is %s, cannot assign", drone_id, drone.status.value)
                return Outcome.failure(DispatchError.DRONE_BUSY)

            order = self.ledger.find_order(order_id)
            if order is None:
                return Outcome.failure(DispatchError.NO_SUCH_ORDER)

            if order.has_drone and order.drone_id != drone_id:
                logger.debug("Order %d rebound from drone %d to drone %d without release",
                             order_id, order.drone_id, drone_id)

            self.fleet.set_status(drone_id, DroneStatus.DELIVERY)
            self.ledger.bind_drone(order_id, drone_id)

        logger.info("Drone %d assigned to order %d", drone_id, order_id)
        return Outcome.success(DroneAssigned(drone_id=drone.drone_id, drone_name=drone.name, order_id=order_id))

    def change_order_status(self, order_id: int, status: OrderStatus) -> Outcome:
        """
        Set an order's status and release its drone when the order closes.

        Any status may be set from any status. Completed and Rejected set the
        bound drone (if any) to Inactive whatever its current status; New and
        InDelivery never touch the drone.

        Returns:
            Outcome carrying OrderStatusChanged, or NO_SUCH_ORDER
        """
        with self._lock:
            outcome = self.ledger.set_status(order_id, status)
            if not outcome.ok:
                return outcome

            order = self.ledger.find_order(order_id)
            if not (status.is_closing and order.has_drone):
                return outcome

            released = self.fleet.find_drone(order.drone_id)
            if released is None:
                # Bindings are only made through assign_drone, so this means a foreign fleet
                logger.debug("Order %d bound to unknown drone %d", order_id, order.drone_id)
                return outcome
            self.fleet.set_status(released.drone_id, DroneStatus.INACTIVE)

        logger.info("Order %d %s, drone %d released", order_id, status.value, released.drone_id)
        return Outcome.success(OrderStatusChanged(
            order_id=order_id,
            status=status,
            released_drone_id=released.drone_id,
            released_drone_name=released.name,
        ))

    def drone_for(self, order: Order) -> Optional[Drone]:
        """Resolve an order's bound drone through the fleet."""
        if not order.has_drone:
            return None
        return self.fleet.find_drone(order.drone_id)

    def dispatch_pending(self, strategy: DispatchStrategy) -> DispatchReport:
        """
        Assign available drones to pending orders using a strategy.

        Every pairing the strategy proposes goes through assign_drone, so a
        faulty plan can never bind a busy drone. Pairings naming an order that
        is not pending, or one already served earlier in the run, are skipped.

        Args:
            strategy: Strategy that plans the pairings

        Returns:
            DispatchReport with the applied assignments and orders left pending
        """
        start_time = time.time()

        with self._lock:
            pending = self.ledger.pending_orders()
            pairings = strategy.plan(self.fleet.available_drones(), pending)

            pending_ids = {order.order_id for order in pending}
            assigned_ids = set()
            assignments = []
            rejected = {}
            skipped = []
            for drone_id, order_id in pairings:
                # Orders outside this run or already served keep their binding
                if order_id not in pending_ids or order_id in assigned_ids:
                    skipped.append((drone_id, order_id))
                    continue
                outcome = self.assign_drone(drone_id, order_id)
                if outcome.ok:
                    assignments.append(outcome.event)
                    assigned_ids.add(order_id)
                else:
                    rejected[order_id] = outcome.error.value

            unassigned = [order for order in pending if order.order_id not in assigned_ids]

        metadata = {}
        if rejected:
            metadata["rejected"] = rejected
        if skipped:
            metadata["skipped"] = skipped

        computation_time = time.time() - start_time
        logger.info("%s assigned %d of %d pending orders",
                    strategy.get_name(), len(assignments), len(pending))

        return DispatchReport(
            assignments=assignments,
            unassigned_orders=unassigned,
            computation_time=computation_time,
            strategy_name=strategy.get_name(),
            metadata=metadata,
        )

    def __repr__(self) -> str:
        return f"DispatchCoordinator(fleet={self.fleet!r}, ledger={self.ledger!r})"
