"""
Order ledger: sole owner of orders, their statuses and drone bindings.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .models import Customer, DispatchError, Order, OrderStatus, OrderStatusChanged, Outcome

logger = logging.getLogger(__name__)


class OrderLedger:
    """
    Creates and enumerates orders.

    The ledger never looks at drones: binding stores a drone id as given and
    status changes never release anything. Cross-entity rules live in
    DispatchCoordinator.
    """

    def __init__(self):
        self._orders: Dict[int, Order] = {}
        self._next_id = 1

    def create_order(self, customer: Customer, city: str, street: str) -> Order:
        """
        Create a New order with no drone bound.

        Args:
            customer: Who placed the order
            city: Delivery city, taken as-is
            street: Delivery street, taken as-is

        Returns:
            The created order
        """
        order = Order(order_id=self._next_id, customer=customer, city=city, street=street)
        self._orders[order.order_id] = order
        self._next_id += 1
        logger.debug("Created order %d for %s", order.order_id, customer.full_name)
        return order

    def find_order(self, order_id: int) -> Optional[Order]:
        """Return the order with the given id, or None."""
        return self._orders.get(order_id)

    def bind_drone(self, order_id: int, drone_id: int) -> Outcome:
        """Record ``drone_id`` as the order's drone without checking it."""
        order = self._orders.get(order_id)
        if order is None:
            return Outcome.failure(DispatchError.NO_SUCH_ORDER)

        order.drone_id = drone_id
        return Outcome.success()

    def set_status(self, order_id: int, status: OrderStatus) -> Outcome:
        """Overwrite an order's status with no transition checks."""
        if not isinstance(status, OrderStatus):
            raise TypeError(f"Expected OrderStatus, got {status!r}")

        order = self._orders.get(order_id)
        if order is None:
            return Outcome.failure(DispatchError.NO_SUCH_ORDER)

        previous = order.status
        order.status = status
        logger.debug("Order %d status %s -> %s", order_id, previous.value, status.value)
        return Outcome.success(OrderStatusChanged(order_id=order_id, status=status))

    def list_orders(self, status_filter: Optional[OrderStatus] = None) -> List[Order]:
        """List orders in creation order, optionally only those in one status."""
        if status_filter is None:
            return list(self._orders.values())
        return [order for order in self._orders.values() if order.status is status_filter]

    def pending_orders(self) -> List[Order]:
        """New orders that have no drone yet."""
        return [
            order for order in self._orders.values()
            if order.status is OrderStatus.NEW and not order.has_drone
        ]

    def customer_order_counts(self) -> Dict[str, int]:
        """
        Count orders per customer name.

        Every order counts regardless of status. Customers sharing the same
        first and last name are merged into one entry.

        Returns:
            Mapping of "first last" to number of orders, in order of first appearance
        """
        counts: Dict[str, int] = {}
        for order in self._orders.values():
            name = order.customer.full_name
            counts[name] = counts.get(name, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(list(self._orders.values()))

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders

    def __repr__(self) -> str:
        return f"OrderLedger(orders={len(self._orders)}, next_id={self._next_id})"
