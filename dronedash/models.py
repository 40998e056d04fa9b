"""
Core data models for the DroneDash dispatch simulator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class DroneStatus(Enum):
    """Availability of a drone."""
    INACTIVE = "Inactive"
    ACTIVE = "Active"
    DELIVERY = "Delivery"


class OrderStatus(Enum):
    """Lifecycle status of an order.

    Any status may follow any other. COMPLETED and REJECTED are the closing
    statuses: reaching one of them releases the bound drone.
    """
    NEW = "New"
    IN_DELIVERY = "InDelivery"
    COMPLETED = "Completed"
    REJECTED = "Rejected"

    @property
    def is_closing(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.REJECTED)


class DispatchError(Enum):
    """Expected failures returned by the core instead of raised."""
    INVALID_NAME = "invalid_name"
    NO_SUCH_DRONE = "no_such_drone"
    NO_SUCH_ORDER = "no_such_order"
    DRONE_BUSY = "drone_busy"


@dataclass
class Drone:
    """A fleet unit owned by the FleetRegistry."""
    drone_id: int
    name: str
    status: DroneStatus = DroneStatus.INACTIVE

    def __post_init__(self):
        if self.drone_id <= 0:
            raise ValueError(f"Drone id must be positive, got {self.drone_id}")
        if not self.name or not self.name.strip():
            raise ValueError("Drone name must not be blank")

    def is_available(self) -> bool:
        """Return True if the drone can take an assignment."""
        return self.status is DroneStatus.INACTIVE

    def __repr__(self) -> str:
        return f"Drone(id={self.drone_id}, name={self.name!r}, status={self.status.value})"


@dataclass(frozen=True)
class Customer:
    """Customer attached to an order. Compared by name only."""
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


@dataclass
class Order:
    """A delivery request owned by the OrderLedger.

    ``drone_id`` is a lookup key into the FleetRegistry, not the drone itself.
    """
    order_id: int
    customer: Customer
    city: str
    street: str
    status: OrderStatus = OrderStatus.NEW
    drone_id: Optional[int] = None

    def __post_init__(self):
        if self.order_id <= 0:
            raise ValueError(f"Order id must be positive, got {self.order_id}")

    @property
    def has_drone(self) -> bool:
        return self.drone_id is not None

    def __repr__(self) -> str:
        return (f"Order(id={self.order_id}, customer={self.customer.full_name!r}, "
                f"status={self.status.value}, drone={self.drone_id})")


@dataclass(frozen=True)
class DroneCreated:
    drone_id: int
    name: str


@dataclass(frozen=True)
class DroneStatusChanged:
    drone_id: int
    name: str
    status: DroneStatus


@dataclass(frozen=True)
class OrderCreated:
    order_id: int
    customer: Customer
    city: str
    street: str


@dataclass(frozen=True)
class DroneAssigned:
    drone_id: int
    drone_name: str
    order_id: int


@dataclass(frozen=True)
class OrderStatusChanged:
    """Status change of an order, with the drone released by it if any."""
    order_id: int
    status: OrderStatus
    released_drone_id: Optional[int] = None
    released_drone_name: Optional[str] = None


Event = Union[DroneCreated, DroneStatusChanged, OrderCreated, DroneAssigned, OrderStatusChanged]


@dataclass(frozen=True)
class Outcome:
    """Result of a core operation: either an event or an error."""
    event: Optional[Event] = None
    error: Optional[DispatchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, event: Optional[Event] = None) -> 'Outcome':
        return cls(event=event)

    @classmethod
    def failure(cls, error: DispatchError) -> 'Outcome':
        return cls(error=error)

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"Outcome(ok, event={self.event!r})"
        return f"Outcome(error={self.error.value})"


@dataclass
class DispatchReport:
    """Contains the results of a batch dispatch run."""
    assignments: List[DroneAssigned]
    unassigned_orders: List[Order]
    computation_time: float
    strategy_name: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the dispatch run."""
        return {
            "strategy": self.strategy_name,
            "num_assignments": len(self.assignments),
            "num_unassigned": len(self.unassigned_orders),
            "computation_time": self.computation_time,
        }

    def __repr__(self) -> str:
        return (f"DispatchReport(strategy={self.strategy_name}, "
                f"assignments={len(self.assignments)}, "
                f"unassigned={len(self.unassigned_orders)})")
