"""
DroneDash dispatch simulator
Tracks delivery drones and customer orders and enforces the rules that bind them.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .models import (
    Customer,
    DispatchError,
    DispatchReport,
    Drone,
    DroneStatus,
    Order,
    OrderStatus,
    Outcome,
)
from .fleet import FleetRegistry
from .ledger import OrderLedger
from .coordinator import DispatchCoordinator
from .strategies import (
    DispatchStrategy,
    FirstAvailableDispatch,
    RandomDispatch,
    UserDefinedDispatch,
)
from .generator import RandomOrderGenerator
from .analyzer import FleetAnalyzer

__all__ = [
    "Customer",
    "DispatchError",
    "DispatchReport",
    "Drone",
    "DroneStatus",
    "Order",
    "OrderStatus",
    "Outcome",
    "FleetRegistry",
    "OrderLedger",
    "DispatchCoordinator",
    "DispatchStrategy",
    "FirstAvailableDispatch",
    "RandomDispatch",
    "UserDefinedDispatch",
    "RandomOrderGenerator",
    "FleetAnalyzer",
]
