"""Interactive console menu for the DroneDash dispatch simulator.

This module is the display and command layer around the core. It reads raw
input, rejects anything malformed before it reaches the coordinator, calls the
core, and renders the returned outcomes as text.

Usage:
    $ python -m dronedash --seed 42
    $ dronedash --verbose
"""

import argparse
import logging
from typing import Callable, List, Optional

from . import __version__
from .config import CANCEL_CODE, LOG_FORMAT
from .coordinator import DispatchCoordinator
from .generator import RandomOrderGenerator
from .models import DispatchError, DroneStatus, OrderStatus, Outcome
from .strategies import FirstAvailableDispatch

logger = logging.getLogger(__name__)

DRONE_STATUS_CODES = {
    "1": DroneStatus.INACTIVE,
    "2": DroneStatus.ACTIVE,
    "3": DroneStatus.DELIVERY,
}

ORDER_STATUS_CODES = {
    "1": OrderStatus.NEW,
    "2": OrderStatus.IN_DELIVERY,
    "3": OrderStatus.COMPLETED,
    "4": OrderStatus.REJECTED,
}

ERROR_MESSAGES = {
    DispatchError.INVALID_NAME: "Drone name must not be empty.",
    DispatchError.NO_SUCH_DRONE: "No such drone.",
    DispatchError.NO_SUCH_ORDER: "No such order.",
    DispatchError.DRONE_BUSY: "Drone is busy.",
}


class ConsoleApp:
    """
    Menu loop over a DispatchCoordinator.

    Input and output are injected so the menu can be driven from tests.
    """

    def __init__(
        self,
        coordinator: Optional[DispatchCoordinator] = None,
        generator: Optional[RandomOrderGenerator] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.coordinator = coordinator if coordinator is not None else DispatchCoordinator()
        self.generator = generator if generator is not None else RandomOrderGenerator()
        self._input = input_fn
        self._print = output_fn

    # Input helpers

    def ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError:
            return CANCEL_CODE

    def ask_id(self, prompt: str) -> Optional[int]:
        """Return the typed id, or None if the user cancelled or typed garbage."""
        raw = self.ask(f"{prompt} ({CANCEL_CODE} to cancel): ")
        try:
            value = int(raw)
        except ValueError:
            self._print(">>> Cancelled.")
            return None
        if value == 0:
            self._print(">>> Cancelled.")
            return None
        return value

    def report_error(self, outcome: Outcome):
        self._print(f">>> Error: {ERROR_MESSAGES[outcome.error]}")

    # Menus

    def run(self):
        """Run the main menu until the user exits."""
        actions = {
            "1": self.generate_order,
            "2": self.show_orders,
            "3": self.show_customer_stats,
            "4": self.drone_menu,
            "5": self.order_menu,
            "6": self.auto_dispatch,
        }
        while True:
            self._print("\n=== DroneDash ===")
            self._print("1. Generate order")
            self._print("2. List orders")
            self._print("3. Customers and order counts")
            self._print("4. Drone management")
            self._print("5. Order management")
            self._print("6. Dispatch pending orders")
            self._print("0. Exit")
            choice = self.ask("Choose an option: ")
            if choice == CANCEL_CODE:
                return
            action = actions.get(choice)
            if action is None:
                self._print(">>> Invalid option.")
                continue
            action()

    def drone_menu(self):
        actions = {
            "1": self.add_drone,
            "2": self.assign_drone,
            "3": self.change_drone_status,
            "4": self.list_drones,
        }
        while True:
            self._print("\n--- Drone management ---")
            self._print("1. Add drone")
            self._print("2. Assign drone to order")
            self._print("3. Change drone status")
            self._print("4. List drones")
            self._print("0. Back")
            choice = self.ask("Option: ")
            if choice == CANCEL_CODE:
                return
            action = actions.get(choice)
            if action is None:
                self._print(">>> Invalid option.")
                continue
            action()

    def order_menu(self):
        actions = {
            "1": self.change_order_status,
            "2": self.show_orders,
        }
        while True:
            self._print("\n--- Order management ---")
            self._print("1. Change order status")
            self._print("2. List orders")
            self._print("0. Back")
            choice = self.ask("Option: ")
            if choice == CANCEL_CODE:
                return
            action = actions.get(choice)
            if action is None:
                self._print(">>> Invalid option.")
                continue
            action()

    # Commands

    def generate_order(self):
        customer, city, street = self.generator.next_content()
        event = self.coordinator.create_order(customer, city, street).event
        self._print(f"Generated order #{event.order_id} for {event.customer} in {event.city}, {event.street}")

    def show_orders(self):
        header = f"{'ID':<4}{'Customer':<20}{'City':<12}{'Street':<15}{'Status':<12}{'Drone':<20}"
        self._print("\n--- Orders ---")
        self._print(header)
        for line in self.order_lines():
            self._print(line)

    def order_lines(self) -> List[str]:
        lines = []
        for order in self.coordinator.ledger.list_orders():
            drone = self.coordinator.drone_for(order)
            drone_label = f"{drone.name} (#{drone.drone_id})" if drone else "-"
            lines.append(
                f"{order.order_id:<4}{order.customer.full_name:<20}{order.city:<12}"
                f"{order.street:<15}{order.status.value:<12}{drone_label:<20}"
            )
        return lines

    def show_customer_stats(self):
        self._print("\n--- Customers and order counts ---")
        for name, count in self.coordinator.ledger.customer_order_counts().items():
            self._print(f"{name}: {count}")

    def add_drone(self):
        name = self.ask(f"Drone name ({CANCEL_CODE} to cancel): ")
        if name == CANCEL_CODE:
            self._print(">>> Cancelled.")
            return
        outcome = self.coordinator.add_drone(name)
        if not outcome.ok:
            self.report_error(outcome)
            return
        self._print(f"Added drone: {outcome.event.name} (ID: {outcome.event.drone_id})")

    def assign_drone(self):
        if not len(self.coordinator.ledger):
            self._print("<<< No orders to assign.")
            return
        order_id = self.ask_id("Order ID")
        if order_id is None:
            return
        drone_id = self.ask_id("Drone ID to assign")
        if drone_id is None:
            return
        outcome = self.coordinator.assign_drone(drone_id, order_id)
        if not outcome.ok:
            self.report_error(outcome)
            return
        event = outcome.event
        self._print(f"Drone '{event.drone_name}' #{event.drone_id} assigned to order #{event.order_id}.")

    def change_drone_status(self):
        drone_id = self.ask_id("Drone ID")
        if drone_id is None:
            return
        self._print("1. Inactive  2. Active  3. Delivery")
        status = DRONE_STATUS_CODES.get(self.ask("Choose status: "))
        if status is None:
            self._print(">>> Invalid status.")
            return
        outcome = self.coordinator.set_drone_status(drone_id, status)
        if not outcome.ok:
            self.report_error(outcome)
            return
        event = outcome.event
        self._print(f"Drone '{event.name}' #{event.drone_id} status changed to {event.status.value}.")

    def list_drones(self):
        self._print("Filter: 1.Inactive 2.Active 3.Delivery 4.All 0.Back")
        choice = self.ask("Option: ")
        if choice == CANCEL_CODE:
            return
        if choice == "4":
            status_filter = None
        elif choice in DRONE_STATUS_CODES:
            status_filter = DRONE_STATUS_CODES[choice]
        else:
            self._print(">>> Invalid option.")
            return
        self._print("\nID\tName\tStatus")
        for drone in self.coordinator.fleet.list_drones(status_filter):
            self._print(f"{drone.drone_id}\t{drone.name}\t{drone.status.value}")

    def change_order_status(self):
        order_id = self.ask_id("Order ID")
        if order_id is None:
            return
        if order_id not in self.coordinator.ledger:
            self._print(f">>> Error: {ERROR_MESSAGES[DispatchError.NO_SUCH_ORDER]}")
            return
        self._print("1.New  2.InDelivery  3.Completed  4.Rejected")
        status = ORDER_STATUS_CODES.get(self.ask("Choose status: "))
        if status is None:
            self._print(">>> Invalid status.")
            return
        outcome = self.coordinator.change_order_status(order_id, status)
        if not outcome.ok:
            self.report_error(outcome)
            return
        event = outcome.event
        self._print(f"Order #{event.order_id} status changed to {event.status.value}.")
        if event.released_drone_id is not None:
            self._print(f"Drone '{event.released_drone_name}' #{event.released_drone_id} released and set to Inactive.")

    def auto_dispatch(self):
        report = self.coordinator.dispatch_pending(FirstAvailableDispatch())
        for event in report.assignments:
            self._print(f"Drone '{event.drone_name}' #{event.drone_id} assigned to order #{event.order_id}.")
        self._print(f"{len(report.assignments)} assigned, {len(report.unassigned_orders)} still pending.")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dronedash", description="Interactive drone dispatch simulator")
    parser.add_argument("--seed", type=int, default=None, help="random seed for order generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)
    logger.debug("Starting with seed=%s", args.seed)

    app = ConsoleApp(generator=RandomOrderGenerator(seed=args.seed))
    try:
        app.run()
    except KeyboardInterrupt:
        return 130
    return 0
