"""
Basic example of using the DroneDash dispatch simulator.
"""

from dronedash import (
    DispatchCoordinator,
    FirstAvailableDispatch,
    FleetAnalyzer,
    OrderStatus,
    RandomOrderGenerator,
)


def main():
    print("=" * 80)
    print("DroneDash - Basic Example")
    print("=" * 80)

    coordinator = DispatchCoordinator()
    generator = RandomOrderGenerator(seed=42)

    # Generate a few orders
    print("\nGenerating orders...")
    for _ in range(4):
        order = generator.generate_order(coordinator.ledger)
        print(f"  Order #{order.order_id} for {order.customer} in {order.city}, {order.street}")

    # Add a drone and dispatch
    print("\n" + "-" * 80)
    outcome = coordinator.add_drone("Morty")
    print(f"Added drone {outcome.event.name} (ID: {outcome.event.drone_id})")

    report = coordinator.dispatch_pending(FirstAvailableDispatch())
    print(f"Strategy: {report.strategy_name}")
    for event in report.assignments:
        print(f"  Drone '{event.drone_name}' #{event.drone_id} -> order #{event.order_id}")
    print(f"Unassigned Orders: {len(report.unassigned_orders)}")

    # Close the first order, freeing its drone
    print("\n" + "-" * 80)
    outcome = coordinator.change_order_status(1, OrderStatus.COMPLETED)
    print(f"Order #1 -> {outcome.event.status.value}, released drone #{outcome.event.released_drone_id}")

    analyzer = FleetAnalyzer(coordinator.fleet, coordinator.ledger)
    stats = analyzer.get_statistics()
    print(f"Drones: {stats['drones']}")
    print(f"Orders: {stats['orders']}")
    print(f"Utilization: {stats['utilization']:.0%}")
    print(analyzer.orders_frame())

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
