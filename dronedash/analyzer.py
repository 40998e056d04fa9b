"""
Analyzer for summarizing and exporting fleet and ledger state.
"""

from typing import Any, Dict, Optional
import json

import pandas as pd

from .fleet import FleetRegistry
from .ledger import OrderLedger
from .models import DroneStatus, OrderStatus

ORDER_COLUMNS = ["order_id", "customer", "city", "street", "status", "drone_id", "drone_name"]


class FleetAnalyzer:
    """Read-only views over a fleet registry and an order ledger."""

    def __init__(self, fleet: FleetRegistry, ledger: OrderLedger):
        self.fleet = fleet
        self.ledger = ledger

    def drone_status_counts(self) -> Dict[str, int]:
        """Number of drones per status, zero counts included."""
        counts = {status.value: 0 for status in DroneStatus}
        for drone in self.fleet.list_drones():
            counts[drone.status.value] += 1
        return counts

    def order_status_counts(self) -> Dict[str, int]:
        """Number of orders per status, zero counts included."""
        counts = {status.value: 0 for status in OrderStatus}
        for order in self.ledger.list_orders():
            counts[order.status.value] += 1
        return counts

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get a statistical summary of the current state.

        Returns:
            Dictionary with drone and order metrics
        """
        num_drones = len(self.fleet)
        in_delivery = len(self.fleet.list_drones(DroneStatus.DELIVERY))

        return {
            "num_drones": num_drones,
            "num_orders": len(self.ledger),
            "drones": self.drone_status_counts(),
            "orders": self.order_status_counts(),
            "utilization": in_delivery / num_drones if num_drones else 0.0,
            "pending_orders": len(self.ledger.pending_orders()),
            "customers": self.ledger.customer_order_counts(),
        }

    def orders_frame(self) -> pd.DataFrame:
        """
        Build a table of all orders in creation order.

        Returns:
            pandas.DataFrame indexed by order_id; drone columns are empty for
            orders without a drone
        """
        rows = []
        for order in self.ledger.list_orders():
            drone = self.fleet.find_drone(order.drone_id) if order.has_drone else None
            rows.append({
                "order_id": order.order_id,
                "customer": order.customer.full_name,
                "city": order.city,
                "street": order.street,
                "status": order.status.value,
                "drone_id": order.drone_id,
                "drone_name": drone.name if drone else None,
            })

        df = pd.DataFrame(rows, columns=ORDER_COLUMNS)
        df["drone_id"] = df["drone_id"].astype("Int64")
        return df.set_index("order_id")

    def export_to_json(self, filepath: str):
        """
        Export statistics and the order table to a JSON file.

        Args:
            filepath: Path to output JSON file
        """
        data = {
            "statistics": self.get_statistics(),
            "drones": [
                {"drone_id": d.drone_id, "name": d.name, "status": d.status.value}
                for d in self.fleet.list_drones()
            ],
            "orders": json.loads(self.orders_frame().reset_index().to_json(orient="records")),
        }

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def export_to_csv(self, filepath: str):
        """Write the order table to a CSV file."""
        self.orders_frame().to_csv(filepath, encoding='utf-8')

    def visualize(self, save_path: Optional[str] = None):
        """
        Plot drone and order status distributions side by side.

        Args:
            save_path: Path to save the figure (if None, displays interactively)
        """
        import matplotlib.pyplot as plt

        fig, axes = plt.subplots(1, 2, figsize=(12, 5))

        for ax, title, counts, color in (
            (axes[0], "Drones by status", self.drone_status_counts(), "tab:blue"),
            (axes[1], "Orders by status", self.order_status_counts(), "tab:orange"),
        ):
            ax.bar(list(counts.keys()), list(counts.values()), color=color, alpha=0.8)
            ax.set_title(title)
            ax.set_ylabel("Count")
            ax.grid(True, axis="y", alpha=0.3)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
            plt.close(fig)
        else:
            plt.show()
