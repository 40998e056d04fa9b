"""
Tests for the fleet analyzer.
"""

import json
import os
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")
import pandas as pd

from dronedash.analyzer import FleetAnalyzer
from dronedash.coordinator import DispatchCoordinator
from dronedash.fleet import FleetRegistry
from dronedash.ledger import OrderLedger
from dronedash.models import Customer, DroneStatus, OrderStatus


class TestFleetAnalyzer(unittest.TestCase):
    """Test FleetAnalyzer class."""

    def setUp(self):
        """Set up test fixtures."""
        self.coordinator = DispatchCoordinator()
        jan = Customer("Jan", "Kowalski")
        anna = Customer("Anna", "Nowak")
        for customer in (jan, jan, anna):
            self.coordinator.create_order(customer, "Wrocław", "ul.Słoneczna")
        self.coordinator.assign_drone(1, 1)
        self.coordinator.change_order_status(2, OrderStatus.REJECTED)
        self.analyzer = FleetAnalyzer(self.coordinator.fleet, self.coordinator.ledger)

    def test_status_counts(self):
        """Test counts cover every status."""
        self.assertEqual(self.analyzer.drone_status_counts(), {"Inactive": 1, "Active": 0, "Delivery": 1})
        self.assertEqual(
            self.analyzer.order_status_counts(),
            {"New": 2, "InDelivery": 0, "Completed": 0, "Rejected": 1},
        )

    def test_get_statistics(self):
        """Test getting statistics."""
        stats = self.analyzer.get_statistics()

        self.assertEqual(stats["num_drones"], 2)
        self.assertEqual(stats["num_orders"], 3)
        self.assertEqual(stats["utilization"], 0.5)
        self.assertEqual(stats["pending_orders"], 1)
        self.assertEqual(stats["customers"], {"Jan Kowalski": 2, "Anna Nowak": 1})

    def test_utilization_without_deliveries(self):
        """Test utilization counts only drones in Delivery."""
        coordinator = DispatchCoordinator()
        for drone in coordinator.fleet.list_drones():
            coordinator.set_drone_status(drone.drone_id, DroneStatus.ACTIVE)
        self.assertEqual(FleetAnalyzer(coordinator.fleet, coordinator.ledger).get_statistics()["utilization"], 0.0)

    def test_utilization_empty_fleet(self):
        """Test utilization of a fleet with no drones."""
        analyzer = FleetAnalyzer(FleetRegistry(seed_names=()), OrderLedger())
        self.assertEqual(analyzer.get_statistics()["utilization"], 0.0)

    def test_orders_frame(self):
        """Test the order table."""
        df = self.analyzer.orders_frame()

        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(list(df.index), [1, 2, 3])
        self.assertEqual(df.loc[1, "drone_name"], "Bob")
        self.assertEqual(df.loc[1, "drone_id"], 1)
        self.assertTrue(pd.isna(df.loc[3, "drone_id"]))
        self.assertEqual(df.loc[2, "status"], "Rejected")

    def test_orders_frame_empty(self):
        """Test the order table of an empty ledger."""
        coordinator = DispatchCoordinator()
        df = FleetAnalyzer(coordinator.fleet, coordinator.ledger).orders_frame()
        self.assertTrue(df.empty)
        self.assertIn("customer", df.columns)

    def test_export_to_json(self):
        """Test exporting state to JSON."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            temp_path = f.name

        try:
            self.analyzer.export_to_json(temp_path)

            with open(temp_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.assertIn("statistics", data)
            self.assertEqual(len(data["drones"]), 2)
            self.assertEqual(len(data["orders"]), 3)
            self.assertEqual(data["orders"][0]["drone_name"], "Bob")
            self.assertIsNone(data["orders"][2]["drone_id"])
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

    def test_export_to_csv(self):
        """Test exporting the order table to CSV."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            temp_path = f.name

        try:
            self.analyzer.export_to_csv(temp_path)
            df = pd.read_csv(temp_path, index_col="order_id")
            self.assertEqual(len(df), 3)
            self.assertEqual(df.loc[2, "customer"], "Jan Kowalski")
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

    def test_visualize_to_file(self):
        """Test saving the status charts."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "status.png")
            self.analyzer.visualize(save_path=path)
            self.assertTrue(os.path.exists(path))


if __name__ == '__main__':
    unittest.main()
