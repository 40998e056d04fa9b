"""
Tests for the fleet registry.
"""

import unittest
from dronedash.fleet import FleetRegistry
from dronedash.models import DispatchError, DroneCreated, DroneStatus


class TestFleetSeeding(unittest.TestCase):
    """Test the default fleet."""

    def test_seed_drones(self):
        """Test that Bob and Rick exist as drones 1 and 2."""
        fleet = FleetRegistry()
        drones = fleet.list_drones()
        self.assertEqual([(d.drone_id, d.name) for d in drones], [(1, "Bob"), (2, "Rick")])
        self.assertTrue(all(d.status is DroneStatus.INACTIVE for d in drones))

    def test_empty_fleet(self):
        """Test building a fleet without seed drones."""
        fleet = FleetRegistry(seed_names=())
        self.assertEqual(len(fleet), 0)
        self.assertEqual(fleet.add_drone("Alpha").event.drone_id, 1)

    def test_fresh_registries_have_independent_counters(self):
        """Test that each registry numbers from scratch."""
        first = FleetRegistry()
        first.add_drone("Alpha")
        first.add_drone("Beta")
        second = FleetRegistry()
        self.assertEqual(second.add_drone("Gamma").event.drone_id, 3)


class TestAddDrone(unittest.TestCase):
    """Test adding drones."""

    def setUp(self):
        self.fleet = FleetRegistry()

    def test_first_added_drone_gets_id_three(self):
        """Test ids continue after the seed drones."""
        outcome = self.fleet.add_drone("Morty")
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.event, DroneCreated(drone_id=3, name="Morty"))
        self.assertEqual(self.fleet.find_drone(3).status, DroneStatus.INACTIVE)

    def test_ids_strictly_increase(self):
        """Test ids are strictly increasing and never reused."""
        ids = [self.fleet.add_drone(f"Drone {i}").event.drone_id for i in range(5)]
        self.assertEqual(ids, [3, 4, 5, 6, 7])

    def test_blank_names_rejected(self):
        """Test empty and whitespace names fail with INVALID_NAME."""
        for name in ("", "   ", "\t\n"):
            outcome = self.fleet.add_drone(name)
            self.assertFalse(outcome.ok)
            self.assertEqual(outcome.error, DispatchError.INVALID_NAME)
        self.assertEqual(len(self.fleet), 2)

    def test_rejected_name_does_not_consume_id(self):
        """Test a failed add leaves the id counter alone."""
        self.fleet.add_drone("   ")
        self.assertEqual(self.fleet.add_drone("Morty").event.drone_id, 3)

    def test_name_is_trimmed(self):
        """Test surrounding whitespace is stripped."""
        outcome = self.fleet.add_drone("  Summer  ")
        self.assertEqual(outcome.event.name, "Summer")


class TestStatusAndListing(unittest.TestCase):
    """Test status changes and listing."""

    def setUp(self):
        self.fleet = FleetRegistry()
        self.fleet.add_drone("Morty")
        self.fleet.add_drone("Summer")

    def test_find_missing_drone(self):
        """Test looking up an unknown id."""
        self.assertIsNone(self.fleet.find_drone(99))
        self.assertNotIn(99, self.fleet)
        self.assertIn(1, self.fleet)

    def test_set_status_unconditional(self):
        """Test any status can overwrite any other."""
        self.assertTrue(self.fleet.set_status(1, DroneStatus.DELIVERY).ok)
        outcome = self.fleet.set_status(1, DroneStatus.ACTIVE)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.event.status, DroneStatus.ACTIVE)
        self.assertEqual(self.fleet.find_drone(1).status, DroneStatus.ACTIVE)

    def test_set_status_missing_drone(self):
        """Test changing the status of an unknown drone."""
        outcome = self.fleet.set_status(42, DroneStatus.ACTIVE)
        self.assertEqual(outcome.error, DispatchError.NO_SUCH_DRONE)

    def test_set_status_requires_enum(self):
        """Test raw values are refused."""
        with self.assertRaises(TypeError):
            self.fleet.set_status(1, "Active")

    def test_list_all_in_creation_order(self):
        """Test listing without a filter."""
        self.fleet.set_status(2, DroneStatus.ACTIVE)
        ids = [d.drone_id for d in self.fleet.list_drones(None)]
        self.assertEqual(ids, [1, 2, 3, 4])

    def test_list_with_filter(self):
        """Test filtering keeps creation order."""
        self.fleet.set_status(4, DroneStatus.ACTIVE)
        self.fleet.set_status(1, DroneStatus.ACTIVE)
        active = self.fleet.list_drones(DroneStatus.ACTIVE)
        self.assertEqual([d.drone_id for d in active], [1, 4])
        self.assertEqual([d.drone_id for d in self.fleet.available_drones()], [2, 3])
        self.assertEqual(self.fleet.list_drones(DroneStatus.DELIVERY), [])


if __name__ == '__main__':
    unittest.main()
