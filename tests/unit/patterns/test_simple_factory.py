"""Tests for the vehicle factory."""

import pytest

from patternkit.patterns.simple_factory import Bike, Car, Truck, Vehicle, VehicleFactory, demo


class TestVehicleFactory:
    """Test vehicle creation by tag."""

    @pytest.mark.parametrize(
        "vehicle_type, expected_class, expected_line",
        [
            ("Car", Car, "Driving a car"),
            ("Bike", Bike, "Riding a bike"),
            ("Truck", Truck, "Driving a truck"),
        ],
    )
    def test_known_types(self, vehicle_type, expected_class, expected_line, capsys):
        """Test each built-in tag yields the matching vehicle."""
        vehicle = VehicleFactory.get_vehicle(vehicle_type)
        assert isinstance(vehicle, expected_class)
        assert vehicle.drive() == expected_line
        assert capsys.readouterr().out == f"{expected_line}\n"

    def test_tags_are_case_insensitive(self):
        """Test lookup ignores case."""
        assert isinstance(VehicleFactory.get_vehicle("car"), Car)
        assert isinstance(VehicleFactory.get_vehicle("TRUCK"), Truck)

    def test_each_call_builds_a_new_vehicle(self):
        """Test the factory does not cache products."""
        assert VehicleFactory.get_vehicle("Car") is not VehicleFactory.get_vehicle("Car")

    @pytest.mark.parametrize("vehicle_type", ["Plane", "", None])
    def test_unknown_type_prints_message_and_returns_none(self, vehicle_type, capsys):
        """Test unknown tags are reported and yield no vehicle."""
        assert VehicleFactory.get_vehicle(vehicle_type) is None
        assert capsys.readouterr().out == "Unknown vehicle type\n"


class TestVehicleRegistration:
    """Test extending the factory without editing it."""

    def test_register_new_type(self, restore_vehicle_types, capsys):
        """Test a registered vehicle can be requested."""

        class Plane(Vehicle):
            def drive(self):
                print("Flying a plane")
                return "Flying a plane"

        VehicleFactory.register("Plane", Plane)

        assert "plane" in VehicleFactory.registered_types()
        assert VehicleFactory.get_vehicle("plane").drive() == "Flying a plane"

    def test_register_override_logs_warning(self, restore_vehicle_types, caplog):
        """Test replacing a built-in type is allowed but logged."""
        VehicleFactory.register("car", Truck)
        assert isinstance(VehicleFactory.get_vehicle("Car"), Truck)
        assert "Overriding existing vehicle type: car" in caplog.text

    def test_unregister(self, restore_vehicle_types):
        """Test removing a type."""
        assert VehicleFactory.unregister("Bike") is True
        assert VehicleFactory.unregister("Bike") is False
        assert "bike" not in VehicleFactory.registered_types()

    def test_subclass_registrations_stay_local(self, restore_vehicle_types):
        """Test a subclass factory extends its own table, not the base one."""

        class FleetFactory(VehicleFactory):
            pass

        FleetFactory.register("van", Truck)

        assert isinstance(FleetFactory.get_vehicle("Car"), Car)
        assert isinstance(FleetFactory.get_vehicle("van"), Truck)
        assert "van" not in VehicleFactory.registered_types()

    def test_registered_types_sorted(self):
        """Test the built-in tags."""
        assert VehicleFactory.registered_types() == ["bike", "car", "truck"]


def test_demo_output(capsys):
    """Test the walk-through drives three vehicles and rejects a plane."""
    demo()
    assert capsys.readouterr().out.splitlines() == [
        "Driving a car",
        "Riding a bike",
        "Driving a truck",
        "Unknown vehicle type",
    ]
