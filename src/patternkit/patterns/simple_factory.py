"""Simple Factory pattern.

``VehicleFactory`` centralises construction: callers ask for a vehicle by
tag and never name the concrete class.
"""

import threading
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

from patternkit.logging.logger import get_logger

logger = get_logger(__name__)


class Vehicle(ABC):
    """Product interface."""

    @abstractmethod
    def drive(self) -> str:
        pass


class Car(Vehicle):

    def drive(self) -> str:
        message = "Driving a car"
        print(message)
        return message


class Bike(Vehicle):

    def drive(self) -> str:
        message = "Riding a bike"
        print(message)
        return message


class Truck(Vehicle):

    def drive(self) -> str:
        message = "Driving a truck"
        print(message)
        return message


class VehicleFactory:
    """
    Creates vehicles from a type tag.

    Tags are matched case-insensitively. New vehicle kinds are added with
    ``register`` instead of editing ``get_vehicle``.
    """

    _constructors: Dict[str, Callable[[], Vehicle]] = {
        "car": Car,
        "bike": Bike,
        "truck": Truck,
    }
    _lock = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Subclasses start from the parent's tags but register into their own table
        cls._constructors = dict(cls._constructors)

    @classmethod
    def register(cls, vehicle_type: str, constructor: Callable[[], Vehicle]) -> None:
        """
        Register a vehicle constructor under a tag.

        Args:
            vehicle_type: Tag used by callers (case-insensitive)
            constructor: Zero-argument callable returning a Vehicle
        """
        key = vehicle_type.lower()
        with cls._lock:
            if key in cls._constructors:
                logger.warning(f"Overriding existing vehicle type: {key}")
            cls._constructors[key] = constructor
        logger.info(f"Registered vehicle type: {key}")

    @classmethod
    def unregister(cls, vehicle_type: str) -> bool:
        with cls._lock:
            return cls._constructors.pop(vehicle_type.lower(), None) is not None

    @classmethod
    def registered_types(cls) -> List[str]:
        with cls._lock:
            return sorted(cls._constructors)

    @classmethod
    def get_vehicle(cls, vehicle_type: Optional[str]) -> Optional[Vehicle]:
        """
        Create a vehicle for the given tag.

        Returns:
            A new Vehicle, or None after printing "Unknown vehicle type"
        """
        constructor = None
        if vehicle_type:
            with cls._lock:
                constructor = cls._constructors.get(vehicle_type.lower())

        if constructor is None:
            print("Unknown vehicle type")
            return None

        return constructor()


def demo() -> None:
    """Request each built-in vehicle, then one the factory does not know."""
    for vehicle_type in ("Car", "Bike", "Truck", "Plane"):
        vehicle = VehicleFactory.get_vehicle(vehicle_type)
        if vehicle is not None:
            vehicle.drive()
