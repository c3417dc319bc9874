"""Static directory and record seed served by the API.

Everything here is fixed at import time and never mutated; each request
filters these tuples by customer name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from tripdesk.models import Driver, Trip, Vehicle


USER_DIRECTORY: Mapping[str, str] = MappingProxyType(
    {
        "user_pepsi": "Pepsi",
        "user_cocacola": "Coca Cola",
        "user_fanta": "Fanta",
    }
)

TRIPS: tuple[Trip, ...] = (
    Trip(id=1, origin="Sao Paulo", destination="Rio de Janeiro", driverId=1, vehicleId=1, informedCargoValue=1000, customerName="Pepsi"),
    Trip(id=2, origin="Buenos Aires", destination="Córdoba", driverId=2, vehicleId=5, informedCargoValue=2000, customerName="Coca Cola"),
    Trip(id=3, origin="Valparaiso", destination="Santiago", driverId=3, vehicleId=6, informedCargoValue=3000, customerName="Fanta"),
)

DRIVERS: tuple[Driver, ...] = (
    Driver(id=1, firstName="John", lastName="Doe", age=30, rating=4.5, customerName="Pepsi"),
    Driver(id=2, firstName="Jane", lastName="Doe", age=25, rating=4.0, customerName="Coca Cola"),
    Driver(id=3, firstName="John", lastName="Perez", age=35, rating=4.8, customerName="Fanta"),
    Driver(id=4, firstName="Lucky", lastName="Luke", age=30, rating=4.5, customerName="Pepsi"),
    Driver(id=5, firstName="Homer", lastName="Simpson", age=30, rating=4.5, customerName="Coca Cola"),
    Driver(id=6, firstName="Lara", lastName="Croft", age=30, rating=4.5, customerName="Fanta"),
)

VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(id=1, licensePlate="ABC123", brand="Toyota", model="Camry", year=2022, customerName="Pepsi"),
    Vehicle(id=2, licensePlate="DEF456", brand="Honda", model="Civic", year=2021, customerName="Coca Cola"),
    Vehicle(id=3, licensePlate="GHI789", brand="Ford", model="Mustang", year=2020, customerName="Fanta"),
    Vehicle(id=4, licensePlate="JKL012", brand="Chevrolet", model="Camaro", year=2019, customerName="Pepsi"),
    Vehicle(id=5, licensePlate="MNO345", brand="Nissan", model="Altima", year=2018, customerName="Coca Cola"),
    Vehicle(id=6, licensePlate="PQR678", brand="Subaru", model="Impreza", year=2017, customerName="Fanta"),
)


@dataclass(frozen=True)
class Catalog:
    """User directory plus the three record sets an app instance serves."""

    directory: Mapping[str, str] = field(default_factory=lambda: USER_DIRECTORY)
    trips: tuple[Trip, ...] = TRIPS
    vehicles: tuple[Vehicle, ...] = VEHICLES
    drivers: tuple[Driver, ...] = DRIVERS

    def customer_for(self, user_name: str) -> str | None:
        return self.directory.get(user_name)


def default_catalog() -> Catalog:
    return Catalog()


__all__ = ["USER_DIRECTORY", "TRIPS", "DRIVERS", "VEHICLES", "Catalog", "default_catalog"]
