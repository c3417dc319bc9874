"""Wire models shared by the API service and the client adapter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    userName: str | None = None


class LoginResponse(BaseModel):
    sessionId: str = Field(min_length=1)


class Trip(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    origin: str
    destination: str
    driverId: int
    vehicleId: int
    informedCargoValue: float
    customerName: str


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    firstName: str
    lastName: str
    age: int
    rating: float
    customerName: str


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    licensePlate: str
    brand: str
    model: str
    year: int
    customerName: str


__all__ = ["LoginRequest", "LoginResponse", "Trip", "Driver", "Vehicle"]
