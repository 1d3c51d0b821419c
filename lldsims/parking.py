"""Parking lot model: vehicles, slots, floors, tickets and pricing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class VehicleType(IntEnum):
    """Vehicle sizes, smallest first; a slot fits any vehicle not larger than it."""

    BIKE = 0
    CAR = 1
    TRUCK = 2


@dataclass(frozen=True)
class Vehicle:
    type: VehicleType
    number: str


@dataclass(eq=False)
class ParkingSlot:
    id: int
    type: VehicleType
    priority: int = 100
    parked_vehicle: Vehicle | None = None

    def can_fit(self, vehicle_type: VehicleType) -> bool:
        return self.type >= vehicle_type

    def park(self, vehicle: Vehicle) -> None:
        self.parked_vehicle = vehicle

    def remove_vehicle(self) -> None:
        self.parked_vehicle = None

    @property
    def is_occupied(self) -> bool:
        return self.parked_vehicle is not None


@dataclass(eq=False)
class ParkingFloor:
    id: int
    slots: list[ParkingSlot] = field(default_factory=list)

    def add_slot(self, slot: ParkingSlot) -> None:
        self.slots.append(slot)

    def find_slot(self, vehicle_type: VehicleType) -> ParkingSlot | None:
        """First free slot made for exactly this vehicle type."""
        return next(
            (s for s in self.slots if not s.is_occupied and s.type is vehicle_type),
            None,
        )

    def find_any_fitting_slot(self, vehicle_type: VehicleType) -> ParkingSlot | None:
        """First free slot large enough for this vehicle type."""
        return next(
            (s for s in self.slots if not s.is_occupied and s.can_fit(vehicle_type)),
            None,
        )


class PricingStrategy(ABC):
    @abstractmethod
    def calculate(self, duration_minutes: int) -> float:
        """Fee for a stay of the given whole number of minutes."""


class FlatRateStrategy(PricingStrategy):
    """Half a unit per minute."""

    def calculate(self, duration_minutes: int) -> float:
        return duration_minutes * 0.5


class HourlyRateStrategy(PricingStrategy):
    """Ten units per started hour."""

    def calculate(self, duration_minutes: int) -> float:
        return ((duration_minutes + 59) // 60) * 10.0


@dataclass
class Ticket:
    floor_id: int
    slot_id: int
    vehicle_number: str
    entry_time: datetime = field(default_factory=datetime.now)
    is_paid: bool = False
    ticket_id: str = field(init=False)

    def __post_init__(self) -> None:
        stamp = self.entry_time.strftime("%Y%m%d%H%M%S")
        self.ticket_id = f"{stamp}_F{self.floor_id}_S{self.slot_id}"


class ParkingLot:
    """Floors of slots, searched in floor-id order."""

    def __init__(self, strategy: PricingStrategy | None = None) -> None:
        self.strategy: PricingStrategy = strategy or FlatRateStrategy()
        self.floors: dict[int, ParkingFloor] = {}

    def add_floor(self, floor: ParkingFloor) -> None:
        self.floors[floor.id] = floor

    def _ordered_floors(self) -> list[ParkingFloor]:
        return [self.floors[key] for key in sorted(self.floors)]

    def park_vehicle(self, vehicle: Vehicle) -> Ticket | None:
        """Park in an exact-size slot if any, else in any larger free slot."""
        for finder in (ParkingFloor.find_slot, ParkingFloor.find_any_fitting_slot):
            for floor in self._ordered_floors():
                slot = finder(floor, vehicle.type)
                if slot is not None:
                    slot.park(vehicle)
                    return Ticket(floor.id, slot.id, vehicle.number)
        print(f"No slot found for {vehicle.number}")
        return None

    def unpark_vehicle(self, ticket: Ticket, now: datetime | None = None) -> float:
        """Free the ticket's slot, mark it paid and return the fee."""
        floor = self.floors[ticket.floor_id]
        slot = next((s for s in floor.slots if s.id == ticket.slot_id), None)
        if slot is None:
            raise KeyError(f"no slot {ticket.slot_id} on floor {ticket.floor_id}")
        slot.remove_vehicle()

        elapsed = (now or datetime.now()) - ticket.entry_time
        minutes = int(elapsed.total_seconds() // 60)
        price = self.strategy.calculate(minutes)
        ticket.is_paid = True
        print(f"Vehicle {ticket.vehicle_number} unparked. Fee: $.{price:g}")
        return price