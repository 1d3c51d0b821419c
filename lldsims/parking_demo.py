"""Park one car in a small lot and pay for it straight away."""

from __future__ import annotations

import argparse

from lldsims.parking import (
    HourlyRateStrategy,
    ParkingFloor,
    ParkingLot,
    ParkingSlot,
    Vehicle,
    VehicleType,
)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(description="Parking lot demonstration.").parse_args(argv)

    lot = ParkingLot(HourlyRateStrategy())
    floor = ParkingFloor(1)
    floor.add_slot(ParkingSlot(0, VehicleType.CAR, 1))
    floor.add_slot(ParkingSlot(1, VehicleType.CAR, 2))
    lot.add_floor(floor)

    car = Vehicle(VehicleType.CAR, "DEMO-0001")
    ticket = lot.park_vehicle(car)
    if ticket is not None:
        print(f"Ticket generated. Vehicle: {ticket.vehicle_number}")
        print("Ticket")
        print(f"Ticket ID: {ticket.ticket_id}")
        print(f"Parking Start-Time: {int(ticket.entry_time.timestamp())}")
        lot.unpark_vehicle(ticket)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())