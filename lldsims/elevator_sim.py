"""Console simulation of a three-car elevator bank."""

from __future__ import annotations

import argparse
import time

from lldsims.elevator import (
    Direction,
    ElevatorObserver,
    ElevatorState,
    Floor,
    Request,
    RequestType,
)
from lldsims.elevator_system import ElevatorSystem
from lldsims.scheduler import LookScheduler
from lldsims.strategies import LookStrategy

_EXTERNAL_CALLS = (
    (3, Direction.UP),
    (5, Direction.DOWN),
    (1, Direction.UP),
    (6, Direction.DOWN),
    (2, Direction.UP),
)

# (elevator id, pickup floor, floor pressed inside the car)
_PASSENGER_CHOICES = (
    (0, 3, 7),
    (0, 1, 4),
    (0, 2, 8),
    (1, 5, 1),
    (2, 6, 2),
)


class ConsoleLogger(ElevatorObserver):
    """Prints every floor and state change."""

    def on_floor_change(self, elevator_id: int, floor: int) -> None:
        print(f"[Logger] Elevator {elevator_id} at floor {floor}")

    def on_state_change(self, elevator_id: int, state: ElevatorState) -> None:
        print(f"[Logger] Elevator {elevator_id} changed state to {state.name}")


class PickupInjector:
    """Simulates a passenger pressing a car button once picked up."""

    def __init__(self) -> None:
        self.injected: set[tuple[int, int]] = set()

    def inject(
        self,
        system: ElevatorSystem,
        elevator_id: int,
        pickup_floor: int,
        internal_floor: int,
    ) -> bool:
        """Add the internal request if the car is stopped at the pickup floor.

        Each (elevator, pickup floor) pair fires at most once. Returns whether
        a request was added.
        """
        key = (elevator_id, pickup_floor)
        elevator = system.get_elevator(elevator_id)
        if elevator is None or key in self.injected:
            return False
        if not elevator.is_at_floor(pickup_floor):
            return False
        direction = Direction.UP if internal_floor > pickup_floor else Direction.DOWN
        elevator.add_request(Request(Floor(internal_floor), direction, RequestType.INTERNAL))
        print(
            f"[Simulation] User inside Elevator {elevator_id} pressed {internal_floor}"
        )
        self.injected.add(key)
        return True


def run_simulation(steps: int = 30, delay: float = 0.4) -> ElevatorSystem:
    """Run the scripted scenario for the given number of steps."""
    system = ElevatorSystem(3, 8, LookScheduler(), LookStrategy())
    system.add_observer_to_all(ConsoleLogger())

    for floor, direction in _EXTERNAL_CALLS:
        system.handle_request(Request(Floor(floor), direction, RequestType.EXTERNAL))

    injector = PickupInjector()
    for _ in range(steps):
        system.step_all()
        for elevator_id, pickup, pressed in _PASSENGER_CHOICES:
            injector.inject(system, elevator_id, pickup, pressed)
        if delay > 0:
            time.sleep(delay)
    return system


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the elevator simulation.")
    parser.add_argument("--steps", type=int, default=30, help="number of ticks")
    parser.add_argument(
        "--delay", type=float, default=0.4, help="seconds to pause between ticks"
    )
    args = parser.parse_args(argv)
    run_simulation(args.steps, args.delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())