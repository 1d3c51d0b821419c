"""A bank of elevators sharing one scheduler and one stopping strategy."""

from __future__ import annotations

from lldsims.elevator import Elevator, ElevatorObserver, Floor, Request, Strategy
from lldsims.scheduler import Scheduler


class ElevatorSystem:
    """Owns the elevators and floors of a building and dispatches requests."""

    def __init__(
        self,
        elevator_count: int,
        floor_count: int,
        scheduler: Scheduler,
        strategy: Strategy,
    ) -> None:
        self.scheduler = scheduler
        self.strategy = strategy
        self._floors = tuple(Floor(number) for number in range(floor_count))
        self._elevators = [Elevator(i, strategy) for i in range(elevator_count)]

    def add_observer_to_all(self, observer: ElevatorObserver) -> None:
        for elevator in self._elevators:
            elevator.add_observer(observer)

    def handle_request(self, request: Request) -> int | None:
        """Hand the request to the elevator the scheduler picks; return its id."""
        assigned = self.scheduler.assign_elevator(self._elevators, request)
        if assigned is None:
            print(f"[System] No elevator available for floor {request.floor.number}")
            return None
        print(
            f"[System] Assigning floor {request.floor.number} "
            f"request to Elevator {assigned}"
        )
        self._elevators[assigned].add_request(request)
        return assigned

    def step_all(self) -> None:
        for elevator in self._elevators:
            elevator.step()

    @property
    def elevators(self) -> list[Elevator]:
        return list(self._elevators)

    def get_elevator(self, elevator_id: int) -> Elevator | None:
        return next((e for e in self._elevators if e.id == elevator_id), None)

    @property
    def floors(self) -> tuple[Floor, ...]:
        return self._floors