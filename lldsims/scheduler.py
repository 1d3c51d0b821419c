"""Assignment of incoming requests to elevators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from lldsims.elevator import Direction, Elevator, Request

REVERSAL_PENALTY = 10


class Scheduler(ABC):
    """Chooses which elevator should serve a request."""

    @abstractmethod
    def assign_elevator(
        self, elevators: Sequence[Elevator], request: Request
    ) -> int | None:
        """Return the id of the chosen elevator, or None if none can serve it."""


class LookScheduler(Scheduler):
    """Prefer idle cars and cars already heading toward the call."""

    @staticmethod
    def _cost(elevator: Elevator, request: Request) -> int:
        current = elevator.current_floor
        target = request.floor.number
        distance = abs(current - target)
        if elevator.is_idle():
            return distance
        on_the_way = (request.direction is Direction.UP and current <= target) or (
            request.direction is Direction.DOWN and current >= target
        )
        if elevator.direction is request.direction and on_the_way:
            return distance
        return distance + REVERSAL_PENALTY

    def assign_elevator(
        self, elevators: Sequence[Elevator], request: Request
    ) -> int | None:
        if not elevators:
            return None
        best = min(elevators, key=lambda e: self._cost(e, request))
        return best.id