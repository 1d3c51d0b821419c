"""Elevator car model: requests, movement, state changes and observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Direction of travel of an elevator or of a hall call."""

    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"

    def step(self) -> int:
        """Floor offset of one move in this direction."""
        if self is Direction.UP:
            return 1
        if self is Direction.DOWN:
            return -1
        return 0


class ElevatorState(Enum):
    IDLE = "IDLE"
    MOVING = "MOVING"
    STOPPED = "STOPPED"
    MAINTENANCE = "MAINTENANCE"


class RequestType(Enum):
    INTERNAL = "INTERNAL"
    EXTERNAL = "EXTERNAL"


@dataclass(frozen=True)
class Floor:
    number: int


@dataclass(frozen=True)
class Request:
    """A call for an elevator: a hall button (external) or a car button (internal)."""

    floor: Floor
    direction: Direction
    type: RequestType


class ElevatorObserver(ABC):
    """Receives notifications about an elevator's movement and state."""

    @abstractmethod
    def on_floor_change(self, elevator_id: int, floor: int) -> None:
        """Called each time the elevator reaches a new floor."""

    @abstractmethod
    def on_state_change(self, elevator_id: int, state: ElevatorState) -> None:
        """Called each time the elevator's state is (re)evaluated."""


class Strategy(ABC):
    """Chooses the next floor an elevator should head to."""

    @abstractmethod
    def next_stop(self, elevator: "Elevator") -> int:
        """Return the floor number the elevator should travel to next."""


class Elevator:
    """A single elevator car driven one floor per step."""

    def __init__(self, elevator_id: int, strategy: Strategy) -> None:
        self.id = elevator_id
        self.current_floor = 0
        self.direction = Direction.IDLE
        self.state = ElevatorState.IDLE
        self.requests: deque[Request] = deque()
        self.observers: list[ElevatorObserver] = []
        self.strategy = strategy

    def __repr__(self) -> str:
        return (
            f"Elevator(id={self.id}, floor={self.current_floor}, "
            f"direction={self.direction.name}, state={self.state.name})"
        )

    def add_request(self, request: Request) -> None:
        self.requests.append(request)
        self.update_direction_and_state()

    def step(self) -> None:
        """Advance the elevator by one tick."""
        if self.state is ElevatorState.MOVING:
            self.current_floor += self.direction.step()
            self.notify_floor_change()
            served = next(
                (r for r in self.requests if r.floor.number == self.current_floor),
                None,
            )
            if served is not None:
                print(f"[Elevator {self.id}] Stopping at floor {self.current_floor}")
                self.requests.remove(served)
                self.state = ElevatorState.STOPPED
                self.notify_state_change()
        elif self.state is ElevatorState.STOPPED:
            self.update_direction_and_state()
        elif self.state is ElevatorState.MAINTENANCE:
            print(f"[Elevator {self.id}] In maintenance mode.")

    def is_idle(self) -> bool:
        return self.state is ElevatorState.IDLE

    def update_direction_and_state(self) -> None:
        """Pick a direction toward the strategy's next stop and set the state."""
        if not self.requests:
            self.direction = Direction.IDLE
            self.state = ElevatorState.IDLE
            self.notify_state_change()
            return

        next_stop = self.strategy.next_stop(self)
        if next_stop > self.current_floor:
            self.direction = Direction.UP
        elif next_stop < self.current_floor:
            self.direction = Direction.DOWN
        else:
            self.direction = Direction.IDLE

        self.state = (
            ElevatorState.STOPPED
            if self.direction is Direction.IDLE
            else ElevatorState.MOVING
        )
        self.notify_state_change()

    def add_observer(self, observer: ElevatorObserver) -> None:
        self.observers.append(observer)

    def notify_floor_change(self) -> None:
        for observer in self.observers:
            observer.on_floor_change(self.id, self.current_floor)

    def notify_state_change(self) -> None:
        for observer in self.observers:
            observer.on_state_change(self.id, self.state)

    def is_at_floor(self, floor: int) -> bool:
        return self.current_floor == floor and self.state is ElevatorState.STOPPED