"""Scheduling strategies that pick an elevator's next stop."""

from __future__ import annotations

from lldsims.elevator import Direction, Elevator, RequestType, Strategy


class FIFOStrategy(Strategy):
    """Serve requests strictly in arrival order."""

    def next_stop(self, elevator: Elevator) -> int:
        if not elevator.requests:
            return elevator.current_floor
        return elevator.requests[0].floor.number


class LookStrategy(Strategy):
    """Head for the oldest request, stopping on the way for compatible calls."""

    def next_stop(self, elevator: Elevator) -> int:
        if not elevator.requests:
            return elevator.current_floor

        current = elevator.current_floor
        primary = elevator.requests[0].floor.number
        going_up = primary > current

        if going_up:
            floors = [
                r.floor.number
                for r in elevator.requests
                if current < r.floor.number <= primary
                and (r.type is RequestType.INTERNAL or r.direction is Direction.UP)
            ]
            return min(floors, default=primary)

        floors = [
            r.floor.number
            for r in elevator.requests
            if primary <= r.floor.number < current
            and (r.type is RequestType.INTERNAL or r.direction is Direction.DOWN)
        ]
        return max(floors, default=primary)


class ScanStrategy(Strategy):
    """Keep moving in the current direction; reverse only when nothing lies ahead."""

    def next_stop(self, elevator: Elevator) -> int:
        if not elevator.requests:
            return elevator.current_floor

        current = elevator.current_floor
        floors = [r.floor.number for r in elevator.requests]

        if elevator.direction is Direction.UP:
            ahead = [f for f in floors if f >= current]
            if ahead:
                return min(ahead)
            behind = [f for f in floors if f < current]
            return max(behind, default=current)

        if elevator.direction is Direction.DOWN:
            ahead = [f for f in floors if f <= current]
            if ahead:
                return max(ahead)
            behind = [f for f in floors if f > current]
            return min(behind, default=current)

        return current