# lldsims

Three small simulations built from plain Python objects, with no third-party
dependencies:

- **Elevators** (`lldsims.elevator`, `lldsims.strategies`,
  `lldsims.scheduler`, `lldsims.elevator_system`): a bank of elevator cars.
  A `LookScheduler` picks which car takes each call. A stop-selection
  strategy (`FIFOStrategy`, `LookStrategy` or `ScanStrategy`) picks where a
  car heads next. `ElevatorObserver` subclasses are told when a car reaches a
  floor and when its state is set.
- **Parking lot** (`lldsims.parking`): floors of typed slots, tickets, and
  `FlatRateStrategy` or `HourlyRateStrategy` pricing.
- **Snakes and ladders** (`lldsims.snakes`): dice, players, snakes, ladders
  and a turn loop, with an interactive console game on top.

## Installing

```
pip install .
```

## Commands

```
lldsims-elevator [--steps N] [--delay SECONDS]
lldsims-parking
lldsims-snakes [--seed N]
```

- `lldsims-elevator` runs a scripted scenario with 3 cars and 8 floors. It
  makes five hall calls, and once a car stops at a pickup floor it adds the
  car-button press for that passenger. It logs every floor and state change.
  The defaults are 30 ticks with 0.4 s between them.
- `lldsims-parking` parks one car in a two-slot lot with hourly pricing. It
  prints the ticket, then unparks the car and prints the fee.
- `lldsims-snakes` asks for the board size and the numbers of snakes,
  ladders, players and dice. It then asks for the player names and for each
  snake and ladder as two numbers, `start end`. An entry that is not valid is
  asked for again. A snake must go down and a ladder up, and both must stay
  between 1 and the board size. During play each player presses Enter to
  roll. `--seed` makes the dice repeatable.

## Using the library

### Elevators

```python
from lldsims.elevator import Direction, Floor, Request, RequestType
from lldsims.elevator_system import ElevatorSystem
from lldsims.scheduler import LookScheduler
from lldsims.strategies import LookStrategy

system = ElevatorSystem(3, 8, LookScheduler(), LookStrategy())
car_id = system.handle_request(Request(Floor(3), Direction.UP, RequestType.EXTERNAL))
for _ in range(5):
    system.step_all()
print(system.get_elevator(car_id))
```

Each `Elevator.step()` moves a moving car one floor. When the car reaches a
floor that has a request, it stops and removes that request. A stopped car
picks its next direction on the following step. A car with no requests goes
idle.

`LookScheduler` scores each car as its distance to the call. A car that is
neither idle nor already travelling toward the call in the call's direction
scores 10 more. The lowest score wins, and on a tie the lowest car id wins.
`handle_request` returns the chosen car's id, or `None` if there are no cars.

### Parking lot

```python
from lldsims.parking import (
    HourlyRateStrategy, ParkingFloor, ParkingLot, ParkingSlot, Vehicle, VehicleType,
)

lot = ParkingLot(HourlyRateStrategy())
floor = ParkingFloor(1)
floor.add_slot(ParkingSlot(0, VehicleType.CAR))
lot.add_floor(floor)
ticket = lot.park_vehicle(Vehicle(VehicleType.CAR, "TEST-0001"))
fee = lot.unpark_vehicle(ticket)
```

`park_vehicle` first looks for a free slot of the vehicle's own type. If it
finds none, it takes any free slot large enough for the vehicle; the sizes go
bike, car, truck. Floors are searched in id order and slots in the order they
were added. It returns a `Ticket`, or `None` when the lot is full.
`unpark_vehicle` frees the slot, marks the ticket paid and returns the fee
for the whole minutes elapsed. It takes an optional `now` for a fixed
clock. Without a pricing strategy the lot uses `FlatRateStrategy`, which
charges 0.5 per minute. `HourlyRateStrategy` charges 10 per started hour.

### Snakes and ladders

```python
import random
from lldsims.snakes import Dice, Gameboard, Jump, Player

game = Gameboard(30, Dice(1, random.Random(7)), [Player("ann"), Player("bob")])
game.add_jump(Jump(4, 14))   # ladder
game.add_jump(Jump(27, 9))   # snake
result = game.play()
print([p.name for p in result.winners], result.loser.name)
```

A roll that would pass the last square leaves the player where they are. A
player who lands exactly on the last square wins and leaves the turn order.
Play goes on until one player is left, and that player loses.
`Gameboard.move` plays a single turn and returns a `TurnOutcome`.

## What it does not do

The simulations keep all their state in memory. Nothing is saved between
runs. The parking lot has no interactive command of its own: `lldsims-parking`
only runs the fixed demonstration.

## Tests

```
pip install ".[test]"
pytest
```