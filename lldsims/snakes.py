"""Snakes and ladders: dice, players, jumps and the turn loop."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field


class Dice:
    """A set of six-sided dice rolled together."""

    def __init__(self, count: int, rng: random.Random | None = None) -> None:
        self.count = count
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        """Total of one roll of every die."""
        return sum(self._rng.randint(1, 6) for _ in range(self.count))


@dataclass(frozen=True)
class Jump:
    """A snake (end below start) or a ladder (end above start)."""

    start: int
    end: int

    @property
    def is_ladder(self) -> bool:
        return self.end > self.start


@dataclass(eq=False)
class Player:
    name: str
    position: int = 0

    def move_to(self, position: int) -> None:
        """Move to a square; negative squares are ignored."""
        if position >= 0:
            self.position = position


def create_players(count: int, ask: Callable[[str], str] = input) -> list[Player]:
    """Ask for each player's name in turn; the first word of an answer is used."""
    players = []
    for number in range(1, count + 1):
        name = ""
        while not name:
            words = ask(f"Enter name for player {number}: ").split()
            name = words[0] if words else ""
        players.append(Player(name))
    return players


@dataclass(frozen=True)
class TurnOutcome:
    """What happened during one player's turn."""

    player: Player
    roll: int
    start: int
    end: int
    jump: Jump | None
    overshot: bool
    won: bool


@dataclass
class GameResult:
    """Players in the order they finished, and the one left on the board."""

    winners: list[Player] = field(default_factory=list)
    loser: Player | None = None


class Gameboard:
    """A board of squares 0..board_size with snakes and ladders on it."""

    def __init__(self, board_size: int, dice: Dice, players: Iterable[Player]) -> None:
        self.board_size = board_size
        self.dice = dice
        self.players = list(players)
        self.jumps: dict[int, int] = {}

    def add_jump(self, jump: Jump) -> None:
        """Place a snake or ladder; a later jump from the same square replaces it."""
        self.jumps[jump.start] = jump.end

    def move(self, player: Player) -> TurnOutcome:
        """Roll for a player and apply the move, including any snake or ladder."""
        start = player.position
        roll = self.dice.roll()
        print(f"{player.name} rolled a {roll}")
        target = start + roll

        if target > self.board_size:
            print(f"Roll exceeds board size. {player.name} stays at {start}")
            return TurnOutcome(player, roll, start, start, None, True, False)

        jump = None
        if target in self.jumps:
            jump = Jump(target, self.jumps[target])
            kind = "Ladder" if jump.is_ladder else "Snake"
            print(f"{kind} from {jump.start} to {jump.end}")
            target = jump.end

        player.move_to(target)
        print(f"{player.name} moves to {player.position}")
        won = player.position == self.board_size
        if won:
            print(f"\n{player.name} wins the game! Congratulations!")
        return TurnOutcome(player, roll, start, player.position, jump, False, won)

    def play(self, on_turn: Callable[[Player], None] | None = None) -> GameResult:
        """Take turns until one player is left; that player loses.

        ``on_turn`` is called with each player just before they roll.
        """
        result = GameResult()
        queue = deque(self.players)
        while len(queue) > 1:
            player = queue.popleft()
            if on_turn is not None:
                on_turn(player)
            if self.move(player).won:
                result.winners.append(player)
            else:
                queue.append(player)

        if queue:
            result.loser = queue[0]
            print(
                f"\n{result.loser.name} is the last player remaining "
                "and loses the game."
            )
        return result