"""Interactive snakes and ladders game for the console."""

from __future__ import annotations

import argparse
import random

from lldsims.snakes import Dice, Gameboard, Jump, Player, create_players


def validate_snake(start: int, end: int, board_size: int) -> bool:
    """A snake must lead downward and stay on the board."""
    return not (start <= end or start > board_size or end < 1)


def validate_ladder(start: int, end: int, board_size: int) -> bool:
    """A ladder must lead upward and stay on the board."""
    return not (start >= end or start < 1 or end > board_size)


def _ask_int(prompt: str) -> int:
    while True:
        answer = input(prompt)
        try:
            return int(answer.strip())
        except ValueError:
            print("Please enter a whole number.")


def _ask_pair(prompt: str) -> tuple[int, int] | None:
    parts = input(prompt).split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _read_jumps(kind: str, count: int, board_size: int, valid) -> list[Jump]:
    jumps = []
    while len(jumps) < count:
        pair = _ask_pair(f"{kind} {len(jumps) + 1}: ")
        if pair is None or not valid(*pair, board_size):
            print(f"Invalid {kind.lower()}. Try again.")
            continue
        jumps.append(Jump(*pair))
    return jumps


def _wait_for_enter(player: Player) -> None:
    try:
        input(f"\n{player.name}'s turn Press enter ")
    except EOFError:
        pass


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play snakes and ladders.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    try:
        board_size = _ask_int("Enter board size (e.g., 100): ")
        snake_count = _ask_int("Enter number of snakes: ")
        ladder_count = _ask_int("Enter number of ladders: ")
        player_count = _ask_int("Enter number of players: ")
        dice_count = _ask_int("Enter number of dice: ")

        players = create_players(player_count)
        game = Gameboard(board_size, Dice(dice_count, random.Random(args.seed)), players)

        print("\nEnter snakes (start > end):")
        for jump in _read_jumps("Snake", snake_count, board_size, validate_snake):
            game.add_jump(jump)

        print("\nEnter ladders (start < end):")
        for jump in _read_jumps("Ladder", ladder_count, board_size, validate_ladder):
            game.add_jump(jump)
    except EOFError:
        print("\nInput ended before the game was set up.")
        return 1

    print("\nGame starting...\n")
    game.play(_wait_for_enter)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())