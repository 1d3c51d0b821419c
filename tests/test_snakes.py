import random

import pytest

from lldsims.snakes import (
    Dice,
    Gameboard,
    GameResult,
    Jump,
    Player,
    create_players,
)


class ScriptedRng:
    """Returns the given die faces in order."""

    def __init__(self, faces):
        self._faces = iter(faces)

    def randint(self, low, high):
        return next(self._faces)


def board(size, rolls, players):
    return Gameboard(size, Dice(1, ScriptedRng(rolls)), players)


def test_dice_single_die_uses_face():
    assert Dice(1, ScriptedRng([5])).roll() == 5


def test_dice_rolls_within_bounds():
    dice = Dice(3, random.Random(42))
    rolls = [dice.roll() for _ in range(500)]
    assert min(rolls) >= 3
    assert max(rolls) <= 18


def test_dice_sums_each_die():
    faces = [2, 6, 1]
    assert Dice(3, ScriptedRng(faces)).roll() == sum(faces)


def test_dice_with_no_dice_rolls_zero():
    assert Dice(0, ScriptedRng([])).roll() == 0


def test_jump_kind():
    assert Jump(2, 8).is_ladder
    assert not Jump(9, 1).is_ladder


def test_player_move_to():
    player = Player("Ann")
    assert player.position == 0
    player.move_to(4)
    assert player.position == 4
    player.move_to(-1)
    assert player.position == 4


def test_create_players_asks_each_in_turn():
    prompts = []
    answers = iter(["Ann", "  Bob Smith "])

    def ask(prompt):
        prompts.append(prompt)
        return next(answers)

    players = create_players(2, ask)
    assert [p.name for p in players] == ["Ann", "Bob"]
    assert prompts == ["Enter name for player 1: ", "Enter name for player 2: "]
    assert all(p.position == 0 for p in players)


def test_create_players_reasks_on_blank():
    answers = iter(["", "   ", "Cy"])
    players = create_players(1, lambda prompt: next(answers))
    assert [p.name for p in players] == ["Cy"]


def test_move_plain():
    player = Player("Ann")
    outcome = board(10, [3], [player]).move(player)
    assert player.position == 3
    assert outcome.start == 0
    assert outcome.end == 3
    assert outcome.jump is None
    assert not outcome.won


def test_move_up_ladder(capsys):
    player = Player("Ann")
    game = board(10, [2], [player])
    game.add_jump(Jump(2, 8))
    outcome = game.move(player)
    assert player.position == 8
    assert outcome.jump == Jump(2, 8)
    assert "Ladder from 2 to 8" in capsys.readouterr().out


def test_move_down_snake(capsys):
    player = Player("Ann")
    game = board(10, [9], [player])
    game.add_jump(Jump(9, 1))
    game.move(player)
    assert player.position == 1
    assert "Snake from 9 to 1" in capsys.readouterr().out


def test_move_overshoot_stays(capsys):
    player = Player("Ann", position=8)
    outcome = board(10, [5], [player]).move(player)
    assert player.position == 8
    assert outcome.overshot
    assert outcome.end == outcome.start
    assert "Ann stays at 8" in capsys.readouterr().out


def test_move_exact_landing_wins():
    player = Player("Ann", position=7)
    outcome = board(10, [3], [player]).move(player)
    assert outcome.won
    assert player.position == 10


def test_later_jump_replaces_earlier():
    player = Player("Ann")
    game = board(10, [4], [player])
    game.add_jump(Jump(4, 9))
    game.add_jump(Jump(4, 6))
    game.move(player)
    assert player.position == 6


def test_play_first_winner_ends_two_player_game():
    ann, bob = Player("Ann"), Player("Bob")
    turns = []
    result = board(4, [4], [ann, bob]).play(turns.append)
    assert result.winners == [ann]
    assert result.loser is bob
    assert turns == [ann]


def test_play_turn_order_and_overshoot():
    ann, bob = Player("Ann"), Player("Bob")
    turns = []
    result = board(5, [2, 3, 6, 2], [ann, bob]).play(turns.append)
    assert turns == [ann, bob, ann, bob]
    assert result.winners == [bob]
    assert result.loser is ann
    assert ann.position == 2


def test_play_three_players_records_finish_order(capsys):
    a, b, c = Player("A"), Player("B"), Player("C")
    result = board(3, [3, 1, 3], [a, b, c]).play()
    assert result.winners == [a, c]
    assert result.loser is b
    assert "B is the last player remaining and loses the game." in capsys.readouterr().out


def test_play_single_player_loses_without_turns():
    solo = Player("Solo")
    turns = []
    result = board(10, [], [solo]).play(turns.append)
    assert turns == []
    assert result.loser is solo
    assert result.winners == []


def test_play_no_players():
    assert board(10, [], []).play() == GameResult()