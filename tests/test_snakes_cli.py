import io
import sys

import pytest

from lldsims.snakes_cli import main, validate_ladder, validate_snake


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


@pytest.mark.parametrize(
    "start, end, valid",
    [
        (9, 2, True),
        (3, 5, False),
        (4, 4, False),
        (11, 2, False),
        (5, 0, False),
        (10, 1, True),
    ],
)
def test_validate_snake(start, end, valid):
    assert validate_snake(start, end, 10) is valid


@pytest.mark.parametrize(
    "start, end, valid",
    [
        (2, 8, True),
        (8, 2, False),
        (4, 4, False),
        (0, 5, False),
        (3, 11, False),
        (1, 10, True),
    ],
)
def test_validate_ladder(start, end, valid):
    assert validate_ladder(start, end, 10) is valid


def test_single_player_loses_immediately(monkeypatch, capsys):
    feed(monkeypatch, "10\n0\n0\n1\n1\nAnn\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Ann is the last player remaining and loses the game." in out
    assert "Game starting..." in out


def test_invalid_snake_and_ladder_are_reasked(monkeypatch, capsys):
    feed(monkeypatch, "10\n1\n1\n1\n1\nAnn\n3 5\n9 2\n8 2\nbad\n2 8\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Invalid snake. Try again.") == 1
    assert out.count("Invalid ladder. Try again.") == 2


def test_non_numeric_size_is_reasked(monkeypatch, capsys):
    feed(monkeypatch, "big\n10\n0\n0\n1\n1\nAnn\n")
    assert main([]) == 0
    assert "Please enter a whole number." in capsys.readouterr().out


def test_two_player_game_finishes(monkeypatch, capsys):
    feed(monkeypatch, "1\n0\n0\n2\n1\nAnn\nBob\n")
    assert main(["--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert out.count("wins the game!") == 1
    assert out.count("loses the game.") == 1


def test_setup_cut_short_returns_error(monkeypatch, capsys):
    feed(monkeypatch, "10\n0\n")
    assert main([]) == 1
    assert "Input ended" in capsys.readouterr().out