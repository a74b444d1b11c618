from unittest.mock import patch

import pygame
import pytest

from sollong.cli import main, run
from sollong.game import Game, MoveResult
from sollong.maps import locate_elements

MAP_TEXT = "111111\n1PC0E1\n111111"


@pytest.fixture
def headless(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\n"
    assert main(["a.ber", "b.ber"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_missing_map_file(headless, capsys):
    assert main([str(headless / "missing.ber")]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_wrong_extension(headless, capsys):
    path = headless / "map.txt"
    path.write_text(MAP_TEXT)
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_invalid_map(headless, capsys):
    path = headless / "bad.ber"
    path.write_text("111\n1P1\n111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error\n")


def test_play_to_win(headless, capsys):
    path = headless / "map.ber"
    path.write_text(MAP_TEXT)
    events = [[_key(pygame.K_d)], [_key(pygame.K_d)], [_key(pygame.K_d)]]
    with patch("pygame.event.get", side_effect=events):
        assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Moves: 0\nMoves: 1\nMoves: 2\nYou win!\n"


def test_escape_quits(headless, capsys):
    game = Game.from_level(locate_elements(MAP_TEXT.split("\n")))
    with patch("pygame.event.get", side_effect=[[_key(pygame.K_ESCAPE)]]):
        assert run(game) is MoveResult.QUIT
    assert capsys.readouterr().out == "Moves: 0\n"
    assert game.moves == 0


def test_window_close_and_ignored_keys(headless, capsys):
    game = Game.from_level(locate_elements(MAP_TEXT.split("\n")))
    events = [
        [_key(pygame.K_RETURN), _key(pygame.K_UP)],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with patch("pygame.event.get", side_effect=events):
        assert run(game) is MoveResult.QUIT
    assert game.player == (1, 1)
    assert capsys.readouterr().out == "Moves: 0\n"