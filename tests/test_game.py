import pytest

from solong.game import KEY_ESCAPE, Direction, Game, key_to_direction
from solong.gamemap import MapError, parse_map

SIMPLE = "11111\n1PCE1\n11111"


def make_game(text=SIMPLE):
    return Game(parse_map(text))


def test_key_to_direction():
    assert key_to_direction(119) is Direction.UP
    assert key_to_direction(97) is Direction.LEFT
    assert key_to_direction(115) is Direction.DOWN
    assert key_to_direction(100) is Direction.RIGHT
    assert key_to_direction(120) is None


def test_initial_state():
    game = make_game()
    assert game.position == (1, 1)
    assert game.collectible_max == 1
    assert game.move_count == 0
    assert game.running


def test_wall_blocks_without_counting():
    game = make_game()
    assert game.move(Direction.LEFT) is False
    assert game.position == (1, 1)
    assert game.move_count == 0


def test_collect_then_exit():
    game = make_game()
    assert game.move(Direction.RIGHT) is True
    assert game.position == (2, 1)
    assert game.collected == 1
    assert game.move_count == 1
    assert game.map.tile(1, 1) == "0"
    assert game.map.tile(2, 1) == "P"
    assert game.move(Direction.RIGHT) is False
    assert game.won
    assert not game.running


def test_exit_locked_until_collected():
    game = make_game("111111\n1PEC01\n111111")
    assert game.move(Direction.RIGHT) is False
    assert game.position == (1, 1)
    assert game.move_count == 1
    assert not game.won
    assert game.running


def test_no_moves_after_game_over():
    game = make_game()
    game.handle_key(KEY_ESCAPE)
    assert game.move(Direction.RIGHT) is False
    assert game.position == (1, 1)


def test_handle_key_escape():
    game = make_game()
    assert game.handle_key(KEY_ESCAPE) is False
    assert not game.running


def test_handle_key_moves():
    game = make_game()
    assert game.handle_key(100) is True
    assert game.position == (2, 1)


def test_handle_unbound_key_does_nothing():
    game = make_game()
    assert game.handle_key(98) is True
    assert game.position == (1, 1)
    assert game.move_count == 0


def test_move_messages(capsys):
    game = make_game()
    game.move(Direction.RIGHT)
    out = capsys.readouterr().out
    assert "collectible count : 0\n" in out
    assert "Movement Count : 0\n" in out


def test_game_without_player():
    with pytest.raises(MapError):
        make_game("111\n1C1\n111")