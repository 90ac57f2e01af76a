import io
from typing import Optional

import pytest

from tttgame.game_basics import Cell, serialize_board
from tttgame.loop import InputClosedError, run_game, take_turn
from tttgame.render import Renderer
from tttgame.state import GameState, Status


def _run(moves: str, state: Optional[GameState] = None):
    out = io.StringIO()
    final = run_game(state or GameState(), io.StringIO(moves), Renderer(out, clear=False))
    return final, out.getvalue()


def test_scripted_win():
    final, text = _run("1\n4\n2\n5\n3\n")
    assert final.status is Status.WON
    assert final.winner == Cell.PLAYER1
    assert text.endswith("\nPlayer 1 has won!\n")


def test_scripted_draw():
    final, text = _run("1\n2\n3\n4\n6\n5\n7\n9\n8\n")
    assert final.status is Status.DRAW
    assert serialize_board(final.board) == "121221112"
    assert text.endswith("\nDraw! Game over.\n")


def test_invalid_inputs_keep_the_turn():
    # player 2 tries 5 again, then junk, then out of range, then a good tile
    final, text = _run("5\n5\nhello\n0\n1\n2\n3\n8\n")
    assert "Tile 5 has already been played. Choose another tile." in text
    assert "Your selection is not a valid number from the board." in text
    assert "0 is not a valid tile on the board." in text
    # X: 5, 2, 8 (middle column); O: 1, 3
    assert serialize_board(final.board) == "212010010"
    assert final.winner == Cell.PLAYER1


def test_take_turn_retries_until_valid():
    s = GameState()
    s.apply_move("5")
    s.end_turn()
    out = io.StringIO()
    idx = take_turn(s, io.StringIO("5\n10\n6\n"), Renderer(out, clear=False))
    assert idx == 5
    assert s.board[5] == Cell.PLAYER2
    assert out.getvalue().count("Enter your selection: ") == 2


def test_eof_is_fatal():
    with pytest.raises(InputClosedError):
        _run("1\n")


def test_eof_during_retries_is_fatal():
    with pytest.raises(InputClosedError):
        _run("abc\n")
