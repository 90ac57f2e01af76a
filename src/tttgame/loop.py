"""
Game loop driver.

render -> read and apply one valid move -> render -> win/draw check -> toggle,
until a terminal state. Rejected input is retried inside take_turn() without
consuming the turn.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .moves import GameError, InvalidMoveError
from .render import Renderer
from .state import GameState, Status


class InputClosedError(GameError):
    """The input stream ended before the game finished."""


def read_selection(stdin: TextIO) -> str:
    line = stdin.readline()
    if line == "":
        raise InputClosedError("Input closed before the game finished.")
    return line


def take_turn(state: GameState, stdin: TextIO, renderer: Renderer) -> int:
    """Keep asking the current player until a move is accepted; return its index."""
    attempts = 0
    while True:
        raw = read_selection(stdin)
        attempts += 1
        try:
            return state.apply_move(raw)
        except InvalidMoveError as e:
            logging.debug("player=%d rejected input=%r attempt=%d (%s)",
                          state.current_player, raw.strip(), attempts, type(e).__name__)
            renderer.message(str(e))
            renderer.prompt()


def announce(state: GameState, renderer: Renderer) -> None:
    if state.status is Status.WON:
        renderer.message(f"\nPlayer {int(state.winner)} has won!")
    elif state.status is Status.DRAW:
        renderer.message("\nDraw! Game over.")


def run_game(
    state: Optional[GameState] = None,
    stdin: Optional[TextIO] = None,
    renderer: Optional[Renderer] = None,
) -> GameState:
    """Play until a win or draw and return the finished state.

    Raises InputClosedError if the input runs out first.
    """
    state = state if state is not None else GameState()
    stdin = stdin if stdin is not None else sys.stdin
    renderer = renderer if renderer is not None else Renderer()

    while not state.is_over:
        renderer.board(state.board, state.current_player)
        take_turn(state, stdin, renderer)
        renderer.board(state.board, state.current_player)
        state.end_turn()

    announce(state, renderer)
    logging.debug("game finished status=%s winner=%s", state.status.value, state.winner)
    return state
