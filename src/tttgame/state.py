"""
Game state machine: board, side to move, and status.

A turn is two calls: apply_move() places the current player's mark, then
end_turn() runs the terminal checks (win first, then draw) and either finishes
the game or passes the turn to the other player.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .game_basics import (
    Board,
    Cell,
    current_player,
    deserialize_board,
    is_draw,
    is_playable_state,
    new_board,
    serialize_board,
    toggle_player,
    winning_line,
)
from .moves import GameError, validate_move


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameOverError(GameError):
    """Raised when a move is attempted after the game has finished."""


class TurnOrderError(GameError):
    """apply_move() and end_turn() were not called alternately."""


@dataclass
class GameState:
    board: Board = field(default_factory=new_board)
    current_player: Cell = Cell.PLAYER1
    status: Status = Status.IN_PROGRESS
    winner: Optional[Cell] = None
    _moved: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_string(cls, board_str: str) -> "GameState":
        """Resume from a 9-digit board string such as "100020000".

        The side to move follows from the piece counts. Raises ValueError when
        the string is malformed or the position is not a game in progress.
        """
        board = deserialize_board(board_str)
        if not is_playable_state(board):
            raise ValueError(f"Board {board_str!r} is not a playable position.")
        return cls(board=board, current_player=current_player(board))

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def apply_move(self, raw: str) -> int:
        """Validate ``raw`` and mark the chosen tile for the current player.

        Raises an InvalidMoveError subclass without touching the board when
        the input is rejected. Returns the 0-based index that was played.
        """
        if self.is_over:
            raise GameOverError("Game is already over.")
        if self._moved:
            raise TurnOrderError("A move was already played this turn; call end_turn() first.")
        index = validate_move(raw, self.board)
        self.board[index] = self.current_player
        self._moved = True
        logging.debug("player=%d index=%d board=%s", self.current_player,
                      index, serialize_board(self.board))
        return index

    def end_turn(self) -> Status:
        if self.is_over:
            raise GameOverError("Game is already over.")
        if not self._moved:
            raise TurnOrderError("No move was played this turn.")
        self._moved = False
        # Win must be checked before draw: a winning last move fills the board too.
        line = winning_line(self.board, self.current_player)
        if line is not None:
            self.status = Status.WON
            self.winner = self.current_player
            logging.debug("player=%d won on line=%s", self.current_player, line)
        elif is_draw(self.board):
            self.status = Status.DRAW
            logging.debug("board full, draw")
        else:
            self.current_player = toggle_player(self.current_player)
        return self.status
