"""tttgame package.

Two-player tic-tac-toe for the terminal: board rules, the game state machine,
and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .game_basics import Cell, is_draw, player_has_won, toggle_player
from .loop import run_game
from .moves import InvalidMoveError, validate_move
from .state import GameState, Status

__all__ = [
    "Cell",
    "GameState",
    "Status",
    "InvalidMoveError",
    "is_draw",
    "player_has_won",
    "toggle_player",
    "validate_move",
    "run_game",
]
