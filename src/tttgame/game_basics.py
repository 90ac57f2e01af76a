"""
Game basics: board representation, serialization, win/draw checks, turn toggle.
Notes:
- A board is a list of 9 cells indexed left-to-right, top-to-bottom (row*3 + col).
- Cells are Cell values: EMPTY=0, PLAYER1=1 (drawn as X), PLAYER2=2 (drawn as O).
- Player 1 always starts.
"""
from enum import IntEnum
from typing import List, Optional, Tuple

BOARD_SIZE = 9


class Cell(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


PLAYERS = (Cell.PLAYER1, Cell.PLAYER2)

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]

Board = List[Cell]


def new_board() -> Board:
    return [Cell.EMPTY] * BOARD_SIZE


def serialize_board(board: Board) -> str:
    return ''.join(str(int(cell)) for cell in board)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != BOARD_SIZE or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [Cell(int(c)) for c in raw]


def winning_line(board: Board, player: Cell) -> Optional[Tuple[int, int, int]]:
    """Return the first line fully held by ``player``, or None."""
    for pattern in WIN_PATTERNS:
        if all(board[i] == player for i in pattern):
            return pattern
    return None


def player_has_won(board: Board, player: Cell) -> bool:
    return winning_line(board, player) is not None


def is_draw(board: Board) -> bool:
    # Only meaningful once player_has_won() came back False for the mover.
    return Cell.EMPTY not in board


def toggle_player(player: Cell) -> Cell:
    if player == Cell.PLAYER1:
        return Cell.PLAYER2
    if player == Cell.PLAYER2:
        return Cell.PLAYER1
    raise ValueError(f"Not a player: {player!r}")


def get_piece_counts(board: Board) -> Tuple[int, int]:
    return board.count(Cell.PLAYER1), board.count(Cell.PLAYER2)


def current_player(board: Board) -> Cell:
    p1, p2 = get_piece_counts(board)
    return Cell.PLAYER1 if p1 == p2 else Cell.PLAYER2


def is_playable_state(board: Board) -> bool:
    """True for a position reachable mid-game: legal counts, no winner, free tiles left."""
    p1, p2 = get_piece_counts(board)
    if not (p1 == p2 or p1 == p2 + 1):
        return False
    if any(player_has_won(board, p) for p in PLAYERS):
        return False
    return not is_draw(board)
