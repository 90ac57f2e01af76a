"""
Move parsing and validation.

A move arrives as free-form text holding a 1-based tile number. Validation
runs three checks in order (integer, range 1-9, empty tile) and raises a
specific InvalidMoveError subclass for the first one that fails. The accepted
result is the 0-based board index.
"""
import logging

from .game_basics import BOARD_SIZE, Board, Cell

MAX_SELECTION = 255


class GameError(Exception):
    """Base class for all game errors."""


class InvalidMoveError(GameError):
    """A move was rejected; the same player gets to try again."""


class NotANumberError(InvalidMoveError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__("Your selection is not a valid number from the board.")


class OutOfRangeError(InvalidMoveError):
    def __init__(self, selection: int):
        self.selection = selection
        super().__init__(f"{selection} is not a valid tile on the board.")


class TileTakenError(InvalidMoveError):
    def __init__(self, selection: int):
        self.selection = selection
        super().__init__(f"Tile {selection} has already been played. Choose another tile.")


def parse_selection(raw: str) -> int:
    """Read a selection as an unsigned byte: ASCII digits, optional leading '+', 0-255."""
    text = raw.strip()
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise NotANumberError(raw)
    value = int(digits)
    if value > MAX_SELECTION:
        raise NotANumberError(raw)
    return value


def validate_move(raw: str, board: Board) -> int:
    """Turn raw input into a board index, or raise InvalidMoveError.

    Args:
        raw: The text the player typed, e.g. "5\\n".
        board: The current board. It is not modified.

    Returns:
        The 0-based index of the selected tile.
    """
    selection = parse_selection(raw)
    if selection < 1 or selection > BOARD_SIZE:
        raise OutOfRangeError(selection)
    index = selection - 1
    if board[index] != Cell.EMPTY:
        raise TileTakenError(selection)
    logging.debug("accepted selection=%d index=%d", selection, index)
    return index
