"""
Text rendering of the board and the host clear-screen call.

Clearing shells out to `clear` (`cls` on Windows). It is cosmetic: any failure
is logged and rendering carries on.
"""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import List, Optional, TextIO

from .game_basics import Board, Cell

ROW_DIVIDER = "---|---|---"
PROMPT = "Enter your selection: "


def get_board_character(cell: Cell, position: int) -> str:
    if cell == Cell.PLAYER1:
        return "X"
    if cell == Cell.PLAYER2:
        return "O"
    return str(position)


def format_board(board: Board) -> List[str]:
    lines: List[str] = []
    for row in range(3):
        cells = [
            get_board_character(board[i], i + 1)
            for i in range(row * 3, row * 3 + 3)
        ]
        lines.append("|".join(f" {c} " for c in cells))
        lines.append(ROW_DIVIDER)
    return lines


def _clear_command() -> List[str]:
    if os.name == "nt":
        return ["cmd", "/c", "cls"]
    return ["clear"]


def clear_screen(out: TextIO) -> bool:
    """Run the host clear command and echo its output. Returns False on failure."""
    cmd = _clear_command()
    try:
        res = subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=2.0)
    except (OSError, subprocess.SubprocessError) as e:
        logging.warning("Could not clear the screen with %s: %s", cmd[-1], e)
        return False
    print(res.stdout, file=out)
    return True


class Renderer:
    def __init__(self, out: Optional[TextIO] = None, clear: bool = True):
        self.out = out if out is not None else sys.stdout
        self.clear = clear

    def board(self, board: Board, player: Cell) -> None:
        if self.clear:
            clear_screen(self.out)
        print(f"Player {int(player)}, please select a tile on the board. "
              "Only values 1 through 9 are valid.", file=self.out)
        print("", file=self.out)
        for line in format_board(board):
            print(line, file=self.out)
        self.prompt()

    def prompt(self) -> None:
        self.out.write(PROMPT)
        self.out.flush()

    def message(self, text: str) -> None:
        print(text, file=self.out)
