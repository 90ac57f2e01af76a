from __future__ import annotations

import argparse
import logging
import sys

from .config import GameConfig
from .loop import InputClosedError, run_game
from .render import Renderer
from .state import GameState


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tttgame", description="Two-player tic-tac-toe in the terminal")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between renders (also: TTTGAME_NO_CLEAR=1)",
    )
    p.add_argument(
        "--board",
        default=None,
        help="Start from a board string, 9 digits 0=empty,1=X,2=O, e.g. 100020000",
    )
    return p


def resolve_config(ns: argparse.Namespace) -> GameConfig:
    cfg = GameConfig.from_env()
    if ns.no_clear:
        cfg.clear_screen = False
    cfg.verbose = ns.verbose
    cfg.start_board = ns.board
    return cfg


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    cfg = resolve_config(ns)
    logging.basicConfig(level=logging.DEBUG if cfg.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tttgame"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if cfg.start_board is not None:
        try:
            state = GameState.from_string(cfg.start_board)
        except ValueError as e:
            logging.error("%s", e)
            return 2
    else:
        state = GameState()

    try:
        run_game(state, sys.stdin, Renderer(sys.stdout, clear=cfg.clear_screen))
    except InputClosedError as e:
        logging.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
