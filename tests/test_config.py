import pytest

from tttgame.cli import build_parser, resolve_config
from tttgame.config import GameConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("TTTGAME_NO_CLEAR", raising=False)
    cfg = GameConfig.from_env()
    assert cfg.clear_screen is True
    assert cfg.verbose is False
    assert cfg.start_board is None


@pytest.mark.parametrize("value,clear", [("1", False), ("yes", False), ("0", True), ("", True)])
def test_env_no_clear(monkeypatch, value, clear):
    monkeypatch.setenv("TTTGAME_NO_CLEAR", value)
    assert GameConfig.from_env().clear_screen is clear


def test_flags_override_env(monkeypatch):
    monkeypatch.delenv("TTTGAME_NO_CLEAR", raising=False)
    ns = build_parser().parse_args(["--no-clear", "-v", "--board", "100020000"])
    cfg = resolve_config(ns)
    assert cfg.clear_screen is False
    assert cfg.verbose is True
    assert cfg.start_board == "100020000"
