import logging

import pytest

from whack import main as main_module
from whack.components.game_state import GameMode
from whack.utils.game_state import current_mode, get_board
from whack.utils.logging_setup import LOGGER_NAME, configure_logging


def test_parser_defaults():
    args = main_module.build_parser().parse_args([])
    assert args.size == 2
    assert args.seed is None
    assert args.log_file is None


def test_parser_rejects_unsupported_size():
    with pytest.raises(SystemExit):
        main_module.build_parser().parse_args(["--size", "4"])


def test_main_returns_zero_on_clean_quit(monkeypatch):
    captured = {}

    def _fake_run(world, event_bus, **kwargs):
        captured["world"] = world
        return 1

    monkeypatch.setattr(main_module, "run_terminal_game", _fake_run)
    assert main_module.main(["--size", "3", "--seed", "5"]) == 0
    world = captured["world"]
    assert get_board(world).size == 3
    assert current_mode(world) == GameMode.MENU


def test_main_returns_130_on_interrupt(monkeypatch):
    def _interrupted(world, event_bus, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "run_terminal_game", _interrupted)
    assert main_module.main([]) == 130


def test_main_returns_one_on_failure(monkeypatch, capsys):
    def _broken(world, event_bus, **kwargs):
        raise OSError("terminal went away")

    monkeypatch.setattr(main_module, "run_terminal_game", _broken)
    assert main_module.main([]) == 1
    assert "terminal went away" in capsys.readouterr().err


def test_configure_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "whack.log"
    logger = configure_logging(log_file, "debug")
    logging.getLogger(f"{LOGGER_NAME}.systems").debug("mole up at %d", 3)
    for handler in logger.handlers:
        handler.flush()
    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG" in content
    assert "mole up at 3" in content
    configure_logging(None)


def test_configure_logging_without_file_is_silent():
    logger = configure_logging(None)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.NullHandler)
    assert logger.propagate is False


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging(None, "chatty")
