import logging

import pytest

from connect_four.debug import DebugLevel, DebugManager, debug, LOGGER_NAME
from connect_four.game.board import Board


@pytest.fixture
def manager():
    return DebugManager()


def test_default_level_is_info(manager):
    assert manager.level == DebugLevel.INFO
    assert manager.logger.name == LOGGER_NAME


def test_messages_below_level_are_dropped(manager, caplog):
    caplog.set_level(logging.DEBUG)
    manager.configure(level=DebugLevel.WARNING)

    manager.info("hidden", "board")
    manager.warning("shown", "board")

    assert [r.getMessage() for r in caplog.records] == ["[board] shown"]


def test_component_filter(manager, caplog):
    caplog.set_level(logging.DEBUG)
    manager.configure(level=DebugLevel.DEBUG, components=["match"])

    manager.debug("kept", "match")
    manager.debug("dropped", "board")

    assert [r.getMessage() for r in caplog.records] == ["[match] kept"]


def test_trace_is_logged_as_debug(manager, caplog):
    caplog.set_level(logging.DEBUG)
    manager.configure(level=DebugLevel.TRACE)

    manager.trace("deep", "board")

    assert caplog.records[0].levelno == logging.DEBUG
    assert caplog.records[0].getMessage() == "TRACE: [board] deep"


def test_disabled_manager_is_silent(manager, caplog):
    caplog.set_level(logging.DEBUG)
    manager.configure(level=DebugLevel.DEBUG, enabled=False)

    manager.error("nothing")

    assert caplog.records == []


def test_none_level_is_silent(manager, caplog):
    caplog.set_level(logging.DEBUG)
    manager.configure(level=DebugLevel.NONE)

    manager.error("nothing")

    assert caplog.records == []


@pytest.mark.parametrize("name, level", [
    ("none", DebugLevel.NONE),
    ("Debug", DebugLevel.DEBUG),
    ("TRACE", DebugLevel.TRACE),
])
def test_set_from_string(manager, name, level):
    assert manager.set_from_string(name) is True
    assert manager.level == level


def test_set_from_string_unknown_level(manager):
    assert manager.set_from_string("loud") is False
    assert manager.level == DebugLevel.INFO


def test_timer(manager):
    manager.start_timer("work")
    elapsed = manager.end_timer("work")

    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("work") is None


def test_log_file(manager, tmp_path):
    log_file = tmp_path / "game.log"
    manager.configure(level=DebugLevel.DEBUG, log_file=str(log_file))
    manager.info("written to file", "cli")
    manager.configure(log_file="")

    assert "[cli] written to file" in log_file.read_text()
    assert not any(isinstance(h, logging.FileHandler) for h in manager.logger.handlers)


def test_console_handler_added_once():
    first = DebugManager()
    second = DebugManager()
    assert first.logger is second.logger
    console = [h for h in first.logger.handlers if getattr(h, "_connect_four_console", False)]
    assert len(console) == 1


def test_board_logs_rejected_moves(caplog):
    caplog.set_level(logging.DEBUG)
    debug.configure(level=DebugLevel.DEBUG, components=["board"])

    Board().update(9, "X")

    assert any("column 9 out of range" in r.getMessage() for r in caplog.records)
