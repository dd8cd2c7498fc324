"""Test unified logging configuration.

Tests for lazy_brush.utils.logging_config:
    - JSON file output carries contextual fields
    - Human format shows "k=v |" context block
    - Idempotency: repeated setup does not duplicate lines
    - A failed reconfigure keeps the previous handlers
    - push_context / pop_context
    - setup_from_config uses the loaded logging section
    - Library records (brush mode changes) reach the configured file

Run:
    pytest tests/test_logging_config.py -v
"""

import json
import logging
import logging.handlers

import pytest

from lazy_brush import LazyBrush
from lazy_brush.configs.loader import LoggingConfig
from lazy_brush.utils import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the root logger and context as we found them."""
    root = logging.getLogger()
    level = root.level
    yield
    logging_config.setup_logging(to_stderr=False, capture_warnings=False)
    logging.captureWarnings(False)
    logging_config.pop_context()
    root.setLevel(level)


def _read_lines(path):
    return path.read_text(encoding="utf-8").strip().splitlines()


def test_json_file_output(tmp_path):
    log_path = tmp_path / "brush.log"
    logging_config.setup_logging(
        log_level="INFO",
        log_file=str(log_path),
        json=True,
        to_stderr=False,
        context={"app": "sketchpad"},
    )
    logging_config.get_logger("lazy_brush.test").info("hello")

    record = json.loads(_read_lines(log_path)[0])
    assert record["msg"] == "hello"
    assert record["lvl"] == "INFO"
    assert record["app"] == "sketchpad"
    assert record["name"] == "lazy_brush.test"


def test_human_format(tmp_path):
    log_path = tmp_path / "brush.log"
    logging_config.setup_logging(log_file=str(log_path), to_stderr=False)
    logging_config.push_context(stroke=12)
    logging_config.get_logger("lazy_brush.test").warning("jitter")

    line = _read_lines(log_path)[0]
    assert "| WARNING  |" in line
    assert "stroke=12 | jitter" in line


def test_setup_is_idempotent(tmp_path):
    log_path = tmp_path / "brush.log"
    logger = logging_config.get_logger("lazy_brush.test")

    logging_config.setup_logging(log_file=str(log_path), json=True, to_stderr=False)
    logger.info("one")
    logging_config.setup_logging(log_file=str(log_path), json=True, to_stderr=False)
    logger.info("two")

    assert [json.loads(x)["msg"] for x in _read_lines(log_path)] == ["one", "two"]


def test_push_pop_context():
    logging_config.push_context(app="sketchpad", stroke=3)
    logging_config.push_context(device="stylus")
    assert logging_config.get_context() == {"app": "sketchpad", "stroke": 3, "device": "stylus"}

    logging_config.pop_context(keys=["stroke"])
    assert logging_config.get_context() == {"app": "sketchpad", "device": "stylus"}

    logging_config.pop_context()
    assert logging_config.get_context() == {}


def test_set_level():
    logging_config.set_level("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_bad_rotation_mode(tmp_path):
    with pytest.raises(ValueError, match="Unknown rotation mode"):
        logging_config.setup_logging(
            log_file=str(tmp_path / "x.log"),
            to_stderr=False,
            rotate={"mode": "weekly"},
        )


def test_bad_rotation_keeps_previous_handlers(tmp_path):
    log_path = tmp_path / "brush.log"
    installed = logging_config.setup_logging(
        log_file=str(log_path), json=True, to_stderr=False
    )

    with pytest.raises(ValueError):
        logging_config.setup_logging(
            log_file=str(tmp_path / "other.log"),
            rotate={"mode": "weekly"},
        )

    root = logging.getLogger()
    assert all(h in root.handlers for h in installed)
    assert logging_config._installed_handlers == installed
    logging_config.get_logger("lazy_brush.test").warning("still here")
    assert json.loads(_read_lines(log_path)[-1])["msg"] == "still here"


def test_rotating_handler(tmp_path):
    handlers = logging_config.setup_logging(
        log_file=str(tmp_path / "logs" / "brush.log"),
        to_stderr=False,
        rotate={"mode": "size", "max_bytes": 1000, "backup_count": 2},
    )
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.handlers.RotatingFileHandler)
    assert (tmp_path / "logs").is_dir()


def test_setup_from_config_captures_brush_debug(tmp_path):
    log_path = tmp_path / "brush.log"
    cfg = LoggingConfig(level="DEBUG", file=str(log_path), format="json")
    logging_config.setup_from_config(cfg, to_stderr=False)

    brush = LazyBrush()
    brush.enable()

    messages = [json.loads(x)["msg"] for x in _read_lines(log_path)]
    assert "Lazy mode enabled" in messages
