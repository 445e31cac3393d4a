from __future__ import annotations

import json
import logging
from pathlib import Path
from textwrap import dedent

from little_time.config.loader import load_settings
from little_time.config.models import TimeSettings
from little_time.core.enums import PrecisionLevel
from little_time.telemetry.logging_setup import JsonFormatter, configure_from_settings, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("little_time.test", logging.INFO, __file__, 1, "limit %s", ("hours",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_should_merge_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(precision="ms", count=3)))
    assert payload["message"] == "limit hours"
    assert payload["level"] == "INFO"
    assert payload["name"] == "little_time.test"
    assert payload["precision"] == "ms"
    assert payload["count"] == 3
    assert "args" not in payload
    assert "levelno" not in payload


def test_json_formatter_should_repr_unserializable_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record(limit=PrecisionLevel.HOURS.limit)))
    assert payload["limit"] == repr(PrecisionLevel.HOURS.limit)


def test_configure_logging_should_write_json_lines_to_file(tmp_path: Path) -> None:
    logger = configure_logging(level="debug", log_dir=tmp_path / "logs", logger_name="json_file_test")
    try:
        logger.info("Limit computed", extra={"precision": "minutes"})
        for handler in logger.handlers:
            handler.flush()
        lines = (tmp_path / "logs" / "little_time.jsonl").read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[0])["message"] == "JSON logging configured"
        last = json.loads(lines[-1])
        assert last["message"] == "Limit computed"
        assert last["precision"] == "minutes"
        assert logger.propagate is False
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_configure_logging_should_default_to_stream_only(capsys) -> None:
    logger = configure_logging(logger_name="json_stream_test")
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
        logger.warning("Clamped to microseconds")
        err = capsys.readouterr().err.strip().splitlines()
        assert json.loads(err[-1])["message"] == "Clamped to microseconds"
    finally:
        logger.handlers.clear()


def test_configure_from_settings_should_apply_level_and_log_dir(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    settings_path = tmp_path / "little_time.yml"
    settings_path.write_text(
        dedent(
            f"""
            logging:
              level: debug
              log_dir: {log_dir.as_posix()}
            """
        ),
        encoding="utf-8",
    )
    logger = configure_from_settings(load_settings(settings_path), logger_name="json_settings_test")
    try:
        assert logger.level == logging.DEBUG
        logger.warning("End of day clamped", extra={"precision": "nanoseconds"})
        for handler in logger.handlers:
            handler.flush()
        log_file = log_dir / "little_time.jsonl"
        assert log_file.exists()
        last = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert last["message"] == "End of day clamped"
        assert last["level"] == "WARNING"
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_configure_from_settings_should_stream_only_without_log_dir() -> None:
    logger = configure_from_settings(TimeSettings(), logger_name="json_default_settings_test")
    try:
        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
    finally:
        logger.handlers.clear()
