from __future__ import annotations

import logging
from pathlib import Path

from walkaround_checks.core.logging_config import LOG_FILE_NAME, build_logging_config, configure_logging


def test_logging_config_writes_to_rotating_file(tmp_path: Path) -> None:
    config = build_logging_config(tmp_path)

    file_handler = config["handlers"]["app_file"]
    assert file_handler["class"] == "logging.handlers.RotatingFileHandler"
    assert file_handler["filename"] == str(tmp_path / LOG_FILE_NAME)
    assert file_handler["backupCount"] == 5
    assert config["loggers"][""]["handlers"] == ["console", "app_file"]
    assert config["disable_existing_loggers"] is False


def test_uvicorn_loggers_do_not_propagate(tmp_path: Path) -> None:
    loggers = build_logging_config(tmp_path)["loggers"]
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        assert loggers[name]["propagate"] is False


def test_configure_logging_creates_log_file(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    root = logging.getLogger()
    previous_handlers = list(root.handlers)
    previous_level = root.level
    try:
        configure_logging(log_dir)
        logging.getLogger("walkaround_checks.tests").info("journal prêt")
        for handler in root.handlers:
            handler.flush()
        assert "journal prêt" in (log_dir / LOG_FILE_NAME).read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            if handler not in previous_handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in previous_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(previous_level)
