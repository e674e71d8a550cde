from __future__ import annotations

import os
from pathlib import Path

import pytest

from walkaround_checks.core import config
from walkaround_checks.core.env_loader import load_env, parse_env_line


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("YES", True), (" on ", True), ("0", False), ("off", False), ("maybe", None)],
)
def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool | None) -> None:
    monkeypatch.setenv("WALKAROUND_TEST_FLAG", raw)
    result = config._get_env_flag("WALKAROUND_TEST_FLAG", default=None)
    assert result is expected


def test_env_flag_default_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WALKAROUND_TEST_FLAG", raising=False)
    assert config._get_env_flag("WALKAROUND_TEST_FLAG", default=True) is True


def test_load_settings_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WALKAROUND_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("WALKAROUND_STORE_KEY", "fleetRecords")
    monkeypatch.setenv("WALKAROUND_STRICT_PERSISTENCE", "true")
    monkeypatch.setenv("WALKAROUND_PDF_PAGE_SIZE", "A4")

    settings = config.load_settings()

    assert settings.DATA_DIR == tmp_path / "data"
    assert settings.STORE_KEY == "fleetRecords"
    assert settings.STRICT_PERSISTENCE is True
    assert settings.PDF_PAGE_SIZE == "a4"


def test_unknown_page_size_falls_back_to_letter(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WALKAROUND_PDF_PAGE_SIZE", "tabloid")
    monkeypatch.setenv("WALKAROUND_STORE_KEY", "   ")

    settings = config.load_settings()

    assert settings.PDF_PAGE_SIZE == "letter"
    assert settings.STORE_KEY == config.DEFAULT_STORE_KEY


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("KEY=value", ("KEY", "value")),
        ("  KEY = 'quoted value' ", ("KEY", "quoted value")),
        ('KEY="a=b"', ("KEY", "a=b")),
        ("# comment", None),
        ("", None),
        ("NO_EQUALS", None),
        ("=orphan", None),
    ],
)
def test_parse_env_line(line: str, expected: tuple[str, str] | None) -> None:
    assert parse_env_line(line) == expected


def test_load_env_keeps_existing_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "WALKAROUND_ENV_NEW=fresh\nWALKAROUND_ENV_KEPT=from-file\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("WALKAROUND_ENV_NEW", raising=False)
    monkeypatch.setenv("WALKAROUND_ENV_KEPT", "from-shell")

    load_env(env_file)

    assert os.environ["WALKAROUND_ENV_NEW"] == "fresh"
    assert os.environ["WALKAROUND_ENV_KEPT"] == "from-shell"
    monkeypatch.delenv("WALKAROUND_ENV_NEW")
