"""Configuration statique de l'application."""
from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from walkaround_checks.core.env_loader import load_env

PACKAGE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = PACKAGE_DIR.parent

DEFAULT_STORE_KEY = "savedRecords"

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}


def _get_env_flag(name: str, default: bool = False) -> bool:
    """Retourne une valeur booléenne à partir d'une variable d'environnement."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_env_choice(name: str, choices: set[str], default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized if normalized in choices else default


def _get_env_path(name: str, default: Path) -> Path:
    value = (os.getenv(name) or "").strip()
    return Path(value).expanduser() if value else default


def _get_env_text(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    return value or default


@dataclass(frozen=True)
class Settings:
    """Paramètres globaux lus depuis l'environnement."""

    DATA_DIR: Path = PACKAGE_DIR / "data"
    STORE_KEY: str = DEFAULT_STORE_KEY
    STRICT_PERSISTENCE: bool = False
    EXPORT_DIR: Path = Path(tempfile.gettempdir())
    PDF_PAGE_SIZE: str = "letter"
    LOG_DIR: Path = PROJECT_ROOT / "logs"


def load_settings() -> Settings:
    load_env()
    return Settings(
        DATA_DIR=_get_env_path("WALKAROUND_DATA_DIR", PACKAGE_DIR / "data"),
        STORE_KEY=_get_env_text("WALKAROUND_STORE_KEY", DEFAULT_STORE_KEY),
        STRICT_PERSISTENCE=_get_env_flag("WALKAROUND_STRICT_PERSISTENCE", default=False),
        EXPORT_DIR=_get_env_path("WALKAROUND_EXPORT_DIR", Path(tempfile.gettempdir())),
        PDF_PAGE_SIZE=_get_env_choice("WALKAROUND_PDF_PAGE_SIZE", {"letter", "a4"}, "letter"),
        LOG_DIR=_get_env_path("WALKAROUND_LOG_DIR", PROJECT_ROOT / "logs"),
    )


settings = load_settings()
