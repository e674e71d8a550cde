from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_SANDBOX = Path(tempfile.mkdtemp(prefix="walkaround-tests-"))
os.environ.setdefault("WALKAROUND_DATA_DIR", str(_SANDBOX / "data"))
os.environ.setdefault("WALKAROUND_LOG_DIR", str(_SANDBOX / "logs"))
os.environ.setdefault("WALKAROUND_EXPORT_DIR", str(_SANDBOX / "exports"))

from walkaround_checks.core import db
from walkaround_checks.core.persistence import PersistenceGateway
from walkaround_checks.services import inspection_sessions


@pytest.fixture()
def kv_store(tmp_path: Path) -> db.SqliteKeyValueStore:
    return db.SqliteKeyValueStore(tmp_path / "kv.db")


@pytest.fixture()
def gateway(kv_store: db.SqliteKeyValueStore) -> PersistenceGateway:
    return PersistenceGateway(kv_store, key="savedRecords", strict=False)


@pytest.fixture()
def isolated_db(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    path = tmp_path / "walkaround.db"
    monkeypatch.setattr(db, "default_db_path", lambda: path)
    inspection_sessions.clear_sessions()
    yield path
    inspection_sessions.clear_sessions()

