from __future__ import annotations

from pathlib import Path

import pytest

from walkaround_checks import cli
from walkaround_checks.core import services
from walkaround_checks.tests.record_helpers import SAFETY_FEATURES, make_record


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda: None)


def test_history_without_records(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["history"]) == 0
    assert "Aucun relevé enregistré." in capsys.readouterr().out


def test_history_lists_records_with_index(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    first, second = make_record(driver_name="Alice"), make_record(driver_name="Bob")
    services.get_gateway().save([first, second])

    assert cli.main(["history"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith(f"[0] {first.id}")
    assert "Driver: Bob" in lines[1]
    assert "Date: Mar 05, 2024 09:30" in lines[1]


def test_catalog_prints_every_category(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["catalog"]) == 0
    out = capsys.readouterr().out
    assert "Cargo and Trailer" in out
    assert out.count("  - ") == 30


def test_show_prints_grouped_items(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record = make_record(items=SAFETY_FEATURES, comments="RAS")
    services.get_gateway().save([record])

    assert cli.main(["show", str(record.id)]) == 0

    out = capsys.readouterr().out
    assert "Driver: John Doe" in out
    assert "  Safety Features" in out
    assert "Exterior Check" not in out
    assert out.rstrip().endswith("RAS")


def test_delete_removes_record(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record = make_record()
    services.get_gateway().save([record])

    assert cli.main(["delete", str(record.id)]) == 0
    assert services.view_history() == []


def test_unknown_record_returns_error_code(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = make_record().id

    assert cli.main(["show", str(missing)]) == 1
    assert cli.main(["delete", str(missing)]) == 1
    assert "Erreur : Relevé introuvable" in capsys.readouterr().out


def test_export_writes_pdf(isolated_db: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record = make_record()
    services.get_gateway().save([record])
    output_dir = tmp_path / "pdf"

    assert cli.main(["export", str(record.id), "--output-dir", str(output_dir)]) == 0

    target = output_dir / "John_Doe_05-03-2024_Checklist.pdf"
    assert target.read_bytes().startswith(b"%PDF")
    assert str(target) in capsys.readouterr().out


def test_invalid_record_id_is_rejected_by_parser(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        cli.main(["show", "not-a-uuid"])
    assert "Identifiant de relevé invalide" in capsys.readouterr().err


def test_show_keeps_whitespace_only_comments(isolated_db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    record = make_record(items=SAFETY_FEATURES, comments="   ")
    services.get_gateway().save([record])

    assert cli.main(["show", str(record.id)]) == 0
    assert "Comments:" in capsys.readouterr().out
