"""Opérations métier exposées par l'API et la ligne de commande."""
from __future__ import annotations

import logging
from pathlib import Path
from uuid import UUID

from walkaround_checks.core import catalog, db, models
from walkaround_checks.core.persistence import PersistenceGateway
from walkaround_checks.services import inspection_sessions
from walkaround_checks.services.checklist_session import ChecklistSession
from walkaround_checks.services.record_store import RecordStore
from walkaround_checks.services.report_pdf import ExportedReport, export_record, write_report

logger = logging.getLogger(__name__)


def get_gateway() -> PersistenceGateway:
    return PersistenceGateway(db.SqliteKeyValueStore(db.default_db_path()))


def get_record_store() -> RecordStore:
    return RecordStore(get_gateway())


def list_catalog() -> list[models.CatalogCategory]:
    return [models.CatalogCategory(name=name, items=list(catalog.items_for(name))) for name in catalog.category_names()]


def start_inspection() -> tuple[str, ChecklistSession]:
    session_id, session = inspection_sessions.open_session()
    logger.info("Nouveau contrôle démarré (%s)", session_id)
    return session_id, session


def submit_inspection(session_id: str) -> models.Record:
    """Validate and persist the open session, then close it.

    Raises ``KeyError`` for an unknown session and a
    ``ChecklistValidationError`` when the form is incomplete; the session stays
    open in that case so it can be corrected.
    """

    session = inspection_sessions.get_session(session_id)
    record = session.validate_and_submit(get_gateway())
    inspection_sessions.close_session(session_id)
    return record


def view_history() -> list[models.Record]:
    return get_record_store().list()


def refresh_history() -> list[models.Record]:
    return get_record_store().refresh()


def get_record(record_id: UUID) -> models.Record:
    record = get_record_store().get(record_id)
    if record is None:
        raise ValueError(f"Relevé introuvable : {record_id}")
    return record


def view_record(record_id: UUID) -> models.RecordDetail:
    record = get_record(record_id)
    categories = [
        models.CatalogCategory(name=name, items=items)
        for name, items in catalog.group_completed_items(record.completed_items)
    ]
    return models.RecordDetail(record=record, categories=categories)


def delete_record(record_id: UUID) -> None:
    if not get_record_store().delete(record_id):
        raise ValueError(f"Relevé introuvable : {record_id}")


def delete_records_at(indices: list[int]) -> list[models.Record]:
    return get_record_store().delete_at(indices)


def export_record_pdf(record_id: UUID) -> ExportedReport:
    return export_record(get_record(record_id))


def export_record_to_directory(record_id: UUID, directory: Path | None = None) -> Path | None:
    return write_report(export_record_pdf(record_id), directory)
