"""Lecture et écriture de la collection de relevés.

La collection entière est encodée en un seul blob JSON rangé sous une clé
unique du stockage clé-valeur. Chaque sauvegarde réécrit le blob complet.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from pydantic import TypeAdapter, ValidationError

from walkaround_checks.core.config import settings
from walkaround_checks.core.db import KeyValueStore, SqliteKeyValueStore
from walkaround_checks.core.models import Record

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(list[Record])


class PersistenceError(RuntimeError):
    """Base error for the persisted record collection."""


class PersistenceDecodeFailure(PersistenceError):
    pass


class PersistenceEncodeFailure(PersistenceError):
    pass


def encode_records(records: Iterable[Record]) -> bytes:
    try:
        return _RECORDS_ADAPTER.dump_json(list(records), by_alias=True)
    except (TypeError, ValueError) as exc:
        raise PersistenceEncodeFailure(f"Impossible d'encoder les relevés : {exc}") from exc


def decode_records(blob: bytes) -> list[Record]:
    try:
        return _RECORDS_ADAPTER.validate_json(blob)
    except (ValidationError, ValueError) as exc:
        raise PersistenceDecodeFailure(f"Impossible de décoder les relevés : {exc}") from exc


class PersistenceGateway:
    """Load and save the full record collection under one well-known key.

    By default failures are logged and swallowed: ``load`` falls back to an
    empty collection and ``save`` drops the write. With ``strict=True`` the
    ``PersistenceDecodeFailure`` / ``PersistenceEncodeFailure`` is raised.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        *,
        key: str | None = None,
        strict: bool | None = None,
    ) -> None:
        self.store = store if store is not None else SqliteKeyValueStore()
        self.key = key or settings.STORE_KEY
        self.strict = settings.STRICT_PERSISTENCE if strict is None else strict

    def load(self) -> list[Record]:
        blob = self.store.get(self.key)
        if blob is None:
            return []
        try:
            return decode_records(blob)
        except PersistenceDecodeFailure as exc:
            if self.strict:
                raise
            logger.warning("Collection '%s' illisible, traitée comme vide : %s", self.key, exc)
            return []

    def save(self, records: Sequence[Record]) -> None:
        try:
            blob = encode_records(records)
        except PersistenceEncodeFailure as exc:
            if self.strict:
                raise
            logger.error("Écriture de la collection '%s' abandonnée : %s", self.key, exc)
            return
        self.store.set(self.key, blob)
        logger.debug("Collection '%s' enregistrée (%d relevés)", self.key, len(records))

    def append(self, record: Record) -> list[Record]:
        records = self.load()
        records.append(record)
        self.save(records)
        return records
