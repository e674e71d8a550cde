"""Historique des relevés enregistrés."""
from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from walkaround_checks.core.models import Record
from walkaround_checks.core.persistence import PersistenceGateway

logger = logging.getLogger(__name__)


class RecordStore:
    """In-memory view of the persisted collection.

    Every mutation is written back through the gateway right away, so
    ``refresh`` never loses pending changes.
    """

    def __init__(self, gateway: PersistenceGateway) -> None:
        self._gateway = gateway
        self._records: list[Record] = gateway.load()

    def list(self) -> list[Record]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: UUID) -> Record | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def delete(self, record_id: UUID) -> bool:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                self._gateway.save(self._records)
                logger.info("Relevé %s supprimé", record_id)
                return True
        return False

    def delete_at(self, indices: Iterable[int]) -> list[Record]:
        positions = sorted(set(indices))
        for position in positions:
            if position < 0 or position >= len(self._records):
                raise IndexError(f"Index de relevé invalide : {position}")
        if not positions:
            return []
        removed = [self._records[position] for position in positions]
        for position in reversed(positions):
            del self._records[position]
        self._gateway.save(self._records)
        logger.info("%d relevé(s) supprimé(s)", len(removed))
        return removed

    def refresh(self) -> list[Record]:
        self._records = self._gateway.load()
        logger.debug("Historique rechargé (%d relevés)", len(self._records))
        return self.list()
