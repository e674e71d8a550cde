"""Session de contrôle en cours : saisie, validation et soumission."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from walkaround_checks.core import catalog as checklist_catalog
from walkaround_checks.core.catalog import CHECKLIST_CATALOG, ChecklistCategory
from walkaround_checks.core.models import Record
from walkaround_checks.core.persistence import PersistenceGateway

logger = logging.getLogger(__name__)


class ChecklistValidationError(ValueError):
    """Input problem reported to the user, who can correct it and resubmit."""

    code = "invalid_checklist"
    message = "The checklist is not valid."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MissingDriverName(ChecklistValidationError):
    code = "missing_driver_name"
    message = "Please enter the driver's name."


class MissingTruckNumber(ChecklistValidationError):
    code = "missing_truck_number"
    message = "Please enter the truck number."


class IncompleteChecklist(ChecklistValidationError):
    code = "incomplete_checklist"
    message = "Please complete all checklist items before submitting."

    def __init__(self, missing_items: list[str]) -> None:
        super().__init__()
        self.missing_items = missing_items


class UnknownCategory(ValueError):
    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown checklist category: {category}")
        self.category = category


@dataclass
class ChecklistSession:
    driver_name: str = ""
    truck_number: str = ""
    date: datetime = field(default_factory=datetime.now)
    completed_items: set[str] = field(default_factory=set)
    comments: str = ""
    catalog: tuple[ChecklistCategory, ...] = CHECKLIST_CATALOG

    def toggle_item(self, item: str) -> bool:
        """Flip ``item`` and return whether it is now checked."""

        if item in self.completed_items:
            self.completed_items.discard(item)
            return False
        self.completed_items.add(item)
        return True

    def toggle_all_in_category(self, category: str) -> bool:
        """Select or deselect the whole category at once.

        If every item is already checked they are all cleared, otherwise they
        are all checked. Returns whether the category ends up complete.
        """

        try:
            items = checklist_catalog.items_for(category, self.catalog)
        except KeyError as exc:
            raise UnknownCategory(category) from exc
        if self.is_category_complete(category):
            self.completed_items.difference_update(items)
            return False
        self.completed_items.update(items)
        return True

    def is_category_complete(self, category: str) -> bool:
        try:
            items = checklist_catalog.items_for(category, self.catalog)
        except KeyError as exc:
            raise UnknownCategory(category) from exc
        return all(item in self.completed_items for item in items)

    def missing_items(self) -> list[str]:
        return [item for item in checklist_catalog.all_items(self.catalog) if item not in self.completed_items]

    def progress(self) -> tuple[int, int]:
        items = checklist_catalog.all_items(self.catalog)
        checked = sum(1 for item in items if item in self.completed_items)
        return checked, len(items)

    def checked_items(self) -> list[str]:
        return [item for item in checklist_catalog.all_items(self.catalog) if item in self.completed_items]

    def snapshot(self) -> dict:
        """Current form state, categories and items in catalog order."""

        checked, total = self.progress()
        return {
            "driver_name": self.driver_name,
            "truck_number": self.truck_number,
            "date": self.date,
            "comments": self.comments,
            "completed_items": self.checked_items(),
            "categories": [
                {
                    "name": category.name,
                    "complete": self.is_category_complete(category.name),
                    "items": [
                        {"label": item, "checked": item in self.completed_items} for item in category.items
                    ],
                }
                for category in self.catalog
            ],
            "checked_count": checked,
            "total_count": total,
        }

    def validate(self) -> None:
        if not self.driver_name.strip():
            raise MissingDriverName()
        if not self.truck_number.strip():
            raise MissingTruckNumber()
        missing = self.missing_items()
        if missing:
            raise IncompleteChecklist(missing)

    def to_record(self) -> Record:
        self.validate()
        # Stored in catalog order; extra labels outside the catalog are kept after.
        known = self.checked_items()
        extra = sorted(self.completed_items.difference(known))
        return Record(
            date=self.date,
            driver_name=self.driver_name,
            truck_number=self.truck_number,
            completed_items=tuple(known + extra),
            comments=self.comments,
        )

    def validate_and_submit(self, gateway: PersistenceGateway) -> Record:
        """Validate, then append the new record to the persisted collection.

        Nothing is written unless every check passes.
        """

        record = self.to_record()
        gateway.append(record)
        logger.info(
            "Relevé %s enregistré (conducteur=%s, véhicule=%s)",
            record.id,
            record.driver_name,
            record.truck_number,
        )
        return record
