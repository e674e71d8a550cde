"""Modèles Pydantic pour les relevés et l'API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUMMARY_DATE_FORMAT = "%b %d, %Y %H:%M"


class Record(BaseModel):
    """One completed inspection, as persisted and exported.

    Field aliases are the keys of the persisted blob.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    date: datetime
    driver_name: str = Field(alias="driverName")
    truck_number: str = Field(alias="truckNumber")
    completed_items: tuple[str, ...] = Field(default=(), alias="completedItems")
    comments: str = ""

    @property
    def display_date(self) -> str:
        return self.date.strftime(SUMMARY_DATE_FORMAT)

    def summary_lines(self) -> list[str]:
        return [
            f"Date: {self.display_date}",
            f"Driver: {self.driver_name}",
            f"Truck: {self.truck_number}",
        ]


class CatalogCategory(BaseModel):
    name: str
    items: list[str] = Field(default_factory=list)


class RecordSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    date: datetime
    driver_name: str = Field(alias="driverName")
    truck_number: str = Field(alias="truckNumber")
    label: str

    @classmethod
    def from_record(cls, record: Record) -> "RecordSummary":
        return cls(
            id=record.id,
            date=record.date,
            driver_name=record.driver_name,
            truck_number=record.truck_number,
            label=" | ".join(record.summary_lines()),
        )


class RecordDetail(BaseModel):
    record: Record
    categories: list[CatalogCategory] = Field(default_factory=list)


class ChecklistItemState(BaseModel):
    label: str
    checked: bool


class ChecklistCategoryState(BaseModel):
    name: str
    complete: bool
    items: list[ChecklistItemState] = Field(default_factory=list)


class InspectionState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    driver_name: str = Field(alias="driverName")
    truck_number: str = Field(alias="truckNumber")
    date: datetime
    comments: str
    completed_items: list[str] = Field(default_factory=list, alias="completedItems")
    categories: list[ChecklistCategoryState] = Field(default_factory=list)
    checked_count: int = Field(default=0, alias="checkedCount")
    total_count: int = Field(default=0, alias="totalCount")


class InspectionUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    driver_name: Optional[str] = Field(default=None, max_length=128, alias="driverName")
    truck_number: Optional[str] = Field(default=None, max_length=64, alias="truckNumber")
    date: Optional[datetime] = None
    comments: Optional[str] = None


class ItemToggle(BaseModel):
    item: str = Field(..., min_length=1)


class CategoryToggle(BaseModel):
    category: str = Field(..., min_length=1)


class DeleteAtRequest(BaseModel):
    indices: list[int] = Field(default_factory=list)

    @field_validator("indices")
    @classmethod
    def _unique_indices(cls, value: list[int]) -> list[int]:
        return sorted(set(value))


class ChecklistErrorDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    message: str
    missing_items: list[str] = Field(default_factory=list, alias="missingItems")
