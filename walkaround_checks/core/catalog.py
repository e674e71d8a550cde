"""Catalogue des points de contrôle du tour du véhicule.

Unique définition partagée par la validation de la session et par le rendu
PDF : l'ordre des catégories et des points est celui affiché et imprimé.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ChecklistCategory:
    name: str
    items: tuple[str, ...]


CHECKLIST_CATALOG: tuple[ChecklistCategory, ...] = (
    ChecklistCategory(
        name="Exterior Check",
        items=(
            "Tires: Inspect for proper inflation.",
            "Tires: Check for any visible wear or damage.",
            "Tires: Ensure lug nuts are tight.",
            "Lights and Reflectors: Test headlights, taillights, brake lights, and turn signals.",
            "Lights and Reflectors: Verify that clearance lights are visible and operational.",
            "Lights and Reflectors: Check reflectors and reflective tape for visibility.",
            "Mirrors and Windows: Clean and ensure windows and mirrors are free of cracks.",
            "Mirrors and Windows: Adjust mirrors for optimal rear visibility.",
            "Fluid Leaks: Check under the vehicle for any signs of oil, coolant, or fuel leaks.",
            "Body and Frame: Inspect the body for any visible damage, rust, or loose parts.",
            "Body and Frame: Ensure the frame is free of cracks or defects.",
            "Suspension: Check suspension components for wear or damage.",
            "Suspension: Ensure shock absorbers are in good condition.",
        ),
    ),
    ChecklistCategory(
        name="Engine Compartment",
        items=(
            "Fluid Levels: Check oil, coolant, and windshield washer fluid levels.",
            "Fluid Levels: Inspect power steering and brake fluid levels.",
            "Battery: Ensure the battery is securely mounted.",
            "Battery: Check for corrosion on terminals.",
            "Belts and Hoses: Inspect for wear, cracks, or fraying.",
        ),
    ),
    ChecklistCategory(
        name="Interior Check",
        items=(
            "Brakes: Test the operation of service and parking brakes.",
            "Steering: Ensure steering wheel has minimal play and operates smoothly.",
            "Gauges and Instruments: Verify that all gauges (fuel, temperature, pressure) are functioning.",
            "Emergency Equipment: Check for a functional fire extinguisher and first aid kit.",
            "Emergency Equipment: Ensure warning triangles or flares are present.",
        ),
    ),
    ChecklistCategory(
        name="Safety Features",
        items=(
            "Seatbelts: Verify seatbelts are functional and not frayed.",
            "Horn: Test the horn to ensure it is operational.",
            "Emergency Exits: Ensure easy access to emergency exits in the cab.",
        ),
    ),
    ChecklistCategory(
        name="Cargo and Trailer",
        items=(
            "Load Security: Check that cargo is properly loaded and secured.",
            "Trailer Connection: Inspect the kingpin and locking jaws.",
            "Trailer Connection: Verify that safety chains are attached.",
            "Trailer Doors: Ensure doors open, close, and lock securely.",
        ),
    ),
)

_CATEGORY_MAP: dict[str, ChecklistCategory] = {category.name: category for category in CHECKLIST_CATALOG}


def category_names(catalog: Iterable[ChecklistCategory] = CHECKLIST_CATALOG) -> list[str]:
    return [category.name for category in catalog]


def items_for(name: str, catalog: Iterable[ChecklistCategory] | None = None) -> tuple[str, ...]:
    """Return the ordered items of ``name``; raise ``KeyError`` if unknown."""

    if catalog is None:
        return _CATEGORY_MAP[name].items
    for category in catalog:
        if category.name == name:
            return category.items
    raise KeyError(name)


def all_items(catalog: Iterable[ChecklistCategory] = CHECKLIST_CATALOG) -> list[str]:
    items: list[str] = []
    seen: set[str] = set()
    for category in catalog:
        for item in category.items:
            if item in seen:
                continue
            seen.add(item)
            items.append(item)
    return items


def group_completed_items(
    completed_items: Iterable[str],
    catalog: Iterable[ChecklistCategory] = CHECKLIST_CATALOG,
) -> list[tuple[str, list[str]]]:
    """Group ``completed_items`` by category, following catalog order.

    Categories without any completed item are left out. The order in which the
    completed items are given is ignored.
    """

    completed = set(completed_items)
    grouped: list[tuple[str, list[str]]] = []
    for category in catalog:
        present = [item for item in category.items if item in completed]
        if present:
            grouped.append((category.name, present))
    return grouped
