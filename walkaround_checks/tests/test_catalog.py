import pytest

from walkaround_checks.core import catalog


def test_catalog_categories_keep_declared_order() -> None:
    assert catalog.category_names() == [
        "Exterior Check",
        "Engine Compartment",
        "Interior Check",
        "Safety Features",
        "Cargo and Trailer",
    ]


def test_catalog_item_counts() -> None:
    counts = {category.name: len(category.items) for category in catalog.CHECKLIST_CATALOG}
    assert counts == {
        "Exterior Check": 13,
        "Engine Compartment": 5,
        "Interior Check": 5,
        "Safety Features": 3,
        "Cargo and Trailer": 4,
    }
    assert len(catalog.all_items()) == 30


def test_items_for_unknown_category_raises_key_error() -> None:
    with pytest.raises(KeyError):
        catalog.items_for("Roof")


def test_group_completed_items_follows_catalog_order_and_skips_empty() -> None:
    horn = "Horn: Test the horn to ensure it is operational."
    tires = "Tires: Ensure lug nuts are tight."
    seatbelts = "Seatbelts: Verify seatbelts are functional and not frayed."

    grouped = catalog.group_completed_items([horn, seatbelts, tires, horn])

    assert grouped == [
        ("Exterior Check", [tires]),
        ("Safety Features", [seatbelts, horn]),
    ]


def test_group_completed_items_ignores_labels_outside_catalog() -> None:
    assert catalog.group_completed_items(["Wipers: check blades."]) == []
