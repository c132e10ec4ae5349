"""Unit tests for the layout document and its record form."""

from __future__ import annotations

import pytest

from folio_pages.layout import LayoutDocument, LayoutRecord, MoveDirection
from folio_pages.sections import SectionRegistry


def _document(registry: SectionRegistry, *type_ids: str) -> LayoutDocument:
    document = LayoutDocument(registry)
    for type_id in type_ids:
        assert document.insert_at_end(type_id) is not None
    return document


def test_insert_assigns_unique_ids_and_copies_defaults(
    ab_registry: SectionRegistry,
) -> None:
    document = _document(ab_registry, "A", "B", "B")
    ids = [entry.id for entry in document]
    assert len(set(ids)) == 3, f"expected distinct entry ids, got {ids!r}"
    assert document[0].content == {"headline": "H"}
    document[0].content["headline"] = "edited"
    descriptor = ab_registry.descriptor_of("A")
    assert descriptor is not None
    assert descriptor.new_content() == {"headline": "H"}


def test_ids_are_not_reused_after_removal(ab_registry: SectionRegistry) -> None:
    document = _document(ab_registry, "A")
    removed_id = document[0].id
    document.remove(removed_id)
    entry = document.insert_at_end("A")
    assert entry is not None
    assert entry.id != removed_id


def test_insert_refuses_unknown_and_duplicate_types(
    ab_registry: SectionRegistry,
) -> None:
    document = _document(ab_registry, "A")
    revision = document.revision
    assert document.insert_at_end("missing") is None
    assert document.insert_at_end("A") is None
    assert len(document) == 1, "expected refused inserts to leave the document alone"
    assert document.revision == revision


def test_remove_is_idempotent(ab_registry: SectionRegistry) -> None:
    document = _document(ab_registry, "A", "B")
    entry_id = document[0].id
    assert document.remove(entry_id) is True
    assert document.remove(entry_id) is False
    assert document.type_ids == ["B"]


@pytest.mark.parametrize(
    ("position", "direction"),
    [(0, MoveDirection.UP), (2, MoveDirection.DOWN)],
)
def test_move_at_boundary_is_a_no_op(
    ab_registry: SectionRegistry, position: int, direction: MoveDirection
) -> None:
    document = _document(ab_registry, "A", "B", "B")
    before = [entry.id for entry in document]
    entry_id = before[position]
    assert document.can_move(entry_id, direction) is False
    assert document.move(entry_id, direction) is False
    assert [entry.id for entry in document] == before


def test_move_swaps_by_identity(ab_registry: SectionRegistry) -> None:
    """Moving one of two same-typed entries swaps that entry, not the type."""
    document = _document(ab_registry, "A", "B", "B")
    first_b, second_b = document[1].id, document[2].id
    assert document.move(first_b, "down") is True
    assert [entry.id for entry in document][1:] == [second_b, first_b]
    assert document.move(first_b, MoveDirection.UP) is True
    assert [entry.id for entry in document][1:] == [first_b, second_b]


def test_move_absent_entry_reports_no_move(ab_registry: SectionRegistry) -> None:
    document = _document(ab_registry, "A")
    assert document.move("nope", "up") is False


def test_update_content_merges_one_field(ab_registry: SectionRegistry) -> None:
    document = _document(ab_registry, "A")
    entry_id = document[0].id
    assert document.update_content(entry_id, "subtext", "S") is True
    assert document[0].content == {"headline": "H", "subtext": "S"}


def test_update_content_ignores_non_editable_and_absent_entries(
    ab_registry: SectionRegistry,
) -> None:
    document = _document(ab_registry, "B")
    entry = document[0]
    assert document.update_content(entry.id, "headline", "X") is False
    assert entry.content == {}
    assert document.update_content("missing", "headline", "X") is False


def test_update_content_copies_structured_values(ab_registry: SectionRegistry) -> None:
    document = _document(ab_registry, "A")
    items = [{"name": "one"}]
    document.update_content(document[0].id, "items", items)
    items[0]["name"] = "changed"
    assert document[0].content["items"] == [{"name": "one"}]


def test_to_records_numbers_positions_densely(ab_registry: SectionRegistry) -> None:
    records = [
        LayoutRecord("B", 4, {}),
        LayoutRecord("A", 10, {"headline": "Saved"}),
        LayoutRecord("B", 11, {}),
    ]
    document = LayoutDocument.from_records(ab_registry, records)
    serialized = document.to_records()
    assert [r.sort_order for r in serialized] == [0, 1, 2]
    assert [r.section_type_id for r in serialized] == ["B", "A", "B"]
    assert serialized[1].content == {"headline": "Saved"}


def test_round_trip_preserves_loaded_order(ab_registry: SectionRegistry) -> None:
    records = [
        LayoutRecord("A", 0, {"headline": "One"}),
        LayoutRecord("B", 1, {}),
        LayoutRecord("B", 2, {}),
    ]
    document = LayoutDocument.from_records(ab_registry, records)
    assert document.to_records() == records


def test_from_records_keeps_unregistered_types(ab_registry: SectionRegistry) -> None:
    document = LayoutDocument.from_records(
        ab_registry, [LayoutRecord("gone", 0, {"x": 1})]
    )
    assert document.to_records() == [LayoutRecord("gone", 0, {"x": 1})]


def test_record_from_mapping_validates_fields() -> None:
    record = LayoutRecord.from_mapping(
        {"section_type_id": "A", "sort_order": "3", "content": None}
    )
    assert record == LayoutRecord("A", 3, {})
    with pytest.raises(ValueError, match="section_type_id"):
        LayoutRecord.from_mapping({"sort_order": 0})
    with pytest.raises(ValueError, match="non-numeric"):
        LayoutRecord.from_mapping({"section_type_id": "A", "sort_order": "first"})
    with pytest.raises(ValueError, match="must be a mapping"):
        LayoutRecord.from_mapping({"section_type_id": "A", "content": ["x"]})
