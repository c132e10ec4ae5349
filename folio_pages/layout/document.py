"""In-memory page composition and its persisted record form.

A :class:`LayoutDocument` is the ordered list of sections placed on the
homepage. Position is never stored on an entry: an entry's index in the
sequence is its render order and, once serialized, its ``sort_order``. Entries
are identified by an opaque ``id`` assigned on creation, so reorders and edits
track the same entry regardless of where it sits.

Every mutation is a no-op when it cannot apply (unknown type, duplicate
single-instance type, absent id, boundary move, non-editable target) and
reports whether the document changed.
"""

from __future__ import annotations

import copy
import dataclasses as dc
import enum
import typing as typ
import uuid

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from folio_pages.sections import SectionRegistry


class MoveDirection(enum.StrEnum):
    """Direction in which an entry can be moved by one slot."""

    UP = "up"
    DOWN = "down"


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dc.dataclass(slots=True)
class LayoutEntry:
    """One section placed on the page."""

    id: str
    section_type_id: str
    content: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class LayoutRecord:
    """Persisted form of a layout entry.

    Attributes
    ----------
    section_type_id : str
        Registry key of the section type.
    sort_order : int
        Zero-based position of the entry within the saved layout.
    content : dict[str, Any]
        Operator-authored content; empty for data-driven sections.
    """

    section_type_id: str
    sort_order: int
    content: dict[str, typ.Any] = dc.field(default_factory=dict)

    def as_dict(self) -> dict[str, typ.Any]:
        """Return a plain mapping suitable for YAML or JSON encoding."""
        return {
            "section_type_id": self.section_type_id,
            "sort_order": self.sort_order,
            "content": copy.deepcopy(self.content),
        }

    @classmethod
    def from_mapping(cls, data: cabc.Mapping[str, typ.Any]) -> LayoutRecord:
        """Build a record from a stored mapping.

        Raises
        ------
        ValueError
            If the mapping lacks a section type, or ``sort_order`` is not an
            integer, or ``content`` is not a mapping.
        """
        type_id = data.get("section_type_id")
        if not type_id:
            msg = "Layout records require a 'section_type_id'."
            raise ValueError(msg)
        try:
            sort_order = int(data.get("sort_order", 0))
        except (TypeError, ValueError) as exc:
            msg = f"Layout record '{type_id}' has a non-numeric 'sort_order'."
            raise ValueError(msg) from exc
        content = data.get("content") or {}
        if not isinstance(content, dict):
            msg = f"Layout record '{type_id}' content must be a mapping."
            raise ValueError(msg)
        return cls(
            section_type_id=str(type_id),
            sort_order=sort_order,
            content=copy.deepcopy(dict(content)),
        )


class LayoutDocument:
    """Ordered, mutable collection of :class:`LayoutEntry` objects."""

    def __init__(
        self,
        registry: SectionRegistry,
        entries: cabc.Iterable[LayoutEntry] = (),
    ) -> None:
        self.registry = registry
        self._entries: list[LayoutEntry] = []
        self.revision = 0
        seen: set[str] = set()
        for entry in entries:
            if entry.id in seen:
                msg = f"Duplicate layout entry id '{entry.id}'."
                raise ValueError(msg)
            seen.add(entry.id)
            self._entries.append(entry)

    @classmethod
    def from_records(
        cls, registry: SectionRegistry, records: cabc.Iterable[LayoutRecord]
    ) -> LayoutDocument:
        """Build a document from records in the order they were received.

        Records referencing unknown section types are kept so that saving the
        document later does not drop them.
        """
        entries = [
            LayoutEntry(
                id=_new_entry_id(),
                section_type_id=record.section_type_id,
                content=copy.deepcopy(record.content),
            )
            for record in records
        ]
        return cls(registry, entries)

    def __iter__(self) -> cabc.Iterator[LayoutEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, position: int) -> LayoutEntry:
        return self._entries[position]

    @property
    def entries(self) -> tuple[LayoutEntry, ...]:
        """Return the entries in render order."""
        return tuple(self._entries)

    @property
    def type_ids(self) -> list[str]:
        """Return the section type id of each entry in order."""
        return [entry.section_type_id for entry in self._entries]

    def index_of(self, entry_id: str) -> int | None:
        """Return the position of ``entry_id`` or ``None`` when absent."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def get(self, entry_id: str) -> LayoutEntry | None:
        """Return the entry with ``entry_id`` or ``None`` when absent."""
        index = self.index_of(entry_id)
        return None if index is None else self._entries[index]

    def contains_type(self, type_id: str) -> bool:
        """Return ``True`` when any entry references ``type_id``."""
        return any(entry.section_type_id == type_id for entry in self._entries)

    def can_move(self, entry_id: str, direction: MoveDirection | str) -> bool:
        """Return whether :meth:`move` would change the document."""
        index = self.index_of(entry_id)
        if index is None:
            return False
        target = index - 1 if MoveDirection(direction) is MoveDirection.UP else index + 1
        return 0 <= target < len(self._entries)

    def insert_at_end(self, type_id: str) -> LayoutEntry | None:
        """Append a new entry of ``type_id`` and return it.

        Returns ``None`` without touching the document when the type is not
        registered, or when it is single-instance and already present.
        """
        descriptor = self.registry.descriptor_of(type_id)
        if descriptor is None:
            return None
        if not descriptor.multi_instance_allowed and self.contains_type(type_id):
            return None
        entry = LayoutEntry(
            id=_new_entry_id(),
            section_type_id=type_id,
            content=descriptor.new_content(),
        )
        self._entries.append(entry)
        self.revision += 1
        return entry

    def remove(self, entry_id: str) -> bool:
        """Remove ``entry_id``; return ``False`` when it was not present."""
        index = self.index_of(entry_id)
        if index is None:
            return False
        del self._entries[index]
        self.revision += 1
        return True

    def move(self, entry_id: str, direction: MoveDirection | str) -> bool:
        """Swap ``entry_id`` with its neighbour in ``direction``.

        Returns ``False`` when the entry is absent, is first and asked to move
        up, or is last and asked to move down.
        """
        if not self.can_move(entry_id, direction):
            return False
        index = typ.cast("int", self.index_of(entry_id))
        target = index - 1 if MoveDirection(direction) is MoveDirection.UP else index + 1
        entries = self._entries
        entries[index], entries[target] = entries[target], entries[index]
        self.revision += 1
        return True

    def update_content(self, entry_id: str, field: str, value: typ.Any) -> bool:
        """Set one content field on an editable entry, keeping the others.

        Returns ``False`` when the entry is absent or its section type is not
        registered as editable.
        """
        entry = self.get(entry_id)
        if entry is None:
            return False
        descriptor = self.registry.descriptor_of(entry.section_type_id)
        if descriptor is None or not descriptor.editable:
            return False
        entry.content = {**entry.content, field: copy.deepcopy(value)}
        self.revision += 1
        return True

    def to_records(self) -> list[LayoutRecord]:
        """Serialize the document with dense ``sort_order`` values.

        Serialization ignores the registry, so entries whose type has been
        unregistered are still written back unchanged.
        """
        return [
            LayoutRecord(
                section_type_id=entry.section_type_id,
                sort_order=index,
                content=copy.deepcopy(entry.content),
            )
            for index, entry in enumerate(self._entries)
        ]


__all__ = ["LayoutDocument", "LayoutEntry", "LayoutRecord", "MoveDirection"]
