"""Operator-facing editing session for the homepage layout.

:class:`LayoutEditor` owns the live :class:`LayoutDocument` for one editing
session. It forwards add/remove/move/edit operations to the document, tracks
whether the document has unsaved changes, and saves by handing a dense,
re-numbered snapshot to a :class:`~folio_pages.layout.store.LayoutStore`.

Status moves through ``LOADED -> MODIFIED -> SAVING -> SAVED | FAILED``. Any
change after ``SAVED`` or ``FAILED`` returns the editor to ``MODIFIED``. The
document is never locked: a change made while a save is in flight stays in the
live document and goes out with the next save.

Example
-------
>>> from pathlib import Path
>>> from folio_pages.layout import LayoutEditor, YamlLayoutStore
>>> from folio_pages.sections import build_default_registry
>>> editor = LayoutEditor.open(
...     build_default_registry(), YamlLayoutStore(Path("config/layout.yaml"))
... )  # doctest: +SKIP
>>> entry = editor.add_section("hero_centered")  # doctest: +SKIP
>>> editor.update_content(entry.id, "headline", "Hello")  # doctest: +SKIP
True
>>> editor.save()  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

from .document import LayoutDocument, LayoutEntry, LayoutRecord, MoveDirection
from .resolver import resolve

if typ.TYPE_CHECKING:
    from folio_pages.sections import SectionDescriptor, SectionRegistry

    from .resolver import DataContext, ResolvedSection
    from .store import LayoutStore

logger = logging.getLogger(__name__)

MULTILINE_THRESHOLD = 80
MULTILINE_KEY_HINTS = ("text", "paragraph")


class EditorStatus(enum.StrEnum):
    """Lifecycle of the live document relative to the saved layout."""

    LOADED = "loaded"
    MODIFIED = "modified"
    SAVING = "saving"
    SAVED = "saved"
    FAILED = "failed"


class LayoutSaveError(RuntimeError):
    """Raised when the layout store rejects a save."""


@dc.dataclass(frozen=True, slots=True)
class FieldSpec:
    """Form field derived from a string value in an entry's content."""

    key: str
    label: str
    multiline: bool


def _field_label(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.replace("_", " ").split(" "))


def _is_multiline(key: str, value: str) -> bool:
    return len(value) > MULTILINE_THRESHOLD or any(
        hint in key for hint in MULTILINE_KEY_HINTS
    )


class LayoutEditor:
    """Mutation and save surface for a single live layout document."""

    def __init__(
        self,
        registry: SectionRegistry,
        store: LayoutStore,
        document: LayoutDocument | None = None,
    ) -> None:
        self.registry = registry
        self.store = store
        self.document = (
            document if document is not None else LayoutDocument(registry)
        )
        self.status = EditorStatus.LOADED
        self.last_error: Exception | None = None
        self._saved_revision = self.document.revision

    @classmethod
    def open(cls, registry: SectionRegistry, store: LayoutStore) -> LayoutEditor:
        """Load the saved layout from ``store`` and start a session on it."""
        document = LayoutDocument.from_records(registry, store.load())
        logger.debug("Loaded layout with %d sections", len(document))
        return cls(registry, store, document)

    @property
    def dirty(self) -> bool:
        """Return ``True`` when the live document differs from the last save."""
        return self.document.revision != self._saved_revision

    def reload(self) -> None:
        """Discard the live document and reload the saved layout."""
        self.document = LayoutDocument.from_records(self.registry, self.store.load())
        self._saved_revision = self.document.revision
        self.status = EditorStatus.LOADED
        self.last_error = None

    def _touch(self, changed: bool, action: str, target: str) -> bool:
        if changed:
            self.status = EditorStatus.MODIFIED
        else:
            logger.debug("Ignored %s of %s", action, target)
        return changed

    def available_types(self) -> list[str]:
        """Return section type ids that may still be added."""
        return self.registry.available_types(self.document)

    def descriptor_for(self, entry_id: str) -> SectionDescriptor | None:
        """Return the descriptor of ``entry_id`` or ``None``."""
        entry = self.document.get(entry_id)
        if entry is None:
            return None
        return self.registry.descriptor_of(entry.section_type_id)

    def add_section(self, type_id: str) -> LayoutEntry | None:
        """Append a section of ``type_id``; ``None`` when refused."""
        entry = self.document.insert_at_end(type_id)
        self._touch(entry is not None, "add", type_id)
        return entry

    def remove_section(self, entry_id: str) -> bool:
        """Remove ``entry_id``; ``False`` when it was not present."""
        return self._touch(self.document.remove(entry_id), "remove", entry_id)

    def move_section(self, entry_id: str, direction: MoveDirection | str) -> bool:
        """Move ``entry_id`` one slot; ``False`` at the boundaries."""
        return self._touch(
            self.document.move(entry_id, direction), f"move {direction}", entry_id
        )

    def can_move(self, entry_id: str, direction: MoveDirection | str) -> bool:
        """Return whether :meth:`move_section` would change the document."""
        return self.document.can_move(entry_id, direction)

    def update_content(self, entry_id: str, field: str, value: typ.Any) -> bool:
        """Set ``field`` on an editable entry; ``False`` when not applicable."""
        return self._touch(
            self.document.update_content(entry_id, field, value),
            f"edit of '{field}'",
            entry_id,
        )

    def editable_fields(self, entry_id: str) -> list[FieldSpec]:
        """Describe the simple form fields for an editable entry.

        Only top-level string values are offered. Nested collections are left
        to :meth:`update_content` with a structured value.
        """
        descriptor = self.descriptor_for(entry_id)
        entry = self.document.get(entry_id)
        if entry is None or descriptor is None or not descriptor.editable:
            return []
        return [
            FieldSpec(key=key, label=_field_label(key), multiline=_is_multiline(key, value))
            for key, value in entry.content.items()
            if isinstance(value, str)
        ]

    def preview(self, data_context: DataContext | None = None) -> list[ResolvedSection]:
        """Resolve the live document exactly as the public page would."""
        return resolve(self.document, data_context)

    def save(self) -> list[LayoutRecord]:
        """Replace the saved layout with the live document.

        Returns
        -------
        list[LayoutRecord]
            The records handed to the store, numbered ``0..n-1``.

        Raises
        ------
        LayoutSaveError
            If the store fails. The status becomes ``FAILED``, the cause is
            kept on :attr:`last_error`, and the live document is untouched.
        """
        records = self.document.to_records()
        revision = self.document.revision
        self.status = EditorStatus.SAVING
        self.last_error = None
        try:
            self.store.replace(records)
        except Exception as exc:
            self.status = EditorStatus.FAILED
            self.last_error = exc
            logger.error("Failed to save layout: %s", exc)
            msg = f"Failed to save layout: {exc}"
            raise LayoutSaveError(msg) from exc
        self._saved_revision = revision
        if self.document.revision != revision:
            self.status = EditorStatus.MODIFIED
        else:
            self.status = EditorStatus.SAVED
        logger.info("Saved layout with %d sections", len(records))
        return records


__all__ = ["EditorStatus", "FieldSpec", "LayoutEditor", "LayoutSaveError"]
