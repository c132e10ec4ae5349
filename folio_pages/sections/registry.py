"""Catalogue of section types that can be placed on the homepage.

A :class:`SectionRegistry` maps a section type id (``"hero_centered"``,
``"blog"``) to an immutable :class:`SectionDescriptor`. The registry is built
once at startup and never mutated afterwards; layout documents, the resolver,
and the editor all consult it by key.

Lookups for unknown ids return ``None`` rather than raising. Saved layouts may
reference types that no longer exist, and callers are expected to skip or
refuse such entries.

Examples
--------
>>> from folio_pages.sections import SectionDescriptor, SectionRegistry
>>> registry = SectionRegistry(
...     [SectionDescriptor("hero", "Hero", editable=True, default_content={"headline": "H"})]
... )
>>> registry.descriptor_of("hero").display_name
'Hero'
>>> registry.descriptor_of("missing") is None
True
"""

from __future__ import annotations

import copy
import dataclasses as dc
import types
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from folio_pages.layout.document import LayoutDocument


@dc.dataclass(frozen=True, slots=True)
class SectionDescriptor:
    """Static description of a reusable page section.

    Attributes
    ----------
    type_id : str
        Unique key stored in layout entries.
    display_name : str
        Human label shown in the editor.
    editable : bool
        ``True`` when instances carry operator-authored content; ``False``
        when props come from the data context at resolution time.
    default_content : Mapping[str, Any]
        Seed content for new editable instances. Stored read-only; use
        :meth:`new_content` to obtain a private copy.
    multi_instance_allowed : bool
        Whether a document may hold more than one entry of this type.
    template : str
        Jinja template that renders resolved props for this type.
    """

    type_id: str
    display_name: str
    editable: bool = False
    default_content: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )
    multi_instance_allowed: bool = False
    template: str = ""

    def __post_init__(self) -> None:
        if not self.type_id:
            msg = "Section descriptors require a non-empty 'type_id'."
            raise ValueError(msg)
        frozen = types.MappingProxyType(copy.deepcopy(dict(self.default_content)))
        object.__setattr__(self, "default_content", frozen)
        if not self.template:
            object.__setattr__(self, "template", f"sections/{self.type_id}.jinja")

    def new_content(self) -> dict[str, typ.Any]:
        """Return a deep copy of the default content for a new entry."""
        if not self.editable:
            return {}
        return copy.deepcopy(dict(self.default_content))


class SectionRegistry:
    """Read-only lookup of section descriptors keyed by type id."""

    def __init__(self, descriptors: cabc.Iterable[SectionDescriptor]) -> None:
        table: dict[str, SectionDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.type_id in table:
                msg = f"Duplicate section type '{descriptor.type_id}'."
                raise ValueError(msg)
            table[descriptor.type_id] = descriptor
        self._descriptors = types.MappingProxyType(table)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._descriptors

    def __iter__(self) -> cabc.Iterator[SectionDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def type_ids(self) -> list[str]:
        """Return registered type ids in catalogue order."""
        return list(self._descriptors)

    def descriptor_of(self, type_id: str) -> SectionDescriptor | None:
        """Return the descriptor registered under ``type_id``, if any."""
        return self._descriptors.get(type_id)

    def available_types(self, document: LayoutDocument) -> list[str]:
        """Return the type ids that may still be added to ``document``.

        Multi-instance types are always offered; every other type is offered
        only while the document holds no entry of that type.
        """
        present = {entry.section_type_id for entry in document}
        return [
            descriptor.type_id
            for descriptor in self._descriptors.values()
            if descriptor.multi_instance_allowed or descriptor.type_id not in present
        ]

    def without(self, *type_ids: str) -> SectionRegistry:
        """Return a new registry lacking the given type ids."""
        dropped = set(type_ids)
        return SectionRegistry(
            descriptor
            for descriptor in self._descriptors.values()
            if descriptor.type_id not in dropped
        )


__all__ = ["SectionDescriptor", "SectionRegistry"]
