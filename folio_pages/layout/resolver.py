"""Turn a layout document into the ordered list of sections to render.

Resolution is the single ordering used by both the public homepage and the
editor preview. It is a pure function of the document, the registry bound to
it, and the data context:

* entries whose section type is no longer registered are skipped;
* editable sections render their own ``content``;
* data-driven sections render whatever the data context holds under their
  type id, or an empty mapping when the context has nothing for them.

Examples
--------
>>> from folio_pages.layout import LayoutDocument, resolve
>>> from folio_pages.sections import build_default_registry
>>> document = LayoutDocument(build_default_registry())
>>> entry = document.insert_at_end("header")
>>> [section.type_id for section in resolve(document, {"header": {"name": "Ada"}})]
['header']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import types
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .document import LayoutDocument

logger = logging.getLogger(__name__)

DataContext = typ.Mapping[str, typ.Mapping[str, typ.Any]]


@dc.dataclass(frozen=True, slots=True)
class ResolvedSection:
    """A section ready to hand to its render contract.

    ``template`` is the Jinja template named by the section descriptor in the
    document's registry.
    """

    entry_id: str
    type_id: str
    props: cabc.Mapping[str, typ.Any]
    template: str


def resolve(
    document: LayoutDocument, data_context: DataContext | None = None
) -> list[ResolvedSection]:
    """Resolve ``document`` against ``data_context`` in document order.

    Parameters
    ----------
    document : LayoutDocument
        Layout to resolve; its registry decides which entries are renderable.
    data_context : Mapping[str, Mapping[str, Any]], optional
        Props for data-driven section types keyed by type id. Missing keys
        resolve to an empty mapping.

    Returns
    -------
    list[ResolvedSection]
        One item per entry with a registered type. Props are read-only views,
        so rendering cannot mutate the document or the context.
    """
    context = data_context or {}
    resolved: list[ResolvedSection] = []
    for entry in document:
        descriptor = document.registry.descriptor_of(entry.section_type_id)
        if descriptor is None:
            logger.debug(
                "Skipping entry %s with unregistered section type '%s'",
                entry.id,
                entry.section_type_id,
            )
            continue
        if descriptor.editable:
            props = entry.content
        else:
            props = context.get(entry.section_type_id) or {}
        resolved.append(
            ResolvedSection(
                entry_id=entry.id,
                type_id=entry.section_type_id,
                props=types.MappingProxyType(props),
                template=descriptor.template,
            )
        )
    return resolved


__all__ = ["DataContext", "ResolvedSection", "resolve"]
