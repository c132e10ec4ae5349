"""Build the data context consumed by data-driven homepage sections.

Data-driven sections (``header``, ``recent_projects``, ``work_experience``,
``blog``, ``connect``) carry no content of their own. At resolution time their
props come from the mapping returned by :func:`build_data_context`, keyed by
section type id.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import PostRecord, ProjectRecord, SiteConfig

_EPOCH = dt.datetime.min.replace(tzinfo=dt.UTC)


def _newest_first(
    records: cabc.Iterable[ProjectRecord | PostRecord],
) -> list[dict[str, typ.Any]]:
    ordered = sorted(records, key=lambda record: record.created_at or _EPOCH, reverse=True)
    return [dc.asdict(record) for record in ordered]


def build_data_context(site: SiteConfig) -> dict[str, dict[str, typ.Any]]:
    """Return props for each data-driven section type.

    Projects and posts are ordered newest first; ``recent_projects`` only
    lists featured projects.
    """
    profile = site.profile
    return {
        "header": {"name": profile.name, "role": profile.role, "bio": profile.bio},
        "recent_projects": {
            "projects": _newest_first(p for p in site.projects if p.is_featured)
        },
        "work_experience": {
            "experiences": [dc.asdict(row) for row in site.experiences]
        },
        "blog": {"posts": _newest_first(site.posts)},
        "connect": {
            "email": profile.email,
            "links": [dc.asdict(link) for link in site.links],
        },
    }


__all__ = ["build_data_context"]
