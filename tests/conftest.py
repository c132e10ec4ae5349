"""Shared fixtures for the layout engine tests."""

from __future__ import annotations

import copy
import typing as typ
from textwrap import dedent

import pytest

from folio_pages.layout import LayoutRecord
from folio_pages.sections import SectionDescriptor, SectionRegistry

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class MemoryStore:
    """Layout store keeping records in memory and counting replacements."""

    def __init__(self, records: cabc.Iterable[LayoutRecord] = ()) -> None:
        self.records: list[LayoutRecord] = list(records)
        self.replace_calls = 0
        self.fail_with: Exception | None = None

    def load(self) -> list[LayoutRecord]:
        return sorted(copy.deepcopy(self.records), key=lambda r: r.sort_order)

    def replace(self, records: cabc.Sequence[LayoutRecord]) -> None:
        self.replace_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        self.records = copy.deepcopy(list(records))


@pytest.fixture
def ab_registry() -> SectionRegistry:
    """Registry with editable ``A`` and multi-instance data-driven ``B``."""
    return SectionRegistry(
        [
            SectionDescriptor(
                "A", "Alpha", editable=True, default_content={"headline": "H"}
            ),
            SectionDescriptor("B", "Beta", multi_instance_allowed=True),
        ]
    )


@pytest.fixture
def memory_store() -> MemoryStore:
    """Empty in-memory layout store."""
    return MemoryStore()


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    """Write a complete ``site.yaml`` using a YAML layout file in ``tmp_path``."""
    path = tmp_path / "site.yaml"
    path.write_text(
        dedent(
            f"""
            site:
              title: Test Folio
              output: {tmp_path / "public" / "index.html"}
            profile:
              name: Ada Lovelace
              role: Analyst
              bio: Writes notes on engines.
              email: ada@example.invalid
            experience:
              - role: Analyst
                company: Engine Works
                period: 1842 - 1843
            links:
              - name: Mastodon
                url: https://example.invalid/@ada
            projects:
              - title: Old Featured
                slug: old-featured
                summary: First featured project.
                is_featured: true
                created_at: 2023-01-01T00:00:00Z
              - title: Hidden
                slug: hidden
                summary: Not featured.
                created_at: 2024-06-01T00:00:00Z
              - title: New Featured
                slug: new-featured
                summary: Second featured project.
                is_featured: true
                created_at: 2024-01-01T00:00:00Z
            posts:
              - title: Older Post
                slug: older-post
                summary: Older.
                created_at: 2022-01-01T00:00:00Z
              - title: Newer Post
                slug: newer-post
                summary: Newer.
                created_at: 2024-02-01T00:00:00Z
            layout_store:
              backend: file
              path: {tmp_path / "layout.yaml"}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path
