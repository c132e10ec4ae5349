"""Typed dataclasses describing the portfolio site configuration."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ProfileConfig:
    """Owner details shown by the header and connect sections."""

    name: str
    role: str
    bio: str
    email: str | None = None


@dc.dataclass(slots=True)
class ExperienceConfig:
    """One row of the work experience section."""

    role: str
    company: str
    period: str


@dc.dataclass(slots=True)
class SocialLinkConfig:
    """Social profile link listed in the connect section."""

    name: str
    url: str
    icon: str | None = None


@dc.dataclass(slots=True)
class ProjectRecord:
    """Portfolio project as supplied by the surrounding application."""

    title: str
    slug: str
    url: str | None = None
    summary: str = ""
    is_featured: bool = False
    created_at: dt.datetime | None = None
    tech_stack: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class PostRecord:
    """Blog post as supplied by the surrounding application."""

    title: str
    slug: str
    summary: str = ""
    url: str | None = None
    image_url: str | None = None
    is_featured: bool = False
    created_at: dt.datetime | None = None


@dc.dataclass(slots=True)
class LayoutStoreConfig:
    """Where the homepage layout is persisted."""

    backend: str = "file"
    path: Path = Path("config/layout.yaml")
    url: str | None = None
    table: str = "site_layout"
    function: str = "replace_site_layout"
    api_key_env: str = "SUPABASE_KEY"


@dc.dataclass(slots=True)
class SiteConfig:
    """Aggregated site content and output settings sourced from YAML."""

    title: str
    output: Path
    profile: ProfileConfig
    experiences: list[ExperienceConfig] = dc.field(default_factory=list)
    links: list[SocialLinkConfig] = dc.field(default_factory=list)
    projects: list[ProjectRecord] = dc.field(default_factory=list)
    posts: list[PostRecord] = dc.field(default_factory=list)
    layout_store: LayoutStoreConfig = dc.field(default_factory=LayoutStoreConfig)


__all__ = [
    "ExperienceConfig",
    "LayoutStoreConfig",
    "PostRecord",
    "ProfileConfig",
    "ProjectRecord",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
]
