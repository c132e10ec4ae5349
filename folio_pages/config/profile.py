"""Builders for the profile, experience, link, project, and post blocks."""

from __future__ import annotations

import typing as typ

from .helpers import _normalize_tags, _optional_str, _parse_timestamp
from .models import (
    ExperienceConfig,
    PostRecord,
    ProfileConfig,
    ProjectRecord,
    SiteConfigError,
    SocialLinkConfig,
)


def _build_profile_config(payload: typ.Mapping[str, object] | None) -> ProfileConfig:
    """Build the owner profile used by the header and connect sections."""
    match payload:
        case {"name": name, "role": role, "bio": bio, **rest}:
            pass
        case _:
            msg = "Profile configuration requires 'name', 'role', and 'bio'."
            raise SiteConfigError(msg)
    for key, value in {"name": name, "role": role, "bio": bio}.items():
        if not value:
            msg = f"Profile is missing '{key}'."
            raise SiteConfigError(msg)
    return ProfileConfig(
        name=str(name),
        role=str(role),
        bio=str(bio).strip(),
        email=_optional_str(rest.get("email")),
    )


def _build_experiences(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[ExperienceConfig]:
    """Build work experience rows."""
    rows: list[ExperienceConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return rows
    for entry in iterable:
        match entry:
            case {"role": role, "company": company, **rest}:
                pass
            case _:
                continue
        if not (role and company):
            msg = "Experience entries require 'role' and 'company'."
            raise SiteConfigError(msg)
        rows.append(
            ExperienceConfig(
                role=str(role),
                company=str(company),
                period=str(rest.get("period") or ""),
            )
        )
    return rows


def _build_social_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[SocialLinkConfig]:
    """Build social link entries for the connect section."""
    links: list[SocialLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return links
    for entry in iterable:
        match entry:
            case {"name": name, "url": url, **rest}:
                pass
            case _:
                continue
        if not (name and url):
            msg = "Social links require 'name' and 'url'."
            raise SiteConfigError(msg)
        links.append(
            SocialLinkConfig(
                name=str(name),
                url=str(url),
                icon=_optional_str(rest.get("icon")),
            )
        )
    return links


def _build_projects(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[ProjectRecord]:
    """Build project records; entries without a title are rejected."""
    projects: list[ProjectRecord] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return projects
    for entry in iterable:
        match entry:
            case {"title": title, "slug": slug, **rest}:
                pass
            case _:
                msg = "Projects require 'title' and 'slug'."
                raise SiteConfigError(msg)
        if not (title and slug):
            msg = "Projects require 'title' and 'slug'."
            raise SiteConfigError(msg)
        projects.append(
            ProjectRecord(
                title=str(title),
                slug=str(slug),
                url=_optional_str(rest.get("url")),
                summary=str(rest.get("summary") or ""),
                is_featured=bool(rest.get("is_featured", False)),
                created_at=_parse_timestamp(rest.get("created_at")),
                tech_stack=_normalize_tags(rest.get("tech_stack")),
            )
        )
    return projects


def _build_posts(entries: list[typ.Mapping[str, object]] | None) -> list[PostRecord]:
    """Build blog post records; entries without a title are rejected."""
    posts: list[PostRecord] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return posts
    for entry in iterable:
        match entry:
            case {"title": title, "slug": slug, **rest}:
                pass
            case _:
                msg = "Posts require 'title' and 'slug'."
                raise SiteConfigError(msg)
        if not (title and slug):
            msg = "Posts require 'title' and 'slug'."
            raise SiteConfigError(msg)
        posts.append(
            PostRecord(
                title=str(title),
                slug=str(slug),
                summary=str(rest.get("summary") or ""),
                url=_optional_str(rest.get("url")),
                image_url=_optional_str(rest.get("image_url")),
                is_featured=bool(rest.get("is_featured", False)),
                created_at=_parse_timestamp(rest.get("created_at")),
            )
        )
    return posts


__all__ = [
    "_build_experiences",
    "_build_posts",
    "_build_profile_config",
    "_build_projects",
    "_build_social_links",
]
