"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str
from .models import LayoutStoreConfig, SiteConfig, SiteConfigError
from .profile import (
    _build_experiences,
    _build_posts,
    _build_profile_config,
    _build_projects,
    _build_social_links,
)

LAYOUT_BACKENDS = ("file", "rest")


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the portfolio site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the owner profile, content records used by
        data-driven sections, the homepage output path, and the layout store
        settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping, or required fields are
        missing or invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from folio_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.profile.name  # doctest: +SKIP
    'Dimitris Vatistas'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = raw.get("site", {}) or {}
    title = site.get("title")
    if not title:
        msg = "Site configuration requires 'site.title'."
        raise SiteConfigError(msg)

    return SiteConfig(
        title=str(title),
        output=Path(site.get("output", "public/index.html")),
        profile=_build_profile_config(raw.get("profile")),
        experiences=_build_experiences(raw.get("experience")),
        links=_build_social_links(raw.get("links")),
        projects=_build_projects(raw.get("projects")),
        posts=_build_posts(raw.get("posts")),
        layout_store=_build_layout_store_config(raw.get("layout_store")),
    )


def _build_layout_store_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> LayoutStoreConfig:
    """Build layout store settings, defaulting to the YAML file backend."""
    base = LayoutStoreConfig()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Layout store configuration must be a mapping."
            raise SiteConfigError(msg)
    backend = str(data.get("backend", base.backend)).lower()
    if backend not in LAYOUT_BACKENDS:
        known = ", ".join(LAYOUT_BACKENDS)
        msg = f"Unknown layout store backend '{backend}'. Known backends: {known}"
        raise SiteConfigError(msg)
    url = _optional_str(data.get("url"))
    if backend == "rest" and not url:
        msg = "The 'rest' layout store requires a 'url'."
        raise SiteConfigError(msg)
    return LayoutStoreConfig(
        backend=backend,
        path=Path(data.get("path", base.path)),
        url=url,
        table=str(data.get("table", base.table)),
        function=str(data.get("function", base.function)),
        api_key_env=str(data.get("api_key_env", base.api_key_env)),
    )


__all__ = ["load_site_config"]
