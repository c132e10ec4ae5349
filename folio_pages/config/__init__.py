"""Load and validate the portfolio site configuration YAML.

This subpackage parses ``config/site.yaml`` into slotted dataclasses
(:class:`SiteConfig`, :class:`ProfileConfig`, and friends) that the data
context builder and the homepage renderer consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.layout_store.backend  # doctest: +SKIP
'file'
"""

from .loader import load_site_config
from .models import (
    ExperienceConfig,
    LayoutStoreConfig,
    PostRecord,
    ProfileConfig,
    ProjectRecord,
    SiteConfig,
    SiteConfigError,
    SocialLinkConfig,
)

__all__ = [
    "ExperienceConfig",
    "LayoutStoreConfig",
    "PostRecord",
    "ProfileConfig",
    "ProjectRecord",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinkConfig",
    "load_site_config",
]
