"""Common literal values used across folio_pages.

These constants keep default paths and environment variable names in one
place so the CLI, loaders, and tests agree on them.

Examples
--------
>>> from folio_pages import _constants
>>> str(_constants.DEFAULT_CONFIG)
'config/site.yaml'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_LEVEL_ENV = "FOLIO_LOG_LEVEL"
