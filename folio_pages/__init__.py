"""Portfolio homepage composition and rendering.

This package assembles the portfolio homepage from a catalogue of reusable
section types, persists the operator's arrangement, and renders it for both the
public site and the editor preview. The ``pages`` console command wraps these
operations.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from folio_pages import main
>>> main()  # doctest: +SKIP
>>> from folio_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
