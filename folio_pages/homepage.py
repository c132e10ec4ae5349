"""Portfolio homepage rendering pipeline.

This module turns a :class:`~folio_pages.layout.LayoutDocument` into HTML. The
document is resolved against the data context built from ``config/site.yaml``
and each resolved section is rendered with the Jinja template named by its
section descriptor. The public page and the editor preview share this path;
the preview only adds a banner around the same section markup.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from folio_pages.config import load_site_config
>>> from folio_pages.layout import LayoutEditor, YamlLayoutStore
>>> from folio_pages.sections import build_default_registry
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> editor = LayoutEditor.open(build_default_registry(), YamlLayoutStore(site.layout_store.path))  # doctest: +SKIP
>>> HomePageBuilder(site).run(editor.document)  # doctest: +SKIP
PosixPath('public/index.html')

Templates live under ``folio_pages/templates`` unless a custom directory is
provided. Rendering relies on Jinja2 with autoescape enabled and writes UTF-8
files.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from .content import build_data_context
from .layout import resolve

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .layout import LayoutDocument, ResolvedSection


class HomePageBuilder:
    """Render the homepage from a layout document and site config data."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site configuration; supplies the page title, output path,
            and the records behind data-driven sections.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``folio_pages/templates``.
        """
        self.site = site
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("home_page.jinja")
        self.data_context = build_data_context(site)

    def resolve(self, document: LayoutDocument) -> list[ResolvedSection]:
        """Resolve ``document`` against this site's data context."""
        return resolve(document, self.data_context)

    def render_section(self, section: ResolvedSection) -> Markup:
        """Render one resolved section with the template it carries."""
        template = self.env.get_template(section.template)
        html = template.render(
            props=section.props,
            entry_id=section.entry_id,
            year=dt.datetime.now(dt.UTC).year,
        )
        return Markup(html)

    def render_sections(self, document: LayoutDocument) -> list[Markup]:
        """Resolve and render every visible section in document order."""
        return [self.render_section(section) for section in self.resolve(document)]

    def render(self, document: LayoutDocument, *, preview: bool = False) -> str:
        """Render the full page; ``preview`` only adds the editor banner."""
        html = self.template.render(
            site=self.site,
            sections=self.render_sections(document),
            preview=preview,
            generated_at=dt.datetime.now(dt.UTC),
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(
        self,
        document: LayoutDocument,
        *,
        output: Path | None = None,
        preview: bool = False,
    ) -> Path:
        """Render and write the page, returning the output path.

        Parent directories are created as needed and filesystem errors
        propagate to the caller.
        """
        output_path = output or self.site.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(document, preview=preview), encoding="utf-8")
        return output_path


__all__ = ["HomePageBuilder"]
