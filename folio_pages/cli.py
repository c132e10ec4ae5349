"""Cyclopts CLI entrypoint for composing and rendering the portfolio homepage.

The ``pages`` console script renders the homepage from the saved layout and
exposes the layout editor: listing sections, adding section types, removing,
reordering, and editing section content. Each editing command loads the saved
layout, applies one change, and saves it back when the change took effect.

Examples
--------
Render the homepage and an editor preview:

>>> from folio_pages.cli import app
>>> app(["generate", "--preview", "public/preview.html"])  # doctest: +SKIP

Add a hero and move it to the top:

>>> app(["layout", "add", "hero_centered"])  # doctest: +SKIP
>>> app(["layout", "move", "4", "up"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import DEFAULT_CONFIG, LOG_LEVEL_ENV
from .config import SiteConfig, load_site_config
from .homepage import HomePageBuilder
from .layout import (
    LayoutEditor,
    LayoutEntry,
    LayoutStore,
    MoveDirection,
    RestLayoutStore,
    YamlLayoutStore,
)
from .sections import build_default_registry

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]
layout_app = App(name="layout", help="Inspect and edit the homepage layout.")
app.command(layout_app)

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]
ApiKeyOption = typ.Annotated[
    str | None,
    Parameter(
        help="API key for the REST layout store (falls back to the configured env var)",
        env_var="INPUT_API_KEY",
    ),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def build_store(site: SiteConfig, *, api_key: str | None = None) -> LayoutStore:
    """Return the layout store described by ``site.layout_store``."""
    settings = site.layout_store
    if settings.backend == "rest":
        return RestLayoutStore(
            base_url=typ.cast("str", settings.url),
            api_key=api_key or os.getenv(settings.api_key_env),
            table=settings.table,
            function=settings.function,
        )
    return YamlLayoutStore(settings.path)


def _open_editor(
    config: Path, api_key: str | None
) -> tuple[SiteConfig, LayoutEditor]:
    site = load_site_config(config)
    editor = LayoutEditor.open(
        build_default_registry(), build_store(site, api_key=api_key)
    )
    return site, editor


def _entry_at(editor: LayoutEditor, position: int) -> LayoutEntry:
    """Return the entry at 1-based ``position``."""
    if not 1 <= position <= len(editor.document):
        msg = (
            f"No section at position {position}; "
            f"the layout has {len(editor.document)} sections."
        )
        raise ValueError(msg)
    return editor.document[position - 1]


def _label(editor: LayoutEditor, entry: LayoutEntry) -> str:
    descriptor = editor.registry.descriptor_of(entry.section_type_id)
    if descriptor is None:
        return f"{entry.section_type_id} (unregistered)"
    return descriptor.display_name


def _save(editor: LayoutEditor) -> None:
    records = editor.save()
    print(f"saved {len(records)} sections")


def _parse_value(
    text: str, current: object = None, *, as_yaml: bool = False
) -> typ.Any:
    """Return the value to store for ``text``.

    Text is kept verbatim unless ``as_yaml`` is set or the field being
    replaced ``current`` holds a list or mapping, in which case ``text`` is
    parsed with the YAML safe loader.
    """
    if not (as_yaml or isinstance(current, list | dict)):
        return text
    try:
        parsed = YAML(typ="safe").load(text)
    except YAMLError as exc:
        msg = f"Value is not valid YAML: {text!r}"
        raise ValueError(msg) from exc
    return text if parsed is None else parsed


@app.command(help="Render the homepage from the saved layout.")
def generate(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the homepage output path", env_var="INPUT_OUTPUT"),
    ] = None,
    preview: typ.Annotated[
        Path | None, Parameter(help="Also write an editor preview page here")
    ] = None,
    api_key: ApiKeyOption = None,
) -> None:
    """Render the public homepage and, optionally, the editor preview.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Write the homepage here instead of the configured ``site.output``.
    preview : Path or None, optional
        When set, also write the preview variant of the same layout.
    api_key : str or None, optional
        Key for the REST layout store.
    """
    site, editor = _open_editor(config, api_key)
    builder = HomePageBuilder(site)
    written = builder.run(editor.document, output=output)
    print(f"wrote {_format_path(written)}")
    if preview:
        preview_path = builder.run(editor.document, output=preview, preview=True)
        print(f"wrote {_format_path(preview_path)}")


@layout_app.command(help="List the sections on the homepage in order.")
def show(*, config: ConfigOption = DEFAULT_CONFIG, api_key: ApiKeyOption = None) -> None:
    """Print each section with its 1-based position."""
    _site, editor = _open_editor(config, api_key)
    if not len(editor.document):
        print("layout is empty")
        return
    for position, entry in enumerate(editor.document, start=1):
        print(f"{position}. {_label(editor, entry)} [{entry.section_type_id}]")


@layout_app.command(help="List the section types that can still be added.")
def types(*, config: ConfigOption = DEFAULT_CONFIG, api_key: ApiKeyOption = None) -> None:
    """Print the type ids offered by the add-section menu."""
    _site, editor = _open_editor(config, api_key)
    available = editor.available_types()
    if not available:
        print("all available sections are in use")
        return
    for type_id in available:
        descriptor = editor.registry.descriptor_of(type_id)
        name = descriptor.display_name if descriptor else type_id
        print(f"{type_id}: {name}")


@layout_app.command(help="Append a section of the given type.")
def add(
    type_id: str,
    /,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    api_key: ApiKeyOption = None,
) -> None:
    """Append ``type_id`` and save, or report why it was refused."""
    _site, editor = _open_editor(config, api_key)
    entry = editor.add_section(type_id)
    if entry is None:
        print(f"cannot add '{type_id}': unknown type or already on the page")
        return
    print(f"added {_label(editor, entry)} at position {len(editor.document)}")
    _save(editor)


@layout_app.command(help="Remove the section at a 1-based position.")
def remove(
    position: int,
    /,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    api_key: ApiKeyOption = None,
) -> None:
    """Remove the section at ``position`` and save."""
    _site, editor = _open_editor(config, api_key)
    entry = _entry_at(editor, position)
    editor.remove_section(entry.id)
    print(f"removed {_label(editor, entry)}")
    _save(editor)


@layout_app.command(help="Move the section at a 1-based position up or down.")
def move(
    position: int,
    direction: MoveDirection,
    /,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    api_key: ApiKeyOption = None,
) -> None:
    """Swap the section with its neighbour and save when it moved."""
    _site, editor = _open_editor(config, api_key)
    entry = _entry_at(editor, position)
    if not editor.move_section(entry.id, direction):
        print(f"{_label(editor, entry)} cannot move {direction}")
        return
    new_position = editor.document.index_of(entry.id)
    print(f"moved {_label(editor, entry)} to position {typ.cast('int', new_position) + 1}")
    _save(editor)


@layout_app.command(name="set", help="Set one content field on an editable section.")
def set_field(
    position: int,
    field: str,
    value: str,
    /,
    *,
    yaml: typ.Annotated[
        bool, Parameter(help="Parse the value as YAML instead of plain text")
    ] = False,
    config: ConfigOption = DEFAULT_CONFIG,
    api_key: ApiKeyOption = None,
) -> None:
    """Set ``field`` to ``value`` and save.

    ``value`` is stored as plain text unless ``--yaml`` is given or the field
    already holds a list or mapping.
    """
    _site, editor = _open_editor(config, api_key)
    entry = _entry_at(editor, position)
    parsed = _parse_value(value, entry.content.get(field), as_yaml=yaml)
    if not editor.update_content(entry.id, field, parsed):
        print(f"{_label(editor, entry)} has no editable content")
        return
    print(f"updated {field} on {_label(editor, entry)}")
    _save(editor)


@layout_app.command(help="List the simple form fields of an editable section.")
def fields(
    position: int,
    /,
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    api_key: ApiKeyOption = None,
) -> None:
    """Print the string fields an operator can edit on the section."""
    _site, editor = _open_editor(config, api_key)
    entry = _entry_at(editor, position)
    specs = editor.editable_fields(entry.id)
    if not specs:
        print(f"{_label(editor, entry)} has no editable fields")
        return
    for spec in specs:
        widget = "textarea" if spec.multiline else "input"
        print(f"{spec.key}: {spec.label} ({widget}) = {entry.content[spec.key]!r}")


def _log_level(name: str) -> int:
    """Return the numeric level for ``name``, or ``WARNING`` when unknown."""
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    return logging.WARNING if level is None else level


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    The log level comes from ``FOLIO_LOG_LEVEL`` and falls back to ``WARNING``
    when the variable is unset or names no known level.
    """
    logging.basicConfig(
        level=_log_level(os.getenv(LOG_LEVEL_ENV, "")),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
