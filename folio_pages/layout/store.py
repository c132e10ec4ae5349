r"""Persistence gateways for the homepage layout.

A store exposes two operations:

``load()``
    Return the saved layout as :class:`LayoutRecord` objects sorted by
    ``sort_order`` ascending.
``replace(records)``
    Discard the saved layout and store exactly ``records``.

``replace`` must be all-or-nothing. A delete-everything-then-insert sequence
without a transaction loses the whole layout if the insert fails, so both
stores here replace in a single step: :class:`YamlLayoutStore` renames a fully
written temporary file over the target, and :class:`RestLayoutStore` calls a
database function that runs the delete and insert in one transaction (see
``sql/replace_site_layout.sql``).

Example
-------
>>> from pathlib import Path
>>> from folio_pages.layout.store import YamlLayoutStore
>>> store = YamlLayoutStore(Path("config/layout.yaml"))  # doctest: +SKIP
>>> [record.section_type_id for record in store.load()]  # doctest: +SKIP
['header', 'recent_projects', 'blog']
"""

from __future__ import annotations

import logging
import os
import tempfile
import typing as typ
from http import HTTPStatus
from pathlib import Path

import requests
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .document import LayoutRecord

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "site_layout"
DEFAULT_FUNCTION = "replace_site_layout"


class LayoutStoreError(RuntimeError):
    """Raised when the layout cannot be read from or written to its store."""


@typ.runtime_checkable
class LayoutStore(typ.Protocol):
    """Load and replace the persisted layout."""

    def load(self) -> list[LayoutRecord]:
        """Return saved records sorted by ``sort_order``."""
        ...

    def replace(self, records: cabc.Sequence[LayoutRecord]) -> None:
        """Atomically replace the saved layout with ``records``."""
        ...


def _records_from_rows(
    rows: cabc.Iterable[cabc.Mapping[str, typ.Any]], *, source: str
) -> list[LayoutRecord]:
    records: list[LayoutRecord] = []
    for row in rows:
        try:
            records.append(LayoutRecord.from_mapping(row))
        except ValueError as exc:
            msg = f"Malformed layout row in {source}: {exc}"
            raise LayoutStoreError(msg) from exc
    records.sort(key=lambda record: record.sort_order)
    return records


class YamlLayoutStore:
    """Keep the layout in a YAML file under a top-level ``sections`` list."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _yaml(self) -> YAML:
        yaml = YAML()
        yaml.width = 120
        yaml.indent(mapping=2, sequence=4, offset=2)
        return yaml

    def load(self) -> list[LayoutRecord]:
        """Return the saved records, or an empty list when no file exists."""
        if not self.path.exists():
            return []
        loader = YAML(typ="safe")
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                document = loader.load(handle) or {}
        except YAMLError as exc:
            msg = f"Unable to parse layout file '{self.path}'."
            raise LayoutStoreError(msg) from exc
        rows = document.get("sections") if isinstance(document, dict) else None
        if rows is None and isinstance(document, dict):
            rows = []
        if not isinstance(rows, list):
            msg = f"Layout file '{self.path}' must map 'sections' to a list."
            raise LayoutStoreError(msg)
        return _records_from_rows(rows, source=str(self.path))

    def replace(self, records: cabc.Sequence[LayoutRecord]) -> None:
        """Write ``records`` to a sibling temp file and rename it into place."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"sections": [record.as_dict() for record in records]}
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}-", suffix=".tmp", dir=self.path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                self._yaml().dump(payload, handle)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            msg = f"Unable to write layout file '{self.path}'."
            raise LayoutStoreError(msg) from exc
        finally:
            tmp_path.unlink(missing_ok=True)
        logger.info("Wrote %d layout sections to %s", len(records), self.path)


class RestLayoutStore:
    """Layout store backed by a PostgREST (Supabase) database.

    Rows live in ``table`` with ``section_id``, ``sort_order`` and ``content``
    columns. Replacement goes through the ``function`` RPC endpoint so the
    database performs the delete and insert inside one transaction.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        table: str = DEFAULT_TABLE,
        function: str = DEFAULT_FUNCTION,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialise the store with connection details.

        Parameters
        ----------
        base_url : str
            Project URL, for example ``https://abc.supabase.co``.
        api_key : str, optional
            API key sent as both ``apikey`` and bearer token.
        table : str, optional
            Table holding the layout rows. Defaults to ``site_layout``.
        function : str, optional
            Database function performing the transactional replace.
        session : requests.Session, optional
            Session to reuse; a new one is created when omitted.
        timeout : float, optional
            Per-request timeout in seconds.

        Notes
        -----
        Requests are attempted once. Callers decide whether to retry.
        """
        self._base = base_url.rstrip("/")
        self._table = table
        self._function = function
        self._session = session or requests.Session()
        self.timeout = timeout
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": "folio-pages/0.1",
        }
        if api_key:
            self._headers["apikey"] = api_key
            self._headers["Authorization"] = f"Bearer {api_key}"

    @property
    def table_url(self) -> str:
        return f"{self._base}/rest/v1/{self._table}"

    @property
    def function_url(self) -> str:
        return f"{self._base}/rest/v1/rpc/{self._function}"

    def load(self) -> list[LayoutRecord]:
        """Fetch the saved rows ordered by ``sort_order``."""
        try:
            response = self._session.get(
                self.table_url,
                params={
                    "select": "section_id,sort_order,content",
                    "order": "sort_order.asc",
                },
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            msg = f"Unable to reach layout table at {self.table_url}"
            raise LayoutStoreError(msg) from exc
        self._raise_for_status(response, "load")
        try:
            payload = response.json()
        except ValueError as exc:
            msg = "Layout table returned invalid JSON."
            raise LayoutStoreError(msg) from exc
        if not isinstance(payload, list):
            msg = "Layout table response must be a JSON array."
            raise LayoutStoreError(msg)
        rows = [
            {
                "section_type_id": row.get("section_id"),
                "sort_order": row.get("sort_order"),
                "content": row.get("content"),
            }
            for row in payload
            if isinstance(row, dict)
        ]
        return _records_from_rows(rows, source=self.table_url)

    def replace(self, records: cabc.Sequence[LayoutRecord]) -> None:
        """Replace all rows through the transactional RPC function."""
        entries = [
            {
                "section_id": record.section_type_id,
                "sort_order": record.sort_order,
                "content": record.content,
            }
            for record in records
        ]
        try:
            response = self._session.post(
                self.function_url,
                json={"entries": entries},
                headers=self._headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            msg = f"Unable to reach layout function at {self.function_url}"
            raise LayoutStoreError(msg) from exc
        self._raise_for_status(response, "replace")
        logger.info("Replaced layout with %d sections via %s", len(entries), self._function)

    @staticmethod
    def _raise_for_status(response: requests.Response, action: str) -> None:
        if HTTPStatus.OK <= response.status_code < HTTPStatus.MULTIPLE_CHOICES:
            return
        detail = response.text.strip() if response.text else ""
        msg = f"Layout {action} failed with HTTP {response.status_code}"
        if detail:
            msg = f"{msg}: {detail}"
        raise LayoutStoreError(msg)


__all__ = [
    "DEFAULT_FUNCTION",
    "DEFAULT_TABLE",
    "LayoutStore",
    "LayoutStoreError",
    "RestLayoutStore",
    "YamlLayoutStore",
]
