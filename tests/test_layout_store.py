"""Unit tests for the YAML and REST layout stores."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest
import requests
from ruamel.yaml import YAML

from folio_pages.layout import LayoutRecord, LayoutStoreError, RestLayoutStore, YamlLayoutStore
from folio_pages.layout import store as store_module

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

RECORDS = [
    LayoutRecord("header", 0, {}),
    LayoutRecord("hero_centered", 1, {"headline": "Hi", "tags": ["a", "b"]}),
    LayoutRecord("footer_links", 2, {"columns": [{"title": "T", "links": []}]}),
]


def test_yaml_store_missing_file_loads_empty(tmp_path: Path) -> None:
    assert YamlLayoutStore(tmp_path / "layout.yaml").load() == []


def test_yaml_store_replace_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "layout.yaml"
    store = YamlLayoutStore(path)
    store.replace(RECORDS)
    assert store.load() == RECORDS
    parsed = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    assert [row["sort_order"] for row in parsed["sections"]] == [0, 1, 2]


def test_yaml_store_sorts_rows_by_sort_order(tmp_path: Path) -> None:
    path = tmp_path / "layout.yaml"
    path.write_text(
        dedent(
            """
            sections:
              - section_type_id: blog
                sort_order: 2
              - section_type_id: header
                sort_order: 0
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    records = YamlLayoutStore(path).load()
    assert [r.section_type_id for r in records] == ["header", "blog"]


def test_yaml_store_rejects_malformed_rows(tmp_path: Path) -> None:
    path = tmp_path / "layout.yaml"
    path.write_text("sections:\n  - sort_order: 0\n", encoding="utf-8")
    with pytest.raises(LayoutStoreError, match="Malformed layout row"):
        YamlLayoutStore(path).load()
    path.write_text("sections: nope\n", encoding="utf-8")
    with pytest.raises(LayoutStoreError, match="must map 'sections' to a list"):
        YamlLayoutStore(path).load()


def test_yaml_store_failed_replace_keeps_previous_layout(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A write that fails before the rename leaves the saved layout intact."""
    path = tmp_path / "layout.yaml"
    store = YamlLayoutStore(path)
    store.replace(RECORDS)

    def failing_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(store_module.os, "replace", failing_replace)
    with pytest.raises(LayoutStoreError, match="Unable to write layout file"):
        store.replace([LayoutRecord("blog", 0, {})])

    assert store.load() == RECORDS
    leftovers = [p.name for p in tmp_path.iterdir() if p.name != "layout.yaml"]
    assert leftovers == [], f"expected temp files to be cleaned up, got {leftovers!r}"


def _response(mocker: MockerFixture, status: int, payload: object = None, text: str = ""):
    response = mocker.Mock()
    response.status_code = status
    response.json.return_value = payload
    response.text = text
    return response


def test_rest_store_loads_ordered_rows(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = _response(
        mocker,
        200,
        [
            {"id": 7, "section_id": "blog", "sort_order": 1, "content": {}},
            {"id": 3, "section_id": "header", "sort_order": 0, "content": None},
        ],
    )
    store = RestLayoutStore(
        base_url="https://db.example.invalid/", api_key="anon-key", session=session
    )
    records = store.load()

    assert records == [LayoutRecord("header", 0, {}), LayoutRecord("blog", 1, {})]
    called_url = session.get.call_args.args[0]
    assert called_url == "https://db.example.invalid/rest/v1/site_layout"
    params = session.get.call_args.kwargs["params"]
    assert params["order"] == "sort_order.asc"
    headers = session.get.call_args.kwargs["headers"]
    assert headers["apikey"] == "anon-key"
    assert headers["Authorization"] == "Bearer anon-key"


def test_rest_store_replaces_through_single_rpc_call(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.post.return_value = _response(mocker, 204)
    store = RestLayoutStore(base_url="https://db.example.invalid", session=session)
    store.replace(RECORDS[:2])

    session.post.assert_called_once()
    session.delete.assert_not_called()
    assert session.post.call_args.args[0] == (
        "https://db.example.invalid/rest/v1/rpc/replace_site_layout"
    )
    body = session.post.call_args.kwargs["json"]
    assert body == {
        "entries": [
            {"section_id": "header", "sort_order": 0, "content": {}},
            {
                "section_id": "hero_centered",
                "sort_order": 1,
                "content": {"headline": "Hi", "tags": ["a", "b"]},
            },
        ]
    }


def test_rest_store_raises_on_http_error(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.post.return_value = _response(mocker, 500, text="boom")
    session.get.return_value = _response(mocker, 401, text="")
    store = RestLayoutStore(base_url="https://db.example.invalid", session=session)
    with pytest.raises(LayoutStoreError, match="HTTP 500: boom"):
        store.replace(RECORDS)
    with pytest.raises(LayoutStoreError, match="HTTP 401"):
        store.load()


def test_rest_store_wraps_transport_errors(mocker: MockerFixture) -> None:
    session = mocker.Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError("refused")
    store = RestLayoutStore(base_url="https://db.example.invalid", session=session)
    with pytest.raises(LayoutStoreError, match="Unable to reach layout table"):
        store.load()
