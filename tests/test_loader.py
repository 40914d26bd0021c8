# tests/test_loader.py

from __future__ import annotations

import json
from pathlib import Path

import pytest
from aiohttp import test_utils, web

from todo_list.tasks.loader import is_url, load_tasks
from todo_list.tasks.task_store import TaskStore

DOC = {
    "tasks": [
        {"id": 1, "text": "Learn DOM", "completed": True, "createdAt": "2024-01-15T10:30:00.000Z"},
        {"id": 4, "text": "Build app", "completed": False, "createdAt": "2024-01-15T11:00:00.000Z"},
    ],
    "categories": ["work", "personal"],
    "settings": {"theme": "light"},
}


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "data.json"
    path.write_text(content, "utf-8")
    return path


def test_is_url() -> None:
    assert is_url("http://example.com/data.json")
    assert is_url("https://example.com/data.json")
    assert not is_url("data.json")
    assert not is_url("/tmp/http/data.json")


@pytest.mark.asyncio
async def test_load_from_file(tmp_path: Path, store: TaskStore) -> None:
    path = _write(tmp_path, json.dumps(DOC))

    result = await load_tasks(store, path)

    assert result.ok
    assert result.loaded == 2
    assert [t.id for t in store.tasks()] == [1, 4]
    assert store.next_id == 5
    assert store.extras == {"categories": ["work", "personal"], "settings": {"theme": "light"}}


@pytest.mark.asyncio
async def test_malformed_tasks_field_yields_empty_store(tmp_path: Path, store: TaskStore) -> None:
    store.add("left over")
    path = _write(tmp_path, json.dumps({"tasks": "not-a-list"}))

    result = await load_tasks(store, path)

    assert not result.ok
    assert result.error is not None
    assert len(store) == 0
    assert store.next_id == 1


@pytest.mark.asyncio
async def test_invalid_json_yields_empty_store(tmp_path: Path, store: TaskStore) -> None:
    path = _write(tmp_path, "{ this is not json")

    result = await load_tasks(store, path)

    assert not result.ok
    assert "malformed JSON" in str(result.error)
    assert len(store) == 0


@pytest.mark.asyncio
async def test_missing_file_yields_empty_store(tmp_path: Path, store: TaskStore) -> None:
    result = await load_tasks(store, tmp_path / "nope.json")
    assert not result.ok
    assert result.error.source is not None
    assert len(store) == 0


@pytest.mark.asyncio
async def test_bad_element_does_not_abort_load(tmp_path: Path, store: TaskStore) -> None:
    doc = {"tasks": [{"id": 1, "text": "ok"}, {"id": 2}, 7]}
    path = _write(tmp_path, json.dumps(doc))

    result = await load_tasks(store, path)

    assert result.ok
    assert result.loaded == 1
    assert result.skipped == 2
    assert [t.text for t in store.tasks()] == ["ok"]


@pytest.mark.asyncio
async def test_load_over_http(store: TaskStore) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.json_response(DOC)

    app = web.Application()
    app.router.add_get("/data.json", handler)

    async with test_utils.TestServer(app) as server:
        result = await load_tasks(store, str(server.make_url("/data.json")))

    assert result.ok
    assert [t.text for t in store.tasks()] == ["Learn DOM", "Build app"]


@pytest.mark.asyncio
async def test_http_error_status_yields_empty_store(store: TaskStore) -> None:
    store.add("left over")
    app = web.Application()

    async with test_utils.TestServer(app) as server:
        result = await load_tasks(store, str(server.make_url("/missing.json")))

    assert not result.ok
    assert "404" in str(result.error)
    assert len(store) == 0


@pytest.mark.asyncio
async def test_out_of_range_date_does_not_abort_load(tmp_path: Path, store: TaskStore) -> None:
    doc = {
        "tasks": [
            {"id": 1, "text": "ok", "createdAt": "2024-01-15T10:30:00.000Z"},
            {"id": 2, "text": "edge", "createdAt": "9999-12-31T23:59:59-01:00"},
        ]
    }
    path = _write(tmp_path, json.dumps(doc))

    result = await load_tasks(store, path)

    assert result.ok
    assert [t.id for t in store.tasks()] == [1, 2]


@pytest.mark.asyncio
async def test_oversized_int_literal_yields_empty_store(tmp_path: Path, store: TaskStore) -> None:
    store.add("left over")
    path = _write(tmp_path, '{"tasks": [{"id": ' + "1" * 5000 + ', "text": "a"}]}')

    result = await load_tasks(store, path)

    assert not result.ok
    assert "malformed JSON" in str(result.error)
    assert len(store) == 0


@pytest.mark.asyncio
async def test_deeply_nested_document_yields_empty_store(tmp_path: Path, store: TaskStore) -> None:
    store.add("left over")
    depth = 200_000
    path = _write(tmp_path, '{"tasks": [], "settings": ' + "[" * depth + "]" * depth + "}")

    result = await load_tasks(store, path)

    assert not result.ok
    assert len(store) == 0
