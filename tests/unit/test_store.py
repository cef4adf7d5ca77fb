import asyncio
import json
from pathlib import Path

import pytest

from eventboard.db.store import JSONDocument, JSONStore, StorageError


def _write(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def _store(tmp_path: Path) -> JSONStore:
    _write(tmp_path / "events.json", [])
    _write(tmp_path / "images.json", [{"path": "a.jpg", "caption": "A"}])
    return JSONStore(tmp_path / "events.json", tmp_path / "images.json")


@pytest.mark.asyncio
async def test_store_event_crud(tmp_path: Path) -> None:
    store = _store(tmp_path)

    await store.append_event({"id": "e1", "title": "one"})
    await store.append_event({"id": "e2", "title": "two"})

    assert [record["id"] for record in await store.list_events()] == ["e1", "e2"]
    assert await store.get_event("e2") == {"id": "e2", "title": "two"}
    assert await store.get_event("missing") is None

    assert await store.replace_event("e1", {"id": "e1", "title": "uno"}) is True
    assert await store.replace_event("missing", {"id": "missing"}) is False
    assert (await store.get_event("e1")) == {"id": "e1", "title": "uno"}

    assert await store.delete_event("e1") is True
    assert await store.delete_event("e1") is False
    on_disk = json.loads((tmp_path / "events.json").read_text(encoding="utf-8"))
    assert on_disk == [{"id": "e2", "title": "two"}]


@pytest.mark.asyncio
async def test_store_lists_images_as_stored(tmp_path: Path) -> None:
    store = _store(tmp_path)
    assert await store.list_images() == [{"path": "a.jpg", "caption": "A"}]


@pytest.mark.asyncio
async def test_document_missing_file_raises_storage_error(tmp_path: Path) -> None:
    document = JSONDocument(tmp_path / "absent.json")
    with pytest.raises(StorageError):
        await document.load()


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["{not json", '{"id": "e1"}', '[1, 2]'])
async def test_document_rejects_malformed_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "events.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        await JSONDocument(path).load()


@pytest.mark.asyncio
async def test_transaction_discards_changes_on_error(tmp_path: Path) -> None:
    path = tmp_path / "events.json"
    _write(path, [{"id": "e1"}])
    document = JSONDocument(path)

    with pytest.raises(RuntimeError, match="boom"):
        async with document.transaction() as records:
            records.clear()
            raise RuntimeError("boom")

    assert await document.load() == [{"id": "e1"}]

    async with document.transaction() as records:
        records.append({"id": "e2"})
    assert await document.load() == [{"id": "e1"}, {"id": "e2"}]


@pytest.mark.asyncio
async def test_concurrent_appends_are_serialized(tmp_path: Path) -> None:
    store = _store(tmp_path)

    await asyncio.gather(*(store.append_event({"id": f"e{index}"}) for index in range(25)))

    ids = {record["id"] for record in await store.list_events()}
    assert ids == {f"e{index}" for index in range(25)}


@pytest.mark.asyncio
async def test_save_preserves_utf8_text(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "events.json"
    document = JSONDocument(path)

    await document.save([{"id": "e1", "title": "Café night"}])

    assert "Café night" in path.read_text(encoding="utf-8")
    assert [p.name for p in path.parent.iterdir()] == ["events.json"]
