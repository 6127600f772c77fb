# -*- coding: utf-8 -*-
"""
tests/shared/storage/test_kv_store.py

Contrato del almacén clave/valor en memoria y en archivo JSON.
"""

import json

import pytest

from pitbox.shared.storage import (
    JsonFileKeyValueStore,
    MemoryKeyValueStore,
    StorageError,
    build_kv_store,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryKeyValueStore()
    return JsonFileKeyValueStore(tmp_path / "store.json")


def test_get_missing_returns_default(store):
    assert store.get("nope") is None
    assert store.get("nope", "fallback") == "fallback"


def test_strings_stored_raw_and_objects_as_json(store):
    store.set("token", "tok-123")
    store.set("selection", {"package_id": "p1", "price": 5000})
    store.set("premium", True)

    assert store.get("token") == "tok-123"
    assert store.get("selection") == {"package_id": "p1", "price": 5000}
    assert store.get("premium") is True


def test_remove_and_clear_group(store):
    for key in ("a", "b", "c"):
        store.set(key, key)

    store.remove("a")
    store.clear_group(["b", "missing"])

    assert store.get("a") is None
    assert store.get("b") is None
    assert store.get("c") == "c"


def test_file_store_survives_restart(tmp_path):
    path = tmp_path / "nested" / "store.json"
    JsonFileKeyValueStore(path).set("selection", {"package_id": "p1"})

    reopened = JsonFileKeyValueStore(path)
    assert reopened.get("selection") == {"package_id": "p1"}
    assert json.loads(path.read_text(encoding="utf-8")) == {"selection": '{"package_id": "p1"}'}
    assert not list(path.parent.glob(".kv-*.tmp"))


def test_file_store_unreadable_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    store = JsonFileKeyValueStore(path)
    assert store.get("anything") is None
    store.set("k", "v")
    assert JsonFileKeyValueStore(path).get("k") == "v"


def test_unserializable_value_raises_storage_error():
    store = MemoryKeyValueStore()
    with pytest.raises(StorageError):
        store.set("bad", {("tuple", "key"): 1})


def test_build_kv_store(tmp_path):
    assert isinstance(build_kv_store("memory", str(tmp_path / "x.json")), MemoryKeyValueStore)
    assert isinstance(build_kv_store("file", str(tmp_path / "x.json")), JsonFileKeyValueStore)
