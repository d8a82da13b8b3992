"""Tests for key-value stores and the persistence gateway."""

import json
import logging
from pathlib import Path

import pytest

from todolist.config import StorageConfig, TodoListConfig
from todolist.storage import (
    DEFAULT_STORAGE_KEY,
    JSONFileStore,
    KeyValueStore,
    MemoryStore,
    PersistenceGateway,
    create_gateway,
    decode_entries,
    encode_entries,
)
from todolist.todos import DeserializationFailure, Entry, PersistenceUnavailable


class TestMemoryStore:
    def test_get_missing(self) -> None:
        assert MemoryStore().get("missing") is None

    def test_set_get_delete(self) -> None:
        store = MemoryStore()
        store.set("k", "v")
        assert store.get("k") == "v"
        assert store.delete("k") is True
        assert store.delete("k") is False
        assert store.get("k") is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryStore(), KeyValueStore)


class TestJSONFileStore:
    @pytest.fixture
    def store_path(self, tmp_path: Path) -> Path:
        return tmp_path / "data" / "todos.json"

    @pytest.fixture
    def store(self, store_path: Path) -> JSONFileStore:
        return JSONFileStore(store_path)

    def test_creates_parent_directory(self, store: JSONFileStore, store_path: Path) -> None:
        assert store_path.parent.is_dir()
        assert not store_path.exists()

    def test_get_missing_file(self, store: JSONFileStore) -> None:
        assert store.get("k") is None

    def test_set_persists_to_disk(self, store: JSONFileStore, store_path: Path) -> None:
        store.set("k", "v")
        assert json.loads(store_path.read_text()) == {"k": "v"}
        assert JSONFileStore(store_path).get("k") == "v"

    def test_set_keeps_other_keys(self, store: JSONFileStore) -> None:
        store.set("a", "1")
        store.set("b", "2")
        store.set("a", "3")
        assert store.get("a") == "3"
        assert store.get("b") == "2"

    def test_delete(self, store: JSONFileStore) -> None:
        store.set("a", "1")
        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.get("a") is None

    def test_no_temp_file_left(self, store: JSONFileStore, store_path: Path) -> None:
        store.set("a", "1")
        assert [p.name for p in store_path.parent.iterdir()] == ["todos.json"]

    def test_corrupt_file_reads_empty(self, store: JSONFileStore, store_path: Path) -> None:
        store_path.write_text("not json {")
        assert store.get("a") is None
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_non_object_file_reads_empty(
        self, store: JSONFileStore, store_path: Path
    ) -> None:
        store_path.write_text("[1, 2]")
        assert store.get("a") is None

    def test_invalid_utf8_reads_empty(
        self, store: JSONFileStore, store_path: Path
    ) -> None:
        store_path.write_bytes(b"\xff\xfe")
        assert store.get("a") is None
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_invalid_utf8_inside_value_reads_empty(
        self, store: JSONFileStore, store_path: Path
    ) -> None:
        store_path.write_bytes(b'{"a": "\xff\xfe"}')
        assert store.get("a") is None

    def test_non_string_values_dropped_with_warning(
        self, store: JSONFileStore, store_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        store_path.write_text(json.dumps({"a": "1", "b": 2, "c": None}))
        with caplog.at_level(logging.WARNING, logger="todolist.storage.file"):
            assert store.get("a") == "1"
        assert store.get("b") is None
        assert "b, c" in caplog.text

    def test_directory_path_is_unavailable(self, tmp_path: Path) -> None:
        with pytest.raises(PersistenceUnavailable):
            JSONFileStore(tmp_path)

    def test_unwritable_parent_is_unavailable(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(PersistenceUnavailable):
            JSONFileStore(blocker / "todos.json")


class TestCodec:
    def test_roundtrip_preserves_order_and_fields(self) -> None:
        entries = [
            Entry("first"),
            Entry("second", completed=True),
            Entry("third", editing=True),
        ]
        assert decode_entries(encode_entries(entries)) == entries

    def test_wire_format(self) -> None:
        assert json.loads(encode_entries([Entry("x")])) == [
            {"description": "x", "completed": False, "editing": False}
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            "garbage",
            '{"description": "x"}',
            '[{"description": "x", "completed": false}]',
            '[{"description": "x", "completed": 1, "editing": false}]',
            "[1]",
        ],
    )
    def test_decode_rejects_malformed(self, raw: str) -> None:
        with pytest.raises(DeserializationFailure):
            decode_entries(raw)


class TestPersistenceGateway:
    def test_load_missing_slot(self, gateway: PersistenceGateway) -> None:
        assert gateway.load() == []

    def test_save_then_load(
        self, gateway: PersistenceGateway, memory_store: MemoryStore
    ) -> None:
        entries = [Entry("a"), Entry("b", completed=True)]
        gateway.save(entries)
        assert memory_store.get("test.todos") is not None
        assert gateway.load() == entries

    def test_undecodable_slot_loads_empty(
        self, gateway: PersistenceGateway, memory_store: MemoryStore
    ) -> None:
        memory_store.set("test.todos", "{broken")
        assert gateway.load() == []

    def test_deeply_nested_slot_loads_empty(
        self, gateway: PersistenceGateway, memory_store: MemoryStore
    ) -> None:
        memory_store.set("test.todos", "[" * 100000)
        assert gateway.load() == []

    def test_key_is_injected(self, memory_store: MemoryStore) -> None:
        first = PersistenceGateway(memory_store, key="one")
        second = PersistenceGateway(memory_store, key="two")
        first.save([Entry("only in one")])
        assert second.load() == []
        assert first.key == "one"

    def test_default_key(self, memory_store: MemoryStore) -> None:
        assert PersistenceGateway(memory_store).key == DEFAULT_STORAGE_KEY == (
            "quinnjr.todomvc.self"
        )


class TestCreateGateway:
    def test_file_backend(self, tmp_path: Path) -> None:
        config = TodoListConfig(
            storage=StorageConfig(path=tmp_path / "todos.json", key="k")
        )
        gateway = create_gateway(config)
        assert isinstance(gateway.store, JSONFileStore)
        assert gateway.key == "k"
        gateway.save([Entry("persisted")])
        assert create_gateway(config).load() == [Entry("persisted")]

    def test_memory_backend(self) -> None:
        gateway = create_gateway(TodoListConfig(storage=StorageConfig(backend="memory")))
        assert isinstance(gateway.store, MemoryStore)

    def test_unavailable_store(self, tmp_path: Path) -> None:
        config = TodoListConfig(storage=StorageConfig(path=tmp_path))
        with pytest.raises(PersistenceUnavailable):
            create_gateway(config)
