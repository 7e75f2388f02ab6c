from __future__ import annotations

from types import SimpleNamespace

import pytest

from clubhive.core.exceptions import StoreError
from clubhive.storage import build_store
from clubhive.storage.json_file_store import JsonFileStore
from clubhive.storage.mapping import MappedStore
from clubhive.storage.memory_store import InMemoryStore
from clubhive.storage.store import parse_records, read_records


def test_absent_key_reads_as_none_not_empty_list():
    s = InMemoryStore()
    assert s.get("clubs") is None

    s.set("clubs", [])
    assert s.get("clubs") == []


def test_memory_store_hands_out_copies():
    s = InMemoryStore()
    s.set("clubs", [{"id": "club-1"}])

    doc = s.get("clubs")
    doc.append({"id": "club-2"})

    assert s.get("clubs") == [{"id": "club-1"}]


def test_corrupt_document_reads_as_absent():
    s = InMemoryStore()
    s.put_raw("events", "{not json")
    s.put_raw("clubs", "42")

    assert s.get("events") is None
    assert s.get("clubs") is None


def test_keys_are_namespaced():
    s = InMemoryStore("hive")
    s.set("clubs", [])
    assert s.keys() == ["hive_clubs"]

    s.remove("clubs")
    assert s.keys() == []


def test_read_records_drops_non_dict_entries():
    s = InMemoryStore()
    s.set("clubs", [{"id": "a"}, "junk", 3, {"id": "b"}])

    assert read_records(s, "clubs") == [{"id": "a"}, {"id": "b"}]


def test_read_records_rejects_non_list_document():
    s = InMemoryStore()
    s.set("clubs", {"id": "a"})

    assert read_records(s, "clubs") is None


def test_parse_records_skips_bad_records():
    out = parse_records([{"n": "1"}, {"n": "x"}, {}], lambda r: int(r["n"]), "numbers")
    assert out == [1]


def test_json_file_store_survives_restart(tmp_path):
    first = JsonFileStore(tmp_path)
    first.set("events", [{"id": "event-1"}])

    second = JsonFileStore(tmp_path)
    assert second.get("events") == [{"id": "event-1"}]
    assert (tmp_path / "clubhive_events.json").exists()


def test_json_file_store_unreadable_file_reads_as_absent(tmp_path):
    (tmp_path / "clubhive_events.json").write_text("[1, 2", encoding="utf-8")

    assert JsonFileStore(tmp_path).get("events") is None


def test_json_file_store_remove_missing_is_noop(tmp_path):
    s = JsonFileStore(tmp_path)
    s.remove("events")
    assert s.get("events") is None


def test_build_store_picks_backend(tmp_path):
    memory = build_store(SimpleNamespace(STORE_BACKEND="memory"))
    assert isinstance(memory, InMemoryStore)

    on_disk = build_store(SimpleNamespace(STORE_BACKEND="json", STORE_PATH=str(tmp_path)))
    assert isinstance(on_disk, JsonFileStore)

    legacy = build_store(SimpleNamespace(STORE_BACKEND="memory", STORE_LEGACY_FIELDS="legacy"))
    assert isinstance(legacy, MappedStore)


def test_build_store_rejects_unknown_settings():
    with pytest.raises(ValueError):
        build_store(SimpleNamespace(STORE_BACKEND="redis"))

    with pytest.raises(ValueError):
        build_store(SimpleNamespace(STORE_BACKEND="memory", STORE_LEGACY_FIELDS="xml"))


def test_json_file_store_read_fault_raises(tmp_path):
    (tmp_path / "clubhive_events.json").mkdir()

    with pytest.raises(StoreError):
        JsonFileStore(tmp_path).get("events")
