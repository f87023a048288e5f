"""RecordStore against a temporary directory."""

import json

import pytest

from repositories import RecordStore, StoreParseError, StoreProtocol


@pytest.fixture()
def rs(tmp_path):
    return RecordStore(tmp_path / "data", "todos.json")


def test_load_missing_file_returns_empty(rs):
    assert not rs.path.exists()
    assert rs.load() == []


def test_save_then_load_round_trip(rs):
    todos = [
        {"id": "a", "text": "buy milk", "completed": False},
        {"id": "b", "text": "café ☕", "completed": True, "category": "home"},
    ]
    rs.save(todos)
    assert rs.load() == todos


def test_save_creates_missing_directories(tmp_path):
    rs = RecordStore(tmp_path / "nested" / "deeper", "todos.json")
    rs.save([{"id": "1", "text": "x", "completed": False}])
    assert rs.path.is_file()
    assert rs.load() == [{"id": "1", "text": "x", "completed": False}]


def test_save_writes_indented_json_in_key_order(rs):
    rs.save([{"text": "t", "id": "1", "completed": False}])
    raw = rs.path.read_text(encoding="utf-8")
    assert raw == '[\n  {\n    "text": "t",\n    "id": "1",\n    "completed": false\n  }\n]'


def test_save_replaces_previous_contents(rs):
    rs.save([{"id": "1", "text": "one", "completed": False}])
    rs.save([])
    assert rs.load() == []
    assert not rs.path.with_suffix(".json.tmp").exists()


def test_load_malformed_json_raises_parse_error(rs):
    rs.data_dir.mkdir(parents=True)
    rs.path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(StoreParseError) as info:
        rs.load()
    assert info.value.path == rs.path


def test_load_non_array_raises_parse_error(rs):
    rs.data_dir.mkdir(parents=True)
    rs.path.write_text(json.dumps({"todos": []}), encoding="utf-8")
    with pytest.raises(StoreParseError, match="expected a JSON array"):
        rs.load()


def test_load_unreadable_path_returns_empty(rs):
    # a directory where the file should be cannot be opened for reading
    rs.path.mkdir(parents=True)
    assert rs.load() == []


def test_save_propagates_write_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a dir", encoding="utf-8")
    rs = RecordStore(blocker / "data", "todos.json")
    with pytest.raises(OSError):
        rs.save([])


def test_record_store_satisfies_protocol(rs):
    assert isinstance(rs, StoreProtocol)


def test_load_invalid_utf8_raises_parse_error(rs):
    rs.data_dir.mkdir(parents=True)
    rs.path.write_bytes(b'[{"id": "1", "text": "caf\xe9", "completed": false}]')
    with pytest.raises(StoreParseError, match="not valid UTF-8"):
        rs.load()


def test_failed_save_leaves_no_temp_file(rs):
    rs.save([{"id": "1", "text": "keep", "completed": False}])
    with pytest.raises(TypeError):
        rs.save([{"id": "2", "text": object(), "completed": False}])
    assert not rs.path.with_suffix(".json.tmp").exists()
    assert rs.load() == [{"id": "1", "text": "keep", "completed": False}]


def test_save_accepts_any_iterable(rs):
    rs.save(t for t in [{"id": "1", "text": "gen", "completed": True}])
    assert rs.load() == [{"id": "1", "text": "gen", "completed": True}]
