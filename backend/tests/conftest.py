"""Shared fixtures: every test gets its own data dir."""

import pytest
from fastapi.testclient import TestClient

import store


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    """Point the default store at a temp dir and rebuild it around the test."""
    path = tmp_path / "data"
    monkeypatch.setenv("TODO_DATA_DIR", str(path))
    monkeypatch.setenv("TODO_DATA_FILE", "todos.json")
    store.reset_record_store()
    yield path
    store.reset_record_store()


@pytest.fixture()
def client(data_dir):
    from main import create_app

    with TestClient(create_app()) as c:
        yield c
