from __future__ import annotations

import importlib

import pytest

import core.config
from storage.task_store import TaskStoreClient


@pytest.fixture()
def reload_config(monkeypatch):
    def _reload():
        return importlib.reload(core.config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(core.config)


def test_base_url_defaults_to_local_store(reload_config, monkeypatch) -> None:
    monkeypatch.delenv("TASKS_API_URL", raising=False)

    config = reload_config()

    assert config.BASE_URL == "http://localhost:5000"
    assert TaskStoreClient(config.BASE_URL)._url() == "http://localhost:5000/api/items"


def test_base_url_comes_from_environment(reload_config, monkeypatch) -> None:
    monkeypatch.setenv("TASKS_API_URL", "https://tasks.example.org/")

    config = reload_config()

    assert config.BASE_URL == "https://tasks.example.org/"
    client = TaskStoreClient(config.BASE_URL)
    assert client._url() == "https://tasks.example.org/api/items"
    assert client._url("t1") == "https://tasks.example.org/api/items/t1"


def test_blank_override_falls_back_to_default(reload_config, monkeypatch) -> None:
    monkeypatch.setenv("TASKS_API_URL", "")

    assert reload_config().BASE_URL == "http://localhost:5000"
