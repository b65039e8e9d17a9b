import importlib
import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "*")
    monkeypatch.setenv("LOG_LEVEL", "INFO")

    # reload so every test starts from an empty store
    import notes_api.api.notes
    import notes_api.main
    importlib.reload(notes_api.api.notes)
    importlib.reload(notes_api.main)

    return TestClient(notes_api.main.app)


@pytest.fixture()
def store():
    from notes_api.storage.notes_store import NotesStore
    return NotesStore()
