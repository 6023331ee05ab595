"""Unit tests for credential stores."""

import json

from feed.client.credential import FileCredentialStore, InMemoryCredentialStore


def test_in_memory_store():
    store = InMemoryCredentialStore()

    assert store.get() is None
    store.set("token")
    assert store.get() == "token"
    store.remove()
    assert store.get() is None


def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "credential.json"

    FileCredentialStore(path).set("Bearer abc")

    assert FileCredentialStore(path).get() == "Bearer abc"
    assert json.loads(path.read_text()) == {"jwtToken": "Bearer abc"}


def test_file_store_remove_keeps_other_keys(tmp_path):
    path = tmp_path / "credential.json"
    path.write_text(json.dumps({"jwtToken": "abc", "theme": "dark"}))
    store = FileCredentialStore(path)

    store.remove()

    assert store.get() is None
    assert json.loads(path.read_text()) == {"theme": "dark"}


def test_file_store_missing_file_and_remove_are_noops(tmp_path):
    path = tmp_path / "credential.json"
    store = FileCredentialStore(path)

    assert store.get() is None
    store.remove()
    assert not path.exists()


def test_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "credential.json"
    path.write_text("{not json")
    store = FileCredentialStore(path, key="token")

    assert store.get() is None
    store.set("abc")
    assert store.get() == "abc"
