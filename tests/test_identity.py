"""Tests for the session identity provider."""

import re

from gallery_sync.adapters.json_file_store import JsonFileStore
from gallery_sync.services.identity import SESSION_KEY, IdentityProvider
from tests.fakes import InMemoryKeyValueStore


def test_session_is_created_once_and_reused() -> None:
    store = InMemoryKeyValueStore()
    provider = IdentityProvider(store)

    first = provider.get_or_create_session()
    second = provider.get_or_create_session()

    assert first == second
    assert store.writes == 1
    assert store.values[SESSION_KEY] == first
    assert re.fullmatch(r"session_\d+_[0-9a-z]+", first)


def test_existing_session_is_returned_untouched() -> None:
    store = InMemoryKeyValueStore(values={SESSION_KEY: "session_1_abc"})

    assert IdentityProvider(store).get_or_create_session() == "session_1_abc"
    assert store.writes == 0


def test_session_survives_new_provider_with_file_store(tmp_path) -> None:
    path = tmp_path / "profile" / "session.json"

    first = IdentityProvider(JsonFileStore(path)).get_or_create_session()
    second = IdentityProvider(JsonFileStore(path)).get_or_create_session()

    assert path.exists()
    assert first == second


def test_file_store_keeps_other_keys(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "store.json")
    store.set("theme", "dark")
    store.set(SESSION_KEY, "session_2_xyz")

    assert store.get("theme") == "dark"
    assert store.get(SESSION_KEY) == "session_2_xyz"
    assert store.get("missing") is None
