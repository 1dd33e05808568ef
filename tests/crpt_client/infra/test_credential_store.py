from __future__ import annotations

import threading

from crpt_client.infra.credential_store import InMemoryCredentialStore


def test_starts_empty_by_default():
    assert InMemoryCredentialStore().get() is None


def test_initial_token():
    assert InMemoryCredentialStore("abc").get() == "abc"


def test_set_overwrites_previous_value():
    store = InMemoryCredentialStore("old")
    store.set("new")
    assert store.get() == "new"


def test_set_does_not_validate_contents():
    store = InMemoryCredentialStore()
    store.set("   ")
    assert store.get() == "   "


def test_concurrent_writers_leave_one_of_the_written_values():
    store = InMemoryCredentialStore()
    tokens = [f"token-{i}" for i in range(20)]
    threads = [threading.Thread(target=store.set, args=(t,)) for t in tokens]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert store.get() in tokens
