import logging
import threading

import pytest

from confstore.adapters.memory_store import InMemoryBackingStore
from confstore.core.settings import StoreSettings
from confstore.types.duration import Duration, TimeUnit


@pytest.fixture
def backing() -> InMemoryBackingStore:
    return InMemoryBackingStore(
        {
            "storage.backend": "cassandra",
            "storage.hosts": "h1,h2",
            "storage.batch": True,
            "ids.block-size": 10000,
            "skipped": None,
        }
    )


def test_initial_entries_skip_none(backing):
    assert len(backing) == 4
    assert not backing.contains_key("skipped")


def test_get_property_returns_native_value(backing):
    assert backing.get_property("ids.block-size") == 10000
    with pytest.raises(KeyError):
        backing.get_property("missing")


def test_get_string_forms(backing):
    backing.set_property("list", ["a", "b"])
    backing.set_property("timeout", Duration(5, TimeUnit.SECONDS))
    assert backing.get_string("storage.batch") == "true"
    assert backing.get_string("ids.block-size") == "10000"
    assert backing.get_string("list") == "a,b"
    assert backing.get_string("timeout") == "5 s"


def test_get_string_array(backing):
    backing.set_property("empty", "")
    backing.set_property("single", 42)
    assert backing.get_string_array("storage.hosts") == ["h1", "h2"]
    assert backing.get_string_array("empty") == []
    assert backing.get_string_array("single") == ["42"]


def test_custom_delimiter_without_trimming():
    settings = StoreSettings(list_delimiter=";", trim_list_elements=False)
    backing = InMemoryBackingStore({"hosts": "a; b;c"}, settings=settings)
    assert backing.get_string_array("hosts") == ["a", " b", "c"]


def test_get_boolean(backing):
    backing.set_property("on", " ON ")
    backing.set_property("zero", "0")
    backing.set_property("number", 1)
    assert backing.get_boolean("storage.batch") is True
    assert backing.get_boolean("on") is True
    assert backing.get_boolean("zero") is False
    with pytest.raises(ValueError):
        backing.get_boolean("number")


def test_get_keys_prefix(backing):
    assert set(backing.get_keys()) == {
        "storage.backend",
        "storage.hosts",
        "storage.batch",
        "ids.block-size",
    }
    assert set(backing.get_keys("storage")) == {
        "storage.backend",
        "storage.hosts",
        "storage.batch",
    }
    # scoping is per segment, not per character
    assert list(backing.get_keys("stor")) == []


def test_clear_property_absent_is_noop(backing):
    backing.clear_property("missing")
    backing.clear_property("storage.backend")
    assert not backing.contains_key("storage.backend")


def test_set_property_detaches_lists():
    hosts = ["a"]
    backing = InMemoryBackingStore()
    backing.set_property("hosts", hosts)
    hosts.append("b")
    assert backing.get_string_array("hosts") == ["a"]


def test_copy_is_independent(backing):
    duplicate = backing.copy()
    assert isinstance(duplicate, InMemoryBackingStore)
    assert duplicate.settings is backing.settings
    duplicate.set_property("storage.backend", "hbase")
    backing.clear_property("ids.block-size")
    assert backing.get_property("storage.backend") == "cassandra"
    assert duplicate.get_property("ids.block-size") == 10000


def test_copy_logs_event(backing, caplog):
    with caplog.at_level(logging.DEBUG, logger="confstore.adapters.memory_store"):
        backing.copy()
    events = [getattr(record, "event", None) for record in caplog.records]
    assert "backing_store_copied" in events


def test_concurrent_writes_and_copies():
    backing = InMemoryBackingStore()

    def writer(offset: int) -> None:
        for i in range(200):
            backing.set_property(f"k.{offset}.{i}", str(i))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    snapshots = [backing.copy() for _ in range(20)]
    for thread in threads:
        thread.join()

    assert len(backing) == 800
    for snapshot in snapshots:
        assert len(list(snapshot.get_keys())) == len(snapshot)


class TaggedStore(InMemoryBackingStore):
    def __init__(self, tag: str, entries=None) -> None:
        super().__init__(entries)
        self.tag = tag


def test_copy_keeps_concrete_class():
    original = TaggedStore("primary", {"a": ["x"]})
    duplicate = original.copy()
    assert type(duplicate) is TaggedStore
    assert duplicate.tag == "primary"
    assert duplicate._lock is not original._lock
    original.get_property("a").append("y")
    original.set_property("b", "2")
    assert duplicate.get_property("a") == ["x"]
    assert not duplicate.contains_key("b")
