"""Tests for definition stores and cache facades."""

import logging
import sqlite3
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from kodic.exceptions import CacheError
from kodic.models.cache_models import CacheEntry
from kodic.utils.cache_engine import DefinitionStore, MemoryStore, SqliteStore
from kodic.utils.cache_manager import CacheManager, NoCacheManager


class TestSqliteStore:
    """Test class for the on-disk store."""

    def test_insert_get_roundtrip(self, tmp_path):
        store = SqliteStore(tmp_path / "kodic.db")
        store.insert(CacheEntry(term="hello", definition="1. 안녕 "))
        entry = store.get("hello")
        assert entry is not None
        assert entry.definition == "1. 안녕 "
        assert entry.reviewed is False
        assert isinstance(entry.created_at, datetime)
        store.close()

    def test_missing_term_returns_none(self, tmp_path):
        store = SqliteStore(tmp_path / "kodic.db")
        assert store.get("absent") is None
        store.close()

    def test_duplicate_term_raises_cache_error(self, tmp_path):
        store = SqliteStore(tmp_path / "kodic.db")
        store.insert(CacheEntry(term="hello", definition="first"))
        with pytest.raises(CacheError):
            store.insert(CacheEntry(term="hello", definition="second"))
        assert store.get("hello").definition == "first"
        store.close()

    def test_persists_across_reopen(self, tmp_path):
        path = tmp_path / "kodic.db"
        store = SqliteStore(path)
        store.insert(CacheEntry(term="tree", definition="1. 나무 "))
        store.close()

        reopened = SqliteStore(path)
        assert reopened.get("tree").definition == "1. 나무 "
        reopened.close()

    def test_entries_newest_first_with_limit(self, tmp_path):
        store = SqliteStore(tmp_path / "kodic.db")
        base = datetime(2024, 1, 1, 12, 0)
        for i, term in enumerate(["one", "two", "three"]):
            store.insert(
                CacheEntry(
                    term=term, definition=term, created_at=base + timedelta(minutes=i)
                )
            )
        assert [e.term for e in store.entries()] == ["three", "two", "one"]
        assert [e.term for e in store.entries(2)] == ["three", "two"]
        store.close()

    def test_unique_constraint_in_schema(self, tmp_path):
        path = tmp_path / "kodic.db"
        SqliteStore(path).close()
        conn = sqlite3.connect(path)
        conn.execute(
            "INSERT INTO entries (term, definition, created_at) VALUES ('a', 'x', 'now')"
        )
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO entries (term, definition, created_at) "
                "VALUES ('a', 'y', 'now')"
            )
        conn.close()

    def test_open_failure_raises_cache_error(self, tmp_path):
        with pytest.raises(CacheError):
            SqliteStore(tmp_path / "missing-dir" / "kodic.db")


class TestMemoryStore:
    """Test class for the in-memory store."""

    def test_satisfies_protocol(self):
        assert isinstance(MemoryStore(), DefinitionStore)

    def test_duplicate_insert_raises(self):
        store = MemoryStore()
        store.insert(CacheEntry(term="hello", definition="a"))
        with pytest.raises(CacheError):
            store.insert(CacheEntry(term="hello", definition="b"))


class TestCacheManager:
    """Test class for CacheManager fail-open behaviour."""

    def test_get_put_roundtrip(self, tmp_path):
        cache = CacheManager(SqliteStore(tmp_path / "kodic.db"))
        assert cache.get("hello") is None
        cache.put("hello", "1. 안녕 ")
        assert cache.get("hello") == "1. 안녕 "
        stats = cache.get_stats()
        assert stats.total_entries == 1
        assert stats.hits == 1
        assert stats.misses == 1
        assert stats.hit_rate == 50.0
        cache.close()

    def test_duplicate_put_is_logged_not_raised(self, caplog):
        cache = CacheManager(MemoryStore())
        cache.put("hello", "first")
        with caplog.at_level(logging.WARNING, logger="kodic"):
            cache.put("hello", "second")
        assert cache.get("hello") == "first"
        assert any("cache_put" in r.getMessage() for r in caplog.records)

    def test_storage_error_on_get_is_a_miss(self, caplog):
        store = MagicMock()
        store.get.side_effect = CacheError("get", "sqlite", RuntimeError("disk"))
        cache = CacheManager(store)
        with caplog.at_level(logging.WARNING, logger="kodic"):
            assert cache.get("hello") is None
        assert any("cache_get" in r.getMessage() for r in caplog.records)

    def test_storage_error_on_put_is_swallowed(self):
        store = MagicMock()
        store.insert.side_effect = CacheError("insert", "sqlite")
        CacheManager(store).put("hello", "x")
        store.insert.assert_called_once()

    def test_history_reports_entries(self):
        cache = CacheManager(MemoryStore())
        cache.put("one", "1")
        cache.put("two", "2")
        assert {e.term for e in cache.history()} == {"one", "two"}
        assert len(cache.history(1)) == 1

    def test_storage_error_on_history_returns_fresh_list(self):
        store = MagicMock()
        store.entries.side_effect = CacheError("entries", "sqlite")
        cache = CacheManager(store)

        first = cache.history()
        first.append(CacheEntry(term="stray", definition="x"))
        second = cache.history()

        assert second == []
        assert first is not second
        assert cache.get_stats().total_entries == 0

    def test_close_closes_store(self):
        store = MagicMock()
        CacheManager(store).close()
        store.close.assert_called_once()


class TestNoCacheManager:
    """Test class for the disabled cache."""

    def test_remembers_nothing(self):
        cache = NoCacheManager()
        cache.put("hello", "x")
        assert cache.get("hello") is None
        assert cache.history() == []
        assert cache.get_stats().total_entries == 0
        cache.close()
