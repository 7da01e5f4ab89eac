"""Integration tests for ClipboardWatcher covering the lookup pipeline"""

import json
from unittest.mock import MagicMock, patch

import pytest

from kodic.core.watcher import ClipboardWatcher
from kodic.exceptions import ClipboardError
from kodic.utils.cache_engine import MemoryStore
from kodic.utils.cache_manager import CacheManager, NoCacheManager

HELLO_BODY = json.dumps(
    {
        "searchResultMap": {
            "searchResultListMap": {
                "WORD": {
                    "items": [
                        {
                            "meansCollector": [
                                {
                                    "means": [
                                        {"value": "<strong>안녕</strong>"},
                                        {"value": "(Abbr.)"},
                                        {"value": "여보세요 (→ hi)"},
                                    ]
                                }
                            ]
                        }
                    ]
                }
            }
        }
    },
    ensure_ascii=False,
).encode("utf-8")


@pytest.fixture
def mocks():
    """Mocked collaborators with an in-memory cache"""
    clipboard = MagicMock()
    client = MagicMock()
    notifier = MagicMock()
    cache = CacheManager(MemoryStore())
    clipboard.read.return_value = "hello"
    client.lookup.return_value = HELLO_BODY
    return clipboard, client, cache, notifier


@pytest.fixture
def watcher(mocks):
    clipboard, client, cache, notifier = mocks
    return ClipboardWatcher(
        clipboard=clipboard,
        dictionary_client=client,
        cache=cache,
        notifier=notifier,
        poll_interval=0.01,
    )


class TestRunOnce:
    """Single pipeline pass scenarios"""

    def test_end_to_end_then_debounce(self, watcher, mocks):
        _, client, cache, notifier = mocks

        outcome = watcher.run_once()
        assert outcome is not None
        assert outcome.term == "hello"
        assert outcome.definition == "1. 안녕 2. 여보세요 "
        assert outcome.from_cache is False
        assert outcome.notified is True
        client.lookup.assert_called_once_with("hello")
        notifier.notify.assert_called_once_with("hello", "1. 안녕 2. 여보세요 ")
        assert cache.get("hello") == "1. 안녕 2. 여보세요 "

        # Clipboard unchanged: debounced, nothing else happens
        assert watcher.run_once() is None
        assert client.lookup.call_count == 1
        assert notifier.notify.call_count == 1

    def test_cache_hit_skips_dictionary(self, watcher, mocks):
        clipboard, client, cache, notifier = mocks
        cache.put("hello", "1. cached ")

        outcome = watcher.run_once()
        assert outcome.from_cache is True
        assert outcome.definition == "1. cached "
        client.lookup.assert_not_called()
        notifier.notify.assert_called_once_with("hello", "1. cached ")
        assert watcher.stats["cache_hits"] == 1

    def test_invalid_clipboard_text_is_ignored(self, watcher, mocks):
        clipboard, client, _, notifier = mocks
        clipboard.read.return_value = "two words here"
        assert watcher.run_once() is None
        client.lookup.assert_not_called()
        notifier.notify.assert_not_called()

    def test_clipboard_error_ends_pass(self, watcher, mocks):
        clipboard, client, _, notifier = mocks
        clipboard.read.side_effect = ClipboardError(RuntimeError("no display"))
        assert watcher.run_once() is None
        client.lookup.assert_not_called()
        assert watcher.stats["cycles"] == 1

    def test_transport_failure_produces_nothing(self, watcher, mocks):
        _, client, cache, notifier = mocks
        client.lookup.return_value = None
        assert watcher.run_once() is None
        notifier.notify.assert_not_called()
        assert cache.get("hello") is None
        assert watcher.stats["failures"] == 1

    def test_unparseable_body_produces_nothing(self, watcher, mocks):
        _, client, cache, notifier = mocks
        client.lookup.return_value = b"<html>maintenance</html>"
        assert watcher.run_once() is None
        notifier.notify.assert_not_called()

    def test_definition_that_cleans_to_nothing_is_not_cached(self, watcher, mocks):
        _, client, cache, notifier = mocks
        client.lookup.return_value = json.dumps(
            {
                "searchResultMap": {
                    "searchResultListMap": {
                        "WORD": {
                            "items": [
                                {"meansCollector": [{"means": [{"value": "(Abbr.)"}]}]}
                            ]
                        }
                    }
                }
            }
        ).encode()
        assert watcher.run_once() is None
        notifier.notify.assert_not_called()
        assert cache.history() == []

    def test_failed_lookup_is_retried_after_clipboard_changes(self, watcher, mocks):
        clipboard, client, _, notifier = mocks
        client.lookup.return_value = None
        assert watcher.run_once() is None

        client.lookup.return_value = HELLO_BODY
        clipboard.read.return_value = "world"
        assert watcher.run_once().term == "world"
        clipboard.read.return_value = "hello"
        assert watcher.run_once().term == "hello"
        assert notifier.notify.call_count == 2

    def test_works_without_cache(self, mocks):
        clipboard, client, _, notifier = mocks
        watcher = ClipboardWatcher(
            clipboard, client, NoCacheManager(), notifier, poll_interval=0.01
        )
        assert watcher.run_once().definition == "1. 안녕 2. 여보세요 "


class TestLookup:
    """Direct lookups bypass the clipboard and the debounce"""

    def test_lookup_twice_uses_cache(self, watcher, mocks):
        _, client, _, notifier = mocks
        assert watcher.lookup("hello") == "1. 안녕 2. 여보세요 "
        assert watcher.lookup("hello") == "1. 안녕 2. 여보세요 "
        client.lookup.assert_called_once()
        notifier.notify.assert_not_called()


class TestRunForever:
    """Polling loop behaviour"""

    @patch("kodic.core.watcher.time.sleep")
    def test_sleeps_after_each_pass(self, mock_sleep, watcher, mocks):
        order = []
        clipboard = mocks[0]
        clipboard.read.side_effect = lambda: order.append("read") or "hello"
        mock_sleep.side_effect = lambda s: order.append("sleep")

        watcher.run_forever(max_cycles=3)

        assert order == ["read", "sleep", "read", "sleep", "read", "sleep"]
        mock_sleep.assert_called_with(0.01)
        assert watcher.stats["cycles"] == 3
        assert watcher.stats["notifications"] == 1

    @patch("kodic.core.watcher.time.sleep")
    def test_interrupt_propagates(self, mock_sleep, watcher, mocks):
        mocks[0].read.side_effect = KeyboardInterrupt
        with pytest.raises(KeyboardInterrupt):
            watcher.run_forever()

    def test_close_releases_cache(self, mocks):
        clipboard, client, _, notifier = mocks
        cache = MagicMock()
        ClipboardWatcher(clipboard, client, cache, notifier).close()
        cache.close.assert_called_once()
