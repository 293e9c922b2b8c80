"""Tests for the validation result cache."""

from datetime import datetime, timedelta, UTC

import pytest

from modelcheck.exceptions import CacheRetrievalError
from modelcheck.models import BaseResource
from modelcheck.validation.cache import CacheEntry, ValidationCache, cache_key


class Page(BaseResource):
    pass


@pytest.fixture
def page():
    return Page(name="page", path="/content/page")


class TestValidationCache:
    """Test ValidationCache reads and writes."""

    def test_cache_and_retrieve(self, cache, page):
        cache.cache_validation_results(page, ["e1"], [])

        assert cache.get_cached_error_messages(page, Page) == ["e1"]
        assert cache.get_cached_warning_messages(page, Page) == []

    def test_model_type_defaults_to_runtime_type(self, cache, page):
        cache.cache_validation_results(page, [], ["w1"])
        assert cache.get_cached_warning_messages(page) == ["w1"]

    def test_miss_raises(self, cache, page):
        with pytest.raises(CacheRetrievalError) as exc_info:
            cache.get_cached_error_messages(page, Page)
        assert exc_info.value.key == cache_key(page)

        with pytest.raises(CacheRetrievalError):
            cache.get_cached_warning_messages(page, Page)

    def test_key_includes_model_type(self, cache, page):
        cache.cache_validation_results(page, ["e1"], [])

        with pytest.raises(CacheRetrievalError):
            cache.get_cached_error_messages(page, BaseResource)

    def test_clean_entry_differs_from_miss(self, cache, page):
        cache.cache_validation_results(page, [], [])
        assert cache.get_cached_error_messages(page) == []

    def test_upsert_overwrites(self, cache, page):
        cache.cache_validation_results(page, ["e1"], ["w1"])
        cache.cache_validation_results(page, ["e2"], [])

        assert cache.get_cached_error_messages(page) == ["e2"]
        assert cache.get_cached_warning_messages(page) == []

    def test_returned_lists_are_copies(self, cache, page):
        errors = ["e1"]
        cache.cache_validation_results(page, errors, [])
        errors.append("e2")
        cache.get_cached_error_messages(page).append("e3")

        assert cache.get_cached_error_messages(page) == ["e1"]

    def test_invalidate(self, cache, page):
        other = Page(name="other", path="/content/other")
        cache.cache_validation_results(page, ["e1"], [])
        cache.cache_validation_results(other, ["e2"], [])

        cache.invalidate(page)

        with pytest.raises(CacheRetrievalError):
            cache.get_cached_error_messages(page)
        assert cache.get_cached_error_messages(other) == ["e2"]

    def test_clear(self, cache, page):
        cache.cache_validation_results(page, ["e1"], [])
        cache.clear()

        with pytest.raises(CacheRetrievalError):
            cache.get_cached_error_messages(page)
        assert cache.stats() == {"total_entries": 0, "generation": 1}

    def test_stale_generation_write_is_dropped(self, cache, page):
        generation = cache.generation
        cache.clear()

        assert cache.cache_validation_results(page, ["stale"], [], generation=generation) is False
        with pytest.raises(CacheRetrievalError):
            cache.get_cached_error_messages(page)

    def test_current_generation_write_is_kept(self, cache, page):
        cache.clear()
        generation = cache.generation

        assert cache.cache_validation_results(page, ["fresh"], [], generation=generation) is True
        assert cache.get_cached_error_messages(page) == ["fresh"]

    def test_cached_validation_map(self, cache, page):
        cache.cache_validation_results(page, ["e1"], ["w1"])

        entries = cache.cached_validation_map
        entry = entries[cache_key(page)]
        assert entry.error_messages == ("e1",)
        assert entry.warning_messages == ("w1",)
        assert entry.generation == 0


class TestCacheExpiry:
    """Test max-age handling."""

    def test_entry_expiry(self):
        entry = CacheEntry((), (), datetime.now(UTC) - timedelta(seconds=10), 0)

        assert entry.is_expired(5) is True
        assert entry.is_expired(60) is False
        assert entry.is_expired(None) is False

    def test_expired_entry_reads_as_miss(self, page):
        cache = ValidationCache(max_age_seconds=5)
        cache.cache_validation_results(page, ["e1"], [])
        key = cache_key(page)
        cache._entries[key] = CacheEntry(("e1",), (), datetime.now(UTC) - timedelta(seconds=10), 0)

        with pytest.raises(CacheRetrievalError):
            cache.get_cached_error_messages(page)
        assert cache.stats()["total_entries"] == 0
