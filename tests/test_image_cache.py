"""
Tests for ImageCache - LRU eviction of cover surfaces.
"""
import pytest

from groove.config import IMAGE_CACHE_MAX_SIZE
from groove.ui.image_cache import ImageCache


@pytest.fixture
def cache():
    cache = ImageCache()
    cache.cache['_placeholder_64'] = object()
    for i in range(IMAGE_CACHE_MAX_SIZE + 5):
        key = f'https://img.test/{i}.jpg_64'
        cache.cache[key] = object()
        cache._access_times[key] = float(i)
    return cache


class TestEviction:
    """Tests for trimming the cache."""

    def test_evicts_oldest_and_keeps_placeholder(self, cache):
        cache._evict_if_needed()
        assert 'https://img.test/0.jpg_64' not in cache.cache
        assert 'https://img.test/9.jpg_64' not in cache.cache
        assert 'https://img.test/10.jpg_64' in cache.cache
        assert '_placeholder_64' in cache.cache

    def test_tolerates_cache_changing_during_eviction(self, cache):
        class RacingTimes(dict):
            def get(self, key, default=None):
                # A worker thread stores a fresh cover and another entry vanishes
                cache.cache['https://img.test/late.jpg_64'] = object()
                cache.cache.pop('https://img.test/0.jpg_64', None)
                return super().get(key, default)

        cache._access_times = RacingTimes(cache._access_times)
        cache._evict_if_needed()

        assert 'https://img.test/late.jpg_64' in cache.cache
        assert 'https://img.test/0.jpg_64' not in cache.cache
