"""
Image Cache - Downloads and caches cover art for search results.
"""
import time
import logging
import threading
from typing import Dict, Optional
from io import BytesIO

import pygame
import requests
from PIL import Image

from .helpers import apply_rounded_corners_pil
from ..config import COLORS, COVER_SIZE, IMAGE_CACHE_MAX_SIZE

logger = logging.getLogger(__name__)


class ImageCache:
    """Downloads cover images in the background and caches surfaces."""

    def __init__(self):
        self.cache: Dict[str, pygame.Surface] = {}
        self._access_times: Dict[str, float] = {}  # For LRU eviction
        self.loading: set = set()
        self._loading_lock = threading.Lock()

    def get_placeholder(self, size: int) -> pygame.Surface:
        """Get a placeholder surface for missing images."""
        cache_key = f'_placeholder_{size}'
        if cache_key not in self.cache:
            placeholder = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.rect(placeholder, COLORS['bg_elevated'], (0, 0, size, size),
                             border_radius=max(6, size // 12))
            self.cache[cache_key] = placeholder
        return self.cache[cache_key]

    def get(self, url: Optional[str], size: int = COVER_SIZE) -> pygame.Surface:
        """Get a cover surface; starts a download and returns a placeholder on miss."""
        if not url:
            return self.get_placeholder(size)

        cache_key = f'{url}_{size}'
        if cache_key in self.cache:
            self._access_times[cache_key] = time.time()
            return self.cache[cache_key]

        self._evict_if_needed()

        if url.startswith('http'):
            with self._loading_lock:
                if url not in self.loading:
                    self.loading.add(url)
                    thread = threading.Thread(
                        target=self._download,
                        args=(url, size, cache_key),
                        daemon=True
                    )
                    thread.start()

        return self.get_placeholder(size)

    def _evict_if_needed(self):
        """Evict least recently used entries if the cache is too large."""
        if len(self.cache) <= IMAGE_CACHE_MAX_SIZE:
            return
        # Snapshot: download threads insert while we sort
        evictable = sorted(
            (key for key in list(self.cache) if not key.startswith('_')),
            key=lambda key: self._access_times.get(key, 0),
        )
        for key in evictable[:10]:
            self.cache.pop(key, None)
            self._access_times.pop(key, None)
        logger.debug(f'Evicted {min(10, len(evictable))} cached covers')

    def _download(self, url: str, size: int, cache_key: str):
        """Download image from URL in background."""
        try:
            resp = requests.get(url, timeout=10)
            resp.raise_for_status()
            img = Image.open(BytesIO(resp.content)).convert('RGBA')
            img = img.resize((size, size), Image.Resampling.LANCZOS)
            img = apply_rounded_corners_pil(img, max(6, size // 12))
            surface = pygame.image.fromstring(img.tobytes(), img.size, 'RGBA')
            self.cache[cache_key] = surface
            self._access_times[cache_key] = time.time()
        except (requests.RequestException, OSError) as e:
            logger.warning(f'Error downloading cover {url}: {e}')
        finally:
            with self._loading_lock:
                self.loading.discard(url)
