"""
Pygame Audio Device - pygame.mixer.music backend.

Sources are read on a background thread (local file or HTTP fetch) and
handed back to the main loop through a queue; poll() applies them and
emits device events. A newer load() supersedes any in-flight one.
"""
import queue
import logging
from io import BytesIO
from pathlib import Path
from typing import Optional
from urllib.parse import urljoin

import pygame
import requests

from .device import AudioDevice, PlaybackError, METADATA_LOADED, TIME_UPDATED, ENDED
from ..utils import run_async, clamp

logger = logging.getLogger(__name__)


class PygameAudioDevice(AudioDevice):
    """Plays tracks through pygame.mixer.music."""

    def __init__(self, media_dir: Path, base_url: str):
        super().__init__()
        self.media_dir = media_dir
        self.base_url = base_url
        self.session = requests.Session()

        self._results: queue.Queue = queue.Queue()
        self._generation = 0
        self._buffer: Optional[BytesIO] = None  # SDL streams from it lazily

        self._ready = False
        self._playing = False
        self._paused = False
        self._offset = 0.0  # Position where the current play() started

        if not pygame.mixer.get_init():
            pygame.mixer.init()
        logger.info(f'Mixer initialized: {pygame.mixer.get_init()}')

    # ============================================
    # SOURCE RESOLUTION
    # ============================================

    def _resolve_local(self, source: str) -> Optional[Path]:
        """Map a source to a file on disk, if there is one."""
        if source.startswith(('http://', 'https://')):
            return None
        candidate = self.media_dir / source.lstrip('/')
        if candidate.is_file():
            return candidate
        direct = Path(source)
        if direct.is_absolute() and direct.is_file():
            return direct
        return None

    def _resolve_url(self, source: str) -> str:
        if source.startswith(('http://', 'https://')):
            return source
        return urljoin(self.base_url.rstrip('/') + '/', source.lstrip('/'))

    def _fetch(self, generation: int, source: str):
        """Read source bytes and measure duration (background thread)."""
        path = self._resolve_local(source)
        try:
            if path is not None:
                data = path.read_bytes()
            else:
                url = self._resolve_url(source)
                logger.info(f'Fetching {url}')
                # No timeout: a hung source just stalls this track
                resp = self.session.get(url)
                resp.raise_for_status()
                data = resp.content
        except (requests.RequestException, OSError) as e:
            logger.warning(f'Could not load {source}: {e}')
            return

        try:
            length = pygame.mixer.Sound(file=BytesIO(data)).get_length()
        except pygame.error as e:
            logger.debug(f'Duration unavailable for {source}: {e}')
            length = 0.0

        self._results.put((generation, source, data, length))

    # ============================================
    # COMMANDS
    # ============================================

    def load(self, source: str):
        self._generation += 1
        pygame.mixer.music.stop()
        self._ready = False
        self._playing = False
        self._paused = False
        self._offset = 0.0
        logger.debug(f'Load requested: {source} (gen {self._generation})')
        run_async(self._fetch, self._generation, source)

    def play(self):
        if not self._ready:
            raise PlaybackError('No source loaded')
        try:
            if self._paused:
                pygame.mixer.music.unpause()
            else:
                pygame.mixer.music.play(start=self._offset)
        except pygame.error as e:
            raise PlaybackError(str(e)) from e
        self._playing = True
        self._paused = False

    def pause(self):
        if self._playing:
            pygame.mixer.music.pause()
            self._paused = True
        self._playing = False

    def seek_to(self, seconds: float):
        self._offset = max(0.0, seconds)
        if not self._ready:
            return
        try:
            if self._playing:
                pygame.mixer.music.play(start=self._offset)
            else:
                # Next play() starts fresh from the new offset
                pygame.mixer.music.stop()
                self._paused = False
        except pygame.error as e:
            logger.warning(f'Seek to {seconds:.1f}s failed: {e}')

    def set_volume(self, fraction: float):
        pygame.mixer.music.set_volume(clamp(fraction, 0.0, 1.0))

    # ============================================
    # EVENTS
    # ============================================

    def _position(self) -> float:
        # get_pos() counts from the last play() call
        return self._offset + max(0, pygame.mixer.music.get_pos()) / 1000.0

    def poll(self):
        while True:
            try:
                generation, source, data, length = self._results.get_nowait()
            except queue.Empty:
                break
            if generation != self._generation:
                logger.debug(f'Dropping superseded load: {source}')
                continue
            self._apply_load(source, data, length)

        if not self._playing:
            return
        if not pygame.mixer.music.get_busy():
            self._playing = False
            self._offset = 0.0
            logger.debug('Playback ended')
            self._emit(ENDED)
            return
        self._emit(TIME_UPDATED, self._position())

    def _apply_load(self, source: str, data: bytes, length: float):
        buffer = BytesIO(data)
        try:
            pygame.mixer.music.load(buffer, Path(source).suffix.lstrip('.'))
        except pygame.error as e:
            logger.warning(f'Cannot decode {source}: {e}')
            return
        self._buffer = buffer
        self._ready = True
        logger.info(f'Loaded {source} ({length:.1f}s)')
        self._emit(METADATA_LOADED, length)

    def close(self):
        pygame.mixer.music.stop()
        pygame.mixer.quit()
        self.session.close()
