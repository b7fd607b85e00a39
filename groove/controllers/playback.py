"""
Playback Controller - Track selection, play intent and device sync.

The controller owns the single PlaybackSession. UI commands and device
events both mutate it here; the device is then brought in line with the
session's intent. Device failures are logged and never retried.
"""
import math
import logging
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..audio.device import AudioDevice, PlaybackError, METADATA_LOADED, TIME_UPDATED, ENDED
from ..models import PlaybackSession, Track
from ..navigation import Direction, step
from ..utils import clamp

logger = logging.getLogger(__name__)


class PlaybackController:
    """Translates user intent and device events into a PlaybackSession."""

    def __init__(self, device: AudioDevice, active_list: Callable[[], Sequence[Track]],
                 volume: float = 1.0):
        """
        Args:
            device: Audio output device to drive
            active_list: Returns the track list next/prev/play act on
            volume: Initial volume (0.0-1.0)
        """
        self.device = device
        self._active_list = active_list
        self._session = PlaybackSession(volume=clamp(volume, 0.0, 1.0))
        self._loaded = False  # Device has finished loading the active source

        device.subscribe(METADATA_LOADED, self.on_metadata_loaded)
        device.subscribe(TIME_UPDATED, self.on_time_update)
        device.subscribe(ENDED, self.on_track_ended)
        device.set_volume(self._session.volume)

    def close(self):
        """Unsubscribe from the device (process teardown)."""
        self.device.unsubscribe(METADATA_LOADED, self.on_metadata_loaded)
        self.device.unsubscribe(TIME_UPDATED, self.on_time_update)
        self.device.unsubscribe(ENDED, self.on_track_ended)

    # ============================================
    # READ ACCESS
    # ============================================

    @property
    def session(self) -> PlaybackSession:
        """Snapshot of the session; mutating it has no effect."""
        return replace(self._session)

    @property
    def active_track(self) -> Optional[Track]:
        return self._session.active_track

    @property
    def is_playing(self) -> bool:
        return self._session.is_playing

    @property
    def elapsed_seconds(self) -> float:
        return self._session.elapsed_seconds

    @property
    def total_seconds(self) -> float:
        return self._session.total_seconds

    @property
    def volume(self) -> float:
        return self._session.volume

    @property
    def progress_percent(self) -> float:
        return self._session.progress_percent

    @property
    def remaining_seconds(self) -> float:
        return self._session.remaining_seconds

    # ============================================
    # COMMANDS
    # ============================================

    def select_track(self, track: Track):
        """Play `track`, or toggle play/pause if it is already active."""
        active = self._session.active_track
        if active is not None and active.id == track.id:
            self._session.is_playing = not self._session.is_playing
            logger.info(f'{"Resume" if self._session.is_playing else "Pause"}: {track.title}')
            self._sync_device()
            return
        self._switch_to(track)

    def toggle_play_pause(self):
        """Flip play intent; with nothing active, start the first track."""
        if self._session.active_track is None:
            tracks = self._active_list()
            if not tracks:
                logger.debug('Play/pause: nothing to play')
                return
            self._switch_to(tracks[0])
            return
        self._session.is_playing = not self._session.is_playing
        logger.info(f'Play/pause: playing={self._session.is_playing}')
        self._sync_device()

    def advance(self, direction: Direction):
        """Move to the next/previous track of the active list, wrapping at both ends."""
        tracks = list(self._active_list())
        active = self._session.active_track
        target = step(tracks, active.id if active else None, direction)
        if target is None:
            logger.debug(f'Advance {direction}: empty list')
            return

        if active is not None and target.id == active.id:
            # Single-track list: start it over
            logger.info(f'Advance {direction}: restarting {target.title}')
            self._session.elapsed_seconds = 0.0
            self._session.is_playing = True
            self._seek_device(0.0)
            self._sync_device()
            return

        logger.info(f'Advance {direction}: {target.title}')
        self._switch_to(target)

    def seek(self, percent: float):
        """Jump to `percent` (0-100) of the track. No-op until duration is known."""
        total = self._session.total_seconds
        if not total or total <= 0:
            return
        new_time = clamp(percent, 0.0, 100.0) / 100 * total
        self._seek_device(new_time)
        self._session.elapsed_seconds = new_time
        logger.debug(f'Seek to {new_time:.1f}s ({percent:.0f}%)')

    def set_volume(self, fraction: float):
        """Set volume (clamped to 0.0-1.0); applied immediately."""
        volume = clamp(fraction, 0.0, 1.0)
        self._session.volume = volume
        self.device.set_volume(volume)
        logger.debug(f'Volume: {volume:.2f}')

    # ============================================
    # DEVICE EVENTS
    # ============================================

    def on_track_ended(self):
        """Auto-advance when the device reaches the end of a track."""
        logger.info('Track ended, advancing')
        self.advance('next')

    def on_metadata_loaded(self, total_seconds: float):
        total = _finite_or_zero(total_seconds)
        self._session.total_seconds = total
        if total > 0:
            self._session.elapsed_seconds = min(self._session.elapsed_seconds, total)
        self._loaded = True
        self._sync_device()

    def on_time_update(self, elapsed_seconds: float):
        elapsed = _finite_or_zero(elapsed_seconds)
        total = self._session.total_seconds
        if total > 0:
            elapsed = min(elapsed, total)
        self._session.elapsed_seconds = elapsed

    # ============================================
    # INTERNALS
    # ============================================

    def _switch_to(self, track: Track):
        """Make `track` active and request its load; play starts once loaded."""
        logger.info(f'Play: {track.title} - {track.artist}')
        self._session.active_track = track
        self._session.elapsed_seconds = 0.0
        self._session.total_seconds = 0.0
        self._session.is_playing = True
        self._loaded = False
        self.device.load(track.source)

    def _sync_device(self):
        """Bring the device in line with play intent."""
        if not self._session.is_playing:
            self.device.pause()
            return
        if not self._loaded:
            return  # on_metadata_loaded will start it
        try:
            self.device.play()
        except PlaybackError as e:
            # Intent stays "playing"; the user can retry
            logger.warning(f'Playback blocked or failed: {e}')

    def _seek_device(self, seconds: float):
        try:
            self.device.seek_to(seconds)
        except PlaybackError as e:
            logger.warning(f'Seek failed: {e}')


def _finite_or_zero(value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value
