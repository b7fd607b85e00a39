"""
Audio Device - Output device contract and a silent implementation.

Devices expose a fixed set of notification channels. Listeners are
called from `poll()`, which the app runs on its main loop, so handlers
never interleave.
"""
import time
import logging
from typing import Callable, Dict, List, Optional

from ..utils import clamp

logger = logging.getLogger(__name__)

METADATA_LOADED = 'metadata_loaded'
TIME_UPDATED = 'time_updated'
ENDED = 'ended'

CHANNELS = (METADATA_LOADED, TIME_UPDATED, ENDED)


class PlaybackError(Exception):
    """Raised by play() when the device refuses or fails to start."""


class AudioDevice:
    """Base class for audio output devices."""

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {channel: [] for channel in CHANNELS}

    def subscribe(self, channel: str, callback: Callable):
        if channel not in self._listeners:
            raise ValueError(f'Unknown device channel: {channel}')
        self._listeners[channel].append(callback)

    def unsubscribe(self, channel: str, callback: Callable):
        if callback in self._listeners.get(channel, []):
            self._listeners[channel].remove(callback)

    def _emit(self, channel: str, *args):
        for callback in list(self._listeners[channel]):
            callback(*args)

    def load(self, source: str):
        raise NotImplementedError

    def play(self):
        raise NotImplementedError

    def pause(self):
        raise NotImplementedError

    def seek_to(self, seconds: float):
        raise NotImplementedError

    def set_volume(self, fraction: float):
        raise NotImplementedError

    def poll(self):
        """Dispatch pending device events. Call once per frame."""

    def close(self):
        """Release the device."""


class NullAudioDevice(AudioDevice):
    """
    Silent device for mock mode and tests.

    Records every command in `commands`. Tests drive events explicitly
    with complete_load(), tick() and finish(); in mock mode poll() does
    the same against the wall clock.
    """

    def __init__(self, mock_duration: float = 30.0, fail_play: bool = False):
        super().__init__()
        self.mock_duration = mock_duration
        self.fail_play = fail_play
        self.commands: List[tuple] = []

        self.source: Optional[str] = None
        self.loading = False
        self.playing = False
        self.position = 0.0
        self.duration = 0.0
        self.volume = 1.0
        self._last_poll: Optional[float] = None

    def load(self, source: str):
        self.commands.append(('load', source))
        self.source = source
        self.loading = True
        self.playing = False
        self.position = 0.0
        self.duration = 0.0

    def play(self):
        self.commands.append(('play',))
        if self.fail_play:
            raise PlaybackError('play() rejected by device')
        if self.loading or self.source is None:
            raise PlaybackError('No source loaded')
        self.playing = True

    def pause(self):
        self.commands.append(('pause',))
        self.playing = False

    def seek_to(self, seconds: float):
        self.commands.append(('seek', seconds))
        self.position = seconds

    def set_volume(self, fraction: float):
        self.commands.append(('volume', fraction))
        self.volume = clamp(fraction, 0.0, 1.0)

    # Event simulation

    def complete_load(self, total_seconds: Optional[float] = None):
        """Finish the pending load and report its duration."""
        self.loading = False
        self.duration = self.mock_duration if total_seconds is None else total_seconds
        self._emit(METADATA_LOADED, self.duration)

    def tick(self, seconds: float):
        """Advance the playhead while playing; emits ended at the end."""
        if not self.playing:
            return
        self.position = min(self.duration, self.position + seconds)
        self._emit(TIME_UPDATED, self.position)
        if self.duration > 0 and self.position >= self.duration:
            self.finish()

    def finish(self):
        self.playing = False
        self._emit(ENDED)

    def poll(self):
        now = time.monotonic()
        dt = 0.0 if self._last_poll is None else now - self._last_poll
        self._last_poll = now
        if self.loading:
            logger.debug(f'Mock load complete: {self.source}')
            self.complete_load()
        self.tick(dt)
