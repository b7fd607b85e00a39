"""
Groove Data Models - Core data structures.
"""
import math
from dataclasses import dataclass
from typing import Optional, Union

from .utils import format_time

TrackId = Union[int, str]


@dataclass(frozen=True)
class Track:
    """A playable item from the library or an online search."""
    id: TrackId
    title: str
    artist: str
    duration_label: str = ''
    source: str = ''
    cover_image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'Track':
        """Build a Track from the catalog wire format ({id, title, artist, duration, src})."""
        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            artist=data.get('artist', ''),
            duration_label=data.get('duration', ''),
            source=data.get('src', ''),
            cover_image=data.get('cover'),
        )


@dataclass
class PlaybackSession:
    """
    Live playback state owned by the PlaybackController.

    `is_playing` is the user's intent; the device may still be loading
    or may have refused to start (autoplay, decode errors).
    """
    active_track: Optional[Track] = None
    is_playing: bool = False
    elapsed_seconds: float = 0.0
    total_seconds: float = 0.0
    volume: float = 1.0

    @property
    def progress_percent(self) -> float:
        """Playback progress as 0-100, clamped."""
        if not self.total_seconds or self.total_seconds <= 0:
            return 0.0
        if math.isnan(self.elapsed_seconds):
            return 0.0
        percent = self.elapsed_seconds / self.total_seconds * 100
        return max(0.0, min(100.0, percent))

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.total_seconds - self.elapsed_seconds)

    @property
    def elapsed_label(self) -> str:
        return format_time(self.elapsed_seconds)

    @property
    def total_label(self) -> str:
        return format_time(self.total_seconds)

    @property
    def remaining_label(self) -> str:
        return format_time(self.remaining_seconds)
