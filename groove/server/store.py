"""
Song Store - Volatile in-memory song list for the backend.
"""
import copy
import logging
import threading
from typing import List, Optional

logger = logging.getLogger(__name__)


class SongStore:
    """In-memory song list with sequential ids. Lost on restart."""

    def __init__(self, songs: Optional[List[dict]] = None):
        self._lock = threading.Lock()
        self._songs: List[dict] = copy.deepcopy(songs or [])
        self._next_id = max((song['id'] for song in self._songs), default=0) + 1

    def all(self) -> List[dict]:
        with self._lock:
            return [dict(song) for song in self._songs]

    def add(self, title: str, artist: str, duration: str, src: str) -> dict:
        with self._lock:
            song = {'id': self._next_id, 'title': title, 'artist': artist,
                    'duration': duration, 'src': src}
            self._next_id += 1
            self._songs.append(song)
        logger.info(f'Song added: {song["id"]} {title}')
        return dict(song)

    def remove(self, song_id: int) -> Optional[dict]:
        """Remove and return a song, or None if there is no such id."""
        with self._lock:
            for index, song in enumerate(self._songs):
                if song['id'] == song_id:
                    del self._songs[index]
                    logger.info(f'Song deleted: {song_id}')
                    return song
        return None
