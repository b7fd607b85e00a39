"""
Track Library - The lists the player navigates.

Handles:
- Home list (seed songs, replaced by the catalog on refresh)
- Local filtering by search text
- Online search results
- Add/remove through the catalog, with user-facing notices
"""
import logging
from typing import List, Optional, Sequence

from ..api import CatalogClient, CatalogError, NotFoundError, ValidationError, SearchClient, SearchError
from ..api.catalog import validate_song
from ..models import Track, TrackId

logger = logging.getLogger(__name__)


class TrackLibrary:
    """Owns the home list, search results and the user-facing notice."""

    def __init__(self, catalog: Optional[CatalogClient], search: Optional[SearchClient],
                 default_tracks: Sequence[Track] = ()):
        """
        Args:
            catalog: Catalog client (None = offline, local list only)
            search: Search client (None = online search disabled)
            default_tracks: List shown until the catalog answers
        """
        self.catalog = catalog
        self.search = search
        self._tracks: List[Track] = list(default_tracks)
        self.search_results: List[Track] = []
        self.notice: Optional[str] = None

    @property
    def tracks(self) -> List[Track]:
        return list(self._tracks)

    # ============================================
    # CATALOG
    # ============================================

    def refresh(self) -> bool:
        """Reload from the catalog. On failure the last known list stays, silently."""
        if self.catalog is None:
            return False
        try:
            self._tracks = self.catalog.list_tracks()
        except CatalogError as e:
            logger.warning(f'Catalog refresh failed, keeping {len(self._tracks)} local songs: {e}')
            return False
        logger.info(f'Library refreshed: {len(self._tracks)} songs')
        return True

    def add(self, title: str, artist: str, duration: str, source: str) -> Optional[Track]:
        """Add a song. Missing fields are rejected before any request."""
        song = {'title': title, 'artist': artist, 'duration': duration, 'src': source}
        try:
            validate_song(song)
        except ValidationError as e:
            self.notice = f'Please fill in: {", ".join(e.missing)}'
            logger.info(f'Add rejected: {e}')
            return None

        if self.catalog is None:
            self.notice = 'Cannot add songs while offline'
            return None

        try:
            created = self.catalog.add_track(title.strip(), artist.strip(), duration.strip(), source.strip())
        except CatalogError as e:
            self.notice = f'Could not add song: {e}'
            logger.error(f'Add failed: {e}')
            return None

        self._tracks.append(created)
        self.notice = f'Added "{created.title}"'
        return created

    def remove(self, track_id: TrackId) -> bool:
        """Delete a song. A 404 counts as already deleted."""
        if self.catalog is not None:
            try:
                self.catalog.delete_track(track_id)
            except NotFoundError:
                logger.info(f'Song {track_id} already gone on server, removing locally')
            except CatalogError as e:
                self.notice = f'Could not delete song: {e}'
                logger.error(f'Delete failed: {e}')
                return False

        before = len(self._tracks)
        self._tracks = [track for track in self._tracks if track.id != track_id]
        if len(self._tracks) < before:
            self.notice = 'Song removed'
        return True

    # ============================================
    # LISTS
    # ============================================

    def filter(self, query: str) -> List[Track]:
        """Songs whose title or artist contains `query` (case-insensitive)."""
        needle = (query or '').strip().lower()
        if not needle:
            return list(self._tracks)
        return [
            track for track in self._tracks
            if needle in track.title.lower() or needle in track.artist.lower()
        ]

    def search_online(self, term: str) -> List[Track]:
        """Run an online search and keep the results. Failures leave an empty result set."""
        if self.search is None:
            self.search_results = []
            return []
        try:
            self.search_results = self.search.search(term)
        except SearchError as e:
            logger.warning(f'Online search failed: {e}')
            self.search_results = []
            return []
        if not self.search_results and term.strip():
            self.notice = f'No results for "{term.strip()}"'
        return list(self.search_results)

    def active_list(self, page: str, query: str = '') -> List[Track]:
        """
        The list next/prev/play operate on for a page.

        home:    filtered songs, or all songs when the filter matches nothing
        search:  online results, or the filtered songs when there are none
        library: all songs
        """
        if page == 'search':
            if self.search_results:
                return list(self.search_results)
            return self.filter(query)
        if page == 'library':
            return list(self._tracks)
        return self.filter(query) or list(self._tracks)

    def clear_notice(self):
        self.notice = None
