"""
Search Client - Online track search through the backend's iTunes proxy.
"""
import logging
from typing import List

import requests

from ..models import Track
from ..utils import format_duration_ms

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """Online search failed."""


def track_from_itunes(result: dict, index: int = 0) -> Track:
    """Map one iTunes search result into a Track."""
    track_id = result.get('trackId')
    return Track(
        id=track_id if track_id is not None else f'itunes-{index}',
        title=result.get('trackName') or 'Unknown title',
        artist=result.get('artistName') or 'Unknown artist',
        duration_label=format_duration_ms(result.get('trackTimeMillis')),
        source=result['previewUrl'],
        cover_image=result.get('artworkUrl100'),
    )


def tracks_from_itunes(payload: dict) -> List[Track]:
    """Playable tracks from an iTunes response (entries without a preview are dropped)."""
    results = payload.get('results', []) if isinstance(payload, dict) else []
    return [
        track_from_itunes(result, index)
        for index, result in enumerate(results)
        if isinstance(result, dict) and result.get('previewUrl')
    ]


class SearchClient:
    """Client for /api/search."""

    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def search(self, term: str) -> List[Track]:
        """Search online. A blank term returns [] without a request."""
        term = (term or '').strip()
        if not term:
            return []
        try:
            resp = self.session.get(
                f'{self.base_url}/api/search',
                params={'term': term},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as e:
            logger.warning(f'Search "{term}" failed: {e}')
            raise SearchError(f'Search failed: {e}') from e
        except ValueError as e:
            raise SearchError(f'Invalid search response: {e}') from e

        tracks = tracks_from_itunes(payload)
        logger.info(f'Search "{term}": {len(tracks)} playable results')
        return tracks
