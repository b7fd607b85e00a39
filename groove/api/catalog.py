"""
Catalog Client - REST client for the Groove song catalog.
"""
import logging
from typing import List, Optional

import requests

from ..models import Track, TrackId

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('title', 'artist', 'duration', 'src')


class CatalogError(Exception):
    """Catalog request failed (network error or non-2xx response)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NotFoundError(CatalogError):
    """The requested song does not exist on the server."""


class ValidationError(ValueError):
    """A song is missing required fields; raised before any request."""

    def __init__(self, missing: List[str]):
        super().__init__(f'Missing required fields: {", ".join(missing)}')
        self.missing = missing


def validate_song(song: dict):
    """Raise ValidationError if any required field is empty."""
    missing = [name for name in REQUIRED_FIELDS if not str(song.get(name) or '').strip()]
    if missing:
        raise ValidationError(missing)


class CatalogClient:
    """Client for /api/songs."""

    def __init__(self, base_url: str, timeout: float = 5):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers['Content-Type'] = 'application/json'

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f'{self.base_url}{path}'
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f'{method} {path} failed: {e}')
            raise CatalogError(f'Catalog unreachable: {e}') from e

        if resp.status_code == 404:
            raise NotFoundError(f'{path} not found', status=404)
        if not resp.ok:
            logger.warning(f'{method} {path}: {resp.status_code} {resp.text[:200]}')
            raise CatalogError(_error_message(resp), status=resp.status_code)
        return resp

    def list_tracks(self) -> List[Track]:
        """Fetch all songs."""
        resp = self._request('GET', '/api/songs')
        try:
            data = resp.json()
        except ValueError as e:
            raise CatalogError(f'Invalid catalog response: {e}') from e
        if not isinstance(data, list):
            raise CatalogError('Invalid catalog response: expected a list')
        tracks = [Track.from_dict(item) for item in data if isinstance(item, dict)]
        logger.debug(f'Fetched {len(tracks)} songs')
        return tracks

    def add_track(self, title: str, artist: str, duration: str, src: str) -> Track:
        """Create a song. Validates locally before sending anything."""
        song = {'title': title, 'artist': artist, 'duration': duration, 'src': src}
        validate_song(song)
        resp = self._request('POST', '/api/songs', json=song)
        try:
            data = resp.json()
        except ValueError as e:
            raise CatalogError(f'Invalid catalog response: {e}') from e
        if not isinstance(data, dict):
            raise CatalogError('Invalid catalog response: expected a song')
        created = Track.from_dict(data)
        logger.info(f'Added song {created.id}: {created.title}')
        return created

    def delete_track(self, track_id: TrackId) -> Optional[Track]:
        """Delete a song. Raises NotFoundError if the server doesn't have it."""
        resp = self._request('DELETE', f'/api/songs/{track_id}')
        logger.info(f'Deleted song {track_id}')
        try:
            body = resp.json()
        except ValueError:
            return None
        song = body.get('song') if isinstance(body, dict) else None
        return Track.from_dict(song) if isinstance(song, dict) else None


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
        if isinstance(body, dict) and body.get('message'):
            return body['message']
    except ValueError:
        pass
    return f'HTTP {resp.status_code}'
