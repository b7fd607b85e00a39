"""
Groove Backend - Flask app serving the song catalog and search proxy.
"""
import logging
from pathlib import Path
from typing import Optional

import requests
from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

from .store import SongStore
from ..api.catalog import REQUIRED_FIELDS
from ..config import DEFAULT_SONGS, ITUNES_SEARCH_URL, MEDIA_DIR, SEARCH_LIMIT, SEARCH_TIMEOUT

logger = logging.getLogger(__name__)


def create_app(store: Optional[SongStore] = None, media_dir: Path = MEDIA_DIR) -> Flask:
    """Build the backend app. Each call gets its own store unless one is given."""
    app = Flask(__name__)
    CORS(app)
    store = store if store is not None else SongStore(DEFAULT_SONGS)
    app.config['SONG_STORE'] = store

    @app.route('/')
    def index():
        return 'Groove backend is running'

    @app.route('/api/songs', methods=['GET'])
    def list_songs():
        return jsonify(store.all())

    @app.route('/api/songs', methods=['POST'])
    def add_song():
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not all(data.get(name) for name in REQUIRED_FIELDS):
            return jsonify({'message': 'Missing required fields'}), 400
        song = store.add(data['title'], data['artist'], data['duration'], data['src'])
        return jsonify(song), 201

    @app.route('/api/songs/<song_id>', methods=['DELETE'])
    def delete_song(song_id):
        try:
            removed = store.remove(int(song_id))
        except ValueError:
            removed = None
        if removed is None:
            return jsonify({'message': 'Song not found'}), 404
        return jsonify({'message': 'Song deleted', 'song': removed})

    @app.route('/api/search', methods=['GET'])
    def search():
        term = request.args.get('term', '').strip()
        if not term:
            return jsonify({'message': 'Missing term'}), 400
        try:
            resp = requests.get(
                ITUNES_SEARCH_URL,
                params={'term': term, 'media': 'music', 'limit': SEARCH_LIMIT},
                timeout=SEARCH_TIMEOUT,
            )
            resp.raise_for_status()
            return jsonify(resp.json())
        except (requests.RequestException, ValueError) as e:
            logger.error(f'iTunes proxy error for "{term}": {e}')
            return jsonify({'message': 'Proxy search failed'}), 500

    @app.route('/audio/<path:filename>')
    def audio(filename):
        return send_from_directory(Path(media_dir) / 'audio', filename)

    return app
