"""
Tests for the backend - song CRUD and the search proxy.
"""
import pytest
import requests
from unittest.mock import patch, MagicMock

from groove.server import create_app, SongStore


@pytest.fixture
def store(sample_songs):
    return SongStore(sample_songs)


@pytest.fixture
def client(store, tmp_path):
    app = create_app(store, media_dir=tmp_path)
    app.config['TESTING'] = True
    return app.test_client()


class TestSongs:
    """Tests for /api/songs."""

    def test_list(self, client, sample_songs):
        resp = client.get('/api/songs')
        assert resp.status_code == 200
        assert resp.get_json() == sample_songs

    def test_add_assigns_next_id(self, client):
        body = {'title': 'New', 'artist': 'Me', 'duration': '1:23', 'src': '/audio/new.mp3'}
        resp = client.post('/api/songs', json=body)
        assert resp.status_code == 201
        assert resp.get_json() == dict(body, id=4)

        second = client.post('/api/songs', json=body)
        assert second.get_json()['id'] == 5
        assert len(client.get('/api/songs').get_json()) == 5

    def test_add_missing_field(self, client):
        resp = client.post('/api/songs', json={'title': 'New', 'artist': '', 'duration': '1:23', 'src': 'x'})
        assert resp.status_code == 400
        assert resp.get_json() == {'message': 'Missing required fields'}

    def test_add_without_body(self, client):
        resp = client.post('/api/songs')
        assert resp.status_code == 400

    def test_add_non_object_body(self, client):
        resp = client.post('/api/songs', json=[1, 2])
        assert resp.status_code == 400
        assert resp.get_json() == {'message': 'Missing required fields'}
        assert len(client.get('/api/songs').get_json()) == 3

    def test_delete(self, client, sample_songs):
        resp = client.delete('/api/songs/2')
        assert resp.status_code == 200
        assert resp.get_json() == {'message': 'Song deleted', 'song': sample_songs[1]}
        assert [s['id'] for s in client.get('/api/songs').get_json()] == [1, 3]

    def test_delete_missing(self, client):
        resp = client.delete('/api/songs/42')
        assert resp.status_code == 404
        assert resp.get_json() == {'message': 'Song not found'}

    def test_delete_non_numeric_id(self, client):
        resp = client.delete('/api/songs/abc')
        assert resp.status_code == 404
        assert resp.get_json() == {'message': 'Song not found'}

    def test_ids_not_reused_after_delete(self, client):
        client.delete('/api/songs/3')
        body = {'title': 'New', 'artist': 'Me', 'duration': '1:23', 'src': '/audio/new.mp3'}
        assert client.post('/api/songs', json=body).get_json()['id'] == 4

    def test_health(self, client):
        assert client.get('/').status_code == 200


class TestSearchProxy:
    """Tests for /api/search."""

    def test_missing_term(self, client):
        resp = client.get('/api/search')
        assert resp.status_code == 400
        assert resp.get_json() == {'message': 'Missing term'}

    def test_passthrough(self, client):
        upstream = MagicMock()
        upstream.json.return_value = {'resultCount': 1, 'results': [{'trackName': 'X'}]}
        with patch('groove.server.app.requests.get', return_value=upstream) as get:
            resp = client.get('/api/search', query_string={'term': 'ap dhillon'})

        assert resp.status_code == 200
        assert resp.get_json()['resultCount'] == 1
        params = get.call_args[1]['params']
        assert params == {'term': 'ap dhillon', 'media': 'music', 'limit': 25}

    def test_upstream_failure(self, client):
        with patch('groove.server.app.requests.get', side_effect=requests.ConnectionError('down')):
            resp = client.get('/api/search?term=x')
        assert resp.status_code == 500
        assert resp.get_json() == {'message': 'Proxy search failed'}


class TestAudio:
    """Tests for serving local audio files."""

    def test_serves_file(self, store, tmp_path):
        (tmp_path / 'audio').mkdir()
        (tmp_path / 'audio' / 'a.mp3').write_bytes(b'ID3data')
        client = create_app(store, media_dir=tmp_path).test_client()

        resp = client.get('/audio/a.mp3')
        assert resp.status_code == 200
        assert resp.data == b'ID3data'

    def test_missing_file(self, client):
        assert client.get('/audio/nope.mp3').status_code == 404
