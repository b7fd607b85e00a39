"""
Tests for TrackLibrary - filtering, active lists and catalog error handling.
"""
import pytest
from unittest.mock import MagicMock

from groove.api import CatalogClient, CatalogError, NotFoundError, SearchError
from groove.managers import TrackLibrary
from groove.models import Track


@pytest.fixture
def songs(sample_songs):
    return [Track.from_dict(song) for song in sample_songs]


@pytest.fixture
def catalog():
    return MagicMock()


@pytest.fixture
def search():
    return MagicMock()


@pytest.fixture
def library(catalog, search, songs):
    return TrackLibrary(catalog, search, songs)


class TestFilter:
    """Tests for local search filtering."""

    def test_blank_query_returns_all(self, library, songs):
        assert library.filter('  ') == songs

    def test_matches_title_or_artist_case_insensitive(self, library):
        assert [t.id for t in library.filter('dhillon')] == [1, 2]
        assert [t.id for t in library.filter(' 295 ')] == [3]
        assert [t.id for t in library.filter('GURINDER')] == [2]

    def test_no_match(self, library):
        assert library.filter('zzz') == []


class TestActiveList:
    """Tests for which list navigation uses per page."""

    def test_home_uses_filter(self, library):
        assert [t.id for t in library.active_list('home', 'moose')] == [3]

    def test_home_falls_back_to_all(self, library, songs):
        assert library.active_list('home', 'zzz') == songs

    def test_search_prefers_online_results(self, library, search):
        online = [Track(id=9, title='Online', artist='X', source='https://a.test/9.m4a')]
        search.search.return_value = online
        library.search_online('x')
        assert library.active_list('search', 'dhillon') == online

    def test_search_without_results_uses_filter(self, library):
        assert [t.id for t in library.active_list('search', 'dhillon')] == [1, 2]

    def test_library_is_everything(self, library, songs):
        assert library.active_list('library', 'zzz') == songs


class TestRefresh:
    """Tests for catalog refresh."""

    def test_refresh_replaces_list(self, library, catalog):
        fresh = [Track(id=7, title='New', artist='Artist')]
        catalog.list_tracks.return_value = fresh
        assert library.refresh()
        assert library.tracks == fresh

    def test_refresh_failure_keeps_list_quietly(self, library, catalog, songs):
        catalog.list_tracks.side_effect = CatalogError('unreachable')
        assert not library.refresh()
        assert library.tracks == songs
        assert library.notice is None

    def test_offline_library(self, songs):
        library = TrackLibrary(None, None, songs)
        assert not library.refresh()
        assert library.tracks == songs


class TestAdd:
    """Tests for adding songs."""

    def test_empty_artist_rejected_locally(self, library, catalog):
        result = library.add('Song', '', '3:00', '/audio/song.mp3')
        assert result is None
        assert 'artist' in library.notice
        catalog.add_track.assert_not_called()

    def test_add_appends(self, library, catalog):
        created = Track(id=4, title='Song', artist='Me', duration_label='3:00', source='/audio/song.mp3')
        catalog.add_track.return_value = created

        assert library.add(' Song ', 'Me', '3:00', '/audio/song.mp3') == created
        catalog.add_track.assert_called_once_with('Song', 'Me', '3:00', '/audio/song.mp3')
        assert library.tracks[-1] == created

    def test_add_failure_shows_notice(self, library, catalog, songs):
        catalog.add_track.side_effect = CatalogError('Catalog unreachable')
        assert library.add('Song', 'Me', '3:00', '/audio/song.mp3') is None
        assert 'Could not add' in library.notice
        assert library.tracks == songs

    def test_bad_server_reply_shows_notice(self, songs):
        client = CatalogClient('http://catalog.test')
        client.session = MagicMock()
        client.session.request.return_value.status_code = 201
        client.session.request.return_value.ok = True
        client.session.request.return_value.json.side_effect = ValueError('no json')
        library = TrackLibrary(client, None, songs)

        assert library.add('Song', 'Me', '1:00', '/audio/song.mp3') is None
        assert 'Could not add' in library.notice
        assert library.tracks == songs


class TestRemove:
    """Tests for deleting songs."""

    def test_remove(self, library, catalog):
        assert library.remove(2)
        catalog.delete_track.assert_called_once_with(2)
        assert [t.id for t in library.tracks] == [1, 3]

    def test_not_found_removes_locally(self, library, catalog):
        catalog.delete_track.side_effect = NotFoundError('gone', status=404)
        assert library.remove(1)
        assert [t.id for t in library.tracks] == [2, 3]

    def test_failure_keeps_song_and_notifies(self, library, catalog, songs):
        catalog.delete_track.side_effect = CatalogError('Catalog unreachable')
        assert not library.remove(1)
        assert library.tracks == songs
        assert 'Could not delete' in library.notice


class TestSearchOnline:
    """Tests for online search."""

    def test_failure_clears_results(self, library, search):
        search.search.side_effect = SearchError('down')
        assert library.search_online('x') == []
        assert library.search_results == []

    def test_no_results_notice(self, library, search):
        search.search.return_value = []
        library.search_online('nothing')
        assert library.notice == 'No results for "nothing"'
