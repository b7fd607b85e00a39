"""
Tests for Groove key handling (no display; components are wired by hand).
"""
import pytest
import pygame
from types import SimpleNamespace
from unittest.mock import MagicMock

from groove.app import Groove
from groove.managers import TrackLibrary
from groove.models import Track


@pytest.fixture
def catalog():
    return MagicMock()


@pytest.fixture
def app(catalog, sample_songs):
    app = Groove.__new__(Groove)
    app.library = TrackLibrary(catalog, MagicMock(), [Track.from_dict(s) for s in sample_songs])
    app.player = MagicMock()
    app.page = 'home'
    app.query = ''
    app.cursor = 1
    app.input_mode = None
    app.input_text = ''
    app.running = True
    return app


def press(app, key):
    app._handle_key(SimpleNamespace(key=key, unicode=''))


class TestDeleteKey:
    """Tests for removing the song under the cursor."""

    def test_delete_removes_row(self, app, catalog):
        press(app, pygame.K_DELETE)
        catalog.delete_track.assert_called_once_with(2)
        assert [t.id for t in app.library.tracks] == [1, 3]

    def test_backspace_does_not_remove(self, app, catalog):
        press(app, pygame.K_BACKSPACE)
        catalog.delete_track.assert_not_called()
        assert len(app.library.tracks) == 3
