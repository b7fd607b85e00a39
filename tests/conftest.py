"""
Pytest configuration and shared fixtures for Groove tests.
"""
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from groove.audio import NullAudioDevice
from groove.controllers import PlaybackController
from groove.models import Track


def make_track(track_id, title=None, artist='Artist'):
    return Track(
        id=track_id,
        title=title or f'Song {track_id}',
        artist=artist,
        duration_label='3:00',
        source=f'/audio/{track_id}.mp3',
    )


@pytest.fixture
def tracks():
    """Three tracks A, B, C."""
    return [make_track('A'), make_track('B'), make_track('C')]


@pytest.fixture
def device():
    """Silent device that records commands."""
    return NullAudioDevice(mock_duration=120.0)


@pytest.fixture
def active_list(tracks):
    """Mutable holder for the list the controller navigates."""
    return list(tracks)


@pytest.fixture
def controller(device, active_list):
    """Controller bound to `active_list` (mutate the list in place to change it)."""
    return PlaybackController(device, lambda: active_list)


@pytest.fixture
def sample_songs():
    """Catalog wire-format songs."""
    return [
        {'id': 1, 'title': 'Excuses', 'artist': 'AP Dhillon',
         'duration': '2:56', 'src': '/audio/excuses.mp3'},
        {'id': 2, 'title': 'Brown Munde', 'artist': 'AP Dhillon, Gurinder Gill',
         'duration': '4:10', 'src': '/audio/brown-munde.mp3'},
        {'id': 3, 'title': '295', 'artist': 'Sidhu Moose Wala',
         'duration': '4:32', 'src': '/audio/295.mp3'},
    ]
