"""
Tests for data models and formatting helpers.
"""
import pytest

from groove.models import PlaybackSession, Track
from groove.utils import format_time, format_duration_ms, clamp


class TestFormatTime:
    """Tests for M:SS formatting."""

    @pytest.mark.parametrize('seconds, expected', [
        (125, '2:05'),
        (0, '0:00'),
        (float('nan'), '0:00'),
        (59.9, '0:59'),
        (-3, '0:00'),
        (None, '0:00'),
        (600, '10:00'),
        (3599.99, '59:59'),
    ])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_format_duration_ms(self):
        assert format_duration_ms(176000) == '2:56'
        assert format_duration_ms(None) == '0:00'


class TestClamp:
    """Tests for clamp."""

    def test_clamp(self):
        assert clamp(5, 0, 1) == 1
        assert clamp(-5, 0, 1) == 0
        assert clamp(0.5, 0, 1) == 0.5
        assert clamp(float('nan'), 0, 1) == 0


class TestTrack:
    """Tests for Track wire conversion."""

    def test_from_dict(self, sample_songs):
        track = Track.from_dict(sample_songs[0])
        assert track.id == 1
        assert track.title == 'Excuses'
        assert track.duration_label == '2:56'
        assert track.source == '/audio/excuses.mp3'
        assert track.cover_image is None


class TestPlaybackSession:
    """Tests for derived session values."""

    def test_defaults(self):
        session = PlaybackSession()
        assert session.active_track is None
        assert not session.is_playing
        assert session.progress_percent == 0
        assert session.elapsed_label == '0:00'

    def test_progress_clamped_when_elapsed_overshoots(self):
        session = PlaybackSession(elapsed_seconds=101, total_seconds=100)
        assert session.progress_percent == 100
        assert session.remaining_seconds == 0

    def test_labels(self):
        session = PlaybackSession(elapsed_seconds=65, total_seconds=200)
        assert session.elapsed_label == '1:05'
        assert session.total_label == '3:20'
        assert session.remaining_label == '2:15'
