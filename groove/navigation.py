"""
List Navigation - Wrap-around index arithmetic over track lists.

Pure functions, no state. Lists are small (tens of items) so lookups
are a plain linear scan.
"""
from typing import Literal, Optional, Sequence

from .models import Track, TrackId

Direction = Literal['next', 'prev']


def find_index(tracks: Sequence[Track], track_id: TrackId) -> int:
    """Index of the first track with `track_id`, or -1 if absent."""
    for index, track in enumerate(tracks):
        if track.id == track_id:
            return index
    return -1


def next_index(index: int, length: int) -> int:
    """Following index, wrapping to 0. From -1 (not found) this is 0."""
    return (index + 1) % length


def prev_index(index: int, length: int) -> int:
    """Preceding index, wrapping to the end. From -1 (not found) this is the last item."""
    if index < 0:
        return length - 1
    return (index - 1 + length) % length


def step(tracks: Sequence[Track], track_id: Optional[TrackId], direction: Direction) -> Optional[Track]:
    """
    Track reached by moving one step from `track_id` in `direction`.

    With no current id the first (next) or last (prev) track is returned.
    Returns None for an empty list.
    """
    if not tracks:
        return None
    length = len(tracks)
    if track_id is None:
        return tracks[0] if direction == 'next' else tracks[-1]

    index = find_index(tracks, track_id)
    if direction == 'next':
        return tracks[next_index(index, length)]
    return tracks[prev_index(index, length)]
