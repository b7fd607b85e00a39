"""
Tests for list navigation - index lookup and wrap-around stepping.
"""
from groove.navigation import find_index, next_index, prev_index, step

from conftest import make_track


class TestFindIndex:
    """Tests for linear id lookup."""

    def test_finds_first_match(self, tracks):
        assert find_index(tracks, 'B') == 1

    def test_absent_id_is_minus_one(self, tracks):
        assert find_index(tracks, 'Z') == -1

    def test_duplicate_ids_return_first(self):
        items = [make_track(1, 'first'), make_track(1, 'second')]
        assert find_index(items, 1) == 0


class TestIndexArithmetic:
    """Tests for next/prev index formulas."""

    def test_next_wraps_to_start(self):
        assert next_index(2, 3) == 0

    def test_prev_wraps_to_end(self):
        assert prev_index(0, 3) == 2

    def test_not_found_next_is_first(self):
        assert next_index(-1, 3) == 0

    def test_not_found_prev_is_last(self):
        assert prev_index(-1, 3) == 2

    def test_single_element(self):
        assert next_index(0, 1) == 0
        assert prev_index(0, 1) == 0


class TestStep:
    """Tests for stepping through a track list."""

    def test_empty_list(self):
        assert step([], 'A', 'next') is None
        assert step([], None, 'prev') is None

    def test_no_current_track(self, tracks):
        assert step(tracks, None, 'next').id == 'A'
        assert step(tracks, None, 'prev').id == 'C'

    def test_steps_forward_and_back(self, tracks):
        assert step(tracks, 'B', 'next').id == 'C'
        assert step(tracks, 'B', 'prev').id == 'A'

    def test_missing_current_restarts(self, tracks):
        assert step(tracks, 'gone', 'next').id == 'A'
        assert step(tracks, 'gone', 'prev').id == 'C'
