"""
Groove Utilities - Shared helper functions.
"""
import math
import threading
import logging

logger = logging.getLogger(__name__)


def run_async(fn, *args):
    """Fire-and-forget async execution in daemon thread.

    Wraps function to catch and log exceptions.
    """
    def wrapper():
        try:
            fn(*args)
        except Exception as e:
            logger.warning(f'Async task {fn.__name__} failed: {e}', exc_info=True)

    threading.Thread(target=wrapper, daemon=True).start()


def format_time(seconds) -> str:
    """Format seconds as M:SS (floored). Zero, negative or NaN give '0:00'."""
    try:
        seconds = float(seconds)
    except (TypeError, ValueError):
        return '0:00'
    if math.isnan(seconds) or math.isinf(seconds) or seconds <= 0:
        return '0:00'
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f'{mins}:{secs:02d}'


def format_duration_ms(millis) -> str:
    """Format a millisecond duration (as returned by iTunes) as M:SS."""
    try:
        return format_time(float(millis) / 1000)
    except (TypeError, ValueError):
        return '0:00'


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]; NaN maps to low."""
    if value != value:  # NaN
        return low
    return max(low, min(high, value))
