"""
Groove Controllers - Playback control.
"""
from .playback import PlaybackController

__all__ = ['PlaybackController']
