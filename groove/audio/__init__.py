"""
Groove Audio - Output devices.
"""
from .device import AudioDevice, NullAudioDevice, PlaybackError

__all__ = ['AudioDevice', 'NullAudioDevice', 'PlaybackError']
