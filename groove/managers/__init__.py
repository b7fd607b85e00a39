"""
Groove Managers - Track list management.
"""
from .library import TrackLibrary

__all__ = ['TrackLibrary']
