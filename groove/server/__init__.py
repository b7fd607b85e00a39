"""
Groove Server - In-memory REST backend.
"""
from .app import create_app
from .store import SongStore

__all__ = ['create_app', 'SongStore']
