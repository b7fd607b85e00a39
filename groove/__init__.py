"""
Groove - Music player with an in-memory catalog backend.
"""
__version__ = '0.1.0'
