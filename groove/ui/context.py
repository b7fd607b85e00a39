"""
Render Context - Bundles all state needed for rendering.
"""
from dataclasses import dataclass
from typing import Optional, List

from ..models import PlaybackSession, Track


@dataclass
class RenderContext:
    """All state needed to render a frame."""
    page: str
    tracks: List[Track]
    cursor: int
    session: PlaybackSession
    query: str
    input_mode: Optional[str]  # 'search', 'add' or None
    input_text: str
    notice: Optional[str]
