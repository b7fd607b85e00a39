"""
Groove UI - Rendering and visual components.
"""
from .image_cache import ImageCache
from .renderer import Renderer
from .context import RenderContext

__all__ = [
    'ImageCache',
    'Renderer',
    'RenderContext',
]
