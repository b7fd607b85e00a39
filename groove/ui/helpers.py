"""
UI Helpers - Drawing utilities for pygame.
"""
import pygame
import pygame.gfxdraw
from PIL import Image, ImageDraw


def draw_aa_circle(surface: pygame.Surface, color: tuple, center: tuple, radius: int):
    """Draw an anti-aliased filled circle."""
    cx, cy = int(center[0]), int(center[1])
    r = int(radius)
    pygame.gfxdraw.aacircle(surface, cx, cy, r, color)
    pygame.gfxdraw.filled_circle(surface, cx, cy, r, color)


def draw_bar(surface: pygame.Surface, rect: pygame.Rect, fraction: float,
             track_color: tuple, fill_color: tuple):
    """Draw a horizontal bar with rounded ends filled to `fraction` (0-1)."""
    radius = rect.height // 2
    pygame.draw.rect(surface, track_color, rect, border_radius=radius)
    filled = int(rect.width * max(0.0, min(1.0, fraction)))
    if filled > 0:
        pygame.draw.rect(surface, fill_color, (rect.x, rect.y, filled, rect.height),
                         border_radius=radius)


def fit_text(font: pygame.font.Font, text: str, max_width: int) -> str:
    """Truncate text with '...' until it fits in max_width pixels."""
    if font.size(text)[0] <= max_width:
        return text
    while len(text) > 1 and font.size(text + '...')[0] > max_width:
        text = text[:-1]
    return text + '...'


def apply_rounded_corners_pil(img: Image.Image, radius: int) -> Image.Image:
    """Apply rounded corners to a square PIL image with transparency."""
    size = img.size[0]
    mask = Image.new('L', (size, size), 0)
    draw = ImageDraw.Draw(mask)
    draw.rounded_rectangle([(0, 0), (size - 1, size - 1)], radius=radius, fill=255)
    result = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    result.paste(img, (0, 0), mask)
    return result
