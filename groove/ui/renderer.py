"""
Renderer - All drawing logic for the Groove UI.
"""
import logging
from typing import List, Optional, Tuple

import pygame

from .context import RenderContext
from .helpers import draw_aa_circle, draw_bar, fit_text
from .image_cache import ImageCache
from ..models import PlaybackSession, Track
from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, COLORS, PAGES,
    HEADER_HEIGHT, ROW_HEIGHT, PLAYER_BAR_HEIGHT, COVER_SIZE,
    PROGRESS_BAR_WIDTH, VOLUME_BAR_WIDTH,
)

logger = logging.getLogger(__name__)

PAGE_TITLES = {'home': 'Home', 'search': 'Search', 'library': 'Your Library'}


class Renderer:
    """Handles all drawing for the Groove UI."""

    def __init__(self, screen: pygame.Surface, image_cache: ImageCache):
        self.screen = screen
        self.image_cache = image_cache

        # Fonts
        self.font_large = pygame.font.Font(None, 34)
        self.font_medium = pygame.font.Font(None, 26)
        self.font_small = pygame.font.Font(None, 21)

        # Hit areas (updated during draw)
        bar_y = SCREEN_HEIGHT - 36
        self.progress_rect = pygame.Rect((SCREEN_WIDTH - PROGRESS_BAR_WIDTH) // 2, bar_y,
                                         PROGRESS_BAR_WIDTH, 6)
        self.volume_rect = pygame.Rect(SCREEN_WIDTH - VOLUME_BAR_WIDTH - 24,
                                       SCREEN_HEIGHT - PLAYER_BAR_HEIGHT // 2 - 3,
                                       VOLUME_BAR_WIDTH, 6)
        self.row_rects: List[Tuple[pygame.Rect, int]] = []

        self._first_row = 0

    @property
    def visible_rows(self) -> int:
        return (SCREEN_HEIGHT - HEADER_HEIGHT - PLAYER_BAR_HEIGHT - ROW_HEIGHT) // ROW_HEIGHT

    def draw(self, ctx: RenderContext):
        """Draw a full frame."""
        self.screen.fill(COLORS['bg_primary'])
        self._draw_header(ctx)
        self._draw_track_list(ctx)
        self._draw_player_bar(ctx.session)

    # ============================================
    # HEADER
    # ============================================

    def _draw_header(self, ctx: RenderContext):
        x = 24
        for page in PAGES:
            color = COLORS['text_primary'] if page == ctx.page else COLORS['text_muted']
            label = self.font_large.render(PAGE_TITLES[page], True, color)
            self.screen.blit(label, (x, 18))
            if page == ctx.page:
                pygame.draw.rect(self.screen, COLORS['accent'],
                                 (x, 18 + label.get_height() + 4, label.get_width(), 3))
            x += label.get_width() + 32

        box = pygame.Rect(24, 58, SCREEN_WIDTH - 48, 28)
        editing = ctx.input_mode is not None
        pygame.draw.rect(self.screen, COLORS['bg_elevated'], box, border_radius=14)
        if editing:
            pygame.draw.rect(self.screen, COLORS['accent'], box, width=1, border_radius=14)

        if ctx.input_mode == 'add':
            text = ctx.input_text + '_'
            color = COLORS['text_primary']
            if not ctx.input_text:
                text = 'title | artist | duration | src'
                color = COLORS['text_muted']
        elif editing:
            text, color = ctx.input_text + '_', COLORS['text_primary']
        elif ctx.query:
            text, color = ctx.query, COLORS['text_secondary']
        else:
            text, color = 'Search songs or artists  ( / )', COLORS['text_muted']
        surface = self.font_small.render(fit_text(self.font_small, text, box.width - 32), True, color)
        self.screen.blit(surface, (box.x + 16, box.centery - surface.get_height() // 2))

        if ctx.notice:
            notice = self.font_small.render(ctx.notice, True, COLORS['text_secondary'])
            self.screen.blit(notice, (SCREEN_WIDTH - notice.get_width() - 24, 24))

    # ============================================
    # TRACK LIST
    # ============================================

    def _draw_track_list(self, ctx: RenderContext):
        top = HEADER_HEIGHT
        columns = (24, 64, 420, SCREEN_WIDTH - 90)
        for label, x in zip(('#', 'Title', 'Artist', 'Duration'), columns):
            surface = self.font_small.render(label, True, COLORS['text_muted'])
            self.screen.blit(surface, (x, top + 10))
        pygame.draw.line(self.screen, COLORS['bg_elevated'],
                         (24, top + ROW_HEIGHT - 4), (SCREEN_WIDTH - 24, top + ROW_HEIGHT - 4))

        self.row_rects = []
        if not ctx.tracks:
            empty = self.font_medium.render('No songs found.', True, COLORS['text_muted'])
            self.screen.blit(empty, (24, top + ROW_HEIGHT + 12))
            return

        # Keep the cursor on screen
        rows = self.visible_rows
        if ctx.cursor < self._first_row:
            self._first_row = ctx.cursor
        elif ctx.cursor >= self._first_row + rows:
            self._first_row = ctx.cursor - rows + 1
        self._first_row = max(0, min(self._first_row, max(0, len(ctx.tracks) - rows)))

        active = ctx.session.active_track
        y = top + ROW_HEIGHT
        for index in range(self._first_row, min(len(ctx.tracks), self._first_row + rows)):
            track = ctx.tracks[index]
            rect = pygame.Rect(16, y, SCREEN_WIDTH - 32, ROW_HEIGHT - 2)
            self.row_rects.append((rect, index))
            if index == ctx.cursor:
                pygame.draw.rect(self.screen, COLORS['bg_elevated'], rect, border_radius=6)
            is_active = active is not None and active.id == track.id
            self._draw_row(track, index, y, columns, is_active)
            y += ROW_HEIGHT

    def _draw_row(self, track: Track, index: int, y: int, columns: tuple, is_active: bool):
        title_color = COLORS['accent'] if is_active else COLORS['text_primary']
        cells = (
            (str(index + 1), COLORS['text_muted']),
            (track.title, title_color),
            (track.artist, COLORS['text_secondary']),
            (track.duration_label, COLORS['text_secondary']),
        )
        widths = (columns[1] - columns[0] - 8, columns[2] - columns[1] - 16,
                  columns[3] - columns[2] - 16, 80)
        for (text, color), x, width in zip(cells, columns, widths):
            surface = self.font_medium.render(fit_text(self.font_medium, text, width), True, color)
            self.screen.blit(surface, (x, y + (ROW_HEIGHT - surface.get_height()) // 2))

    # ============================================
    # PLAYER BAR
    # ============================================

    def _draw_player_bar(self, session: PlaybackSession):
        top = SCREEN_HEIGHT - PLAYER_BAR_HEIGHT
        pygame.draw.rect(self.screen, COLORS['bg_secondary'], (0, top, SCREEN_WIDTH, PLAYER_BAR_HEIGHT))

        track = session.active_track
        cover_y = top + (PLAYER_BAR_HEIGHT - COVER_SIZE) // 2
        self.screen.blit(self.image_cache.get(track.cover_image if track else None), (16, cover_y))

        title = track.title if track else 'No song playing'
        artist = track.artist if track else 'Pick a song from the list above or search'
        name_surface = self.font_medium.render(fit_text(self.font_medium, title, 220), True,
                                               COLORS['text_primary'])
        artist_surface = self.font_small.render(fit_text(self.font_small, artist, 220), True,
                                                COLORS['text_secondary'])
        self.screen.blit(name_surface, (104, cover_y + 16))
        self.screen.blit(artist_surface, (104, cover_y + 42))

        self._draw_controls(session.is_playing, top + 36)

        draw_bar(self.screen, self.progress_rect, session.progress_percent / 100,
                 COLORS['bg_elevated'], COLORS['accent'])
        elapsed = self.font_small.render(session.elapsed_label, True, COLORS['text_secondary'])
        total = self.font_small.render(session.total_label, True, COLORS['text_secondary'])
        label_y = self.progress_rect.centery - elapsed.get_height() // 2
        self.screen.blit(elapsed, (self.progress_rect.x - elapsed.get_width() - 12, label_y))
        self.screen.blit(total, (self.progress_rect.right + 12, label_y))

        draw_bar(self.screen, self.volume_rect, session.volume,
                 COLORS['bg_elevated'], COLORS['text_primary'])
        vol = self.font_small.render('Vol', True, COLORS['text_secondary'])
        self.screen.blit(vol, (self.volume_rect.x - vol.get_width() - 10,
                               self.volume_rect.centery - vol.get_height() // 2))

    def _draw_controls(self, is_playing: bool, cy: int):
        cx = SCREEN_WIDTH // 2
        draw_aa_circle(self.screen, COLORS['text_primary'], (cx, cy), 20)
        dark = COLORS['bg_secondary']
        if is_playing:
            pygame.draw.rect(self.screen, dark, (cx - 7, cy - 8, 5, 16))
            pygame.draw.rect(self.screen, dark, (cx + 2, cy - 8, 5, 16))
        else:
            pygame.draw.polygon(self.screen, dark, [(cx - 5, cy - 9), (cx - 5, cy + 9), (cx + 9, cy)])

        # Previous / next glyphs
        muted = COLORS['text_secondary']
        for offset, sign in ((-60, -1), (60, 1)):
            x = cx + offset
            pygame.draw.polygon(self.screen, muted,
                                [(x - 6 * sign, cy - 8), (x - 6 * sign, cy + 8), (x + 6 * sign, cy)])
            pygame.draw.rect(self.screen, muted, (x + 6 * sign - (2 if sign > 0 else 0), cy - 8, 2, 16))

    # ============================================
    # HIT TESTING
    # ============================================

    def row_at(self, pos) -> Optional[int]:
        for rect, index in self.row_rects:
            if rect.collidepoint(pos):
                return index
        return None

    def control_at(self, pos) -> Optional[str]:
        """'prev', 'play' or 'next' if pos hits a transport button."""
        cy = SCREEN_HEIGHT - PLAYER_BAR_HEIGHT + 36
        cx = SCREEN_WIDTH // 2
        for name, x in (('prev', cx - 60), ('play', cx), ('next', cx + 60)):
            if abs(pos[0] - x) <= 22 and abs(pos[1] - cy) <= 22:
                return name
        return None

    def progress_percent_at(self, pos) -> Optional[float]:
        hit = self.progress_rect.inflate(0, 16)
        if not hit.collidepoint(pos):
            return None
        return (pos[0] - self.progress_rect.x) / self.progress_rect.width * 100

    def volume_at(self, pos) -> Optional[float]:
        hit = self.volume_rect.inflate(0, 16)
        if not hit.collidepoint(pos):
            return None
        return (pos[0] - self.volume_rect.x) / self.volume_rect.width
