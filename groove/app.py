"""
Groove Application - Main application class.
"""
import signal
import logging
from typing import List

import pygame

from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, API_URL, API_TIMEOUT, SEARCH_TIMEOUT,
    MEDIA_DIR, MOCK_MODE, DEFAULT_SONGS, PAGES,
    DEFAULT_VOLUME, VOLUME_STEP, SEEK_STEP, MOCK_TRACK_SECONDS,
    FPS_PLAYING, FPS_IDLE,
)
from .models import Track
from .api import CatalogClient, SearchClient
from .audio import NullAudioDevice
from .audio.pygame_device import PygameAudioDevice
from .controllers import PlaybackController
from .managers import TrackLibrary
from .ui import ImageCache, Renderer, RenderContext

logger = logging.getLogger(__name__)


class Groove:
    """Main Groove application."""

    def __init__(self, fullscreen: bool = False):
        pygame.init()
        pygame.display.set_caption('Groove')

        flags = pygame.FULLSCREEN if fullscreen else 0
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        self.clock = pygame.time.Clock()
        pygame.key.set_repeat(400, 60)

        self._init_components()

    def _init_components(self):
        """Initialize all application components."""
        self.mock_mode = MOCK_MODE
        defaults = [Track.from_dict(song) for song in DEFAULT_SONGS]

        if self.mock_mode:
            self.device = NullAudioDevice(mock_duration=MOCK_TRACK_SECONDS)
            self.library = TrackLibrary(None, None, defaults)
        else:
            self.device = PygameAudioDevice(MEDIA_DIR, API_URL)
            self.library = TrackLibrary(
                CatalogClient(API_URL, timeout=API_TIMEOUT),
                SearchClient(API_URL, timeout=SEARCH_TIMEOUT),
                defaults,
            )

        self.player = PlaybackController(self.device, self.active_list, volume=DEFAULT_VOLUME)
        self.image_cache = ImageCache()
        self.renderer = Renderer(self.screen, self.image_cache)

        # UI state
        self.page = 'home'
        self.query = ''
        self.cursor = 0
        self.input_mode = None  # 'search' | 'add'
        self.input_text = ''
        self.running = True

    # ============================================
    # LISTS
    # ============================================

    def active_list(self) -> List[Track]:
        """List that next/prev/play-pause act on for the current page."""
        return self.library.active_list(self.page, self.query)

    def visible_tracks(self) -> List[Track]:
        """List shown on screen for the current page."""
        if self.page == 'search' and self.library.search_results:
            return self.library.search_results
        if self.page == 'library':
            return self.library.tracks
        return self.library.filter(self.query)

    def _clamp_cursor(self):
        count = len(self.visible_tracks())
        self.cursor = max(0, min(self.cursor, count - 1))

    # ============================================
    # MAIN LOOP
    # ============================================

    def _handle_signal(self, signum, frame):
        """Handle SIGTERM/SIGINT for graceful shutdown."""
        sig_name = 'SIGTERM' if signum == signal.SIGTERM else 'SIGINT'
        logger.info(f'Received {sig_name}, shutting down...')
        self.running = False

    def start(self):
        """Start the application."""
        logger.info('Starting Groove...')
        signal.signal(signal.SIGTERM, self._handle_signal)
        signal.signal(signal.SIGINT, self._handle_signal)

        if self.mock_mode:
            logger.info('Running in MOCK MODE')
        elif not self.library.refresh():
            logger.info('Catalog unavailable, using built-in songs')

        while self.running:
            self._handle_events()
            self.device.poll()
            self.renderer.draw(self._render_context())
            pygame.display.flip()
            self.clock.tick(FPS_PLAYING if self.player.is_playing else FPS_IDLE)

        logger.info('Shutting down...')
        self.player.close()
        self.device.close()
        pygame.quit()
        logger.info('Groove stopped')

    def _render_context(self) -> RenderContext:
        return RenderContext(
            page=self.page,
            tracks=self.visible_tracks(),
            cursor=self.cursor,
            session=self.player.session,
            query=self.query,
            input_mode=self.input_mode,
            input_text=self.input_text,
            notice=self.library.notice,
        )

    # ============================================
    # INPUT
    # ============================================

    def _handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if self.input_mode:
                    self._handle_text_key(event)
                else:
                    self._handle_key(event)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _handle_key(self, event):
        """Handle keyboard input outside text entry."""
        key = event.key
        self.library.clear_notice()
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.player.toggle_play_pause()
        elif key == pygame.K_n:
            self.player.advance('next')
        elif key == pygame.K_p:
            self.player.advance('prev')
        elif key == pygame.K_UP:
            self.cursor -= 1
            self._clamp_cursor()
        elif key == pygame.K_DOWN:
            self.cursor += 1
            self._clamp_cursor()
        elif key == pygame.K_RETURN:
            self._play_row(self.cursor)
        elif key == pygame.K_LEFT:
            self.player.seek(self.player.progress_percent - SEEK_STEP)
        elif key == pygame.K_RIGHT:
            self.player.seek(self.player.progress_percent + SEEK_STEP)
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.player.set_volume(self.player.volume + VOLUME_STEP)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.player.set_volume(self.player.volume - VOLUME_STEP)
        elif key == pygame.K_TAB:
            self.page = PAGES[(PAGES.index(self.page) + 1) % len(PAGES)]
            self.cursor = 0
            logger.debug(f'Page: {self.page}')
        elif key == pygame.K_SLASH:
            self.input_mode = 'search'
            self.input_text = self.query
        elif key == pygame.K_a:
            self.input_mode = 'add'
            self.input_text = ''
        elif key == pygame.K_DELETE:
            self._delete_row(self.cursor)
        elif key == pygame.K_r:
            self.library.refresh()
            self._clamp_cursor()

    def _handle_text_key(self, event):
        """Handle keyboard input while editing the search or add prompt."""
        if event.key == pygame.K_ESCAPE:
            self.input_mode = None
            self.input_text = ''
        elif event.key == pygame.K_RETURN:
            self._commit_input()
        elif event.key == pygame.K_BACKSPACE:
            self.input_text = self.input_text[:-1]
            if self.input_mode == 'search':
                self.query = self.input_text
        elif event.unicode and event.unicode.isprintable():
            self.input_text += event.unicode
            if self.input_mode == 'search':
                self.query = self.input_text  # Live filtering
        self._clamp_cursor()

    def _commit_input(self):
        mode, text = self.input_mode, self.input_text
        self.input_mode = None
        self.input_text = ''
        if mode == 'search':
            self.query = text
            if self.page == 'search':
                self.library.search_online(text)
        elif mode == 'add':
            fields = [part.strip() for part in text.split('|')]
            fields += [''] * (4 - len(fields))
            self.library.add(*fields[:4])
        self.cursor = 0

    def _handle_click(self, pos):
        control = self.renderer.control_at(pos)
        if control == 'play':
            self.player.toggle_play_pause()
        elif control in ('prev', 'next'):
            self.player.advance(control)
        else:
            self._handle_area_click(pos)

    def _handle_area_click(self, pos):
        percent = self.renderer.progress_percent_at(pos)
        if percent is not None:
            self.player.seek(percent)
            return
        fraction = self.renderer.volume_at(pos)
        if fraction is not None:
            self.player.set_volume(fraction)
            return
        row = self.renderer.row_at(pos)
        if row is not None:
            self.cursor = row
            self._play_row(row)

    # ============================================
    # ACTIONS
    # ============================================

    def _play_row(self, index: int):
        tracks = self.visible_tracks()
        if 0 <= index < len(tracks):
            self.player.select_track(tracks[index])

    def _delete_row(self, index: int):
        if self.page == 'search' and self.library.search_results:
            return  # Search results aren't in the catalog
        tracks = self.visible_tracks()
        if 0 <= index < len(tracks):
            self.library.remove(tracks[index].id)
            self._clamp_cursor()
