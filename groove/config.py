"""
Groove Configuration - All constants and settings.
"""
import os
import sys
from pathlib import Path

# ============================================
# NETWORK ENDPOINTS
# ============================================

API_URL = os.environ.get('GROOVE_API_URL', 'http://localhost:5000')
API_TIMEOUT = 5  # seconds, catalog requests

SERVER_HOST = os.environ.get('GROOVE_HOST', '127.0.0.1')
SERVER_PORT = int(os.environ.get('PORT', '5000'))

ITUNES_SEARCH_URL = 'https://itunes.apple.com/search'
SEARCH_LIMIT = 25
SEARCH_TIMEOUT = 10

# ============================================
# PATHS
# ============================================

# Local sources like "/audio/excuses.mp3" resolve under this folder
MEDIA_DIR = Path(os.environ.get('GROOVE_MEDIA_DIR', Path(__file__).parent.parent / 'public'))

# Logging directory
LOG_DIR = Path.home() / '.groove' / 'logs'
LOG_FILE = LOG_DIR / 'groove.log'
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5MB per file
LOG_BACKUP_COUNT = 5

# ============================================
# COMMAND LINE FLAGS
# ============================================

MOCK_MODE = '--mock' in sys.argv or '-m' in sys.argv
FULLSCREEN = '--fullscreen' in sys.argv or '-f' in sys.argv
SERVE_MODE = '--serve' in sys.argv or '-s' in sys.argv

# ============================================
# SEED DATA
# ============================================

DEFAULT_SONGS = [
    {'id': 1, 'title': 'Excuses', 'artist': 'AP Dhillon',
     'duration': '2:56', 'src': '/audio/excuses.mp3'},
    {'id': 2, 'title': 'Brown Munde', 'artist': 'AP Dhillon, Gurinder Gill',
     'duration': '4:10', 'src': '/audio/brown-munde.mp3'},
    {'id': 3, 'title': '295', 'artist': 'Sidhu Moose Wala',
     'duration': '4:32', 'src': '/audio/295.mp3'},
    {'id': 4, 'title': 'Insane', 'artist': 'AP Dhillon, Gurinder Gill, Shinda Kahlon',
     'duration': '3:40', 'src': '/audio/insane.mp3'},
]

# ============================================
# SCREEN & COLORS
# ============================================

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 600

COLORS = {
    'bg_primary': (18, 18, 18),
    'bg_secondary': (24, 24, 24),
    'bg_elevated': (40, 40, 40),
    'accent': (29, 185, 84),  # Spotify green
    'accent_hover': (30, 215, 96),
    'text_primary': (255, 255, 255),
    'text_secondary': (179, 179, 179),
    'text_muted': (110, 110, 110),
    'error': (232, 80, 80),
}

# ============================================
# LAYOUT
# ============================================

HEADER_HEIGHT = 96
ROW_HEIGHT = 36
PLAYER_BAR_HEIGHT = 110
COVER_SIZE = 72
PROGRESS_BAR_WIDTH = 420
VOLUME_BAR_WIDTH = 120

PAGES = ['home', 'search', 'library']

# ============================================
# PLAYBACK
# ============================================

DEFAULT_VOLUME = 0.8
VOLUME_STEP = 0.1
SEEK_STEP = 5  # percent of the track per key press
MOCK_TRACK_SECONDS = 30.0  # Duration reported by the silent device

# ============================================
# TIMING
# ============================================

FPS_PLAYING = 30
FPS_IDLE = 10
IMAGE_CACHE_MAX_SIZE = 100
