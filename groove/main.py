#!/usr/bin/env python3
"""
Groove - Desktop music player with an in-memory catalog backend.

Usage:
    python -m groove              # Player (windowed)
    python -m groove --fullscreen # Player, fullscreen
    python -m groove --mock       # Player with silent device, no network
    python -m groove --serve      # Catalog + search backend
"""
import os
import sys
import platform
import logging
from logging.handlers import RotatingFileHandler

from .config import (
    API_URL, MOCK_MODE, FULLSCREEN, SERVE_MODE, SERVER_HOST, SERVER_PORT, MEDIA_DIR,
    LOG_DIR, LOG_FILE, LOG_MAX_BYTES, LOG_BACKUP_COUNT,
)


def setup_logging():
    """Configure logging with console and rotating file handler."""
    level_name = os.environ.get('GROOVE_LOG_LEVEL', 'INFO').upper()
    level = getattr(logging, level_name, logging.INFO)

    console_formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    file_formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(console_formatter)
    console.setLevel(level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(console)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        root.addHandler(file_handler)
        root.info(f'Logging to: {LOG_FILE}')
    except (OSError, PermissionError) as e:
        root.warning(f'Could not create log file: {e}')

    # Quiet down noisy libraries
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)


def log_system_info(logger: logging.Logger):
    """Log system information at startup."""
    logger.info('=' * 50)
    logger.info('GROOVE STARTUP')
    logger.info('=' * 50)
    logger.info(f'Python: {sys.version.split()[0]}')
    logger.info(f'Platform: {platform.system()} {platform.release()}')
    logger.info(f'Media: {MEDIA_DIR}')
    logger.info('=' * 50)


def serve():
    """Run the catalog backend."""
    from .server import create_app

    logger = logging.getLogger(__name__)
    logger.info(f'Backend server running on http://{SERVER_HOST}:{SERVER_PORT}')
    create_app().run(host=SERVER_HOST, port=SERVER_PORT)


def main():
    """Entry point for Groove."""
    setup_logging()

    logger = logging.getLogger(__name__)
    log_system_info(logger)

    if SERVE_MODE:
        serve()
        return

    from .app import Groove

    if MOCK_MODE:
        logger.info('Mode: MOCK (silent device, no network)')
    else:
        logger.info(f'Catalog: {API_URL}')
    logger.info(f'Fullscreen: {FULLSCREEN}')

    print()
    print('Controls:')
    print('   Space     Play/Pause')
    print('   N / P     Next / previous track')
    print('   Up/Down   Move cursor, Enter to play')
    print('   <- ->     Seek')
    print('   + / -     Volume')
    print('   Tab       Switch page')
    print('   /         Search (Enter on Search page goes online)')
    print('   A         Add song (title | artist | duration | src)')
    print('   Del       Remove song')
    print('   R         Refresh from catalog')
    print('   Esc       Quit')
    print()

    app = Groove(fullscreen=FULLSCREEN)
    app.start()


if __name__ == '__main__':
    main()
