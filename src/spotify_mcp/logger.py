"""Logging setup for the Spotify MCP server.

Console records are colourised with colorlog and written to stderr, because
stdout carries the MCP stdio transport. Setting SPOTIFY_MCP_LOG_FILE adds a
size-rotated plain-text log. The spotipy and httpx loggers are turned down
since the tool layer already reports their failures.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

import colorlog

LEVEL_COLOURS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'bold_red',
}

FILE_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s (%(filename)s:%(lineno)d)'

# Library loggers and the level below which their records are dropped
QUIET_LOGGERS = {
    'spotipy': logging.CRITICAL,  # logs every failed request at ERROR
    'httpx': logging.WARNING,  # logs every request at INFO
    'urllib3': logging.WARNING,
}


def build_console_handler() -> logging.Handler:
    """Colourised handler bound to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s",
            log_colors=LEVEL_COLOURS,
        )
    )
    return handler


def build_file_handler(path: str) -> logging.Handler:
    """Rotating file handler sized by LOG_FILE_MAX_BYTES and LOG_FILE_BACKUP_COUNT."""
    handler = RotatingFileHandler(
        path,
        maxBytes=int(os.getenv('LOG_FILE_MAX_BYTES', str(10 * 1024 * 1024))),
        backupCount=int(os.getenv('LOG_FILE_BACKUP_COUNT', '5')),
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging() -> None:
    """Configure the root logger from SPOTIFY_MCP_LOG_LEVEL and SPOTIFY_MCP_LOG_FILE.

    Handlers are only attached once; calling this again just updates levels.
    """
    root = logging.getLogger()
    root.setLevel(os.getenv('SPOTIFY_MCP_LOG_LEVEL', 'INFO').upper())

    if not root.hasHandlers():
        root.addHandler(build_console_handler())
        log_file = os.getenv('SPOTIFY_MCP_LOG_FILE')
        if log_file:
            root.addHandler(build_file_handler(log_file))

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
