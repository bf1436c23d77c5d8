import logging
import os
import sys

from .builder import InvalidPlaylistError, PlaylistBuilder
from .parser import ParseError, parse_line
from .playlist import Playlist, Segment, load, loads
from .serializer import format_tag
from .validation import ValidationError, validate

__version__ = "0.1.0"

logger = logging.getLogger("m3u8tags")
log_level = logging.getLevelName(os.getenv("M3U8TAGS_LOG_LEVEL", "WARNING").upper())
logger.setLevel(log_level if isinstance(log_level, int) else logging.WARNING)
logger.addHandler(logging.StreamHandler(sys.stderr))

__all__ = [
    "InvalidPlaylistError",
    "ParseError",
    "Playlist",
    "PlaylistBuilder",
    "Segment",
    "ValidationError",
    "format_tag",
    "load",
    "loads",
    "parse_line",
    "validate",
]
