"""Core configuration and model I/O."""

from .config import Settings, settings
from .idf_parser import IDFParser, get_parser

__all__ = [
    "Settings",
    "settings",
    "IDFParser",
    "get_parser",
]
