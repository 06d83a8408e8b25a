"""Utility modules for the JavaDoc provider."""

from .logger import get_logger, Logger
from .file_reader import read_file

__all__ = [
    'get_logger',
    'Logger',
    'read_file',
]
