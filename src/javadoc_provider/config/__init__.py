"""Configuration management module."""

from .constants import MARKERS, VERSIONS, DEFAULTS, APP
from .argument_parser import parse_arguments

__all__ = ['MARKERS', 'VERSIONS', 'DEFAULTS', 'APP', 'parse_arguments']
