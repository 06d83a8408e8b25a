"""Extractors for JavaDoc pages and Java sources.

This module provides the marker dialects, the marker-based JavaDoc text
extractor, and the javalang-based extractor turning Java sources into
resource descriptors.
"""

from .dialect import LEGACY, MODERN, resolve_dialect, detect_generator_version
from .javadoc_extractor import JavaDocExtractor
from .java.descriptor_extractor import JavaDescriptorExtractor

__all__ = [
    'LEGACY',
    'MODERN',
    'resolve_dialect',
    'detect_generator_version',
    'JavaDocExtractor',
    'JavaDescriptorExtractor',
]
