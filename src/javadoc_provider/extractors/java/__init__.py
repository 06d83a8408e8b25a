"""Java source parsing into resource descriptors."""

from .descriptor_extractor import JavaDescriptorExtractor

__all__ = ['JavaDescriptorExtractor']
