"""Errors raised by the JavaDoc provider and the boundary that hides them."""

import logging
from functools import wraps
from typing import Optional

logger = logging.getLogger(__name__)


class JavaDocProviderError(Exception):
    """Base error carrying a message and hints for fixing it."""

    def __init__(self, message: str, suggestions: Optional[list] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []
        self.error_code = error_code


class ConfigurationError(JavaDocProviderError):
    """Missing or invalid provider configuration."""


class DescriptorError(JavaDocProviderError):
    """Java source that cannot be turned into resource descriptors."""


def absent_on_error(func):
    """Decorator: turn any failure of a documentation query into None.

    Documentation is optional for callers, so lookups never raise.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"{func.__name__} found no documentation: {type(e).__name__}: {e}")
            return None
    return wrapper
