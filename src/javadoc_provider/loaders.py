"""Loaders fetching raw JavaDoc pages from a documentation location.

A location is a javadoc directory, a javadoc .jar/.zip archive, or an
http(s) base URL. Loaders return None for anything they cannot read.
"""

import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse, unquote
import logging

import requests

from javadoc_provider.config import DEFAULTS
from javadoc_provider.errors import ConfigurationError
from javadoc_provider.utils import read_file

logger = logging.getLogger(__name__)

_ARCHIVE_SUFFIXES = ('.jar', '.zip')


class ResourceLoader(ABC):
    """Abstract base class for JavaDoc page loaders."""

    def __init__(self, location: str, encoding: str = DEFAULTS.ENCODING):
        """Initialize the base loader.

        Args:
            location: Documentation location the loader reads from
            encoding: Encoding of the JavaDoc pages
        """
        self.location = location
        self.encoding = encoding

    @abstractmethod
    def load(self, resource_path: str) -> Optional[str]:
        """Load the text of a page.

        Args:
            resource_path: Page path relative to the location, e.g. 'org/acme/BookStore.html'

        Returns:
            Page text, or None if the page is not available
        """
        pass

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.location})"

    def __repr__(self) -> str:
        return self.__str__()


class DirectoryResourceLoader(ResourceLoader):
    """Reads pages from an unpacked javadoc tree."""

    def __init__(self, root: str, encoding: str = DEFAULTS.ENCODING):
        super().__init__(str(root), encoding)
        self.root = Path(root)

    def load(self, resource_path: str) -> Optional[str]:
        return read_file(str(self.root / resource_path), encoding=self.encoding)


class ArchiveResourceLoader(ResourceLoader):
    """Reads pages from a javadoc jar or zip archive."""

    def __init__(self, archive_path: str, encoding: str = DEFAULTS.ENCODING):
        super().__init__(str(archive_path), encoding)
        self.archive_path = Path(archive_path)

    def load(self, resource_path: str) -> Optional[str]:
        try:
            with zipfile.ZipFile(self.archive_path) as archive:
                data = archive.read(resource_path)
        except KeyError:
            logger.debug(f"{resource_path} not found in {self.archive_path}")
            return None
        except (OSError, zipfile.BadZipFile) as e:
            logger.warning(f"Cannot read archive {self.archive_path}: {e}")
            return None

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.warning(f"Encoding error reading {resource_path} from {self.archive_path}: {e}")
            return None


class HttpResourceLoader(ResourceLoader):
    """Fetches pages from javadoc published over HTTP.

    Can be used as a context manager to close the underlying session:
        with HttpResourceLoader("https://docs.acme.org/api") as loader:
            page = loader.load("org/acme/BookStore.html")
    """

    def __init__(self, base_url: str, timeout: float = DEFAULTS.HTTP_TIMEOUT,
                 encoding: str = DEFAULTS.ENCODING,
                 session: Optional[requests.Session] = None):
        """Initialize the HTTP loader.

        Args:
            base_url: URL of the javadoc root
            timeout: Request timeout in seconds
            encoding: Encoding used when the server does not declare one
            session: Session to reuse (default: a new one)
        """
        super().__init__(base_url, encoding)
        self.base_url = base_url.rstrip('/') + '/'
        self.timeout = timeout
        self.session = session or requests.Session()

    def load(self, resource_path: str) -> Optional[str]:
        url = self.base_url + resource_path.lstrip('/')
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.warning(f"Timed out fetching {url}: {e}")
            return None
        except requests.exceptions.HTTPError as e:
            logger.debug(f"No documentation at {url}: {e}")
            return None
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request for {url} failed: {e}")
            return None

        if not response.encoding:
            response.encoding = self.encoding
        return response.text

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def create_resource_loader(location: Optional[str],
                           timeout: float = DEFAULTS.HTTP_TIMEOUT,
                           encoding: str = DEFAULTS.ENCODING) -> ResourceLoader:
    """Pick a loader for a documentation location.

    Args:
        location: http(s) URL, file:// URL, archive path or directory path
        timeout: Request timeout for HTTP locations
        encoding: Encoding of the JavaDoc pages

    Returns:
        Loader reading from the location

    Raises:
        ConfigurationError: If no location is given
    """
    if not location:
        raise ConfigurationError(
            "JavaDoc location is not set",
            suggestions=["Pass --docs", "Set provider.docs_location in the config file"],
            error_code="DOCS_LOCATION_MISSING",
        )

    parsed = urlparse(location)
    if parsed.scheme in ('http', 'https'):
        return HttpResourceLoader(location, timeout=timeout, encoding=encoding)

    path = unquote(parsed.path) if parsed.scheme == 'file' else location
    if path.lower().endswith(_ARCHIVE_SUFFIXES):
        return ArchiveResourceLoader(path, encoding=encoding)
    return DirectoryResourceLoader(path, encoding=encoding)
