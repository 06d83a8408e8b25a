"""Process-wide memoization of extracted documentation."""

import threading
from typing import Dict, Any, Optional

from javadoc_provider.data_models import (
    ClassDocumentation,
    MethodDocumentation,
    OperationKey,
)
from javadoc_provider.utils.logger import get_logger


class DocumentationCache:
    """Two-level store: resource path -> class bundle -> operation -> method bundle.

    Entries are only ever added. Concurrent builders of the same entry may both
    run the extraction; the first insert is kept and every caller receives it.
    """

    def __init__(self):
        self._entries: Dict[str, ClassDocumentation] = {}
        self.lock = threading.RLock()
        self.logger = get_logger("DocumentationCache")

        # Statistics
        self.hits = 0
        self.misses = 0

    def get(self, resource_path: str) -> Optional[ClassDocumentation]:
        """Get the class bundle stored for a resource.

        Args:
            resource_path: JavaDoc page location, e.g. 'org/acme/BookStore.html'

        Returns:
            Cached bundle or None if not found
        """
        with self.lock:
            docs = self._entries.get(resource_path)
            if docs is None:
                self.misses += 1
                self.logger.debug(f"Cache miss for {resource_path}")
            else:
                self.hits += 1
            return docs

    def put_if_absent(self, resource_path: str,
                      docs: ClassDocumentation) -> ClassDocumentation:
        """Store a class bundle unless the resource already has one.

        Args:
            resource_path: JavaDoc page location
            docs: Freshly built bundle

        Returns:
            The bundle retained in the cache
        """
        with self.lock:
            retained = self._entries.setdefault(resource_path, docs)
        if retained is not docs:
            self.logger.debug(f"Discarded duplicate bundle for {resource_path}")
        else:
            self.logger.debug(f"Cached documentation for {resource_path}")
        return retained

    def get_method_docs(self, class_docs: ClassDocumentation,
                        key: OperationKey) -> Optional[MethodDocumentation]:
        """Get the method bundle stored inside a class bundle."""
        docs = class_docs.get_method_docs(key)
        with self.lock:
            if docs is None:
                self.misses += 1
            else:
                self.hits += 1
        return docs

    def put_method_docs_if_absent(self, class_docs: ClassDocumentation, key: OperationKey,
                                  docs: MethodDocumentation) -> MethodDocumentation:
        """Store a method bundle unless the operation already has one."""
        return class_docs.add_method_docs(key, docs)

    def clear(self) -> None:
        """Clear all cache entries."""
        with self.lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
            self.logger.info("Documentation cache cleared")

    def __contains__(self, resource_path: str) -> bool:
        with self.lock:
            return resource_path in self._entries

    def __len__(self) -> int:
        with self.lock:
            return len(self._entries)

    def get_statistics(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        with self.lock:
            total_requests = self.hits + self.misses
            return {
                'classes': len(self._entries),
                'methods': sum(docs.method_count for docs in self._entries.values()),
                'hits': self.hits,
                'misses': self.misses,
                'hit_rate': self.hits / max(1, total_requests),
                'total_requests': total_requests,
            }
