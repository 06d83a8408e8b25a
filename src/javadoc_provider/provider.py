"""JavaDoc-backed documentation provider for REST resources and operations."""

from typing import Optional

from javadoc_provider.cache import DocumentationCache
from javadoc_provider.config import DEFAULTS
from javadoc_provider.data_models import ClassDocumentation, MethodDocumentation
from javadoc_provider.descriptors import (
    ClassDescriptor,
    OperationDescriptor,
    build_resource_path,
    resolve_documented_type,
)
from javadoc_provider.errors import absent_on_error
from javadoc_provider.extractors.dialect import detect_generator_version, resolve_dialect
from javadoc_provider.extractors.javadoc_extractor import JavaDocExtractor
from javadoc_provider.loaders import ResourceLoader, create_resource_loader
from javadoc_provider.utils.logger import get_logger


class JavaDocProvider:
    """Answers documentation queries from generated JavaDoc pages.

    Each resource class page is loaded once and its class bundle cached;
    method bundles are extracted on the first query for each operation. The
    generator version, and so the marker dialect, is fixed for the lifetime
    of a provider. Use with_generator_version() to get a provider for another
    version.

    None of the query methods raise: missing pages, missing markers and any
    unexpected failure all read as "no documentation".
    """

    def __init__(self, loader: ResourceLoader,
                 generator_version: Optional[str] = None,
                 cache: Optional[DocumentationCache] = None,
                 routing_annotation: str = DEFAULTS.ROUTING_ANNOTATION):
        """Initialize the provider.

        Args:
            loader: Source of raw JavaDoc pages
            generator_version: Java version the pages were built with (default: detected)
            cache: Documentation cache (default: a new one)
            routing_annotation: Annotation marking the documented resource type
        """
        self.logger = get_logger("JavaDocProvider")
        self.loader = loader
        self.generator_version = (
            generator_version if generator_version is not None else detect_generator_version()
        )
        self.dialect = resolve_dialect(self.generator_version)
        self.extractor = JavaDocExtractor(self.dialect)
        self.cache = cache if cache is not None else DocumentationCache()
        self.routing_annotation = routing_annotation

        self.logger.debug(
            f"JavaDoc provider for {loader} using {self.dialect.name} markers "
            f"(generator version {self.generator_version})"
        )

    @classmethod
    def from_location(cls, location: Optional[str],
                      generator_version: Optional[str] = None,
                      timeout: float = DEFAULTS.HTTP_TIMEOUT,
                      encoding: str = DEFAULTS.ENCODING) -> "JavaDocProvider":
        """Create a provider for a javadoc directory, archive or URL.

        Raises:
            ConfigurationError: If location is empty
        """
        loader = create_resource_loader(location, timeout=timeout, encoding=encoding)
        return cls(loader, generator_version=generator_version)

    @classmethod
    def from_config(cls, config_loader) -> "JavaDocProvider":
        """Create a provider from the 'provider' section of a ConfigLoader.

        Raises:
            ConfigurationError: If no docs_location is configured
        """
        return cls.from_location(
            config_loader.get_docs_location(),
            generator_version=config_loader.get_generator_version(),
            timeout=config_loader.get_http_timeout(),
            encoding=config_loader.get_encoding(),
        )

    def with_generator_version(self, generator_version: str) -> "JavaDocProvider":
        """Return a provider reading the same pages with another generator version.

        The new provider starts with an empty cache.
        """
        return type(self)(
            self.loader,
            generator_version=generator_version,
            routing_annotation=self.routing_annotation,
        )

    # ------------------------------------------------------------------
    # Documentation queries

    @absent_on_error
    def get_class_doc(self, class_descriptor: ClassDescriptor) -> Optional[str]:
        """Get the description of a resource class."""
        docs = self._get_class_docs(class_descriptor)
        if docs is None:
            return None
        return docs.summary

    @absent_on_error
    def get_method_doc(self, operation: OperationDescriptor) -> Optional[str]:
        """Get the description of an operation."""
        docs = self._get_operation_docs(operation)
        if docs is None:
            return None
        return docs.summary

    @absent_on_error
    def get_method_response_doc(self, operation: OperationDescriptor) -> Optional[str]:
        """Get the return value description of an operation."""
        docs = self._get_operation_docs(operation)
        if docs is None:
            return None
        return docs.return_doc

    @absent_on_error
    def get_method_parameter_doc(self, operation: OperationDescriptor,
                                 param_index: int) -> Optional[str]:
        """Get the description of an operation parameter by position."""
        docs = self._get_operation_docs(operation)
        if docs is None:
            return None
        return docs.parameter_doc(param_index)

    # ------------------------------------------------------------------
    # Internal helpers

    def _get_class_docs(self, class_descriptor: ClassDescriptor) -> Optional[ClassDocumentation]:
        documented_type = resolve_documented_type(
            class_descriptor.service_type, self.routing_annotation
        )
        resource = build_resource_path(documented_type)

        class_docs = self.cache.get(resource)
        if class_docs is not None:
            return class_docs

        raw_text = self.loader.load(resource)
        if raw_text is None:
            self.logger.debug(f"No JavaDoc page {resource} in {self.loader}")
            return None

        class_docs = self.extractor.build_class_documentation(
            raw_text, documented_type.simple_name, documented_type.is_interface
        )
        if class_docs is None:
            return None
        return self.cache.put_if_absent(resource, class_docs)

    def _get_operation_docs(self, operation: OperationDescriptor) -> Optional[MethodDocumentation]:
        class_docs = self._get_class_docs(operation.class_descriptor)
        if class_docs is None:
            return None

        key = operation.operation_key
        method_docs = self.cache.get_method_docs(class_docs, key)
        if method_docs is not None:
            return method_docs

        method_docs = self.extractor.build_method_documentation(class_docs.raw_text, key)
        if method_docs is None:
            return None
        return self.cache.put_method_docs_if_absent(class_docs, key, method_docs)
