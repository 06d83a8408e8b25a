"""JavaDoc documentation provider.

Extracts class, operation, parameter and return value descriptions of Java
REST resources from generated JavaDoc HTML pages.
"""

from .data_models import TagDialect, OperationKey, ClassDocumentation, MethodDocumentation
from .descriptors import (
    TypeDescriptor,
    ClassDescriptor,
    OperationDescriptor,
    resolve_documented_type,
    build_resource_path,
)
from .cache import DocumentationCache
from .loaders import (
    ResourceLoader,
    DirectoryResourceLoader,
    ArchiveResourceLoader,
    HttpResourceLoader,
    create_resource_loader,
)
from .provider import JavaDocProvider
from .errors import JavaDocProviderError, ConfigurationError, DescriptorError

__version__ = "1.0.0"

__all__ = [
    'TagDialect',
    'OperationKey',
    'ClassDocumentation',
    'MethodDocumentation',
    'TypeDescriptor',
    'ClassDescriptor',
    'OperationDescriptor',
    'resolve_documented_type',
    'build_resource_path',
    'DocumentationCache',
    'ResourceLoader',
    'DirectoryResourceLoader',
    'ArchiveResourceLoader',
    'HttpResourceLoader',
    'create_resource_loader',
    'JavaDocProvider',
    'JavaDocProviderError',
    'ConfigurationError',
    'DescriptorError',
]
