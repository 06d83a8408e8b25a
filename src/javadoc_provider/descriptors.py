"""Descriptors of REST resource classes and operations.

A descriptor carries only what documentation lookup needs: the type's
qualified name, whether it is an interface, which annotations it carries, and
its direct supertypes.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from javadoc_provider.config import DEFAULTS, MARKERS
from javadoc_provider.data_models import OperationKey


@dataclass(frozen=True)
class TypeDescriptor:
    """A Java type as seen by the documentation provider.

    Attributes:
        qualified_name: Fully qualified type name, e.g. 'org.acme.BookStore'
        is_interface: Whether the type is an interface
        annotations: Simple names of the annotations on the type
        superclass: Direct superclass, None for interfaces and unknown types
        interfaces: Directly implemented (or extended) interfaces
    """
    qualified_name: str
    is_interface: bool = False
    annotations: FrozenSet[str] = frozenset()
    superclass: Optional["TypeDescriptor"] = None
    interfaces: Tuple["TypeDescriptor", ...] = ()

    @property
    def simple_name(self) -> str:
        """Type name without package or enclosing type."""
        return self.qualified_name.rsplit('.', 1)[-1].rsplit('$', 1)[-1]

    def has_annotation(self, annotation: str) -> bool:
        """Check whether the type carries an annotation, by simple name."""
        return annotation in self.annotations


@dataclass(frozen=True)
class ClassDescriptor:
    """A REST resource class.

    Attributes:
        service_type: The class serving the resource
    """
    service_type: TypeDescriptor


@dataclass(frozen=True)
class OperationDescriptor:
    """A REST operation of a resource class.

    Attributes:
        class_descriptor: Resource the operation belongs to
        method: Method invoked to serve the operation
        annotated_method: Method carrying the HTTP annotations when that is a
            different declaration, e.g. on an implemented interface
    """
    class_descriptor: ClassDescriptor
    method: OperationKey
    annotated_method: Optional[OperationKey] = field(default=None)

    @property
    def operation_key(self) -> OperationKey:
        """Key of the declaration whose documentation describes the operation."""
        return self.annotated_method if self.annotated_method is not None else self.method


def resolve_documented_type(service_type: TypeDescriptor,
                            annotation: str = DEFAULTS.ROUTING_ANNOTATION) -> TypeDescriptor:
    """Choose the type whose JavaDoc page documents a resource.

    The type itself wins if it carries the routing annotation, then its direct
    superclass, then the first directly implemented interface that carries
    it. Otherwise the type itself is used.
    """
    if service_type.has_annotation(annotation):
        return service_type
    superclass = service_type.superclass
    if superclass is not None and superclass.has_annotation(annotation):
        return superclass
    for interface in service_type.interfaces:
        if interface.has_annotation(annotation):
            return interface
    return service_type


def build_resource_path(documented_type: TypeDescriptor) -> str:
    """Relative location of a type's JavaDoc page, e.g. 'org/acme/BookStore.html'."""
    return documented_type.qualified_name.replace('.', '/') + MARKERS.RESOURCE_SUFFIX
