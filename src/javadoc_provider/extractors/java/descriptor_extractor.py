"""Resource descriptor extraction from Java source using the javalang parser."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Set, Tuple
import logging

import javalang

from javadoc_provider.config import DEFAULTS
from javadoc_provider.data_models import OperationKey
from javadoc_provider.descriptors import ClassDescriptor, OperationDescriptor, TypeDescriptor
from javadoc_provider.errors import DescriptorError
from javadoc_provider.utils import read_file

logger = logging.getLogger(__name__)

# JAX-RS annotations that make a method a resource method or locator
_RESOURCE_METHOD_ANNOTATIONS = frozenset({
    'GET', 'POST', 'PUT', 'DELETE', 'HEAD', 'OPTIONS', 'PATCH', DEFAULTS.ROUTING_ANNOTATION,
})


@dataclass
class _ParsedMethod:
    key: OperationKey
    annotations: FrozenSet[str]


@dataclass
class _ParsedType:
    qualified_name: str
    package: str
    is_interface: bool
    annotations: FrozenSet[str]
    superclass_name: Optional[str] = None
    interface_names: Tuple[str, ...] = ()
    methods: List[_ParsedMethod] = field(default_factory=list)
    imports: Dict[str, str] = field(default_factory=dict)
    wildcard_imports: Tuple[str, ...] = ()
    source_file: str = ""


def _annotation_names(node) -> FrozenSet[str]:
    return frozenset(
        annotation.name.rsplit('.', 1)[-1] for annotation in (node.annotations or [])
    )


def _reference_name(reference) -> str:
    """Join a possibly qualified javalang ReferenceType chain into a dotted name."""
    parts = [reference.name]
    sub_type = getattr(reference, 'sub_type', None)
    while sub_type is not None:
        parts.append(sub_type.name)
        sub_type = getattr(sub_type, 'sub_type', None)
    return '.'.join(parts)


def _parameter_type_name(parameter) -> str:
    type_node = parameter.type
    name = _reference_name(type_node)
    dimensions = len(getattr(type_node, 'dimensions', None) or [])
    name += '[]' * dimensions
    if parameter.varargs:
        name += '...'
    return name


class JavaDescriptorExtractor:
    """Builds resource descriptors from Java source files.

    Sources are registered first; descriptors are resolved afterwards so that
    a class can refer to a superclass or interface declared in another file.
    Types that were never registered still resolve, without annotations.
    """

    def __init__(self, routing_annotation: str = DEFAULTS.ROUTING_ANNOTATION):
        """Initialize the descriptor extractor.

        Args:
            routing_annotation: Simple name of the annotation routing a resource
        """
        self.routing_annotation = routing_annotation
        self._types: Dict[str, _ParsedType] = {}
        logger.debug("Java descriptor extractor initialized")

    @property
    def type_names(self) -> List[str]:
        """Qualified names of all registered types, in registration order."""
        return list(self._types)

    def add_file(self, file_path: str, encoding: str = DEFAULTS.ENCODING) -> List[str]:
        """Parse and register the types declared in a Java source file.

        Raises:
            DescriptorError: If the file cannot be read or parsed
        """
        content = read_file(file_path, encoding=encoding)
        if content is None:
            raise DescriptorError(
                f"Cannot read Java source: {file_path}",
                suggestions=["Check the file path", "Check the file encoding"],
                error_code="SOURCE_UNREADABLE",
            )
        return self.add_source(content, source_file=file_path)

    def add_source(self, content: str, source_file: str = "<string>") -> List[str]:
        """Parse and register the top-level types declared in Java source.

        Args:
            content: Java compilation unit
            source_file: Origin used in log and error messages

        Returns:
            Qualified names of the registered types

        Raises:
            DescriptorError: If the source is not valid Java
        """
        try:
            tree = javalang.parse.parse(content)
        except (javalang.parser.JavaSyntaxError, javalang.tokenizer.LexerError) as e:
            raise DescriptorError(
                f"Java syntax error in {source_file}: {e}",
                suggestions=["Check that the file compiles"],
                error_code="SOURCE_INVALID",
            ) from e

        package = tree.package.name if tree.package else ""
        imports: Dict[str, str] = {}
        wildcard_imports: List[str] = []
        for declaration in tree.imports or []:
            if declaration.static:
                continue
            if declaration.wildcard:
                wildcard_imports.append(declaration.path)
            else:
                imports[declaration.path.rsplit('.', 1)[-1]] = declaration.path

        registered = []
        for type_node in tree.types or []:
            parsed = self._parse_type(type_node, package, source_file)
            if parsed is None:
                continue
            parsed.imports = imports
            parsed.wildcard_imports = tuple(wildcard_imports)
            self._types[parsed.qualified_name] = parsed
            registered.append(parsed.qualified_name)

        logger.debug(f"Registered {len(registered)} types from {source_file}")
        return registered

    def get_type_descriptor(self, name: str) -> TypeDescriptor:
        """Resolve a registered type, by qualified or simple name.

        Raises:
            DescriptorError: If no registered type has that name
        """
        parsed = self._find_registered(name)
        if parsed is None:
            raise DescriptorError(
                f"Unknown type: {name}",
                suggestions=[f"Pass the source declaring {name}"],
                error_code="TYPE_UNKNOWN",
            )
        return self._build_descriptor(parsed.qualified_name, parsed.is_interface, set())

    def get_class_descriptor(self, name: str) -> ClassDescriptor:
        """Resolve a registered type into a resource class descriptor."""
        return ClassDescriptor(service_type=self.get_type_descriptor(name))

    def get_operation_descriptors(self, name: str) -> List[OperationDescriptor]:
        """Describe the public methods of a registered type as operations.

        A method without JAX-RS annotations of its own takes its annotated
        declaration from the superclass or an implemented interface, when
        one declares a method with the same name and arity.
        """
        parsed = self._find_registered(name)
        if parsed is None:
            raise DescriptorError(f"Unknown type: {name}", error_code="TYPE_UNKNOWN")

        class_descriptor = ClassDescriptor(
            service_type=self._build_descriptor(parsed.qualified_name, parsed.is_interface, set())
        )
        operations = []
        for method in parsed.methods:
            annotated = None
            if not method.annotations & _RESOURCE_METHOD_ANNOTATIONS:
                annotated = self._find_annotated_declaration(parsed, method.key)
            operations.append(OperationDescriptor(
                class_descriptor=class_descriptor,
                method=method.key,
                annotated_method=annotated,
            ))
        return operations

    # ------------------------------------------------------------------
    # Internal helpers

    def _parse_type(self, node, package: str, source_file: str) -> Optional[_ParsedType]:
        if isinstance(node, javalang.tree.InterfaceDeclaration):
            is_interface = True
            superclass_name = None
            interface_refs = node.extends or []
        elif isinstance(node, javalang.tree.ClassDeclaration):
            is_interface = False
            superclass_name = _reference_name(node.extends) if node.extends else None
            interface_refs = node.implements or []
        else:
            logger.debug(f"Skipping {type(node).__name__} {node.name} in {source_file}")
            return None

        qualified_name = f"{package}.{node.name}" if package else node.name
        methods = []
        for method in node.methods:
            if not is_interface and 'public' not in (method.modifiers or set()):
                continue
            key = OperationKey(
                name=method.name,
                parameter_types=tuple(_parameter_type_name(p) for p in method.parameters),
            )
            methods.append(_ParsedMethod(key=key, annotations=_annotation_names(method)))

        return _ParsedType(
            qualified_name=qualified_name,
            package=package,
            is_interface=is_interface,
            annotations=_annotation_names(node),
            superclass_name=superclass_name,
            interface_names=tuple(_reference_name(ref) for ref in interface_refs),
            methods=methods,
            source_file=source_file,
        )

    def _find_registered(self, name: str) -> Optional[_ParsedType]:
        if name in self._types:
            return self._types[name]
        for parsed in self._types.values():
            if parsed.qualified_name.rsplit('.', 1)[-1] == name:
                return parsed
        return None

    def _qualify(self, name: str, context: _ParsedType) -> str:
        if '.' in name:
            return name
        if name in context.imports:
            return context.imports[name]
        same_package = f"{context.package}.{name}" if context.package else name
        if same_package in self._types:
            return same_package
        for package in context.wildcard_imports:
            candidate = f"{package}.{name}"
            if candidate in self._types:
                return candidate
        return same_package

    def _build_descriptor(self, qualified_name: str, is_interface: bool,
                          visiting: Set[str]) -> TypeDescriptor:
        parsed = self._types.get(qualified_name)
        if parsed is None or qualified_name in visiting:
            return TypeDescriptor(qualified_name=qualified_name, is_interface=is_interface)

        visiting = visiting | {qualified_name}
        superclass = None
        if parsed.superclass_name:
            superclass = self._build_descriptor(
                self._qualify(parsed.superclass_name, parsed), False, visiting
            )
        interfaces = tuple(
            self._build_descriptor(self._qualify(name, parsed), True, visiting)
            for name in parsed.interface_names
        )
        return TypeDescriptor(
            qualified_name=parsed.qualified_name,
            is_interface=parsed.is_interface,
            annotations=parsed.annotations,
            superclass=superclass,
            interfaces=interfaces,
        )

    def _find_annotated_declaration(self, parsed: _ParsedType,
                                    key: OperationKey) -> Optional[OperationKey]:
        supertypes = []
        if parsed.superclass_name:
            supertypes.append(self._qualify(parsed.superclass_name, parsed))
        supertypes.extend(self._qualify(name, parsed) for name in parsed.interface_names)

        for supertype_name in supertypes:
            supertype = self._types.get(supertype_name)
            if supertype is None:
                continue
            for method in supertype.methods:
                if (method.key.name == key.name and method.key.arity == key.arity
                        and method.annotations & _RESOURCE_METHOD_ANNOTATIONS):
                    return method.key
        return None
