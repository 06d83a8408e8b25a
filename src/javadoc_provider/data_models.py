"""Data models for the JavaDoc documentation provider."""

import threading
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TagDialect:
    """Literal markers used by one JavaDoc generator version.

    Attributes:
        name: Dialect name ('legacy' or 'modern')
        class_info_tag: Tag opening the class description
        operation_info_tag: Tag opening a method description
        operation_link: Anchor prefix preceding every method signature
        response_marker: Tag opening the return value description
        code_tag: Closing code tag that precedes each parameter description
    """
    name: str
    class_info_tag: str
    operation_info_tag: str
    operation_link: str
    response_marker: str
    code_tag: str


@dataclass(frozen=True)
class OperationKey:
    """Stable identity of an operation: method name plus ordered parameter types.

    Attributes:
        name: Declaring method name
        parameter_types: Parameter type names in declaration order
    """
    name: str
    parameter_types: Tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        """Number of declared parameters."""
        return len(self.parameter_types)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.parameter_types)})"


@dataclass(frozen=True)
class MethodDocumentation:
    """Documentation extracted for a single operation.

    Attributes:
        summary: Method description, None when absent
        parameter_docs: Parameter descriptions in source order
        return_doc: Return value description, None when absent
    """
    summary: Optional[str] = None
    parameter_docs: Tuple[str, ...] = ()
    return_doc: Optional[str] = None

    def parameter_doc(self, index: int) -> Optional[str]:
        """Return the description at a parameter position, None when out of range."""
        if 0 <= index < len(self.parameter_docs):
            return self.parameter_docs[index]
        return None


@dataclass
class ClassDocumentation:
    """Documentation bundle for one resource class.

    The raw page text and summary never change once built. The method map only
    grows: entries are added on first lookup of an operation and are never
    replaced.

    Attributes:
        raw_text: Complete JavaDoc page the bundle was extracted from
        summary: Class description, None when absent
        methods: Method bundles keyed by operation
    """
    raw_text: str
    summary: Optional[str] = None
    methods: Dict[OperationKey, MethodDocumentation] = field(
        default_factory=dict, compare=False, repr=False
    )
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, compare=False, repr=False
    )

    def get_method_docs(self, key: OperationKey) -> Optional[MethodDocumentation]:
        """Get the cached bundle for an operation."""
        with self._lock:
            return self.methods.get(key)

    def add_method_docs(self, key: OperationKey,
                        docs: MethodDocumentation) -> MethodDocumentation:
        """Store a method bundle unless one is already present.

        Returns:
            The bundle retained for the key, which is the existing one when
            another caller stored it first
        """
        with self._lock:
            return self.methods.setdefault(key, docs)

    @property
    def method_count(self) -> int:
        """Number of resolved method bundles."""
        with self._lock:
            return len(self.methods)
