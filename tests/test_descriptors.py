"""Tests for documented-type resolution and resource paths."""

from javadoc_provider.data_models import OperationKey
from javadoc_provider.descriptors import (
    ClassDescriptor,
    OperationDescriptor,
    TypeDescriptor,
    build_resource_path,
    resolve_documented_type,
)

ROUTED = frozenset({"Path"})


def test_annotated_type_documents_itself():
    store = TypeDescriptor("org.acme.Store", annotations=ROUTED,
                           superclass=TypeDescriptor("org.acme.Base", annotations=ROUTED))
    assert resolve_documented_type(store) is store


def test_annotated_superclass_wins_over_interfaces():
    base = TypeDescriptor("org.acme.Base", annotations=ROUTED)
    api = TypeDescriptor("org.acme.Api", is_interface=True, annotations=ROUTED)
    store = TypeDescriptor("org.acme.Store", superclass=base, interfaces=(api,))
    assert resolve_documented_type(store) is base


def test_first_annotated_interface():
    plain = TypeDescriptor("org.acme.Closeable", is_interface=True)
    api = TypeDescriptor("org.acme.Api", is_interface=True, annotations=ROUTED)
    other = TypeDescriptor("org.acme.OtherApi", is_interface=True, annotations=ROUTED)
    store = TypeDescriptor("org.acme.Store", superclass=TypeDescriptor("java.lang.Object"),
                           interfaces=(plain, api, other))
    assert resolve_documented_type(store) is api


def test_unannotated_type_falls_back_to_itself():
    store = TypeDescriptor("org.acme.Store", interfaces=(TypeDescriptor("org.acme.Api", True),))
    assert resolve_documented_type(store) is store


def test_interface_without_superclass():
    api = TypeDescriptor("org.acme.Api", is_interface=True)
    assert resolve_documented_type(api) is api


def test_custom_routing_annotation():
    base = TypeDescriptor("org.acme.Base", annotations=frozenset({"Route"}))
    store = TypeDescriptor("org.acme.Store", superclass=base)
    assert resolve_documented_type(store, "Route") is base
    assert resolve_documented_type(store) is store


def test_resource_path_and_simple_name():
    store = TypeDescriptor("org.acme.books.BookStore")
    assert build_resource_path(store) == "org/acme/books/BookStore.html"
    assert store.simple_name == "BookStore"
    assert TypeDescriptor("Store").simple_name == "Store"
    assert TypeDescriptor("org.acme.Outer$Inner").simple_name == "Inner"


def test_operation_key_prefers_annotated_method():
    resource = ClassDescriptor(TypeDescriptor("org.acme.Store"))
    invoked = OperationKey("get", ("java.lang.String",))
    annotated = OperationKey("get", ("String",))

    assert OperationDescriptor(resource, invoked).operation_key is invoked
    assert OperationDescriptor(resource, invoked, annotated).operation_key is annotated
